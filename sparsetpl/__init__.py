"""
sparsetpl: write Jinja2 templates inline, indented the way the surrounding
code is, without the indentation leaking into the output.

Plain Jinja2 forces the layout of the rendered text onto the template
literal:

    MY_TEMPLATE = jinja2.Template(
        "Some list:\\n"
        "{% for item in data %}"
        "# {{ item }}\\n"
        "{% endfor %}"
    )

With sparsetpl the same template reads naturally:

    MY_TEMPLATE = SparseTemplate("list", '''
        Some list:{{ "\\n" }}

        {% for item in data %}
            # {{ item }}{{ "\\n" }}
        {% endfor %}
    ''')

and renders exactly the same text. Indentation and line breaks in the
source are dropped; whitespace that belongs in the output is written as an
expression, `{{ " " }}` or `{{ "\\n" }}`.

The `last` function tells whether a loop index points at the final element:

    {% for item in data %}
        {{ item }}
        {% if not last(loop.index0, data) %}
            {{ "\\n" }}
        {% endif %}
    {% endfor %}

`SparseTemplate.execute` returns the rendered string and raises
TemplateRenderError on failure. Use `safe_execute` to get a RenderResult
with the (possibly partial) output and the error instead.
"""
from .core import (
    strip_insignificant_whitespace,
    last,
    SparseTemplate,
    SparseTemplateSet,
    RenderResult,
    execute_to_string,
    parse_glob,
)
from .config import TemplateSettings, UndefinedPolicy, load_settings
from .logging_setup import configure_logging
from .exceptions import (
    SparseTemplateError,
    ConfigError,
    TemplateLoadError,
    TemplateParseError,
    TemplateRenderError,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "strip_insignificant_whitespace",
    "last",
    "SparseTemplate",
    "SparseTemplateSet",
    "RenderResult",
    "execute_to_string",
    "parse_glob",
    "TemplateSettings",
    "UndefinedPolicy",
    "load_settings",
    "configure_logging",
    "SparseTemplateError",
    "ConfigError",
    "TemplateLoadError",
    "TemplateParseError",
    "TemplateRenderError",
]

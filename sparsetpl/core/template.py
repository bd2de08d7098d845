# sparsetpl/core/template.py
"""
Compiles sparse template text and executes templates into strings.

Two execution paths exist on purpose:
  - `SparseTemplate.execute` must succeed; failures raise TemplateRenderError.
  - `SparseTemplate.safe_execute` / `execute_to_string` hand back a
    RenderResult holding whatever output was produced and the error, if any.
"""
import io
from collections.abc import Mapping
from typing import Any, Dict, NamedTuple, Optional, Union

import jinja2
import structlog

from sparsetpl.config.settings import TemplateSettings
from sparsetpl.exceptions import TemplateParseError, TemplateRenderError

from .environment import default_environment
from .functions import BUILTIN_FUNCTIONS
from .stripper import strip_insignificant_whitespace

log = structlog.get_logger(__name__)

# name under which the whole data value is visible inside a template.
DATA_VARIABLE = "data"


class RenderResult(NamedTuple):
    output: str
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_render_context(data: Any) -> Dict[str, Any]:
    # string keys of a mapping become top-level names and win over DATA_VARIABLE.
    # keys naming a builtin function stay reachable only through DATA_VARIABLE.
    context: Dict[str, Any] = {DATA_VARIABLE: data}
    if isinstance(data, Mapping):
        context.update(
            (k, v) for k, v in data.items() if isinstance(k, str) and k not in BUILTIN_FUNCTIONS
        )
    return context


def parse_error_from_syntax_error(exc: jinja2.TemplateSyntaxError, template_name: Optional[str]) -> TemplateParseError:
    name = exc.name or template_name
    log.error("template_parse_failed", template=name, lineno=exc.lineno, error=exc.message)
    return TemplateParseError(
        f"Failed to parse template '{name}' (line {exc.lineno}): {exc.message}",
        template_name=name,
        lineno=exc.lineno,
    )


def compile_source(env: jinja2.Environment, source: str, name: Optional[str] = None) -> jinja2.Template:
    """
    Parses already-stripped source into a named template of `env`.
    The builtin functions are bound as template globals, so any environment works.
    """
    try:
        code = env.compile(source, name=name)
    except jinja2.TemplateSyntaxError as e:
        raise parse_error_from_syntax_error(e, name) from e
    template = env.template_class.from_code(env, code, env.make_globals(dict(BUILTIN_FUNCTIONS)), None)
    log.debug("template_compiled_successfully", template=name, source_length=len(source))
    return template


def execute_to_string(template: Union[jinja2.Template, "SparseTemplate"], data: Any = None) -> RenderResult:
    """
    Renders `template` against `data` into an in-memory buffer.

    Execution errors are returned rather than raised, together with the
    output produced before the failure.
    """
    if isinstance(template, SparseTemplate):
        template = template.template

    buffer = io.StringIO()
    try:
        for chunk in template.generate(build_render_context(data)):
            buffer.write(chunk)
    except Exception as e:
        log.warning("template_execution_failed", template=template.name, error=str(e), partial_length=buffer.tell())
        return RenderResult(buffer.getvalue(), e)
    return RenderResult(buffer.getvalue())


class SparseTemplate:
    """
    A template built from sparse text: indentation and line breaks in `text`
    are stripped before parsing, and the `last` function is available.

    The compiled Jinja2 template stays reachable as `.template` for callers
    who want the engine's own rendering behaviour.
    """

    def __init__(
        self,
        name: str,
        text: str,
        settings: Optional[TemplateSettings] = None,
        environment: Optional[jinja2.Environment] = None,
    ):
        settings = settings or TemplateSettings()
        source = strip_insignificant_whitespace(text) if settings.strip else text
        env = environment or default_environment(settings)
        self._bind(name, source, compile_source(env, source, name), settings)

    def _bind(self, name: str, source: str, template: jinja2.Template, settings: TemplateSettings) -> None:
        self.name = name
        self.settings = settings
        self.source = source
        self.template = template

    @classmethod
    def from_compiled(cls, name: str, source: str, template: jinja2.Template,
                      settings: Optional[TemplateSettings] = None) -> "SparseTemplate":
        # wraps a template that was already parsed elsewhere (e.g. by a template set).
        instance = cls.__new__(cls)
        instance._bind(name, source, template, settings or TemplateSettings())
        return instance

    def execute(self, data: Any = None) -> str:
        """Renders and returns the output; any failure raises TemplateRenderError."""
        result = execute_to_string(self.template, data)
        if result.error is not None:
            log.error("template_must_succeed_execution_failed", template=self.name, error=str(result.error))
            raise TemplateRenderError(
                f"Failed to execute template '{self.name}': {result.error}",
                template_name=self.name,
                partial_output=result.output,
            ) from result.error
        return result.output

    def safe_execute(self, data: Any = None) -> RenderResult:
        return execute_to_string(self.template, data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, source={self.source!r})"

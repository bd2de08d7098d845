"""
Core of sparsetpl: whitespace stripping, template functions and the
wrappers around Jinja2 parsing and execution.
"""
from .stripper import strip_insignificant_whitespace
from .functions import last, BUILTIN_FUNCTIONS
from .environment import create_environment, default_environment
from .template import SparseTemplate, RenderResult, execute_to_string
from .template_set import SparseTemplateSet, parse_glob

__all__ = [
    "strip_insignificant_whitespace",
    "last",
    "BUILTIN_FUNCTIONS",
    "create_environment",
    "default_environment",
    "SparseTemplate",
    "RenderResult",
    "execute_to_string",
    "SparseTemplateSet",
    "parse_glob",
]

# sparsetpl/core/environment.py
"""
Builds Jinja2 environments with the package's template functions registered.
"""
from functools import lru_cache
from typing import Optional

import jinja2
import structlog

from sparsetpl.config.settings import TemplateSettings, UndefinedPolicy

from .functions import BUILTIN_FUNCTIONS

log = structlog.get_logger(__name__)

UNDEFINED_CLASSES = {
    UndefinedPolicy.DEFAULT: jinja2.Undefined,
    UndefinedPolicy.STRICT: jinja2.StrictUndefined,
}

def create_environment(
    settings: Optional[TemplateSettings] = None,
    loader: Optional[jinja2.BaseLoader] = None,
) -> jinja2.Environment:
    """Returns a new environment; functions are registered before any parse can happen."""
    settings = settings or TemplateSettings()
    env = jinja2.Environment(
        loader=loader,
        undefined=UNDEFINED_CLASSES[settings.undefined],
        autoescape=settings.autoescape,
    )
    env.globals.update(BUILTIN_FUNCTIONS)
    log.debug(
        "template_environment_created",
        undefined=settings.undefined.value,
        autoescape=settings.autoescape,
        functions=sorted(BUILTIN_FUNCTIONS),
    )
    return env

@lru_cache(maxsize=None)
def _shared_environment(settings: TemplateSettings) -> jinja2.Environment:
    return create_environment(settings)

def default_environment(settings: Optional[TemplateSettings] = None) -> jinja2.Environment:
    # one shared environment per distinct settings value; never mutated after creation.
    return _shared_environment(settings or TemplateSettings())

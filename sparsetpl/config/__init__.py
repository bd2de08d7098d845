from .settings import TemplateSettings, UndefinedPolicy, DEFAULT_ENCODING
from .loader import load_settings, settings_from_mapping

__all__ = [
    "TemplateSettings",
    "UndefinedPolicy",
    "DEFAULT_ENCODING",
    "load_settings",
    "settings_from_mapping",
]

from typing import Optional


class SparseTemplateError(Exception):
    # base exception for all package-specific errors.
    pass

class ConfigError(SparseTemplateError):
    # errors related to configuration.
    pass

class TemplateLoadError(SparseTemplateError):
    # errors while locating or reading template sources.
    pass

class TemplateParseError(SparseTemplateError):
    # template source rejected by the engine's parser.
    def __init__(self, message: str, template_name: Optional[str] = None, lineno: Optional[int] = None):
        super().__init__(message)
        self.template_name = template_name
        self.lineno = lineno

class TemplateRenderError(SparseTemplateError):
    # execution failure escalated by a must-succeed entry point.
    def __init__(self, message: str, template_name: Optional[str] = None, partial_output: str = ""):
        super().__init__(message)
        self.template_name = template_name
        self.partial_output = partial_output

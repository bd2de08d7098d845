# sparsetpl/core/template_set.py
"""
Parses every file matched by a glob pattern into one set of named templates.
Each template is named after its file's base name, so templates in a set can
include or import one another by that name.
"""
import glob
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import jinja2
import structlog

from sparsetpl.config.settings import TemplateSettings
from sparsetpl.exceptions import TemplateLoadError

from .environment import create_environment
from .stripper import strip_insignificant_whitespace
from .template import RenderResult, SparseTemplate, parse_error_from_syntax_error

log = structlog.get_logger(__name__)


class SparseTemplateSet:
    """Named templates sharing one environment; the first matched file is the default."""

    def __init__(self, environment: jinja2.Environment, sources: Dict[str, str],
                 templates: Dict[str, jinja2.Template], settings: TemplateSettings):
        self.environment = environment
        self.settings = settings
        self._sources = sources
        self._templates = templates

    @property
    def names(self) -> List[str]:
        return list(self._templates)

    @property
    def default_name(self) -> str:
        return next(iter(self._templates))

    def get(self, name: Optional[str] = None) -> SparseTemplate:
        if name is None:
            name = self.default_name
        if name not in self._templates:
            raise TemplateLoadError(f"no template named '{name}' in set (available: {', '.join(self.names)})")
        return SparseTemplate.from_compiled(name, self._sources[name], self._templates[name], self.settings)

    def execute(self, name: Optional[str] = None, data: Any = None) -> str:
        return self.get(name).execute(data)

    def safe_execute(self, name: Optional[str] = None, data: Any = None) -> RenderResult:
        return self.get(name).safe_execute(data)

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)


def _read_template_file(path: Path, encoding: str) -> str:
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        log.error("template_file_read_failed", path=str(path), error=str(e))
        raise TemplateLoadError(f"Failed to read template file {path}: {e}") from e


def parse_glob(pattern: str, settings: Optional[TemplateSettings] = None) -> SparseTemplateSet:
    """
    Reads, strips and parses every file matching `pattern`.

    Raises TemplateLoadError when nothing matches or a file cannot be read,
    and TemplateParseError when a file does not parse. The first failure
    aborts the whole set.
    """
    settings = settings or TemplateSettings()
    matched_paths = sorted(glob.glob(pattern))
    if not matched_paths:
        log.error("template_glob_matched_nothing", pattern=pattern)
        raise TemplateLoadError(f"pattern matches no files: {pattern!r}")
    log.debug("template_glob_matched", pattern=pattern, count=len(matched_paths))

    sources: Dict[str, str] = {}
    for path_str in matched_paths:
        path = Path(path_str)
        text = _read_template_file(path, settings.encoding)
        # a later file with the same base name replaces the earlier one.
        sources[path.name] = strip_insignificant_whitespace(text) if settings.strip else text

    env = create_environment(settings, loader=jinja2.DictLoader(sources))
    templates: Dict[str, jinja2.Template] = {}
    for name in sources:
        try:
            templates[name] = env.get_template(name)
        except jinja2.TemplateSyntaxError as e:
            raise parse_error_from_syntax_error(e, name) from e
        log.debug("template_compiled_successfully", template=name)

    log.info("template_set_parsed", pattern=pattern, templates=list(templates))
    return SparseTemplateSet(env, sources, templates, settings)

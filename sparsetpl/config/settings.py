from dataclasses import dataclass
from enum import Enum
from typing import Optional
import structlog

log = structlog.get_logger(__name__)

DEFAULT_ENCODING = "utf-8"

class UndefinedPolicy(Enum):
    # how templates treat names missing from the data value.
    DEFAULT = "default"
    STRICT = "strict"

    @classmethod
    def from_string(cls, s: Optional[str]) -> "UndefinedPolicy":
        if not s:
            return cls.DEFAULT
        try:
            return cls(s.lower())
        except ValueError:
            log.warning("invalid_undefined_policy_string", input_string=s)
            return cls.DEFAULT

DEFAULT_UNDEFINED_POLICY = UndefinedPolicy.DEFAULT

@dataclass(frozen=True)
class TemplateSettings:
    # engine options shared by every template built from one environment.
    undefined: UndefinedPolicy = DEFAULT_UNDEFINED_POLICY
    autoescape: bool = False
    encoding: str = DEFAULT_ENCODING
    strip: bool = True

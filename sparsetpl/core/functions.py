"""
Template functions installed into every environment before parsing.
"""
from types import MappingProxyType
from typing import Any, Callable, Mapping

def last(index: int, sequence: Any) -> bool:
    """
    Reports whether `index` addresses the final element of `sequence`.
    Anything without len() raises TypeError.
    """
    return index == len(sequence) - 1

BUILTIN_FUNCTIONS: Mapping[str, Callable[..., Any]] = MappingProxyType({
    "last": last,
})

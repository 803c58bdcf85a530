"""
Shape-tolerant accessors for untrusted JSON-like data.

Every accessor returns None (or the given default) when no key holds a usable
value: the key is missing, the container is not a mapping, or the value has
the wrong type. When several alias keys are given, the first one whose value
has the right type wins; a null or mistyped alias never hides a later one.
None of them raise.
"""

import math
from typing import Any, Callable, List, Mapping, Optional


def _lookup(data: Any, keys, usable: Callable[[Any], bool]) -> Any:
    """Returns the first value under `keys` accepted by `usable`, else None."""
    if not isinstance(data, Mapping):
        return None
    for key in keys:
        if key in data and usable(data[key]):
            return data[key]
    return None


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a number here
    return (
        not isinstance(value, bool)
        and isinstance(value, (int, float))
        and math.isfinite(value)
    )


def get_str(data: Any, *keys: str) -> Optional[str]:
    return _lookup(data, keys, lambda v: isinstance(v, str))


def get_bool(data: Any, *keys: str, default: Optional[bool] = None) -> Optional[bool]:
    value = _lookup(data, keys, lambda v: isinstance(v, bool))
    return value if value is not None else default


def get_number(data: Any, *keys: str) -> Optional[float]:
    """
    Numeric value as float. Booleans, NaN and infinities count as absent.
    """
    value = _lookup(data, keys, _is_number)
    return float(value) if value is not None else None


def get_list(data: Any, *keys: str) -> Optional[List[Any]]:
    value = _lookup(data, keys, lambda v: isinstance(v, (list, tuple)))
    return list(value) if value is not None else None

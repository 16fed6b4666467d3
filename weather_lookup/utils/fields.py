"""
Helpers for reading loosely structured provider JSON.
"""

import math
from typing import Any, Optional, Union

Number = Union[int, float]


def dig(data: Any, *path: Union[str, int]) -> Any:
    """
    Follow a path of dict keys and list indexes, returning None as soon as a
    step is missing or has the wrong shape.

    >>> dig({"weather": [{"main": "Rain"}]}, "weather", 0, "main")
    'Rain'
    >>> dig({"main": None}, "main", "temp") is None
    True
    """
    current = data
    for step in path:
        if isinstance(step, int):
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return None
            current = current[step]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(step)
        if current is None:
            return None
    return current


def as_number(value: Any) -> Optional[Number]:
    """Return value if it is a real int/float, otherwise None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def round_half_up(value: Any) -> Optional[int]:
    """
    Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2).

    Non-numeric input yields None.
    """
    number = as_number(value)
    if number is None:
        return None
    return math.floor(number + 0.5)


def within(
    value: Any, low: Optional[Number] = None, high: Optional[Number] = None
) -> Optional[Number]:
    """
    Return value if it is a number inside [low, high], otherwise None.

    >>> within(-1, low=0) is None
    True
    """
    number = as_number(value)
    if number is None:
        return None
    if (low is not None and number < low) or (high is not None and number > high):
        return None
    return number

"""
Canonical member-name normalization.

Member names are always strings. Definitions and lookups may use integers or
floats for numeric-looking names, so both sides pass through
`canonical_name` to agree on a single string form. Only the listed input types
are accepted; booleans are excluded even though `bool` subclasses `int`.
"""
from __future__ import annotations

import math
import numbers
from typing import Any, Optional


def canonical_name(value: Any) -> Optional[str]:
    """
    Converts a name-like value to its canonical string form.

    Args:
        value: A string, integer or float naming a member.

    Returns:
        The canonical name, or None when the value is not name-like.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        try:
            return str(int(value))
        except ValueError:
            # beyond the interpreter's int-to-str digit limit
            return None
    if isinstance(value, numbers.Real):
        try:
            number = float(value)
        except OverflowError:
            return None
        if not math.isfinite(number):
            return None
        if number.is_integer():
            return str(int(number))
        return repr(number)
    return None


__all__ = ["canonical_name"]

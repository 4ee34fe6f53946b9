"""Lenient numeric array parsing for spectrum columns.

Rows from the data service store spectra either as JSON arrays, as
strings holding a JSON array, or as loosely formatted number lists.
Array items are coerced the way the viewer's JavaScript ``Number()`` does,
so shift and intensity arrays keep their positions aligned.
"""

import json
import math
import re

_NUMBER_RE = re.compile(r"-?\d+\.?\d*(?:e[+-]?\d+)?", re.IGNORECASE)


def _coerce_item(value: object) -> float | None:
    """Coerce one array item; None means the item is dropped."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        f = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            f = float(text)
        except ValueError:
            return None
    elif isinstance(value, list):
        # [] is 0 and [x] is x; longer lists are not numbers
        if not value:
            return 0.0
        return _coerce_item(value[0]) if len(value) == 1 else None
    else:
        return None
    return None if math.isnan(f) else f


def _numbers(values: list) -> list[float]:
    return [f for f in (_coerce_item(v) for v in values) if f is not None]


def to_number_array(value: object) -> list[float]:
    """Coerce a raw column value into a list of floats.

    Items that are not numbers are dropped rather than raising; ``null`` and
    blank items count as 0.

    Args:
        value: A list, a number, a string, or None.

    Returns:
        Parsed numbers in order; an empty list when nothing can be parsed.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return _numbers(list(value))
    if isinstance(value, (int, float)):
        f = _coerce_item(value)
        return [] if f is None else [f]
    if not isinstance(value, str):
        return []

    text = value.strip()
    if (text.startswith("[") and text.endswith("]")) or (text.startswith("{") and text.endswith("}")):
        try:
            parsed = json.loads(text)
        except ValueError:
            parsed = None
        if isinstance(parsed, list):
            return _numbers(parsed)

    return _numbers(_NUMBER_RE.findall(text))

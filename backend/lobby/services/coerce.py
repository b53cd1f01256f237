import math
import re

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')
_LEADING_FLOAT = re.compile(r'^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')
_FALSE_STRINGS = {'', '0', 'false', 'no', 'off'}


def parse_int(value):
    """Lenient integer parse: leading digits of a string, truncated numbers.

    Returns None when nothing numeric can be read ("abc", None, True).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def count_or_default(value, default):
    count = parse_int(value)
    if not count or count < 1:
        return default
    return count


def _strict_float(value):
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def parse_float(value):
    """Lenient float parse: the leading number of a string ("85.2s" -> 85.2).

    Returns None when the value has no numeric prefix at all.
    """
    if isinstance(value, str):
        match = _LEADING_FLOAT.match(value)
        if not match:
            return None
        number = float(match.group(1))
        return number if math.isfinite(number) else None
    return _strict_float(value)


def canonical_int(value):
    """Exact integer form of a value, or None when it is not an integral number.

    1, "1", 1.0 and " 1.0 " all map to 1; "1abc" and 1.5 map to None.
    """
    number = _strict_float(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def to_bool(value):
    # Form bodies carry "false"/"0" as text, so those strings read as False
    # rather than truthy like any other non-empty string
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)

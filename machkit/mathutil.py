"""Integer helpers for fixed-point machine parameters."""

from __future__ import annotations

__all__ = [
    "deg_to_sec",
    "sec_to_deg",
    "mul_by_10",
    "trim",
    "round_to_precision",
    "trim_acc",
]


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def _cmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _cdiv(a, b)


def deg_to_sec(angle: float) -> int:
    """Convert an angle written as D.MMSS into a number of arc seconds."""
    data = int(angle * 10000)
    seconds = _cmod(data, 100)
    minutes = _cdiv(_cmod(data, 10000), 100)
    degrees = _cdiv(data, 10000)
    return seconds + minutes * 60 + degrees * 3600


def sec_to_deg(angle: int) -> float:
    """Convert a number of arc seconds into an angle written as D.MMSS."""
    seconds = _cmod(angle, 60)
    minutes = _cmod(_cdiv(angle, 60), 60)
    degrees = _cdiv(angle, 3600)
    return float(degrees) + minutes / 100 + seconds / 10000


def mul_by_10(value: int, exponent: int) -> int:
    """Scale ``value`` by ten to ``exponent``, truncating toward zero when dividing."""
    factor = 10 ** abs(exponent)
    if exponent > 0:
        return value * factor
    return _cdiv(value, factor)


def trim(data: int, upper_limit: int, lower_limit: int) -> int:
    """Clamp ``data`` to the closed range given by the limits."""
    if data >= upper_limit:
        return upper_limit
    if data <= lower_limit:
        return lower_limit
    return data


def round_to_precision(data: int, precision: int) -> int:
    """Round ``data`` to a multiple of ``precision``; ties go toward zero."""
    if precision == 0:
        raise ValueError("precision must be non-zero")
    rest = _cmod(data, precision)
    data -= rest
    if abs(rest) > _cdiv(precision, 2):
        data += precision if rest > 0 else -precision
    return data


def trim_acc(data: int, upper_limit: int, lower_limit: int, precision: int) -> int:
    """Clamp ``data`` to the limits, then round it to ``precision``."""
    return round_to_precision(trim(data, upper_limit, lower_limit), precision)
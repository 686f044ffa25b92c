"""Display scaling for raw register values.

Register values travel on the wire as raw 16-bit integers.  Many of them are
fixed-point quantities: a temperature register with scale 10 reports 22.5 °C
as 225, a current register with scale 100 reports 15.50 A as 1550.  These
helpers convert between the two for presentation; they are never applied
inside the read/write path.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def to_display(raw: int, scale: int) -> int | float:
    """Convert a raw register value to display units.

    Args:
        raw: Raw (already sign-extended) register value
        scale: Register scale divisor

    Returns:
        ``raw / scale`` for scales above 1, otherwise ``raw`` unchanged

    Example:
        >>> to_display(225, 10)
        22.5
        >>> to_display(42, 1)
        42
    """
    if scale <= 1:
        return raw
    return raw / scale


def to_raw(display: float, scale: int) -> int:
    """Convert a display value back to the raw integer to write.

    Halves round away from zero, so 22.25 at scale 10 becomes 223 and
    -22.25 becomes -223.

    Example:
        >>> to_raw(22.5, 10)
        225
        >>> to_raw(22.25, 10)
        223
    """
    scaled = Decimal(str(display)) * int(max(scale, 1))
    return int(scaled.to_integral_value(rounding=ROUND_HALF_UP))


def format_value(raw: int, scale: int) -> str:
    """Format a raw register value for display (``225, 10`` → ``"22.5"``)."""
    value = to_display(raw, scale)
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


__all__ = ["format_value", "to_display", "to_raw"]

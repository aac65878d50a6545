"""Text formatting shared by record strings and deal narrative lines.

Existing tooling compares these lines byte for byte, so numbers keep a fixed
layout: plain decimals with at least one fractional digit between 1e-3 and
1e7, and
``<digit>.<digits>E<exp>`` scientific notation outside that range.
"""

from decimal import Decimal
from typing import Sequence


def format_number(value: float) -> str:
    """Format a float for narrative output.

    Parameters
    ----------
    value : float
        Value to format.

    Returns
    -------
    str
        e.g. ``80.0``, ``802000.0``, ``1.0E7``.
    """
    value = float(value)
    if value != value or value in (float("inf"), float("-inf")):
        return {"nan": "NaN", "inf": "Infinity", "-inf": "-Infinity"}[repr(value)]
    if value == 0:
        return "-0.0" if str(value).startswith("-") else "0.0"

    magnitude = abs(value)
    if 1e-3 <= magnitude < 1e7:
        return repr(value)

    # Shortest round-trip digits, re-laid out as d.dddE<exp>
    dec = Decimal(repr(value))
    sign, digits, _ = dec.as_tuple()
    exponent = dec.adjusted()
    digit_str = "".join(str(d) for d in digits).rstrip("0") or "0"
    mantissa = digit_str[0] + "." + (digit_str[1:] or "0")
    return f"{'-' if sign else ''}{mantissa}E{exponent}"


def format_bool(value: bool) -> str:
    """Lower-case boolean (``true``/``false``)."""
    return "true" if value else "false"


def format_address(address: Sequence[int]) -> str:
    """Bracketed, comma-separated address (``[4, 5, 1, 1]``)."""
    return "[" + ", ".join(str(int(part)) for part in address) + "]"

"""Timestamp unit detection and conversion to the write precision."""

# Nanoseconds per unit
_UNIT_NANOS = {"s": 1_000_000_000, "ms": 1_000_000, "us": 1_000, "ns": 1}


def detect_unit(timestamp: int) -> str:
    """Infer the unit of a Unix timestamp from its number of digits.

    Up to 10 digits are seconds, 13 milliseconds, 16 microseconds,
    anything longer nanoseconds.
    """
    digits = len(str(abs(timestamp)))
    if digits <= 10:
        return "s"
    if digits <= 13:
        return "ms"
    if digits <= 16:
        return "us"
    return "ns"


def to_precision(timestamp: int, precision: str) -> int | None:
    """Convert a timestamp of any supported unit to the given precision.

    Args:
        timestamp: Unix timestamp in s, ms, us or ns. 0 means unset.
        precision: Target precision (ns, us, ms, s).

    Returns:
        The converted timestamp, or None when the input is unset.
    """
    if not timestamp:
        return None
    nanos = timestamp * _UNIT_NANOS[detect_unit(timestamp)]
    return nanos // _UNIT_NANOS[precision]

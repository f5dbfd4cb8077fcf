"""Duration literals such as ``10s`` or ``1.5m``."""

import re
from datetime import timedelta

from oraclemap.core.exceptions import InvalidInputError

_DURATION_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([a-zA-Z]+)\s*$")

# Unit length in microseconds
_UNITS: dict[str, float] = {
    "ns": 0.001,
    "us": 1,
    "ms": 1_000,
    "s": 1_000_000,
    "m": 60_000_000,
    "h": 3_600_000_000,
    "d": 86_400_000_000,
}


def parse_duration(value: str | timedelta) -> timedelta:
    """Parse a duration literal into a timedelta.

    Args:
        value: Literal like ``"11s"`` or an existing timedelta

    Returns:
        Non-negative timedelta

    Raises:
        InvalidInputError: If the literal is malformed, uses an unknown unit
            or the duration is negative
    """
    if isinstance(value, timedelta):
        if value < timedelta(0):
            raise InvalidInputError(
                "Duration must not be negative", context={"value": value}
            )
        return value
    if not isinstance(value, str):
        raise InvalidInputError(
            f"Duration must be a string literal, got {type(value).__name__}"
        )

    match = _DURATION_PATTERN.match(value)
    if match is None:
        raise InvalidInputError(
            f"Duration is not valid: {value!r}",
            context={"units": list(_UNITS.keys())},
        )
    magnitude, unit = match.groups()
    if unit not in _UNITS:
        raise InvalidInputError(
            f"Unknown time unit: {unit}", context={"units": list(_UNITS.keys())}
        )
    try:
        return timedelta(microseconds=float(magnitude) * _UNITS[unit])
    except OverflowError as e:
        raise InvalidInputError(
            f"Duration is too large: {value!r}", context={"max_days": timedelta.max.days}
        ) from e


def format_duration(value: timedelta) -> str:
    """Format a timedelta as the largest whole-unit literal, e.g. ``11s``."""
    micros = value // timedelta(microseconds=1)
    if micros == 0:
        return "0s"
    for unit in ("d", "h", "m", "s", "ms"):
        unit_micros = int(_UNITS[unit])
        if micros % unit_micros == 0:
            return f"{micros // unit_micros}{unit}"
    return f"{micros}us"

"""Closed value sets for Oracle connector settings.

Each enum exposes a single ``parse`` classmethod, which is the only place raw
property strings are turned into members. Matching is case-sensitive.
"""

import decimal
from enum import Enum
from typing import Any, Optional

from oraclemap.core.exceptions import InvalidInputError


class SettingEnum(str, Enum):
    """Base for string-valued setting enums."""

    @classmethod
    def parse(cls, value: Any):
        """Parse a member from itself or its exact name.

        Raises:
            InvalidInputError: If value is not one of the declared variants
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise InvalidInputError(
            f"Invalid {cls.__name__} value: {value!r}",
            context={"allowed": [member.value for member in cls]},
        )

    def __str__(self) -> str:
        return self.value


class UnsupportedTypeStrategy(SettingEnum):
    """What to do with columns whose Oracle type has no mapping."""

    IGNORE = "IGNORE"
    FAIL = "FAIL"
    CONVERT_TO_VARCHAR = "CONVERT_TO_VARCHAR"


class NumberExceedsLimitsMode(SettingEnum):
    """What to do when a NUMBER column does not fit a 38 digit decimal."""

    ROUND = "ROUND"
    FAIL = "FAIL"
    CONVERT_TO_VARCHAR = "CONVERT_TO_VARCHAR"


class NumberType(SettingEnum):
    """Target representation chosen for a NUMBER column."""

    INTEGER = "INTEGER"
    DECIMAL = "DECIMAL"
    DOUBLE = "DOUBLE"


class RoundMode(SettingEnum):
    """Rounding policies, named after java.math.RoundingMode."""

    UP = "UP"
    DOWN = "DOWN"
    CEILING = "CEILING"
    FLOOR = "FLOOR"
    HALF_UP = "HALF_UP"
    HALF_DOWN = "HALF_DOWN"
    HALF_EVEN = "HALF_EVEN"
    UNNECESSARY = "UNNECESSARY"

    @property
    def decimal_rounding(self) -> Optional[str]:
        """Matching ``decimal`` module constant, None for UNNECESSARY."""
        return _DECIMAL_ROUNDING.get(self)


_DECIMAL_ROUNDING: dict[RoundMode, str] = {
    RoundMode.UP: decimal.ROUND_UP,
    RoundMode.DOWN: decimal.ROUND_DOWN,
    RoundMode.CEILING: decimal.ROUND_CEILING,
    RoundMode.FLOOR: decimal.ROUND_FLOOR,
    RoundMode.HALF_UP: decimal.ROUND_HALF_UP,
    RoundMode.HALF_DOWN: decimal.ROUND_HALF_DOWN,
    RoundMode.HALF_EVEN: decimal.ROUND_HALF_EVEN,
}

"""Conversion of decimal values to fixed-point, floating-point and text targets.

All functions here are pure. They receive a ``decimal.Decimal`` as decoded by
the driver and return a fresh value for the target representation:

- fixed-point: the value rescaled to exactly ``scale`` fractional digits
- floating-point: the nearest float to the rescaled value
- text: the canonical decimal string, without rounding
"""

import decimal
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Optional

import pyarrow as pa

from oraclemap.core.exceptions import (
    ConversionError,
    ConversionInexactError,
    ValueExceedsLimitsError,
)
from oraclemap.models.enums import NumberExceedsLimitsMode, RoundMode

# Largest precision of the host decimal type (Arrow decimal128)
MAX_DECIMAL_PRECISION = 38


class TargetKind(str, Enum):
    """Host representation a source decimal is converted to."""

    DECIMAL = "DECIMAL"
    DOUBLE = "DOUBLE"
    VARCHAR = "VARCHAR"


@dataclass(frozen=True)
class TargetSpec:
    """Resolved target type for a column.

    ``precision`` and ``scale`` are required for DECIMAL targets. For DOUBLE
    targets ``scale`` is optional; when set, values are rounded to that many
    fractional digits before conversion.
    """

    kind: TargetKind
    precision: Optional[int] = None
    scale: Optional[int] = None

    def __post_init__(self):
        if self.kind == TargetKind.DECIMAL:
            if self.precision is None or self.scale is None:
                raise ValueError("DECIMAL target requires precision and scale")
            if not 1 <= self.precision <= MAX_DECIMAL_PRECISION:
                raise ValueError(
                    f"DECIMAL precision must be between 1 and {MAX_DECIMAL_PRECISION}, "
                    f"got {self.precision}"
                )
            if not 0 <= self.scale <= self.precision:
                raise ValueError(
                    f"DECIMAL scale must be between 0 and precision, got {self.scale}"
                )

    @classmethod
    def decimal(cls, precision: int, scale: int) -> "TargetSpec":
        return cls(TargetKind.DECIMAL, precision, scale)

    @classmethod
    def double(cls, scale: Optional[int] = None) -> "TargetSpec":
        return cls(TargetKind.DOUBLE, scale=scale)

    @classmethod
    def varchar(cls) -> "TargetSpec":
        return cls(TargetKind.VARCHAR)

    def to_arrow(self) -> pa.DataType:
        """Return the Arrow type values of this target are stored as."""
        if self.kind == TargetKind.DECIMAL:
            return pa.decimal128(self.precision, self.scale)
        if self.kind == TargetKind.DOUBLE:
            return pa.float64()
        return pa.string()

    def __str__(self) -> str:
        if self.kind == TargetKind.DECIMAL:
            return f"decimal({self.precision}, {self.scale})"
        if self.kind == TargetKind.DOUBLE and self.scale is not None:
            return f"double(scale={self.scale})"
        return self.kind.value.lower()


@dataclass(frozen=True)
class ConversionPolicy:
    """Rounding settings resolved from the connector configuration."""

    round_mode: RoundMode = RoundMode.HALF_EVEN
    exceeds_limits: NumberExceedsLimitsMode = NumberExceedsLimitsMode.ROUND

    @classmethod
    def from_config(cls, config) -> "ConversionPolicy":
        """Resolve the policy from an OracleConfig.

        Raises:
            ConfigurationError: If the config's round mode contradicts its
                exceeds-limits mode
        """
        return cls(
            round_mode=config.effective_round_mode(),
            exceeds_limits=config.number_exceeds_limits_mode,
        )


def to_decimal(value: Any) -> Decimal:
    """Coerce a driver value to Decimal.

    Floats go through their shortest repr so ``0.1`` becomes ``Decimal("0.1")``.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ConversionError(
            "Cannot convert boolean to decimal", context={"value": value}
        )
    if isinstance(value, (int, float, str)):
        try:
            return Decimal(value.strip() if isinstance(value, str) else repr(value))
        except decimal.InvalidOperation as e:
            raise ConversionError(
                f"Cannot convert {value!r} to decimal", context={"value": value}
            ) from e
    raise ConversionError(
        f"Cannot convert {type(value).__name__} to decimal", context={"value": value}
    )


def round_decimal(value: Decimal, scale: int, round_mode: RoundMode) -> Decimal:
    """Rescale value to exactly ``scale`` fractional digits.

    Zeros are appended when the value has fewer digits, otherwise the extra
    digits are rounded away with ``round_mode``.

    Args:
        value: Source decimal
        scale: Number of fractional digits to keep (negative rounds to tens,
            hundreds, ...)
        round_mode: Rounding policy; UNNECESSARY fails instead of rounding

    Returns:
        Decimal with exponent ``-scale``

    Raises:
        ConversionError: If value is NaN or infinite
        ConversionInexactError: If round_mode is UNNECESSARY and digits
            would be lost
    """
    if not value.is_finite():
        raise ConversionError(
            "Cannot rescale a non-finite decimal", context={"value": value}
        )

    quantum = Decimal(1).scaleb(-scale)
    # Enough digits that quantize never runs out of context precision
    context = decimal.Context(
        prec=max(1, value.adjusted() + 2 + max(scale, 0)),
        rounding=round_mode.decimal_rounding or decimal.ROUND_DOWN,
    )
    rounded = value.quantize(quantum, context=context)

    if round_mode == RoundMode.UNNECESSARY and rounded != value:
        raise ConversionInexactError(
            f"Rounding necessary to fit {value} into scale {scale}",
            context={"value": value, "scale": scale},
        )
    return rounded


def round_decimal_to_type(
    value: Decimal, precision: int, scale: int, round_mode: RoundMode
) -> Decimal:
    """Round value to ``scale`` and check it fits ``precision`` digits.

    Raises:
        ConversionInexactError: If round_mode is UNNECESSARY and digits
            would be lost
        ValueExceedsLimitsError: If the rounded value has more than
            ``precision`` digits
    """
    rounded = round_decimal(value, scale, round_mode)
    digits = len(rounded.as_tuple().digits)
    if digits > precision:
        raise ValueExceedsLimitsError(
            f"Value {rounded} does not fit decimal({precision}, {scale})",
            context={"value": value, "precision": precision, "scale": scale},
        )
    return rounded


def encode_unscaled(value: Decimal) -> int:
    """Return the unscaled integer of a decimal, e.g. 12346 for ``123.46``."""
    sign, digits, _ = value.as_tuple()
    unscaled = int("".join(str(d) for d in digits)) if digits else 0
    return -unscaled if sign else unscaled


def round_double(
    value: Decimal, scale: Optional[int], round_mode: RoundMode
) -> float:
    """Rescale value then return the nearest float.

    Without a scale the value is converted directly. NaN and infinities are
    passed through as floats.

    Raises:
        ConversionInexactError: If round_mode is UNNECESSARY and digits
            would be lost
    """
    if scale is None or not value.is_finite():
        return float(value)
    return float(round_decimal(value, scale, round_mode))


def decimal_to_varchar(value: Decimal) -> str:
    """Return the canonical decimal text of value, with no rounding."""
    return str(value)


def convert(value: Any, target: TargetSpec, policy: ConversionPolicy) -> Any:
    """Convert one source value to the target representation.

    Args:
        value: Decimal (or int, float, str) from the driver; None is SQL NULL
        target: Resolved target type
        policy: Resolved rounding settings

    Returns:
        Decimal, float or str depending on ``target.kind``; None for None

    Raises:
        ConversionInexactError: If rounding is needed under UNNECESSARY
        ValueExceedsLimitsError: If the value does not fit a DECIMAL target
    """
    if value is None:
        return None
    dec = to_decimal(value)
    if target.kind == TargetKind.DECIMAL:
        return round_decimal_to_type(dec, target.precision, target.scale, policy.round_mode)
    if target.kind == TargetKind.DOUBLE:
        return round_double(dec, target.scale, policy.round_mode)
    return decimal_to_varchar(dec)


def convert_column(
    values: Iterable[Any], target: TargetSpec, policy: ConversionPolicy
) -> pa.Array:
    """Convert a sequence of source values into an Arrow array of the target type."""
    converted = [convert(value, target, policy) for value in values]
    return pa.array(converted, type=target.to_arrow())

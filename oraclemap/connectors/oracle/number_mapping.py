"""Resolution of Oracle NUMBER columns to Arrow types.

Oracle reports an unconstrained NUMBER, and FLOAT, with precision 0 and scale
-127. Both are treated here as "unknown": precision ``None`` or ``0`` and scale
``None`` or ``-127``.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, Optional

import pyarrow as pa

from oraclemap.core.exceptions import UnsupportedColumnError
from oraclemap.core.numeric import (
    MAX_DECIMAL_PRECISION,
    ConversionPolicy,
    TargetKind,
    TargetSpec,
    convert,
    convert_column,
)
from oraclemap.models.enums import NumberExceedsLimitsMode, NumberType, UnsupportedTypeStrategy
from oraclemap.models.oracle_config import UNDEFINED_SCALE, OracleConfig

logger = logging.getLogger(__name__)

ORACLE_UNKNOWN_SCALE = -127


@dataclass(frozen=True)
class ColumnMapping:
    """Target type and conversion policy for one column."""

    target: TargetSpec
    policy: ConversionPolicy

    @property
    def kind(self) -> TargetKind:
        return self.target.kind

    @property
    def arrow_type(self) -> pa.DataType:
        return self.target.to_arrow()

    def read(self, value: Any) -> Any:
        """Convert a single driver value for this column."""
        return convert(value, self.target, self.policy)

    def to_arrow(self, values: Iterable[Any]) -> pa.Array:
        """Convert driver values into an Arrow array of this column's type."""
        return convert_column(values, self.target, self.policy)


def _normalize(precision: Optional[int], scale: Optional[int]):
    if precision is not None and precision <= 0:
        precision = None
    if scale == ORACLE_UNKNOWN_SCALE:
        scale = None
    return precision, scale


def default_decimal_scale(config: OracleConfig, precision: Optional[int] = None) -> Optional[int]:
    """Scale for DECIMAL columns whose own scale is unknown.

    ``decimal_default_scale`` wins when defined; otherwise
    ``ratio_default_scale`` is read as the share of the precision given to
    fractional digits. Returns None when neither is defined.
    """
    if config.decimal_default_scale != UNDEFINED_SCALE:
        return min(config.decimal_default_scale, MAX_DECIMAL_PRECISION)
    if config.ratio_default_scale != UNDEFINED_SCALE:
        total = min(precision or MAX_DECIMAL_PRECISION, MAX_DECIMAL_PRECISION)
        return min(math.floor(config.ratio_default_scale * total), total)
    return None


def choose_number_type(
    precision: Optional[int], scale: Optional[int], config: OracleConfig
) -> NumberType:
    """Pick the target representation for a NUMBER column.

    Expects normalized precision and scale (None for unknown).
    """
    if scale is None:
        return config.number_null_scale_type or config.number_type_default
    if scale == 0:
        return config.number_zero_scale_type or NumberType.DECIMAL
    if precision is None:
        return config.number_type_default
    return NumberType.DECIMAL


def unsupported_column_mapping(
    config: OracleConfig, type_name: str
) -> Optional[ColumnMapping]:
    """Apply the unsupported-type strategy to a column that cannot be mapped.

    Returns:
        A VARCHAR mapping, or None if the column should be skipped

    Raises:
        UnsupportedColumnError: If the strategy is FAIL
    """
    strategy = config.unsupported_type_strategy
    if strategy == UnsupportedTypeStrategy.FAIL:
        raise UnsupportedColumnError(
            f"Unsupported Oracle type: {type_name}",
            context={"strategy": strategy},
        )
    if strategy == UnsupportedTypeStrategy.CONVERT_TO_VARCHAR:
        logger.info(
            "Converting unsupported column to varchar", extra={"column_type": type_name}
        )
        return ColumnMapping(TargetSpec.varchar(), ConversionPolicy.from_config(config))
    logger.debug("Ignoring unsupported column", extra={"column_type": type_name})
    return None


def _exceeds_limits_mapping(
    type_name: str, round_scale: int, config: OracleConfig, policy: ConversionPolicy
) -> ColumnMapping:
    """Apply the exceeds-limits mode to a column decimal128 cannot hold as declared.

    Under ROUND the column becomes ``decimal(38, round_scale)``.
    """
    mode = config.number_exceeds_limits_mode
    if mode == NumberExceedsLimitsMode.FAIL:
        raise UnsupportedColumnError(
            f"{type_name} cannot be represented as a decimal",
            context={"max_precision": MAX_DECIMAL_PRECISION, "mode": mode},
        )
    if mode == NumberExceedsLimitsMode.CONVERT_TO_VARCHAR:
        logger.info(
            "Converting NUMBER that exceeds limits to varchar",
            extra={"column_type": type_name},
        )
        return ColumnMapping(TargetSpec.varchar(), policy)

    target = TargetSpec.decimal(MAX_DECIMAL_PRECISION, round_scale)
    logger.info(
        "Rounding NUMBER that exceeds limits",
        extra={"column_type": type_name, "context": {"target": target}},
    )
    return ColumnMapping(target, policy)


def _decimal_mapping(
    precision: int, scale: int, config: OracleConfig, policy: ConversionPolicy
) -> ColumnMapping:
    if scale < 0:
        # NUMBER(5,-2) stores 5 significant digits left of two implied zeros
        precision, scale = precision - scale, 0
    precision = max(precision, scale, 1)
    if precision > MAX_DECIMAL_PRECISION:
        # Keep integer digits, give up fractional ones
        integer_digits = max(precision - scale, 0)
        round_scale = max(0, min(scale, MAX_DECIMAL_PRECISION - integer_digits))
        return _exceeds_limits_mapping(
            f"NUMBER({precision},{scale})", round_scale, config, policy
        )
    return ColumnMapping(TargetSpec.decimal(precision, scale), policy)


def resolve_number_mapping(
    precision: Optional[int], scale: Optional[int], config: OracleConfig
) -> ColumnMapping:
    """Resolve the column mapping for an Oracle NUMBER(precision, scale).

    A column whose scale is unknown borrows the configured default scale at
    full precision. Without a default scale it is handled like a column that
    exceeds the decimal limits.

    Args:
        precision: Declared precision; None or 0 when unspecified
        scale: Declared scale; None or -127 when unknown
        config: Connector configuration

    Returns:
        ColumnMapping

    Raises:
        ConfigurationError: If the round mode contradicts the exceeds-limits mode
        UnsupportedColumnError: If the column cannot be mapped under a FAIL policy
    """
    type_name = f"NUMBER({precision},{scale})"
    precision, scale = _normalize(precision, scale)
    policy = ConversionPolicy.from_config(config)
    number_type = choose_number_type(precision, scale, config)

    if number_type == NumberType.DOUBLE:
        if config.double_default_scale != UNDEFINED_SCALE:
            double_scale = config.double_default_scale
        elif scale is not None and scale > 0:
            double_scale = scale
        else:
            double_scale = None
        mapping = ColumnMapping(TargetSpec.double(double_scale), policy)
    elif number_type == NumberType.INTEGER:
        integer_precision = precision or MAX_DECIMAL_PRECISION
        if scale is not None and scale < 0:
            integer_precision -= scale
        mapping = _decimal_mapping(integer_precision, 0, config, policy)
    elif scale is None:
        default_scale = default_decimal_scale(config, precision)
        if default_scale is None:
            mapping = _exceeds_limits_mapping(type_name, 0, config, policy)
        else:
            # The declared precision says nothing about integer digits here
            mapping = ColumnMapping(
                TargetSpec.decimal(MAX_DECIMAL_PRECISION, default_scale), policy
            )
    elif precision is None:
        mapping = _decimal_mapping(
            max(MAX_DECIMAL_PRECISION, scale), scale, config, policy
        )
    else:
        mapping = _decimal_mapping(precision, scale, config, policy)

    logger.debug(
        "Resolved NUMBER column",
        extra={"column_type": type_name, "context": {"target": mapping.target}},
    )
    return mapping

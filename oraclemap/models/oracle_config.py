"""Oracle connector configuration model and its builder."""

import logging
import math
from datetime import timedelta
from typing import Any, Callable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from oraclemap.core.exceptions import ConfigurationError, InvalidInputError
from oraclemap.models.duration import format_duration, parse_duration
from oraclemap.models.enums import (
    NumberExceedsLimitsMode,
    NumberType,
    RoundMode,
    UnsupportedTypeStrategy,
)

logger = logging.getLogger(__name__)

UNDEFINED_SCALE = -1

# NUMBER columns without a usable scale must still hold fractional values
DEFAULT_NUMBER_TYPES = (NumberType.DECIMAL, NumberType.DOUBLE)


def _check_scale_pair(ratio_scale: float, decimal_scale: int) -> None:
    if ratio_scale != UNDEFINED_SCALE and decimal_scale != UNDEFINED_SCALE:
        raise ConfigurationError(
            "oracle.number.default-scale.ratio and "
            "oracle.number.default-scale.decimal are mutually exclusive",
            context={"ratio": ratio_scale, "decimal": decimal_scale},
        )


def _check_round_mode(
    exceeds_limits: NumberExceedsLimitsMode, round_mode: RoundMode
) -> RoundMode:
    if exceeds_limits == NumberExceedsLimitsMode.ROUND and round_mode == RoundMode.UNNECESSARY:
        raise ConfigurationError(
            "oracle.number.round-mode cannot be UNNECESSARY when "
            "oracle.number.exceeds-limits is ROUND",
            context={"exceeds_limits": exceeds_limits, "round_mode": round_mode},
        )
    return round_mode


def _validate_scale(value: Any, name: str, allow_fraction: bool = False) -> Any:
    valid_types = (int, float) if allow_fraction else (int,)
    if isinstance(value, bool) or not isinstance(value, valid_types):
        raise InvalidInputError(
            f"{name} must be a number, got {type(value).__name__}",
            context={"value": value},
        )
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidInputError(f"{name} must be finite", context={"value": value})
    if value != UNDEFINED_SCALE and value < 0:
        raise InvalidInputError(
            f"{name} must be non-negative or {UNDEFINED_SCALE}",
            context={"value": value},
        )
    return value


def _parse_number_type_default(value: Any) -> NumberType:
    number_type = NumberType.parse(value)
    if number_type not in DEFAULT_NUMBER_TYPES:
        raise InvalidInputError(
            f"oracle.number.default-type cannot be {number_type}",
            context={"allowed": [t.value for t in DEFAULT_NUMBER_TYPES]},
        )
    return number_type


def _parse_optional_number_type(value: Any) -> Optional[NumberType]:
    if value is None or value == "":
        return None
    return NumberType.parse(value)


class OracleConfig(BaseModel):
    """Validated, immutable settings for the Oracle connector.

    Field aliases are the connector property keys, so a flat property mapping
    validates directly. Prefer ``OracleConfigBuilder`` or ``from_properties``,
    which report bad input as ``InvalidInputError`` instead of pydantic's
    ``ValidationError``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    auto_reconnect: bool = Field(default=True, alias="oracle.auto-reconnect")
    max_reconnects: int = Field(default=3, alias="oracle.max-reconnects", ge=0)
    connection_timeout: timedelta = Field(
        default=timedelta(seconds=10), alias="oracle.connection-timeout"
    )
    unsupported_type_strategy: UnsupportedTypeStrategy = Field(
        default=UnsupportedTypeStrategy.IGNORE,
        alias="unsupported-type.handling-strategy",
    )
    synonyms_enabled: bool = Field(default=False, alias="oracle.synonyms.enabled")
    number_exceeds_limits_mode: NumberExceedsLimitsMode = Field(
        default=NumberExceedsLimitsMode.ROUND, alias="oracle.number.exceeds-limits"
    )
    number_type_default: NumberType = Field(
        default=NumberType.DECIMAL, alias="oracle.number.default-type"
    )
    number_zero_scale_type: Optional[NumberType] = Field(
        default=None, alias="oracle.number.type.zero-scale-type"
    )
    number_null_scale_type: Optional[NumberType] = Field(
        default=None, alias="oracle.number.type.null-scale-type"
    )
    number_round_mode: RoundMode = Field(
        default=RoundMode.HALF_EVEN, alias="oracle.number.round-mode"
    )
    ratio_default_scale: float = Field(
        default=UNDEFINED_SCALE, alias="oracle.number.default-scale.ratio"
    )
    decimal_default_scale: int = Field(
        default=UNDEFINED_SCALE, alias="oracle.number.default-scale.decimal"
    )
    double_default_scale: int = Field(
        default=UNDEFINED_SCALE, alias="oracle.number.default-scale.double"
    )

    @field_validator("connection_timeout", mode="before")
    @classmethod
    def validate_connection_timeout(cls, v):
        """Accept duration literals such as ``11s``."""
        return parse_duration(v)

    @field_validator(
        "unsupported_type_strategy",
        "number_exceeds_limits_mode",
        "number_round_mode",
        mode="before",
    )
    @classmethod
    def validate_enum_name(cls, v, info):
        """Match enum names case-sensitively."""
        annotation = cls.model_fields[info.field_name].annotation
        return annotation.parse(v)

    @field_validator("number_type_default", mode="before")
    @classmethod
    def validate_number_type_default(cls, v):
        """Default NUMBER type must be DECIMAL or DOUBLE."""
        return _parse_number_type_default(v)

    @field_validator("number_zero_scale_type", "number_null_scale_type", mode="before")
    @classmethod
    def validate_scale_type_override(cls, v):
        """Empty string means no override."""
        return _parse_optional_number_type(v)

    @field_validator("ratio_default_scale", mode="before")
    @classmethod
    def validate_ratio_default_scale(cls, v):
        """Validate ratio scale is the sentinel or non-negative."""
        if isinstance(v, str):
            v = _parse_float(v)
        return _validate_scale(v, "ratio_default_scale", allow_fraction=True)

    @field_validator("decimal_default_scale", "double_default_scale", mode="before")
    @classmethod
    def validate_default_scale(cls, v, info):
        """Validate scale is the sentinel or a non-negative integer."""
        if isinstance(v, str):
            v = _parse_int(v)
        return _validate_scale(v, info.field_name)

    @model_validator(mode="after")
    def validate_cross_fields(self):
        """Reject contradictory setting pairs."""
        _check_scale_pair(self.ratio_default_scale, self.decimal_default_scale)
        _check_round_mode(self.number_exceeds_limits_mode, self.number_round_mode)
        return self

    def effective_round_mode(self) -> RoundMode:
        """Return the round mode to use for conversions.

        Raises:
            ConfigurationError: If round mode is UNNECESSARY while the
                exceeds-limits mode is ROUND
        """
        return _check_round_mode(self.number_exceeds_limits_mode, self.number_round_mode)

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> "OracleConfig":
        """Build a config from a flat property mapping.

        Args:
            properties: Property keys (e.g. ``oracle.number.round-mode``) to
                string values

        Returns:
            Validated OracleConfig

        Raises:
            InvalidInputError: If a key is unknown or a value is malformed
            ConfigurationError: If two properties contradict each other
        """
        return OracleConfigBuilder.from_properties(properties).build()

    def to_properties(self) -> dict[str, str]:
        """Render the config as a flat property mapping."""
        properties = {}
        for name, field in type(self).model_fields.items():
            properties[field.alias] = _format_property(getattr(self, name))
        return properties

    def to_builder(self) -> "OracleConfigBuilder":
        """Return a builder pre-populated with this config's values."""
        builder = OracleConfigBuilder()
        builder._values = self.model_dump()
        return builder


def _format_property(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, timedelta):
        return format_duration(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    raise InvalidInputError(f"Invalid boolean value: {value!r}")


def _parse_int(value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as e:
        raise InvalidInputError(f"Invalid integer value: {value!r}") from e


def _parse_float(value: str) -> float:
    try:
        return float(value.strip())
    except ValueError as e:
        raise InvalidInputError(f"Invalid number value: {value!r}") from e


def _identity(value: str) -> str:
    return value


class OracleConfigBuilder:
    """Mutable builder for OracleConfig.

    Every setter validates its own input before storing it and returns the
    builder, so calls can be chained. The ratio/decimal default scales are
    checked against each other on write; the round mode is checked when
    ``effective_round_mode`` is read and again by ``build``.
    """

    def __init__(self):
        self._values: dict[str, Any] = {
            name: field.default for name, field in OracleConfig.model_fields.items()
        }

    def set_auto_reconnect(self, enabled: bool) -> "OracleConfigBuilder":
        if not isinstance(enabled, bool):
            raise InvalidInputError("auto_reconnect must be a boolean")
        self._values["auto_reconnect"] = enabled
        return self

    def set_max_reconnects(self, count: int) -> "OracleConfigBuilder":
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise InvalidInputError(
                "max_reconnects must be a non-negative integer", context={"value": count}
            )
        self._values["max_reconnects"] = count
        return self

    def set_connection_timeout(self, timeout: str | timedelta) -> "OracleConfigBuilder":
        self._values["connection_timeout"] = parse_duration(timeout)
        return self

    def set_unsupported_type_strategy(
        self, strategy: str | UnsupportedTypeStrategy
    ) -> "OracleConfigBuilder":
        self._values["unsupported_type_strategy"] = UnsupportedTypeStrategy.parse(strategy)
        return self

    def set_synonyms_enabled(self, enabled: bool) -> "OracleConfigBuilder":
        if not isinstance(enabled, bool):
            raise InvalidInputError("synonyms_enabled must be a boolean")
        self._values["synonyms_enabled"] = enabled
        return self

    def set_number_exceeds_limits_mode(
        self, mode: str | NumberExceedsLimitsMode
    ) -> "OracleConfigBuilder":
        self._values["number_exceeds_limits_mode"] = NumberExceedsLimitsMode.parse(mode)
        return self

    def set_number_type_default(self, number_type: str | NumberType) -> "OracleConfigBuilder":
        self._values["number_type_default"] = _parse_number_type_default(number_type)
        return self

    def set_number_zero_scale_type(
        self, number_type: str | NumberType | None
    ) -> "OracleConfigBuilder":
        self._values["number_zero_scale_type"] = _parse_optional_number_type(number_type)
        return self

    def set_number_null_scale_type(
        self, number_type: str | NumberType | None
    ) -> "OracleConfigBuilder":
        self._values["number_null_scale_type"] = _parse_optional_number_type(number_type)
        return self

    def set_number_round_mode(self, round_mode: str | RoundMode) -> "OracleConfigBuilder":
        self._values["number_round_mode"] = RoundMode.parse(round_mode)
        return self

    def set_ratio_default_scale(self, scale: float) -> "OracleConfigBuilder":
        scale = _validate_scale(scale, "ratio_default_scale", allow_fraction=True)
        _check_scale_pair(scale, self._values["decimal_default_scale"])
        self._values["ratio_default_scale"] = scale
        return self

    def set_decimal_default_scale(self, scale: int) -> "OracleConfigBuilder":
        scale = _validate_scale(scale, "decimal_default_scale")
        _check_scale_pair(self._values["ratio_default_scale"], scale)
        self._values["decimal_default_scale"] = scale
        return self

    def set_double_default_scale(self, scale: int) -> "OracleConfigBuilder":
        self._values["double_default_scale"] = _validate_scale(scale, "double_default_scale")
        return self

    def get(self, name: str) -> Any:
        """Return the value currently stored for a field name."""
        if name not in self._values:
            raise InvalidInputError(f"Unknown setting: {name}")
        return self._values[name]

    def effective_round_mode(self) -> RoundMode:
        """Return the configured round mode if it is consistent.

        Raises:
            ConfigurationError: If round mode is UNNECESSARY while the
                exceeds-limits mode is ROUND
        """
        return _check_round_mode(
            self._values["number_exceeds_limits_mode"], self._values["number_round_mode"]
        )

    def build(self) -> OracleConfig:
        """Validate all cross-field invariants and return a frozen config.

        Raises:
            ConfigurationError: If any two settings contradict each other
        """
        self.effective_round_mode()
        _check_scale_pair(
            self._values["ratio_default_scale"], self._values["decimal_default_scale"]
        )
        config = OracleConfig.model_validate(self._values)
        logger.debug("Built Oracle config", extra={"context": config.to_properties()})
        return config

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> "OracleConfigBuilder":
        """Create a builder from a flat property mapping.

        Properties are applied in mapping order through the regular setters.

        Raises:
            InvalidInputError: If a key is unknown or a value is malformed
            ConfigurationError: If the ratio and decimal default scales are
                both defined
        """
        builder = cls()
        for key, raw_value in properties.items():
            if key not in PROPERTY_SETTERS:
                raise InvalidInputError(
                    f"Unknown property: {key}",
                    context={"known": sorted(PROPERTY_SETTERS)},
                )
            if not isinstance(raw_value, str):
                raise InvalidInputError(
                    f"Property {key} must be a string",
                    context={"type": type(raw_value).__name__},
                )
            setter_name, parse = PROPERTY_SETTERS[key]
            getattr(builder, setter_name)(parse(raw_value))
        return builder


# Property key -> (builder setter, raw string parser)
PROPERTY_SETTERS: dict[str, tuple[str, Callable[[str], Any]]] = {
    "oracle.auto-reconnect": ("set_auto_reconnect", _parse_bool),
    "oracle.max-reconnects": ("set_max_reconnects", _parse_int),
    "oracle.connection-timeout": ("set_connection_timeout", _identity),
    "unsupported-type.handling-strategy": ("set_unsupported_type_strategy", _identity),
    "oracle.synonyms.enabled": ("set_synonyms_enabled", _parse_bool),
    "oracle.number.exceeds-limits": ("set_number_exceeds_limits_mode", _identity),
    "oracle.number.default-type": ("set_number_type_default", _identity),
    "oracle.number.round-mode": ("set_number_round_mode", _identity),
    "oracle.number.type.zero-scale-type": ("set_number_zero_scale_type", _identity),
    "oracle.number.type.null-scale-type": ("set_number_null_scale_type", _identity),
    "oracle.number.default-scale.ratio": ("set_ratio_default_scale", _parse_float),
    "oracle.number.default-scale.decimal": ("set_decimal_default_scale", _parse_int),
    "oracle.number.default-scale.double": ("set_double_default_scale", _parse_int),
}

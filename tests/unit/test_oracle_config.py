"""Tests for OracleConfig and OracleConfigBuilder."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from oraclemap.core.exceptions import ConfigurationError, InvalidInputError
from oraclemap.models.enums import (
    NumberExceedsLimitsMode,
    NumberType,
    RoundMode,
    UnsupportedTypeStrategy,
)
from oraclemap.models.oracle_config import (
    UNDEFINED_SCALE,
    OracleConfig,
    OracleConfigBuilder,
)


class TestDefaults:
    """Tests for default settings."""

    def test_default_values(self, default_config):
        """Test every documented default."""
        assert default_config.unsupported_type_strategy == UnsupportedTypeStrategy.IGNORE
        assert default_config.number_exceeds_limits_mode == NumberExceedsLimitsMode.ROUND
        assert default_config.number_type_default == NumberType.DECIMAL
        assert default_config.number_zero_scale_type is None
        assert default_config.number_null_scale_type is None
        assert default_config.number_round_mode == RoundMode.HALF_EVEN
        assert default_config.ratio_default_scale == UNDEFINED_SCALE
        assert default_config.decimal_default_scale == UNDEFINED_SCALE
        assert default_config.double_default_scale == UNDEFINED_SCALE
        assert default_config.auto_reconnect is True
        assert default_config.max_reconnects == 3
        assert default_config.connection_timeout == timedelta(seconds=10)
        assert default_config.synonyms_enabled is False

    def test_builder_defaults_match_model(self, default_config):
        """Test an untouched builder builds the default config."""
        assert OracleConfigBuilder().build() == default_config

    def test_default_properties(self, default_config):
        """Test defaults rendered as properties."""
        properties = default_config.to_properties()
        assert properties["oracle.number.round-mode"] == "HALF_EVEN"
        assert properties["oracle.connection-timeout"] == "10s"
        assert properties["oracle.number.type.zero-scale-type"] == ""
        assert properties["oracle.number.default-scale.ratio"] == "-1"
        assert properties["oracle.auto-reconnect"] == "true"


class TestScaleConflict:
    """Tests for the ratio/decimal default scale exclusion."""

    def test_decimal_then_ratio_conflicts(self):
        """Test setting ratio while decimal is defined fails."""
        builder = OracleConfigBuilder()
        builder.set_decimal_default_scale(UNDEFINED_SCALE)
        builder.set_ratio_default_scale(UNDEFINED_SCALE)

        builder.set_decimal_default_scale(8)
        with pytest.raises(ConfigurationError):
            builder.set_ratio_default_scale(0.3)

    def test_ratio_then_decimal_conflicts(self):
        """Test setting decimal while ratio is defined fails."""
        builder = OracleConfigBuilder().set_ratio_default_scale(0.5)
        with pytest.raises(ConfigurationError):
            builder.set_decimal_default_scale(4)

    def test_rejected_write_keeps_previous_state(self):
        """Test a rejected transition leaves both values untouched."""
        builder = OracleConfigBuilder().set_decimal_default_scale(8)
        with pytest.raises(ConfigurationError):
            builder.set_ratio_default_scale(2)
        assert builder.get("decimal_default_scale") == 8
        assert builder.get("ratio_default_scale") == UNDEFINED_SCALE

    def test_overwrite_defined_side(self):
        """Test the defined side can be overwritten."""
        config = (
            OracleConfigBuilder()
            .set_decimal_default_scale(8)
            .set_decimal_default_scale(10)
            .build()
        )
        assert config.decimal_default_scale == 10

    @pytest.mark.parametrize("other", [UNDEFINED_SCALE, 0, 8])
    def test_undefined_always_succeeds(self, other):
        """Test clearing either side succeeds whatever the other holds."""
        builder = OracleConfigBuilder().set_decimal_default_scale(other)
        builder.set_ratio_default_scale(UNDEFINED_SCALE)
        builder.set_decimal_default_scale(UNDEFINED_SCALE)
        assert builder.get("decimal_default_scale") == UNDEFINED_SCALE

    def test_clearing_resolves_conflict(self):
        """Test clearing decimal allows ratio to be set."""
        config = (
            OracleConfigBuilder()
            .set_decimal_default_scale(8)
            .set_decimal_default_scale(UNDEFINED_SCALE)
            .set_ratio_default_scale(0.25)
            .build()
        )
        assert config.ratio_default_scale == 0.25
        assert config.decimal_default_scale == UNDEFINED_SCALE

    def test_model_rejects_both_defined(self):
        """Test direct model construction also enforces the exclusion."""
        with pytest.raises(ConfigurationError):
            OracleConfig(ratio_default_scale=0.5, decimal_default_scale=4)

    @pytest.mark.parametrize("scale", [-2, -0.5, True, "4", float("nan")])
    def test_invalid_scale_values(self, scale):
        """Test malformed scales are rejected as bad input."""
        with pytest.raises(InvalidInputError):
            OracleConfigBuilder().set_ratio_default_scale(scale)

    def test_decimal_scale_must_be_integer(self):
        """Test decimal and double scales reject fractions."""
        with pytest.raises(InvalidInputError):
            OracleConfigBuilder().set_decimal_default_scale(1.5)
        with pytest.raises(InvalidInputError):
            OracleConfigBuilder().set_double_default_scale(-3)


class TestRoundMode:
    """Tests for the round mode invariant."""

    def test_unnecessary_with_round_fails_on_read(self):
        """Test ROUND + UNNECESSARY is rejected when read."""
        builder = OracleConfigBuilder()
        builder.set_number_exceeds_limits_mode("ROUND")
        builder.set_number_round_mode("UNNECESSARY")
        with pytest.raises(ConfigurationError):
            builder.effective_round_mode()

    def test_unnecessary_with_round_fails_on_build(self):
        """Test build re-validates the round mode."""
        builder = OracleConfigBuilder().set_number_round_mode(RoundMode.UNNECESSARY)
        with pytest.raises(ConfigurationError):
            builder.build()

    @pytest.mark.parametrize("mode", ["FAIL", "CONVERT_TO_VARCHAR"])
    def test_unnecessary_allowed_without_round(self, mode):
        """Test UNNECESSARY is legal when exceeding limits does not round."""
        config = (
            OracleConfigBuilder()
            .set_number_exceeds_limits_mode(mode)
            .set_number_round_mode("UNNECESSARY")
            .build()
        )
        assert config.effective_round_mode() == RoundMode.UNNECESSARY

    @pytest.mark.parametrize(
        "round_mode", [mode for mode in RoundMode if mode != RoundMode.UNNECESSARY]
    )
    def test_other_modes_returned_unchanged(self, round_mode):
        """Test every other mode reads back as configured."""
        builder = OracleConfigBuilder().set_number_round_mode(round_mode.value)
        assert builder.effective_round_mode() == round_mode
        assert builder.build().effective_round_mode() == round_mode

    def test_invalid_enum_strings(self):
        """Test unknown enum strings fail immediately."""
        builder = OracleConfigBuilder()
        with pytest.raises(InvalidInputError):
            builder.set_number_exceeds_limits_mode("ASDF")
        with pytest.raises(InvalidInputError):
            builder.set_number_round_mode("ASDF")
        with pytest.raises(InvalidInputError):
            builder.set_number_round_mode("half_even")

    def test_invalid_input_is_value_error(self):
        """Test bad input is distinguishable from conflicting settings."""
        with pytest.raises(ValueError):
            OracleConfigBuilder().set_number_round_mode("ASDF")
        assert not issubclass(ConfigurationError, ValueError)


class TestFieldSetters:
    """Tests for single-field validation."""

    def test_default_type_rejects_integer(self):
        """Test INTEGER is not a valid default NUMBER type."""
        with pytest.raises(InvalidInputError):
            OracleConfigBuilder().set_number_type_default("INTEGER")

    def test_scale_type_overrides(self):
        """Test zero/null scale overrides accept INTEGER and empty."""
        config = (
            OracleConfigBuilder()
            .set_number_zero_scale_type("INTEGER")
            .set_number_null_scale_type("")
            .build()
        )
        assert config.number_zero_scale_type == NumberType.INTEGER
        assert config.number_null_scale_type is None

    def test_negative_max_reconnects(self):
        """Test max_reconnects must be non-negative."""
        with pytest.raises(InvalidInputError):
            OracleConfigBuilder().set_max_reconnects(-1)

    def test_connection_timeout(self):
        """Test connection timeout accepts literals and timedeltas."""
        builder = OracleConfigBuilder().set_connection_timeout("1.5m")
        assert builder.get("connection_timeout") == timedelta(seconds=90)
        builder.set_connection_timeout(timedelta(seconds=3))
        assert builder.get("connection_timeout") == timedelta(seconds=3)
        with pytest.raises(InvalidInputError):
            builder.set_connection_timeout("-1s")

    def test_connection_timeout_too_large(self):
        """Test an out-of-range timeout is invalid input and leaves the builder unchanged."""
        builder = OracleConfigBuilder()
        with pytest.raises(InvalidInputError):
            builder.set_connection_timeout("999999999999d")
        assert builder.get("connection_timeout") == timedelta(seconds=10)

    def test_boolean_setters(self):
        """Test boolean setters reject non-booleans."""
        with pytest.raises(InvalidInputError):
            OracleConfigBuilder().set_auto_reconnect("yes")
        with pytest.raises(InvalidInputError):
            OracleConfigBuilder().set_synonyms_enabled(1)

    def test_config_is_frozen(self, default_config):
        """Test the built config cannot be mutated."""
        with pytest.raises(ValidationError):
            default_config.max_reconnects = 7

    def test_to_builder_round_trip(self):
        """Test a config can be adjusted through a new builder."""
        original = OracleConfigBuilder().set_decimal_default_scale(6).build()
        changed = original.to_builder().set_number_round_mode("DOWN").build()
        assert changed.decimal_default_scale == 6
        assert changed.number_round_mode == RoundMode.DOWN
        assert original.number_round_mode == RoundMode.HALF_EVEN


class TestPropertyMapping:
    """Tests for populating the config from property strings."""

    def test_explicit_property_mappings(self, full_properties):
        """Test the full property mapping equals the setter-built config."""
        expected = (
            OracleConfigBuilder()
            .set_auto_reconnect(False)
            .set_max_reconnects(5)
            .set_connection_timeout(timedelta(seconds=11))
            .set_unsupported_type_strategy("FAIL")
            .set_synonyms_enabled(True)
            .set_number_exceeds_limits_mode("ROUND")
            .set_number_type_default("DECIMAL")
            .set_number_zero_scale_type("INTEGER")
            .set_number_null_scale_type("DOUBLE")
            .set_number_round_mode("UP")
            .set_ratio_default_scale(UNDEFINED_SCALE)
            .set_decimal_default_scale(14)
            .set_double_default_scale(6)
            .build()
        )
        assert OracleConfig.from_properties(full_properties) == expected

    def test_property_round_trip(self, full_properties):
        """Test to_properties reproduces the input mapping."""
        config = OracleConfig.from_properties(full_properties)
        assert config.to_properties() == full_properties

    def test_aliases_validate_directly(self, full_properties):
        """Test the property keys are accepted as model aliases."""
        config = OracleConfig.model_validate(full_properties)
        assert config == OracleConfig.from_properties(full_properties)

    def test_unknown_property(self):
        """Test unknown keys are rejected."""
        with pytest.raises(InvalidInputError) as exc_info:
            OracleConfig.from_properties({"oracle.number.bogus": "1"})
        assert "Unknown property" in str(exc_info.value)

    def test_case_sensitive_enum_values(self):
        """Test enum property values must match case exactly."""
        with pytest.raises(InvalidInputError):
            OracleConfig.from_properties({"oracle.number.round-mode": "up"})

    def test_malformed_numbers(self):
        """Test non-numeric scale properties are rejected."""
        with pytest.raises(InvalidInputError):
            OracleConfig.from_properties({"oracle.number.default-scale.decimal": "four"})
        with pytest.raises(InvalidInputError):
            OracleConfig.from_properties({"oracle.auto-reconnect": "maybe"})

    def test_conflicting_properties(self):
        """Test conflicting scale properties fail as configuration errors."""
        with pytest.raises(ConfigurationError):
            OracleConfig.from_properties(
                {
                    "oracle.number.default-scale.decimal": "4",
                    "oracle.number.default-scale.ratio": "0.3",
                }
            )

    def test_round_unnecessary_properties(self):
        """Test ROUND + UNNECESSARY properties fail when built."""
        with pytest.raises(ConfigurationError):
            OracleConfig.from_properties({"oracle.number.round-mode": "UNNECESSARY"})

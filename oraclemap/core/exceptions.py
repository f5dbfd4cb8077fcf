"""Exception hierarchy for the oraclemap package."""


class OracleMapError(Exception):
    """Base exception for all oraclemap errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class InvalidInputError(OracleMapError, ValueError):
    """Raised when a single setting receives a value outside its domain."""

    pass


class ConfigurationError(OracleMapError):
    """Raised when two settings are individually valid but contradict each other."""

    pass


class ConfigLoadError(OracleMapError):
    """Raised when a configuration file cannot be read."""

    pass


class UnsupportedColumnError(OracleMapError):
    """Raised when a column type cannot be mapped under the configured policy."""

    pass


class ConversionError(OracleMapError, ArithmeticError):
    """Raised when a value cannot be converted to its target representation."""

    pass


class ConversionInexactError(ConversionError):
    """Raised when a conversion needs rounding but the round mode forbids it."""

    pass


class ValueExceedsLimitsError(ConversionError):
    """Raised when a rounded value still has more digits than the target precision."""

    pass

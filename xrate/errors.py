"""Exceptions raised by the exchange rate reader."""


class ExchangeRateError(Exception):
    """Base exception for all xrate errors."""
    pass


class ConfigurationError(ExchangeRateError):
    """Raised when required configuration is missing or unusable."""
    pass


class MissingAccessKeyError(ConfigurationError):
    """Raised when no API access key is available at construction time."""

    def __init__(self, variable: str | None = "FIXER_IO_ACCESS_KEY", message: str | None = None) -> None:
        self.variable = variable
        if message is None:
            message = f"environment variable {variable} is not set or empty"
        super().__init__(message)


class RateTransportError(ExchangeRateError):
    """Raised when the rate service cannot be reached or answers with an error status."""
    pass


class RateParseError(ExchangeRateError):
    """Raised when the response body is not valid JSON."""
    pass


class RateSchemaError(ExchangeRateError):
    """Raised when the response lacks the ``rates`` object or a requested currency."""
    pass


class ZeroRateError(RateSchemaError, ZeroDivisionError):
    """Raised when a cross-rate would divide by a zero rate."""

    def __init__(self, currency: str, date: str) -> None:
        self.currency = currency
        self.date = date
        super().__init__(f"rate for {currency} on {date} is zero; cannot compute cross-rate")

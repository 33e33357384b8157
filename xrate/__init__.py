from xrate.errors import (
    ConfigurationError,
    ExchangeRateError,
    MissingAccessKeyError,
    RateParseError,
    RateSchemaError,
    RateTransportError,
    ZeroRateError,
)
from xrate.reader import ExchangeRateReader
from xrate.schemas import DateKey, RateDocument, RateQuote

__all__ = [
    "ConfigurationError",
    "DateKey",
    "ExchangeRateError",
    "ExchangeRateReader",
    "MissingAccessKeyError",
    "RateDocument",
    "RateParseError",
    "RateQuote",
    "RateSchemaError",
    "RateTransportError",
    "ZeroRateError",
]

from __future__ import annotations

from datetime import date as _date
from typing import Any

from pydantic import BaseModel, ConfigDict

from xrate.errors import RateSchemaError

PROVIDER_NAME = "fixer.io"


def zero_pad(value: int) -> str:
    """Render a month or day as exactly two digits (6 -> "06")."""
    return f"{value:02d}"


def format_date(year: int, month: int, day: int) -> str:
    return f"{year}-{zero_pad(month)}-{zero_pad(day)}"


class DateKey(BaseModel):
    """Year/month/day triple used as the path fragment of a request.

    No calendar validation happens here; ``DateKey(year=2010, month=2, day=31)``
    is forwarded to the service as ``2010-02-31`` and left for it to reject.
    """

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, value: _date) -> DateKey:
        return cls(year=value.year, month=value.month, day=value.day)

    def path(self) -> str:
        return format_date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return self.path()


class RateDocument(BaseModel):
    """Rates for a single date, relative to the service's base currency."""

    rates: dict[str, float]
    base: str | None = None
    date: str | None = None

    def rate_for(self, currency_code: str) -> float:
        try:
            return float(self.rates[currency_code])
        except KeyError:
            raise RateSchemaError(
                f"currency {currency_code!r} not found in rates for {self.date or 'requested date'}"
            ) from None


class RateQuote(BaseModel):
    base: str
    target: str
    rate: float
    date: str
    provider: str = PROVIDER_NAME


def describe_service_error(payload: Any) -> str | None:
    """Extract the service's own error description from a failed response body.

    Fixer.io answers failed requests with HTTP 200 and a body such as
    ``{"success": false, "error": {"code": 101, "type": "missing_access_key"}}``.
    """
    if not isinstance(payload, dict) or payload.get("success", True):
        return None
    error = payload.get("error")
    if isinstance(error, dict):
        parts = [str(error[k]) for k in ("code", "type", "info") if error.get(k) is not None]
        return " ".join(parts) or None
    if error is not None:
        return str(error)
    return "request unsuccessful"

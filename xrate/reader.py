from __future__ import annotations

import logging
from typing import Any, overload

from xrate.config import DEFAULT_TIMEOUT, load_access_key
from xrate.errors import MissingAccessKeyError, ZeroRateError
from xrate.provider import fetch_rate_document
from xrate.schemas import DateKey, RateDocument, RateQuote

log = logging.getLogger("xrate.reader")

# The service quotes every rate against the Euro.
SERVICE_BASE_CURRENCY = "EUR"


class ExchangeRateReader:
    """Read historical exchange rates from a Fixer.io-style JSON API.

    Requests for a given day are built by appending the date to ``base_url``;
    with ``base_url="http://data.fixer.io/api/"`` the rates for 25 June 2010
    come from ``http://data.fixer.io/api/2010-06-25?access_key=...``.

    The access key is taken from ``access_key`` or, when that is omitted,
    from the ``FIXER_IO_ACCESS_KEY`` environment variable. Either way it is
    resolved here, so a missing key fails before any request is made.
    """

    def __init__(
        self,
        base_url: str,
        access_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        if access_key is None:
            access_key = load_access_key()
        if not access_key:
            raise MissingAccessKeyError(None, "access_key was passed explicitly but is empty")
        self._base_url = base_url
        self._access_key = access_key
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._base_url!r})"

    def _fetch(self, year: int, month: int, day: int) -> tuple[DateKey, RateDocument]:
        date_key = DateKey(year=year, month=month, day=day)
        return date_key, fetch_rate_document(
            self._base_url, self._access_key, self._timeout, date_key
        )

    @staticmethod
    def _cross(document: RateDocument, date_key: DateKey, from_currency: str, to_currency: str) -> float:
        from_rate = document.rate_for(from_currency)
        to_rate = document.rate_for(to_currency)
        if to_rate == 0:
            raise ZeroRateError(to_currency, date_key.path())
        return from_rate / to_rate

    @overload
    def get_rate(self, currency_code: str, year: int, month: int, day: int, /) -> float: ...

    @overload
    def get_rate(
        self, from_currency: str, to_currency: str, year: int, month: int, day: int, /
    ) -> float: ...

    def get_rate(self, currency_code: str, *args: Any) -> float:
        """
        Return the rate of ``currency_code`` against the Euro on a date, or,
        when a second currency code is given, the rate of the first currency
        against the second: ``get_rate("USD", "GBP", 2010, 6, 25)``.
        """
        if args and isinstance(args[0], str):
            return self.get_cross_rate(currency_code, *args)
        if len(args) != 3:
            raise TypeError(
                "get_rate() takes (currency_code, year, month, day) "
                "or (from_currency, to_currency, year, month, day)"
            )
        year, month, day = args
        date_key, document = self._fetch(year, month, day)
        rate = document.rate_for(currency_code)
        log.debug("rate %s on %s = %s", currency_code, date_key, rate)
        return rate

    def get_cross_rate(
        self, from_currency: str, to_currency: str, year: int, month: int, day: int
    ) -> float:
        """Return ``rate(from_currency) / rate(to_currency)`` from one day's rates."""
        date_key, document = self._fetch(year, month, day)
        rate = self._cross(document, date_key, from_currency, to_currency)
        log.debug("cross rate %s/%s on %s = %s", from_currency, to_currency, date_key, rate)
        return rate

    def quote(
        self,
        currency_code: str,
        year: int,
        month: int,
        day: int,
        to_currency: str | None = None,
    ) -> RateQuote:
        """
        Same lookup as ``get_rate`` but returned as a ``RateQuote``.
        Without ``to_currency`` the quote is against the service's base currency.
        """
        date_key, document = self._fetch(year, month, day)
        if to_currency is None:
            base = document.base or SERVICE_BASE_CURRENCY
            rate = document.rate_for(currency_code)
        else:
            base = to_currency
            rate = self._cross(document, date_key, currency_code, to_currency)
        return RateQuote(
            base=base,
            target=currency_code,
            rate=rate,
            date=document.date or date_key.path(),
        )

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest
from pytest import MonkeyPatch

from xrate.reader import ExchangeRateReader

JSON = dict[str, Any]

DUMMY_DATA_URL = "http://rates.example.test/ExchangeRateData/"
ACCESS_KEY = "test-key"

# Fixed documents served by the fake rate service, keyed by the date fragment.
FIXTURE_DOCUMENTS: dict[str, JSON] = {
    "2009-11-12": {
        "success": True,
        "base": "EUR",
        "date": "2009-11-12",
        "rates": {"USD": 1.485674, "GBP": 0.894, "CHF": 1.5094},
    },
    "2010-06-25": {
        "success": True,
        "base": "EUR",
        "date": "2010-06-25",
        "rates": {"USD": 1.234835, "GBP": 0.823961, "CHF": 1.3652},
    },
    "2010-07-05": {
        "success": True,
        "base": "EUR",
        "date": "2010-07-05",
        "rates": {"USD": 1.2548, "GBP": 0.8301, "CHF": 1.333588},
    },
    "2010-09-09": {
        "success": True,
        "base": "EUR",
        "date": "2010-09-09",
        "rates": {"USD": 1.2727, "ZAR": 9.165675},
    },
}


class FakeResponse:
    def __init__(
        self,
        url: str,
        status: int = 200,
        payload: Any = None,
        text: str | None = None,
    ) -> None:
        self.url = url
        self.status = status
        self._payload = payload if payload is not None else {}
        self._text = text

    def raise_for_status(self) -> None:
        if self.status >= 400:
            request = httpx.Request("GET", self.url)
            response = httpx.Response(self.status, request=request)
            raise httpx.HTTPStatusError(f"status {self.status}", request=request, response=response)

    def json(self) -> Any:
        if self._text is not None:
            return json.loads(self._text)
        return self._payload


def date_fragment(url: str) -> str:
    path, _, _query = url.partition("?")
    return path.rsplit("/", 1)[-1]


class FakeRateService:
    """Serves FIXTURE_DOCUMENTS (or overrides) and records every requested URL."""

    def __init__(self) -> None:
        self.documents: dict[str, Any] = {k: dict(v) for k, v in FIXTURE_DOCUMENTS.items()}
        self.urls: list[str] = []

    def get(self, url: str) -> FakeResponse:
        self.urls.append(url)
        document = self.documents.get(date_fragment(url))
        if document is None:
            return FakeResponse(url, 404, {"error": "not found"})
        return FakeResponse(url, 200, document)


@pytest.fixture
def fake_service(monkeypatch: MonkeyPatch) -> FakeRateService:
    service = FakeRateService()

    def fake_get(self: Any, url: str, **kwargs: Any) -> FakeResponse:
        return service.get(url)

    monkeypatch.setattr(httpx.Client, "get", fake_get)
    return service


@pytest.fixture
def reader() -> ExchangeRateReader:
    return ExchangeRateReader(DUMMY_DATA_URL, access_key=ACCESS_KEY)

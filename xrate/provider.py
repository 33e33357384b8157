from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from xrate.errors import RateParseError, RateSchemaError, RateTransportError
from xrate.logging_conf import mask_access_key
from xrate.schemas import DateKey, RateDocument, describe_service_error

log = logging.getLogger("xrate.provider")


def make_client(timeout: float) -> httpx.Client:
    return httpx.Client(timeout=timeout, headers={"User-Agent": "xrate/1.0"})


def build_url(base_url: str, access_key: str, date_key: DateKey) -> str:
    # base_url is used verbatim; callers supply the trailing separator
    return f"{base_url}{date_key.path()}?access_key={access_key}"


def parse_rate_document(payload: Any) -> RateDocument:
    has_rates = isinstance(payload, dict) and "rates" in payload
    service_error = describe_service_error(payload)
    if service_error is not None and not has_rates:
        raise RateSchemaError(f"rate service reported an error: {service_error}")
    try:
        return RateDocument.model_validate(payload)
    except ValidationError as e:
        raise RateSchemaError(f"response has no usable 'rates' object: {e}") from e


def fetch_rate_document(
    base_url: str, access_key: str, timeout: float, date_key: DateKey
) -> RateDocument:
    url = build_url(base_url, access_key, date_key)
    safe_url = mask_access_key(url, access_key)
    log.debug("GET %s", safe_url)
    try:
        with make_client(timeout) as client:
            r = client.get(url)
            r.raise_for_status()
            try:
                payload = r.json()
            except ValueError as e:
                raise RateParseError(f"response from {safe_url} is not valid JSON: {e}") from e
    except httpx.HTTPError as e:
        raise RateTransportError(
            f"failed to fetch rates from {safe_url}: {type(e).__name__}"
        ) from e

    document = parse_rate_document(payload)
    log.debug("parsed %d rates for %s", len(document.rates), date_key)
    return document

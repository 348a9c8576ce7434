"""Serverless entrypoint serving the catalog and prices per invocation.

Follows the API Gateway / Netlify proxy model: ``handler(event, context)``
returns ``{"statusCode", "headers", "body"}`` with a JSON string body.
"""

from __future__ import annotations

import json
from typing import Any

from app.errors import PRICE_FETCH_ERROR_MESSAGE, PriceFetchError
from app.services import catalog
from app.services.price_service import PriceService, dump_prices

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

price_service = PriceService()


def _respond(status_code: int, payload: Any = None) -> dict:
    headers = dict(CORS_HEADERS)
    if payload is None:
        return {"statusCode": status_code, "headers": headers, "body": ""}
    headers["Content-Type"] = "application/json"
    return {
        "statusCode": status_code,
        "headers": headers,
        "body": json.dumps(payload, ensure_ascii=False),
    }


def _request_method(event: dict) -> str:
    method = event.get("httpMethod")
    if not method:
        http = (event.get("requestContext") or {}).get("http") or {}
        method = http.get("method") or "GET"
    return str(method).upper()


def _request_path(event: dict) -> str:
    return str(event.get("path") or event.get("rawPath") or "")


def handler(event: dict, context: Any = None) -> dict:
    method = _request_method(event)
    path = _request_path(event)
    print(f"[FUNCTION][request] method={method} path={path}", flush=True)

    if method == "OPTIONS":
        return _respond(204)

    if "/cryptocurrencies" in path:
        return _respond(200, catalog.dump_catalog())

    try:
        prices = price_service.fetch_prices()
    except PriceFetchError:
        return _respond(500, {"error": PRICE_FETCH_ERROR_MESSAGE})
    return _respond(200, dump_prices(prices))

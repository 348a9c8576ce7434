from __future__ import annotations

import math
from typing import Any, Callable, Iterable

from pydantic import ValidationError

from app.config.settings import get_settings
from app.errors import PriceFetchError, UpstreamPayloadError
from app.integrations.coinmarketcap import CoinMarketCapClient
from app.schemas.crypto import PriceQuote
from app.services import catalog


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int)


def _usd_quote(record: dict, symbol: str) -> PriceQuote:
    quote = record.get("quote")
    usd = quote.get("USD") if isinstance(quote, dict) else None
    if not isinstance(usd, dict):
        raise UpstreamPayloadError(f"missing USD quote for {symbol}")

    price = usd.get("price")
    change = usd.get("percent_change_24h")
    if not _is_number(price) or not _is_number(change):
        raise UpstreamPayloadError(f"non-numeric USD quote for {symbol}")
    try:
        return PriceQuote(price=price, percent_change_24h=change)
    except ValidationError as exc:
        raise UpstreamPayloadError(f"invalid USD quote for {symbol}") from exc


def reshape_listings(records: Iterable[Any], known_symbols: Iterable[str]) -> dict[str, PriceQuote]:
    """Keep the USD quote of every listing whose symbol is in the catalog.

    Listings for unknown symbols are skipped without looking at their quote.
    Upstream orders listings by market cap, so the first listing of a
    symbol wins.
    """
    known = frozenset(known_symbols)
    out: dict[str, PriceQuote] = {}
    for record in records:
        if not isinstance(record, dict):
            continue
        symbol = record.get("symbol")
        if symbol not in known or symbol in out:
            continue
        out[symbol] = _usd_quote(record, symbol)
    return out


def _client_from_settings() -> CoinMarketCapClient:
    settings = get_settings()
    return CoinMarketCapClient(
        api_key=settings.COINMARKETCAP_API_KEY,
        base_url=settings.CMC_BASE_URL,
        timeout=settings.CMC_TIMEOUT_SEC,
        limit=settings.CMC_LISTINGS_LIMIT,
    )


class PriceService:
    """Latest USD prices for catalog symbols, fetched fresh on every call."""

    def __init__(
        self,
        *,
        client=None,
        client_factory: Callable[[], Any] | None = None,
        known_symbols: Iterable[str] | None = None,
    ) -> None:
        self.client = client
        self.client_factory = client_factory or _client_from_settings
        self.known_symbols = frozenset(known_symbols) if known_symbols is not None else catalog.known_symbols()

    def _get_client(self):
        if self.client is not None:
            return self.client
        try:
            return self.client_factory()
        except ValueError as exc:
            raise PriceFetchError(f"upstream client not configured: {exc}") from exc

    def fetch_prices(self) -> dict[str, PriceQuote]:
        try:
            records = self._get_client().get_listings()
            prices = reshape_listings(records, self.known_symbols)
        except PriceFetchError as exc:
            print(
                f"[PRICE][fetch_failed] error_type={type(exc).__name__} error={exc}",
                flush=True,
            )
            raise
        except Exception as exc:
            print(
                f"[PRICE][unexpected_error] error_type={type(exc).__name__} error={exc}",
                flush=True,
            )
            raise PriceFetchError(f"unexpected price fetch failure: {exc}") from exc

        print(
            f"[PRICE][fetch_ok] records={len(records)} symbols={len(prices)}",
            flush=True,
        )
        return prices


def dump_prices(prices: dict[str, PriceQuote]) -> dict[str, dict]:
    return {symbol: quote.model_dump(by_alias=True) for symbol, quote in prices.items()}

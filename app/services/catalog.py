from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from app.schemas.crypto import CatalogEntry

_LOGO_BASE = "https://cryptologos.cc/logos"


def _entry(name: str, symbol: str, icon: str, icon_color: str, logo: str) -> CatalogEntry:
    return CatalogEntry(
        name=name,
        symbol=symbol,
        icon=icon,
        icon_color=icon_color,
        logo_url=f"{_LOGO_BASE}/{logo}",
    )


CATALOG: tuple[CatalogEntry, ...] = (
    _entry("Bitcoin", "BTC", "₿", "F7931A", "bitcoin-btc-logo.png"),
    _entry("Ethereum", "ETH", "Ξ", "627EEA", "ethereum-eth-logo.png"),
    _entry("Tether", "USDT", "₮", "26A17B", "tether-usdt-logo.png"),
    _entry("Ripple", "XRP", "✕", "23292F", "xrp-xrp-logo.png"),
    _entry("Solana", "SOL", "◎", "00FFA3", "solana-sol-logo.png"),
    _entry("Binance Coin", "BNB", "B", "F3BA2F", "bnb-bnb-logo.png"),
    _entry("Cardano", "ADA", "A", "0033AD", "cardano-ada-logo.png"),
    _entry("Dogecoin", "DOGE", "D", "C2A633", "dogecoin-doge-logo.png"),
    _entry("Polkadot", "DOT", "●", "E6007A", "polkadot-new-dot-logo.png"),
    _entry("Polygon", "MATIC", "M", "8247E5", "polygon-matic-logo.png"),
)


def index_by_symbol(entries: Iterable[CatalogEntry]) -> Mapping[str, CatalogEntry]:
    """Build a read-only symbol index; duplicate symbols are rejected."""
    index: dict[str, CatalogEntry] = {}
    for entry in entries:
        if entry.symbol in index:
            raise ValueError(f"duplicate catalog symbol: {entry.symbol}")
        index[entry.symbol] = entry
    return MappingProxyType(index)


_BY_SYMBOL = index_by_symbol(CATALOG)


def list_all() -> list[CatalogEntry]:
    return list(CATALOG)


def get_entry(symbol: str) -> CatalogEntry | None:
    return _BY_SYMBOL.get(symbol)


def known_symbols() -> frozenset[str]:
    return frozenset(_BY_SYMBOL)


def dump_catalog() -> list[dict]:
    return [entry.model_dump(by_alias=True) for entry in CATALOG]

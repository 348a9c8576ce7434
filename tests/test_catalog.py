import unittest

from pydantic import ValidationError

from app.schemas.crypto import CatalogEntry
from app.services import catalog


class TestCatalog(unittest.TestCase):
    def test_list_all_keeps_definition_order(self):
        symbols = [entry.symbol for entry in catalog.list_all()]
        self.assertEqual(
            symbols,
            ["BTC", "ETH", "USDT", "XRP", "SOL", "BNB", "ADA", "DOGE", "DOT", "MATIC"],
        )

    def test_list_all_returns_a_snapshot(self):
        first = catalog.list_all()
        first.clear()
        self.assertEqual(len(catalog.list_all()), 10)

    def test_symbols_are_unique(self):
        symbols = [entry.symbol for entry in catalog.list_all()]
        self.assertEqual(len(symbols), len(set(symbols)))
        self.assertEqual(catalog.known_symbols(), frozenset(symbols))

    def test_get_entry(self):
        btc = catalog.get_entry("BTC")
        self.assertIsNotNone(btc)
        self.assertEqual(btc.name, "Bitcoin")
        self.assertEqual(btc.icon, "₿")
        self.assertEqual(btc.icon_color, "F7931A")
        self.assertEqual(btc.logo_url, "https://cryptologos.cc/logos/bitcoin-btc-logo.png")
        self.assertIsNone(catalog.get_entry("SHIB"))

    def test_entries_are_immutable(self):
        entry = catalog.get_entry("ETH")
        with self.assertRaises(ValidationError):
            entry.name = "Ether"

    def test_dump_uses_wire_field_names(self):
        row = catalog.dump_catalog()[0]
        self.assertEqual(
            row,
            {
                "name": "Bitcoin",
                "symbol": "BTC",
                "icon": "₿",
                "iconColor": "F7931A",
                "logoUrl": "https://cryptologos.cc/logos/bitcoin-btc-logo.png",
            },
        )

    def test_icon_colors_have_no_leading_hash(self):
        for entry in catalog.list_all():
            self.assertFalse(entry.icon_color.startswith("#"))
            self.assertEqual(len(entry.icon_color), 6)

    def test_duplicate_symbols_are_rejected(self):
        entry = CatalogEntry(
            name="Bitcoin",
            symbol="BTC",
            icon="₿",
            iconColor="F7931A",
            logoUrl="https://example.test/btc.png",
        )
        with self.assertRaises(ValueError):
            catalog.index_by_symbol([entry, entry])

    def test_symbol_index_is_read_only(self):
        index = catalog.index_by_symbol(catalog.list_all())
        with self.assertRaises(TypeError):
            index["SHIB"] = catalog.get_entry("BTC")


if __name__ == "__main__":
    unittest.main()

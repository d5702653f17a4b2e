import tempfile
import unittest
from pathlib import Path

from entity_resolution.catalogs import (
    AMAZON_CATALOG,
    GOOGLE_CATALOG,
    CatalogConfig,
    TokenizedCatalog,
    load_catalog_records,
    load_tokenized_catalog,
    tokenize_catalog,
)
from entity_resolution.errors import RecordNotFoundError

AMAZON_CSV = """id,title,description,manufacturer,price
b000jz4hqo,Clickart 950 000 - Premier image pack (DVD-ROM),,Broderbund,0
b0006zf55o,Ca International - Arcserve Lap/Desktop OEM 30pk,oem arcserve backup,Computer Associates,0
"""

GOOGLE_CSV = """id,name,description,manufacturer,price
http://www.google.com/base/feeds/snippets/11125907881740407428,learning quickbooks 2007,learning quickbooks 2007,intuit,38.99
"""


class LoadCatalogRecordsTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)
        self.amazon_path = self.tmp / "Amazon_small.csv"
        self.amazon_path.write_text(AMAZON_CSV, encoding="utf-8")
        self.google_path = self.tmp / "Google_small.csv"
        self.google_path.write_text(GOOGLE_CSV, encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_amazon_fields_joined_in_order(self):
        records = load_catalog_records(self.amazon_path, AMAZON_CATALOG)
        self.assertEqual(len(records), 2)
        self.assertEqual(
            records[1],
            (
                "b0006zf55o",
                "Ca International - Arcserve Lap/Desktop OEM 30pk "
                "Computer Associates oem arcserve backup",
            ),
        )

    def test_missing_cell_becomes_empty(self):
        record_id, text = load_catalog_records(self.amazon_path, AMAZON_CATALOG)[0]
        self.assertEqual(record_id, "b000jz4hqo")
        self.assertEqual(text, "Clickart 950 000 - Premier image pack (DVD-ROM) Broderbund ")

    def test_google_layout(self):
        records = load_catalog_records(self.google_path, GOOGLE_CATALOG)
        self.assertEqual(
            records,
            [
                (
                    "http://www.google.com/base/feeds/snippets/11125907881740407428",
                    "learning quickbooks 2007 intuit learning quickbooks 2007",
                )
            ],
        )

    def test_missing_column(self):
        with self.assertRaises(KeyError):
            load_catalog_records(self.google_path, AMAZON_CATALOG)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_catalog_records(self.tmp / "nope.csv", AMAZON_CATALOG)

    def test_load_tokenized(self):
        catalog = load_tokenized_catalog(self.amazon_path, AMAZON_CATALOG, stopwords={"oem"})
        self.assertEqual(catalog.name, "amazon")
        self.assertEqual(
            catalog.tokens("b0006zf55o"),
            ["ca", "international", "arcserve", "lap", "desktop", "30pk",
             "computer", "associates", "arcserve", "backup"],
        )

    def test_config_needs_text_columns(self):
        with self.assertRaises(ValueError):
            CatalogConfig(name="x", id_col="id", text_cols=())


class TokenizedCatalogTests(unittest.TestCase):
    RECORDS = [
        ("r1", "one two"),
        ("r2", "one two three"),
        ("r3", "four five six"),
        ("r4", "!!!"),
    ]

    def test_lookup_by_id(self):
        catalog = tokenize_catalog("a", self.RECORDS)
        self.assertEqual(len(catalog), 4)
        self.assertIn("r2", catalog)
        self.assertEqual(catalog.tokens("r2"), ["one", "two", "three"])
        self.assertEqual(catalog.tokens("r4"), [])

    def test_unknown_id(self):
        catalog = tokenize_catalog("a", self.RECORDS)
        with self.assertRaises(RecordNotFoundError):
            catalog.tokens("missing")
        with self.assertRaises(KeyError):
            catalog.tokens("missing")

    def test_records_keep_load_order(self):
        catalog = tokenize_catalog("a", self.RECORDS)
        self.assertEqual([rid for rid, _ in catalog.records()], ["r1", "r2", "r3", "r4"])
        self.assertEqual(list(catalog), ["r1", "r2", "r3", "r4"])

    def test_token_count(self):
        self.assertEqual(tokenize_catalog("a", self.RECORDS).token_count(), 8)

    def test_biggest_record_first_wins_on_tie(self):
        self.assertEqual(tokenize_catalog("a", self.RECORDS).biggest_record(), ("r2", 3))

    def test_biggest_record_empty(self):
        self.assertEqual(TokenizedCatalog("a", []).biggest_record(), ("", 0))

    def test_duplicate_ids(self):
        with self.assertRaises(ValueError):
            tokenize_catalog("a", [("r1", "x"), ("r1", "y")])

    def test_parallel_matches_sequential(self):
        records = [(f"r{i}", f"item {i} text {i % 7}") for i in range(50)]
        seq = tokenize_catalog("a", records)
        par = tokenize_catalog("a", records, max_workers=4)
        self.assertEqual(seq.records(), par.records())

    def test_read_only(self):
        catalog = tokenize_catalog("a", self.RECORDS)
        with self.assertRaises(TypeError):
            catalog.tokens_by_id["r9"] = ["x"]


if __name__ == "__main__":
    unittest.main()

"""
Catalog record source.

Implements:
- Column layout per catalog (CatalogConfig)
- CSV loading into (record_id, text) records
- Tokenized, id-indexed catalogs
- Token counting and biggest-record lookup
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import AbstractSet, Iterator, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from entity_resolution.errors import RecordNotFoundError
from entity_resolution.tokenizer import tokenize


# ---------------------------------------------------------
# Catalog configuration
# ---------------------------------------------------------

@dataclass(frozen=True)
class CatalogConfig:
    """Which CSV columns identify a record and which ones hold its text."""

    name: str
    id_col: str
    text_cols: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.text_cols:
            raise ValueError(f"Catalog '{self.name}' needs at least one text column")


# Field order: title/name, manufacturer, description
AMAZON_CATALOG = CatalogConfig(
    name="amazon",
    id_col="id",
    text_cols=("title", "manufacturer", "description"),
)

GOOGLE_CATALOG = CatalogConfig(
    name="google",
    id_col="id",
    text_cols=("name", "manufacturer", "description"),
)


# ---------------------------------------------------------
# Loading
# ---------------------------------------------------------

def load_catalog_records(path: Path, config: CatalogConfig) -> List[Tuple[str, str]]:
    """
    Load one catalog CSV as (record_id, text) pairs.

    The text fields listed in `config.text_cols` are joined with a single
    space, in that order. Missing cells become empty strings.

    Parameters
    ----------
    path : Path
        Catalog CSV (e.g. Amazon_small.csv).
    config : CatalogConfig
        Column layout of the catalog.

    Returns
    -------
    List[Tuple[str, str]]
        Records in file order.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog '{config.name}' not found at: {path}")

    df = pd.read_csv(path, dtype=str, keep_default_na=False)

    for col in (config.id_col, *config.text_cols):
        if col not in df.columns:
            raise KeyError(f"Column '{col}' not found in {path}")

    fields = [df[col].fillna("").astype(str).tolist() for col in config.text_cols]
    texts = [" ".join(values) for values in zip(*fields)]
    ids = df[config.id_col].astype(str).tolist()
    return list(zip(ids, texts))


# ---------------------------------------------------------
# Tokenized catalog
# ---------------------------------------------------------

class TokenizedCatalog:
    """
    Token sequences of one catalog, indexed by record id.

    Built once per catalog and read-only afterwards.
    """

    def __init__(
        self,
        name: str,
        records: Sequence[Tuple[str, List[str]]],
        stopwords: Optional[AbstractSet[str]] = None,
    ):
        self.name = name
        # stopword set the tokens were filtered with
        self.stopwords = frozenset(stopwords) if stopwords else None
        tokens_by_id = {}
        for record_id, tokens in records:
            if record_id in tokens_by_id:
                raise ValueError(
                    f"Duplicate record id '{record_id}' in catalog '{name}'"
                )
            tokens_by_id[record_id] = tokens
        self.tokens_by_id: Mapping[str, List[str]] = MappingProxyType(tokens_by_id)

    def __len__(self) -> int:
        return len(self.tokens_by_id)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self.tokens_by_id

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens_by_id)

    def records(self) -> List[Tuple[str, List[str]]]:
        """(record_id, tokens) pairs in load order."""
        return list(self.tokens_by_id.items())

    def tokens(self, record_id: str) -> List[str]:
        try:
            return self.tokens_by_id[record_id]
        except KeyError:
            raise RecordNotFoundError(self.name, record_id) from None

    def token_count(self) -> int:
        return sum(len(tokens) for tokens in self.tokens_by_id.values())

    def biggest_record(self) -> Tuple[str, int]:
        """
        Return (record_id, token_count) of the record with the most tokens.

        The first record wins on ties. An empty catalog gives ("", 0).
        """
        max_id, max_count = "", 0
        for record_id, tokens in self.tokens_by_id.items():
            if len(tokens) > max_count:
                max_id, max_count = record_id, len(tokens)
        return max_id, max_count


def tokenize_catalog(
    name: str,
    records: Sequence[Tuple[str, str]],
    stopwords: Optional[AbstractSet[str]] = None,
    max_workers: Optional[int] = None,
) -> TokenizedCatalog:
    """
    Tokenize every (record_id, text) record of one catalog.

    Records are independent, so with max_workers > 1 the texts are
    tokenized on a thread pool. Output order always follows `records`.
    """
    ids = [record_id for record_id, _ in records]
    texts = [text for _, text in records]

    if max_workers is not None and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            token_lists = list(executor.map(lambda t: tokenize(t, stopwords), texts))
    else:
        token_lists = [tokenize(t, stopwords) for t in texts]

    return TokenizedCatalog(name, list(zip(ids, token_lists)), stopwords)


def load_tokenized_catalog(
    path: Path,
    config: CatalogConfig,
    stopwords: Optional[AbstractSet[str]] = None,
    max_workers: Optional[int] = None,
) -> TokenizedCatalog:
    """Load a catalog CSV and tokenize it in one step."""
    print(f"[Catalog] Loading {config.name} records from: {path}")
    records = load_catalog_records(path, config)
    catalog = tokenize_catalog(config.name, records, stopwords, max_workers)
    print(
        f"[Catalog] {config.name}: {len(catalog)} records, "
        f"{catalog.token_count()} tokens"
    )
    return catalog

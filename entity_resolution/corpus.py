"""
Corpus-wide statistics over both catalogs.

This module:
    - Builds the IDF table (N / document frequency) from tokenized records
    - Counts tokens across a corpus
    - Wraps the IDF table in an immutable CorpusIndex value
    - Bins the IDF distribution into a fixed-size histogram

Outputs (via write_histogram):
    artifacts/idf_histogram.csv
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import AbstractSet, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from entity_resolution.catalogs import TokenizedCatalog
from entity_resolution.similarity import string_similarity

Record = Tuple[str, Sequence[str]]


# ----------------------------- IDF --------------------------------


def build_idf(records: Sequence[Record]) -> Mapping[str, float]:
    """
    Compute inverse document frequency for every token in the corpus.

    idf(t) = N / df(t)

    where N is the number of records and df(t) the number of records
    containing t at least once. A token repeated inside one record still
    counts once for that record.

    Parameters
    ----------
    records : Sequence[Tuple[str, Sequence[str]]]
        (record_id, tokens) pairs from all catalogs combined.

    Returns
    -------
    Mapping[str, float]
        Read-only token -> idf mapping. Empty if `records` is empty.
    """
    records = list(records)
    n = float(len(records))
    doc_freq = Counter(token for _, tokens in records for token in set(tokens))
    return MappingProxyType({token: n / df for token, df in doc_freq.items()})


def count_tokens(records: Iterable[Record]) -> int:
    """Total number of tokens over all records."""
    return sum(len(tokens) for _, tokens in records)


def lowest_idf_tokens(idf: Mapping[str, float], n: int = 11) -> List[Tuple[str, float]]:
    """Return the `n` most common tokens (smallest idf), ties broken by token."""
    return sorted(idf.items(), key=lambda kv: (kv[1], kv[0]))[:n]


# --------------------------- histogram ----------------------------


def histogram_bounds(idf: Mapping[str, float]) -> Tuple[float, float]:
    """
    Return the [floor(min), ceil(max)] range the IDF histogram spans.

    A degenerate range (all values equal to the same integer) is widened
    to one unit so the bins keep a positive width.
    """
    if not idf:
        return 0.0, 1.0
    values = idf.values()
    lower = float(math.floor(min(values)))
    upper = float(math.ceil(max(values)))
    if upper <= lower:
        upper = lower + 1.0
    return lower, upper


def idf_histogram(idf: Mapping[str, float], number_of_bins: int = 50) -> np.ndarray:
    """
    Count IDF values into `number_of_bins` equal-width buckets.

    Buckets span [floor(min), ceil(max)]; the maximum value lands in the
    last bucket. An empty table gives all-zero counts.
    """
    if number_of_bins < 1:
        raise ValueError(f"number_of_bins must be >= 1, got {number_of_bins}")

    lower, upper = histogram_bounds(idf)
    values = np.fromiter(idf.values(), dtype="float64", count=len(idf))
    counts, _ = np.histogram(values, bins=number_of_bins, range=(lower, upper))
    return counts.astype("int64")


def write_histogram(
    counts: np.ndarray,
    bounds: Tuple[float, float],
    output_path: Path,
) -> pd.DataFrame:
    """
    Save histogram bin counts for an external renderer.

    Output CSV columns:
        - bin
        - lower
        - upper
        - count
    """
    lower, upper = bounds
    edges = np.linspace(lower, upper, len(counts) + 1)
    df = pd.DataFrame(
        {
            "bin": np.arange(len(counts), dtype="int32"),
            "lower": edges[:-1],
            "upper": edges[1:],
            "count": counts,
        }
    )

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)
    return df


# --------------------------- index value --------------------------


@dataclass(frozen=True)
class CorpusIndex:
    """
    Immutable corpus statistics shared by every similarity computation.

    Built once before any scoring happens and then only read, so it can
    be handed to any number of concurrent readers. `stopwords` is the set
    the corpus tokens were filtered with; text scored against this index
    is tokenized with the same set.
    """

    idf: Mapping[str, float]
    record_count: int
    token_count: int
    stopwords: Optional[FrozenSet[str]] = None

    @classmethod
    def from_records(
        cls,
        records: Sequence[Record],
        stopwords: Optional[AbstractSet[str]] = None,
    ) -> "CorpusIndex":
        records = list(records)
        return cls(
            idf=build_idf(records),
            record_count=len(records),
            token_count=count_tokens(records),
            stopwords=frozenset(stopwords) if stopwords else None,
        )

    @classmethod
    def from_catalogs(cls, *catalogs: TokenizedCatalog) -> "CorpusIndex":
        """
        Combine the records of all catalogs and index them as one corpus.

        All catalogs must have been tokenized with the same stopword set.
        """
        policies = {catalog.stopwords for catalog in catalogs}
        if len(policies) > 1:
            names = ", ".join(catalog.name for catalog in catalogs)
            raise ValueError(f"Catalogs {names} were tokenized with different stopword sets")

        records: List[Record] = []
        for catalog in catalogs:
            records.extend(catalog.records())
        return cls.from_records(records, policies.pop() if policies else None)

    def __len__(self) -> int:
        return len(self.idf)

    def __contains__(self, token: object) -> bool:
        return token in self.idf

    def lowest_idf_tokens(self, n: int = 11) -> List[Tuple[str, float]]:
        return lowest_idf_tokens(self.idf, n)

    def histogram(self, number_of_bins: int = 50) -> np.ndarray:
        return idf_histogram(self.idf, number_of_bins)

    def string_similarity(self, text1: str, text2: str) -> float:
        """Cosine similarity of two raw texts, tokenized with this index's stopwords."""
        return string_similarity(text1, text2, self.idf, self.stopwords)

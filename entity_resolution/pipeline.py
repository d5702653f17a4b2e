# entity_resolution/pipeline.py
"""
End-to-end TF-IDF scoring run.

This module:
    - Loads the stopword list and both catalogs
    - Tokenizes every record (optionally on a thread pool)
    - Builds one IDF table over both catalogs combined
    - Reports corpus statistics
    - Writes the IDF histogram
    - Scores the configured (amazon_id, google_id) pairs

Outputs:
    artifacts/idf_histogram.csv
    artifacts/pair_scores.csv
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import AbstractSet, Iterable, Optional, Tuple

import numpy as np
import pandas as pd

from entity_resolution.catalogs import (
    AMAZON_CATALOG,
    GOOGLE_CATALOG,
    TokenizedCatalog,
    load_tokenized_catalog,
)
from entity_resolution.config import PipelineConfig
from entity_resolution.corpus import CorpusIndex, histogram_bounds, write_histogram
from entity_resolution.errors import EntityResolutionError
from entity_resolution.similarity import record_similarity
from entity_resolution.tokenizer import load_stopwords


@dataclass
class PipelineResult:
    amazon: TokenizedCatalog
    google: TokenizedCatalog
    corpus: CorpusIndex
    histogram: np.ndarray
    scores: pd.DataFrame


# ----------------------------- steps ----------------------------------


def load_corpus(
    config: PipelineConfig,
) -> Tuple[TokenizedCatalog, TokenizedCatalog, CorpusIndex, Optional[AbstractSet[str]]]:
    """
    Load both catalogs and build the shared IDF table.

    The IDF table is complete before this returns, so every later TF-IDF
    lookup sees the final values.
    """
    stopwords = None
    if config.use_stopwords:
        print(f"[Corpus] Loading stopwords from: {config.stopwords_path}")
        stopwords = load_stopwords(config.stopwords_path)
        print(f"[Corpus] {len(stopwords)} stopwords")

    amazon = load_tokenized_catalog(
        config.amazon_path, AMAZON_CATALOG, stopwords, config.max_workers
    )
    google = load_tokenized_catalog(
        config.google_path, GOOGLE_CATALOG, stopwords, config.max_workers
    )

    corpus = CorpusIndex.from_catalogs(amazon, google)
    print(
        f"[Corpus] {corpus.record_count} records, {corpus.token_count} tokens, "
        f"{len(corpus)} distinct tokens"
    )
    return amazon, google, corpus, stopwords


def score_pairs(
    amazon: TokenizedCatalog,
    google: TokenizedCatalog,
    corpus: CorpusIndex,
    pairs: Iterable[Tuple[str, str]],
) -> pd.DataFrame:
    """
    Score (amazon_id, google_id) pairs.

    A pair that cannot be scored (unknown id, empty record, zero-norm
    vector) is reported and skipped; the remaining pairs are still scored.

    Output columns:
        - amazon_id
        - google_id
        - similarity
    """
    rows = []
    for amazon_id, google_id in pairs:
        try:
            sim = record_similarity(amazon, amazon_id, google, google_id, corpus.idf)
        except EntityResolutionError as e:
            print(f"[WARN] Skipping pair ({amazon_id}, {google_id}): {e}")
            continue
        print(f"[Score] {amazon_id} <-> {google_id}: {sim:.10f}")
        rows.append({"amazon_id": amazon_id, "google_id": google_id, "similarity": sim})

    return pd.DataFrame(rows, columns=["amazon_id", "google_id", "similarity"])


# --------------------------- main logic -------------------------------


def run_pipeline(config: PipelineConfig) -> PipelineResult:
    """
    Main entry point:

         Load stopwords + both catalogs
         Build the combined IDF table
         Print corpus statistics
         Save the IDF histogram
         Score configured pairs and save them
    """
    amazon, google, corpus, _ = load_corpus(config)

    # ------------------------------------------------------------------
    #  Corpus statistics
    # ------------------------------------------------------------------
    biggest_id, biggest_count = amazon.biggest_record()
    print(f"[Corpus] Biggest {amazon.name} record: {biggest_id} ({biggest_count} tokens)")

    print(f"[Corpus] {config.lowest_idf_count} tokens with the smallest IDF:")
    for token, value in corpus.lowest_idf_tokens(config.lowest_idf_count):
        print(f"    {token:<20} {value:.4f}")

    # ------------------------------------------------------------------
    #  IDF histogram
    # ------------------------------------------------------------------
    counts = corpus.histogram(config.number_of_bins)
    write_histogram(counts, histogram_bounds(corpus.idf), Path(config.histogram_path))
    print(f"[OK] Saved IDF histogram to {config.histogram_path}")

    # ------------------------------------------------------------------
    #  Pair scores
    # ------------------------------------------------------------------
    scores = score_pairs(amazon, google, corpus, config.pairs)
    scores_path = Path(config.scores_path)
    scores_path.parent.mkdir(parents=True, exist_ok=True)
    scores.to_csv(scores_path, index=False)
    print(f"[OK] Saved {len(scores)} pair scores to {scores_path}")

    return PipelineResult(
        amazon=amazon,
        google=google,
        corpus=corpus,
        histogram=counts,
        scores=scores,
    )

"""
TF-IDF entity resolution between two product catalogs.

Pipeline:
    raw text -> tokens -> (TF, IDF) -> TF-IDF vectors -> cosine similarity
"""

from entity_resolution.corpus import CorpusIndex, build_idf, count_tokens
from entity_resolution.errors import (
    EmptyRecordError,
    EntityResolutionError,
    RecordNotFoundError,
    UndefinedSimilarityError,
    UnknownTokenError,
)
from entity_resolution.similarity import (
    cosine_similarity,
    dot_product,
    norm,
    record_similarity,
    string_similarity,
)
from entity_resolution.tokenizer import load_stopwords, tokenize
from entity_resolution.weighting import term_frequency, tfidf

__all__ = [
    "CorpusIndex",
    "build_idf",
    "count_tokens",
    "EmptyRecordError",
    "EntityResolutionError",
    "RecordNotFoundError",
    "UndefinedSimilarityError",
    "UnknownTokenError",
    "cosine_similarity",
    "dot_product",
    "norm",
    "record_similarity",
    "string_similarity",
    "load_stopwords",
    "tokenize",
    "term_frequency",
    "tfidf",
]

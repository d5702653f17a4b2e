"""
Cosine similarity between sparse TF-IDF vectors.

Vectors are plain dicts {token: weight}; a token missing from one side
contributes zero.
"""

from __future__ import annotations

import math
from typing import AbstractSet, Mapping, Optional

from entity_resolution.catalogs import TokenizedCatalog
from entity_resolution.errors import UndefinedSimilarityError
from entity_resolution.tokenizer import tokenize
from entity_resolution.weighting import tfidf


def dot_product(a: Mapping[str, float], b: Mapping[str, float]) -> float:
    """Sum of a[t] * b[t] over the tokens present in both vectors."""
    # sorted so that a.b and b.a sum in the same order
    return sum((a[token] * b[token] for token in sorted(a.keys() & b.keys())), 0.0)


def norm(a: Mapping[str, float]) -> float:
    """Euclidean norm of a sparse vector."""
    return math.sqrt(sum(weight * weight for weight in a.values()))


def cosine_similarity(a: Mapping[str, float], b: Mapping[str, float]) -> float:
    """
    Cosine similarity of two sparse vectors.

    Orthogonal vectors give 0.0.

    Raises:
        UndefinedSimilarityError: if either vector has zero norm (no
        entries, or only zero weights).
    """
    denom = norm(a) * norm(b)
    if denom == 0.0:
        raise UndefinedSimilarityError(
            "Cosine similarity is undefined for a zero-norm vector"
        )
    return dot_product(a, b) / denom


def string_similarity(
    text1: str,
    text2: str,
    idf: Mapping[str, float],
    stopwords: Optional[AbstractSet[str]] = None,
) -> float:
    """
    Score two raw texts against a shared IDF table.

    `stopwords` must be the same set used when building `idf`, otherwise
    tokens can go missing from the table (UnknownTokenError).
    CorpusIndex.string_similarity passes the right set automatically.
    """
    vec1 = tfidf(tokenize(text1, stopwords), idf)
    vec2 = tfidf(tokenize(text2, stopwords), idf)
    return cosine_similarity(vec1, vec2)


def record_similarity(
    catalog_a: TokenizedCatalog,
    id_a: str,
    catalog_b: TokenizedCatalog,
    id_b: str,
    idf: Mapping[str, float],
) -> float:
    """
    Score one record of `catalog_a` against one record of `catalog_b`.

    Lookups are by id.

    Raises:
        RecordNotFoundError: if an id is not in its catalog.
    """
    vec_a = tfidf(catalog_a.tokens(id_a), idf)
    vec_b = tfidf(catalog_b.tokens(id_b), idf)
    return cosine_similarity(vec_a, vec_b)

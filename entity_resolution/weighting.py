"""
Per-record term weighting: TF and TF-IDF.
"""

from __future__ import annotations

from typing import Dict, Mapping, Sequence

from entity_resolution.errors import EmptyRecordError, UnknownTokenError


def term_frequency(tokens: Sequence[str]) -> Dict[str, float]:
    """
    Compute term frequency for one record.

    Each occurrence of a token adds 1 / len(tokens), so the values sum to
    1.0 and the keys are exactly the distinct tokens.

    Raises:
        EmptyRecordError: if `tokens` is empty.
    """
    if len(tokens) == 0:
        raise EmptyRecordError()

    one_token = 1.0 / len(tokens)
    tf: Dict[str, float] = {}
    for token in tokens:
        tf[token] = tf.get(token, 0.0) + one_token
    return tf


def tfidf(tokens: Sequence[str], idf: Mapping[str, float]) -> Dict[str, float]:
    """
    Build the TF-IDF weight vector of a record against a corpus IDF table.

    Raises:
        EmptyRecordError: if `tokens` is empty.
        UnknownTokenError: if a token is missing from `idf`.
    """
    weights: Dict[str, float] = {}
    for token, tf_value in term_frequency(tokens).items():
        try:
            weights[token] = tf_value * idf[token]
        except KeyError:
            raise UnknownTokenError(token) from None
    return weights

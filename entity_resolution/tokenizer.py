"""
Text tokenization for catalog records.

Implements:
- Lowercasing + word-character extraction
- Optional stopword filtering
- Stopword list loading
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import AbstractSet, List, Optional


# ---------------------------------------------------------
# Tokenization
# ---------------------------------------------------------

WORD_RE = re.compile(r"\b\w+\b")


def tokenize(text: str, stopwords: Optional[AbstractSet[str]] = None) -> List[str]:
    """
    Split text into lowercase word tokens.

    Tokens are maximal runs of word characters (letters, digits and
    underscore). Order and repetitions are preserved. If `stopwords` is
    given, tokens contained in it are dropped.

    Non-string input (e.g. NaN from a CSV) is treated as empty text.
    """
    if not isinstance(text, str):
        return []
    tokens = WORD_RE.findall(text.lower())
    if stopwords:
        return [t for t in tokens if t not in stopwords]
    return tokens


# ---------------------------------------------------------
# Stopwords
# ---------------------------------------------------------

def load_stopwords(path: Path) -> frozenset:
    """Load a one-word-per-line stopword file into a lowercase frozenset."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Stopword file not found at: {path}")

    with path.open("r", encoding="utf-8") as f:
        words = (line.strip().lower() for line in f)
        return frozenset(w for w in words if w)

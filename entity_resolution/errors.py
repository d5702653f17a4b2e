"""
Errors raised by the similarity pipeline.

All of them are deterministic functions of the input; nothing here is
retried.
"""

from __future__ import annotations


class EntityResolutionError(Exception):
    """Base class for every error raised by this package."""


class EmptyRecordError(EntityResolutionError, ValueError):
    """Term frequency was requested for a record with zero tokens."""

    def __init__(self, message: str = "record has no tokens") -> None:
        super().__init__(message)


class UnknownTokenError(EntityResolutionError, KeyError):
    """A token is missing from the IDF table it is weighted against."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(
            f"Token '{token}' is not in the IDF table. "
            "Was this record part of the corpus the table was built from?"
        )

    def __str__(self) -> str:
        return str(self.args[0])


class UndefinedSimilarityError(EntityResolutionError, ZeroDivisionError):
    """Cosine similarity is undefined because a vector has zero norm."""


class RecordNotFoundError(EntityResolutionError, KeyError):
    """A record id is not present in a tokenized catalog."""

    def __init__(self, catalog: str, record_id: str) -> None:
        self.catalog = catalog
        self.record_id = record_id
        super().__init__(f"Record '{record_id}' not found in catalog '{catalog}'")

    def __str__(self) -> str:
        return str(self.args[0])

"""Exceptions raised by the hashtag creator."""

from __future__ import annotations


class HashtagCreatorError(Exception):
    """Base exception for hashtag creator errors."""

    pass


class RequestValidationError(HashtagCreatorError):
    """A request is missing a required field or cannot be parsed."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field

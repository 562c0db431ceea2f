"""
=============================================================================
REGISTRY ERRORS
=============================================================================

Every failure raised by the registry derives from HTTPStatusError, so
callers can catch the whole family with a single except clause.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                        ERROR TAXONOMY                               │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   HTTPStatusError                                                   │
    │   ├── InvalidInputError      "malformed query"                      │
    │   │   └── UnsupportedLocaleError                                    │
    │   ├── NotFoundError          "valid query, absent data"             │
    │   └── ConflictError          "phrase owned by another code"         │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Each class also inherits the closest built-in exception (ValueError,
LookupError, RuntimeError), so generic handlers keep working:

    try:
        registry.get_reason_phrase(499)
    except LookupError:
        ...

=============================================================================
"""

from typing import Optional


class HTTPStatusError(Exception):
    """Base class for every error raised by the httpstatus package."""


class InvalidInputError(HTTPStatusError, ValueError):
    """
    Raised when a caller supplies a malformed value.

    Covers codes outside the valid range, non integer-coercible codes,
    non string-like phrases, phrases containing CR/LF and override
    collections that are not iterable.
    """


class UnsupportedLocaleError(InvalidInputError):
    """Raised when no dataset is bound to the requested language."""

    def __init__(self, message: str, language: object = None):
        super().__init__(message)
        self.language = language


class NotFoundError(HTTPStatusError, LookupError):
    """Raised when a well-formed code or phrase has no registry entry."""


class ConflictError(HTTPStatusError, RuntimeError):
    """
    Raised when a merge would bind a phrase already owned by another code.

    Attributes:
        code: the code the caller tried to bind
        existing_code: the code that already owns the phrase
    """

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        existing_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.code = code
        self.existing_code = existing_code

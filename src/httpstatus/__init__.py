"""
=============================================================================
HTTPSTATUS - HTTP Status Code and Reason Phrase Registry
=============================================================================

Lookup and validation for HTTP status codes and their reason phrases,
in English, French or German, with user-defined overrides.

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    httpstatus/
    ├── __init__.py          # This file - package exports
    ├── registry.py          # StatusRegistry: lookups, merges, classes
    ├── filters.py           # Code / phrase / collection validation
    ├── response_class.py    # ResponseClass enum and band predicates
    ├── status_codes.py      # HTTPStatus named constants
    ├── config.py            # RegistryConfig dataclass
    ├── errors.py            # Exception hierarchy
    └── languages/           # One dataset per language
        ├── en.py
        ├── fr.py
        └── de.py

=============================================================================
QUICK START
=============================================================================

    from httpstatus import StatusRegistry, HTTPStatus

    registry = StatusRegistry()
    registry.get_reason_phrase(HTTPStatus.NOT_FOUND)   # 'Not Found'
    registry.get_status_code("i'm a TEAPOT")           # 418

    registry.merge(599, "Network Connect Timeout Error")
    registry.get_response_class(599)                   # ResponseClass.SERVER_ERROR

    registry.has_status_code(1000)                     # False, no exception
    registry.get_reason_phrase(1000)                   # InvalidInputError

=============================================================================
"""

__version__ = "1.0.0"

from .config import RegistryConfig
from .errors import (
    ConflictError,
    HTTPStatusError,
    InvalidInputError,
    NotFoundError,
    UnsupportedLocaleError,
)
from .languages import DEFAULT_LANGUAGE, Language, load_dataset
from .registry import StatusRegistry
from .response_class import ResponseClass
from .status_codes import HTTPStatus

__all__ = [
    # Registry
    "StatusRegistry",
    "RegistryConfig",

    # Datasets
    "Language",
    "DEFAULT_LANGUAGE",
    "load_dataset",

    # Classification
    "ResponseClass",

    # Constants
    "HTTPStatus",

    # Errors
    "HTTPStatusError",
    "InvalidInputError",
    "UnsupportedLocaleError",
    "NotFoundError",
    "ConflictError",

    "__version__",
]

"""
=============================================================================
RESPONSE CLASSES
=============================================================================

A status code's class is derived from its leading digit:

    ┌────────┬────────────────┬──────────────────────────────────────────┐
    │ Band   │ Class          │ Meaning                                  │
    ├────────┼────────────────┼──────────────────────────────────────────┤
    │ 1xx    │ INFORMATIONAL  │ Request received, continuing process     │
    │ 2xx    │ SUCCESS        │ Request received, understood, accepted   │
    │ 3xx    │ REDIRECTION    │ Further action needed                    │
    │ 4xx    │ CLIENT_ERROR   │ Problem with the request                 │
    │ 5xx    │ SERVER_ERROR   │ Problem with the server                  │
    │ 6xx-9xx│ CUSTOM         │ Outside the standard, application-defined│
    └────────┴────────────────┴──────────────────────────────────────────┘

UNASSIGNED is the one class that cannot be computed from the number
alone: it means "inside a standard band but not a registered code"
(306, 418 in some tables, 499...). Only a StatusRegistry can answer it.

The predicates below are purely numeric. They never raise: anything that
is not integer-coercible is simply not a member of any band.

=============================================================================
"""

from enum import Enum
from typing import Any

from .filters import MAXIMUM, coerce_int


class ResponseClass(Enum):
    """Coarse category of a status code."""

    INFORMATIONAL = "informational"
    SUCCESS = "success"
    REDIRECTION = "redirection"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    CUSTOM = "custom"
    UNASSIGNED = "unassigned"

    @property
    def is_standard(self) -> bool:
        """True for the five classes defined by RFC 7231."""
        return self in _STANDARD_CLASSES


_STANDARD_CLASSES = frozenset({
    ResponseClass.INFORMATIONAL,
    ResponseClass.SUCCESS,
    ResponseClass.REDIRECTION,
    ResponseClass.CLIENT_ERROR,
    ResponseClass.SERVER_ERROR,
})

# Leading digit -> class
_CLASS_BY_DIGIT = {
    1: ResponseClass.INFORMATIONAL,
    2: ResponseClass.SUCCESS,
    3: ResponseClass.REDIRECTION,
    4: ResponseClass.CLIENT_ERROR,
    5: ResponseClass.SERVER_ERROR,
}

# First code above the standard bands
CUSTOM_MINIMUM = 600


def class_for_code(code: int) -> ResponseClass:
    """
    Map an already-validated code to its class by leading digit.

    Codes 600-999 are CUSTOM. Callers are expected to have run the code
    through filter_status_code() first.
    """
    return _CLASS_BY_DIGIT.get(code // 100, ResponseClass.CUSTOM)


def _in_band(value: Any, low: int, high: int) -> bool:
    code = coerce_int(value)
    return code is not None and low <= code < high


def is_informational(code: Any) -> bool:
    return _in_band(code, 100, 200)


def is_successful(code: Any) -> bool:
    return _in_band(code, 200, 300)


def is_redirection(code: Any) -> bool:
    return _in_band(code, 300, 400)


def is_client_error(code: Any) -> bool:
    return _in_band(code, 400, 500)


def is_server_error(code: Any) -> bool:
    return _in_band(code, 500, 600)


def is_error(code: Any) -> bool:
    """4xx or 5xx."""
    return _in_band(code, 400, 600)


def is_custom(code: Any) -> bool:
    """Above the standard bands but still a storable code (600-999)."""
    return _in_band(code, CUSTOM_MINIMUM, MAXIMUM + 1)


def is_standard(code: Any) -> bool:
    """Inside one of the five standard bands (100-599)."""
    return _in_band(code, 100, CUSTOM_MINIMUM)

"""
=============================================================================
INPUT FILTERS
=============================================================================

Validation for the three kinds of input the registry accepts: status
codes, reason phrases and override collections. Each filter either
returns a normalized value or raises InvalidInputError.

=============================================================================
STATUS CODES
=============================================================================

    Accepted                          Rejected
    ────────                          ────────
    404                               True / False    (bool is not a code)
    HTTPStatus.NOT_FOUND              "great", "4O4"  (not pure digits)
    "404", " 404 "                    404.5           (not integral)
    404.0                             [], {}, None, object()
                                      99, 1000        (out of range)

The valid range is [MINIMUM, MAXIMUM] = [100, 999]. Codes 600-999 are
not standard but may be stored as custom codes.

=============================================================================
REASON PHRASES (RFC 7230)
=============================================================================

The reason phrase ends the status line, which is terminated by CRLF:

    HTTP/1.1 404 Not Found\\r\\n
                 ─────────
                     └── must not contain \\r or \\n

A phrase holding either character would let a caller inject extra
header lines, so both are rejected after trimming.

=============================================================================
"""

import re
import numbers
from collections.abc import Iterable, Mapping
from typing import Any, Iterator, Optional, Tuple

from .errors import InvalidInputError


MINIMUM = 100
MAXIMUM = 999

# Four digits cover MAXIMUM; longer strings never reach int()
_DIGITS = re.compile(r"\s*[0-9]{1,4}\s*")


def filter_status_code(value: Any) -> int:
    """
    Validate a status code and return it as a plain int.

    Raises:
        InvalidInputError: if the value is not an integer in [100, 999]
    """
    code = coerce_int(value)
    if code is None or not MINIMUM <= code <= MAXIMUM:
        raise InvalidInputError(
            f"The submitted code must be a positive integer between {MINIMUM} and {MAXIMUM}"
        )
    return code


def coerce_int(value: Any) -> Optional[int]:
    """Return value as an int if it is integer-coercible, else None."""
    # bool is an int subclass but never a status code
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and _DIGITS.fullmatch(value):
        return int(value)
    return None


def filter_reason_phrase(value: Any) -> str:
    """
    Validate a reason phrase and return it trimmed.

    Strings are accepted as-is. Other objects are accepted only when
    their class defines its own __str__; numbers, bytes and containers
    are rejected even though str() would work on them.

    Raises:
        InvalidInputError: for non string-like values or embedded CR/LF
    """
    if not _is_string_like(value):
        raise InvalidInputError("The reason phrase must be a string")

    try:
        phrase = str(value).strip()
    except Exception:
        # a user-defined __str__ that raises or returns a non-str
        raise InvalidInputError("The reason phrase must be a string") from None
    if "\r" in phrase or "\n" in phrase:
        raise InvalidInputError("The reason phrase can not contain carriage return characters")
    return phrase


def _is_string_like(value: Any) -> bool:
    if isinstance(value, str):
        return True
    if value is None or isinstance(value, (numbers.Number, bytes, bytearray, Iterable)):
        return False
    return type(value).__str__ is not object.__str__


def filter_collection(collection: Any) -> Iterator[Tuple[Any, Any]]:
    """
    Turn an override collection into an iterator of (code, phrase) pairs.

    Accepts a mapping or any iterable of 2-item pairs. None means
    "no overrides". The pairs themselves are not validated here; merge()
    filters each code and phrase as it applies them.

    Raises:
        InvalidInputError: if the collection is a string, is not iterable,
            or yields something other than a pair
    """
    if collection is None:
        return iter(())
    if isinstance(collection, Mapping):
        return iter(list(collection.items()))
    if isinstance(collection, (str, bytes, bytearray)) or not isinstance(collection, Iterable):
        raise InvalidInputError("The collection must be a mapping or an iterable of pairs")

    pairs = []
    for item in collection:
        if isinstance(item, (str, bytes, bytearray)):
            raise InvalidInputError(f"Expected a (code, phrase) pair, got {item!r}")
        try:
            code, phrase = item
        except (TypeError, ValueError):
            raise InvalidInputError(f"Expected a (code, phrase) pair, got {item!r}") from None
        pairs.append((code, phrase))
    return iter(pairs)

"""
=============================================================================
STATUS REGISTRY
=============================================================================

A queryable table of HTTP status codes and reason phrases, built from a
locale dataset and extended with user overrides.

=============================================================================
DATA LAYOUT
=============================================================================

The registry keeps two dictionaries that are always updated together:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   _phrases (forward)              _codes (reverse index)            │
    │   ──────────────────              ──────────────────────            │
    │   100 → "Continue"                "continue"   → 100                │
    │   200 → "OK"                      "ok"         → 200                │
    │   404 → "Not Found"               "not found"  → 404                │
    │   ...                             ...                               │
    │                                                                      │
    │   Phrases are stored verbatim.    Keys are lower-cased, which makes │
    │                                   phrase lookups case-insensitive   │
    │                                   and enforces phrase uniqueness.   │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
MERGE RULES
=============================================================================

    merge(code, phrase)
        │
        ├── code invalid / phrase invalid ─────────▶ InvalidInputError
        │
        ├── phrase owned by ANOTHER code ──────────▶ ConflictError
        │   (case-insensitive)                       (nothing changes)
        │
        └── otherwise ─────────────────────────────▶ _phrases[code] = phrase
                                                     (insert or update)

    merge(101, "Continue")       ConflictError: 100 owns "continue"
    merge(100, "CONTINUE")       OK, update-in-place of 100's own phrase
    merge(100, "New Continue")   OK, and "Continue" is free again

The check and the write happen under one lock, so two concurrent merges
can never both claim the same phrase. Lookups do not take the lock.

=============================================================================
INTERVIEW QUESTIONS ABOUT THIS DESIGN
=============================================================================

Q: "Why keep a reverse index instead of scanning the values?"
A: "A scan is O(n) per lookup and needs lower-casing every value each
   time. The index is O(1) and doubles as the uniqueness check for merge.
   The cost is keeping both dicts in sync, which is why every write goes
   through a single function."

Q: "Why does has_status_code() return False for 1000 instead of raising?"
A: "Existence checks answer a yes/no question. A malformed input simply
   isn't in the table. Callers that need to tell 'malformed' from
   'absent' use get_reason_phrase(), which raises distinct errors."

=============================================================================
"""

import logging
import threading
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from . import response_class as rc
from .config import RegistryConfig
from .errors import ConflictError, InvalidInputError, NotFoundError
from .filters import (
    MAXIMUM,
    MINIMUM,
    coerce_int,
    filter_collection,
    filter_reason_phrase,
    filter_status_code,
)
from .languages import DEFAULT_LANGUAGE, Language, load_dataset
from .response_class import ResponseClass


logger = logging.getLogger(__name__)


class StatusRegistry:
    """
    Bidirectional code <-> reason phrase table.

    Usage:
        registry = StatusRegistry()
        registry.get_reason_phrase(404)          # 'Not Found'
        registry.get_status_code("not found")    # 404

        custom = StatusRegistry("fr", {499: "Requête annulée"})
        custom.get_reason_phrase(404)            # 'Non trouvé'

    Overrides may be a mapping or an iterable of (code, phrase) pairs.
    They are merged in iteration order, so a later pair may reuse a
    phrase an earlier pair freed up.

    Raises (on construction):
        UnsupportedLocaleError: unknown language
        InvalidInputError: malformed overrides
        ConflictError: an override reuses a phrase owned by another code
    """

    MINIMUM = MINIMUM
    MAXIMUM = MAXIMUM

    def __init__(
        self,
        language: Union[Language, str] = DEFAULT_LANGUAGE,
        overrides: Any = None,
    ):
        self.language = Language.parse(language)
        self._lock = threading.Lock()
        self._phrases: Dict[int, str] = load_dataset(self.language)
        self._codes: Dict[str, int] = {}
        for code, phrase in self._phrases.items():
            # first code wins if a dataset ever repeats a phrase
            self._codes.setdefault(phrase.lower(), code)

        for code, phrase in filter_collection(overrides):
            self.merge(code, phrase)

    @classmethod
    def from_config(
        cls,
        config: Optional[RegistryConfig] = None,
        overrides: Any = None,
    ) -> "StatusRegistry":
        """Build a registry from a RegistryConfig (defaults when None)."""
        config = config or RegistryConfig()
        config.validate()
        return cls(config.resolved_language, overrides)

    # =========================================================================
    # WRITES
    # =========================================================================

    def merge(self, code: Any, phrase: Any) -> None:
        """
        Add a code or replace its phrase.

        Raises:
            InvalidInputError: if the code or the phrase is invalid
            ConflictError: if another code already owns the phrase
        """
        code = filter_status_code(code)
        phrase = filter_reason_phrase(phrase)
        with self._lock:
            _bind(self._phrases, self._codes, code, phrase)
        logger.debug(f"Merged {code} '{phrase}'")

    def update(self, overrides: Any) -> None:
        """
        Merge a whole collection, all or nothing.

        The pairs are applied to copies of the tables, which replace the
        live ones only if every pair succeeds. On any error the registry
        is left exactly as it was.
        """
        pairs = [
            (filter_status_code(code), filter_reason_phrase(phrase))
            for code, phrase in filter_collection(overrides)
        ]
        with self._lock:
            phrases = dict(self._phrases)
            codes = dict(self._codes)
            for code, phrase in pairs:
                _bind(phrases, codes, code, phrase)
            self._phrases, self._codes = phrases, codes
        logger.debug(f"Merged {len(pairs)} reason phrases")

    # =========================================================================
    # LOOKUPS
    # =========================================================================

    def get_reason_phrase(self, code: Any) -> str:
        """
        Return the phrase registered for a code, verbatim.

        Raises:
            InvalidInputError: if the code is not valid
            NotFoundError: if the code is valid but not registered
        """
        code = filter_status_code(code)
        try:
            return self._phrases[code]
        except KeyError:
            raise NotFoundError(f"Unknown http status code: `{code}`") from None

    def get_status_code(self, phrase: Any) -> int:
        """
        Return the code registered for a phrase, ignoring case.

        Raises:
            InvalidInputError: if the phrase is not valid
            NotFoundError: if no code uses the phrase
        """
        phrase = filter_reason_phrase(phrase)
        code = self._codes.get(phrase.lower())
        if code is None:
            raise NotFoundError(f"No Http status code is associated to `{phrase}`")
        return code

    def has_status_code(self, code: Any) -> bool:
        """True if the code is registered. Invalid input gives False."""
        try:
            code = filter_status_code(code)
        except InvalidInputError:
            return False
        return code in self._phrases

    def has_reason_phrase(self, phrase: Any) -> bool:
        """True if any code uses the phrase (any case). Invalid input gives False."""
        try:
            phrase = filter_reason_phrase(phrase)
        except InvalidInputError:
            return False
        return phrase.lower() in self._codes

    # =========================================================================
    # CLASSIFICATION
    # =========================================================================

    def get_response_class(self, code: Any, *, assigned_only: bool = False) -> ResponseClass:
        """
        Classify a code by its leading digit.

        ResponseClass.UNASSIGNED is returned only when assigned_only=True:
        then a code inside a standard band that is not registered reports
        UNASSIGNED instead of its band. With the default
        assigned_only=False the result is always the band class (or
        CUSTOM), whether or not the code is registered. Custom codes
        (600-999) are always CUSTOM.

        Raises:
            InvalidInputError: if the code is not valid
        """
        code = filter_status_code(code)
        if assigned_only and self.is_unassigned(code):
            return ResponseClass.UNASSIGNED
        return rc.class_for_code(code)

    def is_informational(self, code: Any) -> bool:
        return rc.is_informational(code)

    def is_successful(self, code: Any) -> bool:
        return rc.is_successful(code)

    def is_redirection(self, code: Any) -> bool:
        return rc.is_redirection(code)

    def is_client_error(self, code: Any) -> bool:
        return rc.is_client_error(code)

    def is_server_error(self, code: Any) -> bool:
        return rc.is_server_error(code)

    def is_error(self, code: Any) -> bool:
        return rc.is_error(code)

    def is_custom(self, code: Any) -> bool:
        return rc.is_custom(code)

    def is_unassigned(self, code: Any) -> bool:
        """
        True for a code inside a standard band (100-599) that this
        registry has no phrase for, e.g. 306 with the default dataset.

        Depends on the registry contents: merging a phrase for 306 makes
        it assigned.
        """
        value = coerce_int(code)
        return rc.is_standard(value) and value not in self._phrases

    # =========================================================================
    # COLLECTION PROTOCOL
    # =========================================================================

    def __len__(self) -> int:
        return len(self._phrases)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._phrases))

    def __contains__(self, code: Any) -> bool:
        return self.has_status_code(code)

    def items(self) -> Iterator[Tuple[int, str]]:
        """(code, phrase) pairs in registry order."""
        return iter(list(self._phrases.items()))

    def to_dict(self) -> Dict[int, str]:
        return dict(self._phrases)

    def __repr__(self) -> str:
        return f"StatusRegistry(language={self.language.value!r}, entries={len(self)})"


def _bind(phrases: Dict[int, str], codes: Dict[str, int], code: int, phrase: str) -> None:
    # Single write path for both tables; callers hold the registry lock.
    key = phrase.lower()
    owner = codes.get(key)
    if owner is not None and owner != code:
        logger.warning(f"Rejected {code} '{phrase}': phrase already used by {owner}")
        raise ConflictError(
            "The submitted reason phrase is already present in the collection",
            code=code,
            existing_code=owner,
        )

    previous = phrases.get(code)
    if previous is not None and codes.get(previous.lower()) == code:
        del codes[previous.lower()]

    phrases[code] = phrase
    codes[key] = code

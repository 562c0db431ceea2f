"""
=============================================================================
LOCALE DATASETS
=============================================================================

One complete {code -> phrase} table per supported language. Each
language is bound to its loader in a static table, so the set of
supported languages is exactly the members of the Language enum:

    ┌──────────┬─────────────────────┐
    │ Language │ Loader              │
    ├──────────┼─────────────────────┤
    │ EN       │ en.get_phrases()    │  (default)
    │ FR       │ fr.get_phrases()    │
    │ DE       │ de.get_phrases()    │
    └──────────┴─────────────────────┘

Adding a language means adding a module, an enum member and one row in
_LOADERS. Nothing is resolved from a string at import time.

=============================================================================
"""

import logging
from enum import Enum
from typing import Callable, Dict, Optional, Union

from ..errors import UnsupportedLocaleError
from . import de, en, fr


logger = logging.getLogger(__name__)


class Language(str, Enum):
    """Supported dataset languages, valued by their ISO 639-1 code."""

    EN = "en"
    FR = "fr"
    DE = "de"

    @classmethod
    def parse(cls, value: Union["Language", str]) -> "Language":
        """
        Resolve a Language member from a member or its code.

        Matching is case-insensitive and ignores surrounding whitespace,
        so "FR" and " fr " both resolve to Language.FR.

        Raises:
            UnsupportedLocaleError: if no member matches
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        supported = ", ".join(member.value for member in cls)
        raise UnsupportedLocaleError(
            f"Unsupported language: {value!r}. Expected one of: {supported}",
            language=value,
        )


DEFAULT_LANGUAGE = Language.EN

_LOADERS: Dict[Language, Callable[[], Dict[int, str]]] = {
    Language.EN: en.get_phrases,
    Language.FR: fr.get_phrases,
    Language.DE: de.get_phrases,
}


def load_dataset(language: Union[Language, str] = DEFAULT_LANGUAGE) -> Dict[int, str]:
    """
    Return a fresh copy of the dataset bound to a language.

    The copy is the caller's to mutate; the module-level tables are
    never handed out directly.

    Raises:
        UnsupportedLocaleError: for unrecognized identifiers
    """
    language = Language.parse(language)
    phrases = _LOADERS[language]()
    logger.debug(f"Loaded {len(phrases)} reason phrases for language '{language.value}'")
    return phrases


_TABLES: Dict[Language, Dict[int, str]] = {
    Language.EN: en.STATUS_PHRASES,
    Language.FR: fr.STATUS_PHRASES,
    Language.DE: de.STATUS_PHRASES,
}


def get_phrase(
    language: Union[Language, str],
    code: int,
    default: Optional[str] = None,
) -> Optional[str]:
    """
    Read one phrase from a language's table without copying it.

    Raises:
        UnsupportedLocaleError: for unrecognized identifiers
    """
    return _TABLES[Language.parse(language)].get(code, default)


__all__ = ["Language", "DEFAULT_LANGUAGE", "load_dataset", "get_phrase"]

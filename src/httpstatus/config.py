"""
=============================================================================
REGISTRY CONFIGURATION
=============================================================================

Centralized configuration for building a StatusRegistry.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Priority (highest to lowest):                                     │
    │                                                                      │
    │   1. Arguments in code                                              │
    │      └── RegistryConfig(language="fr")                              │
    │                                                                      │
    │   2. Environment variables                                          │
    │      └── HTTPSTATUS_LANGUAGE=fr python app.py                       │
    │                                                                      │
    │   3. Defaults                                                       │
    │      └── language="en", log_level="WARNING"                         │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

import os
import logging
from dataclasses import dataclass

from .languages import DEFAULT_LANGUAGE, Language


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class RegistryConfig:
    """
    Settings used by StatusRegistry.from_config().

    Usage:
        config = RegistryConfig(language="de")
        config.validate()
        registry = StatusRegistry.from_config(config)
    """

    language: str = DEFAULT_LANGUAGE.value
    """
    Base dataset language (ISO 639-1 code): en, fr or de.
    """

    log_level: str = "WARNING"
    """
    Level for the 'httpstatus' logger (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    DEBUG - dataset loads and every merge
    WARNING - rejected merges only
    """

    @classmethod
    def from_env(cls) -> "RegistryConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        HTTPSTATUS_LANGUAGE   Base dataset language (default: en)
        HTTPSTATUS_LOG_LEVEL  Logging level (default: WARNING)

        =====================================================================
        """
        return cls(
            language=os.getenv("HTTPSTATUS_LANGUAGE", DEFAULT_LANGUAGE.value),
            log_level=os.getenv("HTTPSTATUS_LOG_LEVEL", "WARNING"),
        )

    @property
    def resolved_language(self) -> Language:
        """
        The language as an enum member.

        Raises:
            UnsupportedLocaleError: if the language is not supported
        """
        return Language.parse(self.language)

    def validate(self) -> None:
        """
        Validate configuration values.

        Errors are raised here, before any dataset is loaded.

        Raises:
            UnsupportedLocaleError: for an unknown language
            ValueError: for an unknown log level
        """
        Language.parse(self.language)

        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. Must be one of {', '.join(_LOG_LEVELS)}."
            )

    def setup_logging(self) -> None:
        """
        Configure logging for applications that have not done so already.

        The package only creates loggers; it never touches the root
        logger unless this is called.
        """
        level = getattr(logging, self.log_level.upper(), logging.WARNING)

        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        logging.getLogger("httpstatus").setLevel(level)

"""
pytest configuration and fixtures.
"""

from typing import Dict
import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from httpstatus import StatusRegistry, load_dataset


@pytest.fixture
def registry() -> StatusRegistry:
    """Registry on the default (English) dataset."""
    return StatusRegistry()


@pytest.fixture
def en_phrases() -> Dict[int, str]:
    """The English dataset as a plain dict."""
    return load_dataset("en")


@pytest.fixture
def custom_registry() -> StatusRegistry:
    """Registry with one custom client error code."""
    return StatusRegistry(overrides={498: "Custom error code"})


class PhraseObject:
    """Non-str object that renders as a reason phrase."""

    def __init__(self, text: str):
        self.text = text

    def __str__(self) -> str:
        return self.text


@pytest.fixture
def phrase_object():
    return PhraseObject


class BrokenPhraseObject:
    """Object whose __str__ does not return a str."""

    def __str__(self):
        return 5


@pytest.fixture
def broken_phrase_object():
    return BrokenPhraseObject()

"""Pytest fixtures for Word Tier tests."""

from typing import Optional
from unittest.mock import Mock

import pytest
import requests

from word_tier import config
from word_tier.core.definitions import DefinitionResolver
from word_tier.core.session import AnalysisSession
from word_tier.lexical.classifier import DifficultyClassifier
from word_tier.services.client import ServiceUnavailable
from word_tier.services.dictionary import DefinitionNotFound


class FakeFrequencySource:
    """Frequency source backed by a dict; unknown words raise like a dead service."""

    def __init__(self, frequencies: dict[str, Optional[float]]) -> None:
        self.frequencies = frequencies
        self.calls: list[str] = []

    def lookup_frequency(self, word: str) -> Optional[float]:
        self.calls.append(word)
        if word not in self.frequencies:
            raise ServiceUnavailable(f"no route to {word}")
        return self.frequencies[word]


class FakeDefinitionSource:
    """Definition source backed by a dict; unknown words are not found."""

    def __init__(self, definitions: dict[str, Optional[str]]) -> None:
        self.definitions = definitions
        self.calls: list[str] = []

    def lookup_definition(self, word: str) -> Optional[str]:
        self.calls.append(word)
        if word not in self.definitions:
            raise DefinitionNotFound(f"{word} not found", status_code=404)
        return self.definitions[word]


@pytest.fixture(autouse=True)
def reset_settings():
    """Keep the global settings instance from leaking between tests."""
    config._settings = None
    yield
    config._settings = None


@pytest.fixture
def sample_sentence() -> str:
    """Sentence with five common and three rare words."""
    return "The cat sat on an extraordinarily obfuscated windowsill"


@pytest.fixture
def frequencies() -> dict[str, Optional[float]]:
    return {
        "the": 50000.0,
        "cat": 120.5,
        "sat": 45.0,
        "on": 30000.0,
        "an": 8000.0,
        "extraordinarily": 1.2,
        "obfuscated": 0.05,
        "windowsill": 0.9,
        "curious": 3.1,
    }


@pytest.fixture
def definitions() -> dict[str, Optional[str]]:
    return {
        "obfuscated": "Made obscure or unclear.",
        "windowsill": "The horizontal surface at the bottom of a window.",
        "extraordinarily": None,
        "curious": "Eager to know or learn something.",
    }


@pytest.fixture
def frequency_source(frequencies) -> FakeFrequencySource:
    return FakeFrequencySource(frequencies)


@pytest.fixture
def definition_source(definitions) -> FakeDefinitionSource:
    return FakeDefinitionSource(definitions)


@pytest.fixture
def session(frequency_source, definition_source) -> AnalysisSession:
    """Analysis session wired to in-memory services."""
    classifier = DifficultyClassifier(frequency_source)
    return AnalysisSession(classifier, DefinitionResolver(definition_source))


def make_response(status_code: int = 200, payload=None, json_error: bool = False) -> Mock:
    """Build a fake requests.Response."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    if json_error:
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def http_session() -> Mock:
    """A requests.Session stand-in; set ``get.return_value`` per test."""
    return Mock(spec=requests.Session)

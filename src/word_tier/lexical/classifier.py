"""Difficulty classification from corpus frequency.

Classification fails closed: an unreachable service, a non-success response
or a missing frequency tag all yield ``DifficultyTier.EASY``. One unknown
word can therefore never abort the analysis of the rest of a sentence.
"""

import logging
from enum import IntEnum
from typing import Optional, Protocol

from word_tier.config import get_settings

logger = logging.getLogger(__name__)


class DifficultyTier(IntEnum):
    """Word difficulty, ordered by increasing rarity."""

    EASY = 0
    MEDIUM = 1
    HARD = 2

    @property
    def label(self) -> str:
        """Lowercase name used in styles and JSON output."""
        return self.name.lower()


class FrequencySource(Protocol):
    """Anything that can report a word's frequency per million words."""

    def lookup_frequency(self, word: str) -> Optional[float]:
        ...


def tier_for_frequency(
    frequency: float,
    easy_threshold: float = 4.0,
    medium_threshold: float = 2.5,
) -> DifficultyTier:
    """Map a frequency score to a tier.

    Above ``easy_threshold`` is Easy, ``medium_threshold`` up to and including
    ``easy_threshold`` is Medium, anything rarer is Hard.
    """
    if frequency > easy_threshold:
        return DifficultyTier.EASY
    if frequency >= medium_threshold:
        return DifficultyTier.MEDIUM
    return DifficultyTier.HARD


class DifficultyClassifier:
    """Classifies lookup keys by querying a frequency source."""

    def __init__(
        self,
        source: FrequencySource,
        easy_threshold: Optional[float] = None,
        medium_threshold: Optional[float] = None,
    ) -> None:
        """Initialize the classifier.

        Args:
            source: Frequency collaborator (e.g. DatamuseClient)
            easy_threshold: Frequencies above this are Easy
            medium_threshold: Frequencies from this up to easy_threshold are Medium
        """
        settings = get_settings()
        self.source = source
        self.easy_threshold = (
            settings.easy_threshold if easy_threshold is None else easy_threshold
        )
        self.medium_threshold = (
            settings.medium_threshold if medium_threshold is None else medium_threshold
        )

    def classify(self, key: str) -> DifficultyTier:
        """Classify a normalized key. Never raises."""
        if not key:
            return DifficultyTier.EASY

        try:
            frequency = self.source.lookup_frequency(key)
        except Exception as e:
            logger.info("Frequency lookup failed for %r, treating as easy: %s", key, e)
            return DifficultyTier.EASY

        if frequency is None:
            logger.debug("No frequency data for %r", key)
            return DifficultyTier.EASY

        return tier_for_frequency(frequency, self.easy_threshold, self.medium_threshold)

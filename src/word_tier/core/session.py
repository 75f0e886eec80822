"""Analysis session: one sentence analysis plus click-to-define handling.

The session owns the PositionIndex. Every ``analyze`` call builds a new index
and only publishes it once the whole sentence is classified, so clicks never
resolve against entries left over from a previous sentence.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from word_tier.config import Settings, get_settings
from word_tier.core.definitions import NOT_FOUND_MESSAGE, DefinitionResolver
from word_tier.core.position_index import PositionIndex
from word_tier.lexical.classifier import DifficultyClassifier, DifficultyTier
from word_tier.lexical.normalizer import normalize
from word_tier.lexical.tokenizer import Token, tokenize
from word_tier.services.client import ServiceError
from word_tier.services.datamuse import DatamuseClient
from word_tier.services.dictionary import DictionaryClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalyzedToken:
    """A token paired with its difficulty tier."""

    token: Token
    tier: DifficultyTier

    @property
    def display_text(self) -> str:
        return self.token.text

    @property
    def marked(self) -> bool:
        """Whether the token is styled and clickable."""
        return self.tier is not DifficultyTier.EASY

    def to_dict(self) -> dict[str, object]:
        return {
            "text": self.token.text,
            "start": self.token.start,
            "key": self.token.key,
            "tier": self.tier.label,
        }


@dataclass
class AnalysisResult:
    """Ordered tokens of one analysis in rendering order."""

    sentence: str
    tokens: list[AnalyzedToken] = field(default_factory=list)

    @property
    def tiers(self) -> list[DifficultyTier]:
        return [t.tier for t in self.tokens]

    @property
    def rendered_text(self) -> str:
        """The output text, each token followed by one space."""
        return "".join(f"{t.token.text} " for t in self.tokens)

    @property
    def marked_words(self) -> list[AnalyzedToken]:
        return [t for t in self.tokens if t.marked]


@dataclass(frozen=True)
class WordDefinition:
    """A word and its definition (or the not-found message)."""

    word: str
    definition: str
    found: bool = True

    def __str__(self) -> str:
        return f"{self.word}:\n{self.definition}"


class AnalysisSession:
    """Coordinates tokenization, classification, indexing and definitions."""

    def __init__(
        self,
        classifier: DifficultyClassifier,
        resolver: DefinitionResolver,
    ) -> None:
        self.classifier = classifier
        self.resolver = resolver
        self.index = PositionIndex()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "AnalysisSession":
        """Build a session backed by the configured remote services."""
        settings = settings or get_settings()
        frequency_client = DatamuseClient(
            base_url=settings.frequency_api_url,
            timeout=settings.request_timeout,
            max_retries=settings.max_retries,
        )
        dictionary_client = DictionaryClient(
            base_url=settings.definition_api_url,
            timeout=settings.request_timeout,
            max_retries=settings.max_retries,
        )
        classifier = DifficultyClassifier(
            frequency_client,
            easy_threshold=settings.easy_threshold,
            medium_threshold=settings.medium_threshold,
        )
        return cls(classifier, DefinitionResolver(dictionary_client))

    def analyze(self, sentence: str) -> AnalysisResult:
        """Classify every token of ``sentence`` and rebuild the position index.

        Each distinct key is looked up at most once per call; nothing is
        remembered between calls.
        """
        self.index = PositionIndex()
        index = PositionIndex()
        tiers: dict[str, DifficultyTier] = {}
        result = AnalysisResult(sentence=sentence)

        for token in tokenize(sentence):
            if token.is_word:
                if token.key not in tiers:
                    tiers[token.key] = self.classifier.classify(token.key)
                tier = tiers[token.key]
            else:
                tier = DifficultyTier.EASY

            if tier is not DifficultyTier.EASY:
                index.record(token.start, token.key)
            result.tokens.append(AnalyzedToken(token=token, tier=tier))

        self.index = index
        logger.debug(
            "Analyzed %d tokens, %d marked", len(result.tokens), len(index)
        )
        return result

    def define_at(self, offset: int) -> Optional[WordDefinition]:
        """Define the marked word at a rendered offset.

        Returns None when no marked word covers the offset.
        """
        key = self.index.resolve(offset)
        if key is None:
            return None
        return self._define_key(key)

    def define(self, word: str) -> WordDefinition:
        """Define a typed word after normalizing it."""
        key = normalize(word)
        if not key:
            return WordDefinition(word=word, definition=NOT_FOUND_MESSAGE, found=False)
        return self._define_key(key)

    def _define_key(self, key: str) -> WordDefinition:
        try:
            definition = self.resolver.resolve(key)
        except ServiceError as e:
            logger.warning("Definition lookup failed for %r: %s", key, e)
            return WordDefinition(word=key, definition=NOT_FOUND_MESSAGE, found=False)
        return WordDefinition(
            word=key,
            definition=definition,
            found=definition != NOT_FOUND_MESSAGE,
        )

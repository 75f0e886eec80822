"""Core analysis session and its supporting structures."""

from word_tier.core.definitions import NOT_FOUND_MESSAGE, DefinitionResolver
from word_tier.core.position_index import PositionIndex
from word_tier.core.session import (
    AnalysisResult,
    AnalysisSession,
    AnalyzedToken,
    WordDefinition,
)

__all__ = [
    "NOT_FOUND_MESSAGE",
    "DefinitionResolver",
    "PositionIndex",
    "AnalysisResult",
    "AnalysisSession",
    "AnalyzedToken",
    "WordDefinition",
]

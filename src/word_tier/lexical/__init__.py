"""Tokenization, normalization and difficulty classification."""

from word_tier.lexical.classifier import (
    DifficultyClassifier,
    DifficultyTier,
    tier_for_frequency,
)
from word_tier.lexical.normalizer import normalize
from word_tier.lexical.tokenizer import Token, split_fragments, tokenize

__all__ = [
    "DifficultyClassifier",
    "DifficultyTier",
    "tier_for_frequency",
    "normalize",
    "Token",
    "split_fragments",
    "tokenize",
]

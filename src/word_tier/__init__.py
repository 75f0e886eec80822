"""Word Tier - frequency-based word difficulty detector."""

__version__ = "0.1.0"

"""Lookup-key normalization for raw tokens."""

import re

# Anything that is not an ASCII letter or a hyphen
_NON_KEY_CHARS = re.compile(r"[^A-Za-z\-]")


def normalize(raw: str) -> str:
    """Reduce a raw token to its lookup key.

    Every character other than an ASCII letter or hyphen is dropped and the
    rest is lowercased. Accented letters are dropped rather than
    transliterated, so ``"Café-123"`` becomes ``"caf-"``.

    An empty result means the token is not a classifiable word: it is still
    rendered, but never looked up or indexed.
    """
    return _NON_KEY_CHARS.sub("", raw).lower()

"""Sentence tokenizer with double-dash separator handling.

Tokens carry the offset at which they start in the rendered output, where
every token is followed by exactly one space. The offset of token *i* is
therefore the sum of ``len(token) + 1`` over all earlier tokens.
"""

from dataclasses import dataclass, field
from typing import Iterator

from word_tier.lexical.normalizer import normalize

DASH_SEPARATOR = "--"


@dataclass(frozen=True)
class Token:
    """A lexical unit of the input sentence.

    Attributes:
        text: Raw substring as it appeared in the input (may include punctuation)
        start: Offset of the first character in the rendered output
        key: Normalized lookup key (may be empty)
    """

    text: str
    start: int
    key: str = field(default="")

    @property
    def end(self) -> int:
        """Offset just past the token text in the rendered output."""
        return self.start + len(self.text)

    @property
    def is_word(self) -> bool:
        """Whether the token has a non-empty lookup key."""
        return bool(self.key)


def split_fragments(text: str) -> list[str]:
    """Split text into raw token strings.

    The text is split on single spaces. Fragments containing ``--`` are split
    again on it and only the non-empty pieces kept. Empty fragments from
    consecutive spaces survive; trailing empty fragments are dropped, so
    empty input gives no fragments.
    """
    fragments = text.split(" ")
    while fragments and not fragments[-1]:
        fragments.pop()

    result: list[str] = []
    for fragment in fragments:
        if DASH_SEPARATOR in fragment:
            result.extend(part for part in fragment.split(DASH_SEPARATOR) if part)
        else:
            result.append(fragment)
    return result


def tokenize(text: str) -> Iterator[Token]:
    """Yield tokens in order with rendered offsets and lookup keys.

    The iterator is single-use; call again to re-tokenize.
    """
    offset = 0
    for fragment in split_fragments(text):
        yield Token(text=fragment, start=offset, key=normalize(fragment))
        offset += len(fragment) + 1

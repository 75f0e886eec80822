"""Reverse lookup from rendered offsets to marked words."""

from typing import Iterator, Optional


class PositionIndex:
    """Maps the start offset of each marked (non-easy) token to its key.

    A key recorded at ``start`` claims the closed interval
    ``[start, start + len(key) + 1]``; the extra character lets a click on the
    trailing space still select the word. Adjacent intervals can touch, in
    which case the entry with the greatest start not after the offset wins.
    """

    def __init__(self) -> None:
        self._entries: dict[int, str] = {}

    def record(self, start: int, key: str) -> None:
        """Record a marked token. A later record at the same start replaces it."""
        self._entries[start] = key

    def resolve(self, offset: int) -> Optional[str]:
        """Return the key whose interval contains ``offset``, or None."""
        best: Optional[int] = None
        for start, key in self._entries.items():
            if start <= offset <= start + len(key) + 1:
                if best is None or start > best:
                    best = start
        return None if best is None else self._entries[best]

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def items(self) -> Iterator[tuple[int, str]]:
        """Iterate ``(start, key)`` pairs in ascending offset order."""
        return iter(sorted(self._entries.items()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, start: object) -> bool:
        return start in self._entries

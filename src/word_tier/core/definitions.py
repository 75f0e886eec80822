"""Definition resolution for clicked words."""

from typing import Optional, Protocol

NOT_FOUND_MESSAGE = "Definition not found."


class DefinitionSource(Protocol):
    """Anything that can return the first definition of a word."""

    def lookup_definition(self, word: str) -> Optional[str]:
        ...


class DefinitionResolver:
    """Turns a lookup key into a human-readable definition."""

    def __init__(self, source: DefinitionSource) -> None:
        self.source = source

    def resolve(self, key: str) -> str:
        """Return the first definition of ``key``.

        A response without any definition gives ``NOT_FOUND_MESSAGE`` as a
        normal result. A missing entry raises ``DefinitionNotFound`` from the
        source, and transport failures raise ``ServiceUnavailable``; callers
        decide how to surface those.
        """
        definition = self.source.lookup_definition(key)
        return definition or NOT_FOUND_MESSAGE

"""Typed views of the word service responses.

Only the fields this package reads are declared; anything else the services
send is ignored.
"""

import math
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

FREQUENCY_TAG_PREFIX = "f:"

# Plain non-negative decimal; rules out signs, exponents, nan and inf
_FREQUENCY_VALUE = re.compile(r"[0-9.]+")


class DatamuseWord(BaseModel):
    """One candidate from a Datamuse ``/words`` query."""

    model_config = ConfigDict(extra="ignore")

    word: str = ""
    score: Optional[float] = None
    tags: list[str] = Field(default_factory=list)

    @property
    def frequency_tag(self) -> Optional[str]:
        """The first ``f:`` tag, if any."""
        for tag in self.tags:
            if tag.startswith(FREQUENCY_TAG_PREFIX):
                return tag
        return None

    @property
    def frequency(self) -> Optional[float]:
        """Occurrences per million words from the first ``f:`` tag.

        None when there is no tag or its value is not a finite non-negative
        decimal.
        """
        tag = self.frequency_tag
        if tag is None:
            return None
        value = tag[len(FREQUENCY_TAG_PREFIX):]
        if not _FREQUENCY_VALUE.fullmatch(value):
            return None
        try:
            frequency = float(value)
        except ValueError:
            return None
        return frequency if math.isfinite(frequency) else None


class Sense(BaseModel):
    """A single definition within a meaning."""

    model_config = ConfigDict(extra="ignore")

    definition: str
    example: Optional[str] = None


class Meaning(BaseModel):
    """Definitions grouped under one part of speech."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    part_of_speech: Optional[str] = Field(default=None, alias="partOfSpeech")
    definitions: list[Sense] = Field(default_factory=list)


class DictionaryEntry(BaseModel):
    """One headword from the Free Dictionary API."""

    model_config = ConfigDict(extra="ignore")

    word: str = ""
    phonetic: Optional[str] = None
    meanings: list[Meaning] = Field(default_factory=list)

    def first_definition(self) -> Optional[str]:
        """Return the first definition text in meaning order."""
        for meaning in self.meanings:
            for sense in meaning.definitions:
                if sense.definition:
                    return sense.definition
        return None


DATAMUSE_RESPONSE = TypeAdapter(list[DatamuseWord])
DICTIONARY_RESPONSE = TypeAdapter(list[DictionaryEntry])

"""Data models for lexicon lookups."""

from typing import Dict, List
from pydantic import BaseModel, Field


UNKNOWN = "[unknown]"

# Part-of-speech codes used by the word list
POS_LABELS: Dict[str, str] = {
    "v": "verb",
    "fw": "function word",
    "n": "noun",
    "r": "adverb",
    "j": "adjective",
    "u": "interjection",
    "m": "numeral",
    "k": "proper noun",
    "abbr": "abbreviation",
}


def part_of_speech_label(code: str) -> str:
    """Translate a POS code to its label; unrecognized codes pass through."""
    return POS_LABELS.get(code.lower(), code)


class LexiconEntry(BaseModel):
    """One row of the word list."""
    lemma: str
    part_of_speech: str = ""
    frequency: float = 0.0
    inflections: List[str] = Field(default_factory=list)
    # Cell text as it appears in the source
    frequency_raw: str = ""
    inflections_raw: str = ""

    @property
    def part_of_speech_label(self) -> str:
        return part_of_speech_label(self.part_of_speech)


class WordDetails(BaseModel):
    """Human-readable lookup result for the details view."""
    word: str
    part_of_speech: str = UNKNOWN
    frequency: str = UNKNOWN
    inflections: str = UNKNOWN
    found: bool = False

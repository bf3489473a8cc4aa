"""
Word list lookup.

The lexicon is loaded once from a CSV file with the header
LEMMA,POS,FREQUENCY,INFLECTIONS and is read-only afterwards. Lookups match
the lemma first and fall back to the comma-separated inflections. When
several rows match, the first one in file order wins.
"""

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd

from .models import LexiconEntry, WordDetails, UNKNOWN, part_of_speech_label


logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("LEMMA", "POS", "FREQUENCY", "INFLECTIONS")

_EDGE_PUNCTUATION = re.compile(r'^[.,!?;:()]+|[.,!?;:()]+$')
_INFLECTION_SEPARATOR = re.compile(r',\s*')


def clean_word(word: str) -> str:
    """Strip leading and trailing punctuation runs from a word."""
    return _EDGE_PUNCTUATION.sub("", word)


def split_inflections(raw: str) -> List[str]:
    """Split an INFLECTIONS cell into its forms."""
    if not raw:
        return []
    return [form for form in _INFLECTION_SEPARATOR.split(raw) if form]


def _format_frequency(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


class Lexicon:
    """
    In-memory word list with lemma and inflection indexes.

    Both indexes keep the first entry seen for a key, so duplicate lemmas or
    inflections shared between lemmas resolve to the earliest row.
    """

    def __init__(self, entries: Optional[Iterable[LexiconEntry]] = None):
        self._entries: List[LexiconEntry] = []
        self._by_lemma: Dict[str, LexiconEntry] = {}
        self._by_inflection: Dict[str, LexiconEntry] = {}
        for entry in entries or []:
            self._add(entry)

    def _add(self, entry: LexiconEntry) -> None:
        self._entries.append(entry)
        self._by_lemma.setdefault(entry.lemma.lower(), entry)
        for form in entry.inflections:
            self._by_inflection.setdefault(form.lower(), entry)

    @classmethod
    def from_csv(cls, path: str | Path) -> "Lexicon":
        """
        Load a lexicon from a CSV word list.

        Args:
            path: Path to the CSV file

        Returns:
            A populated Lexicon

        Raises:
            OSError: If the file cannot be read
            ValueError: If the file cannot be parsed or lacks a required column
        """
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise ValueError(f"Word list {path} is missing columns: {', '.join(missing)}")

        frequencies = pd.to_numeric(df["FREQUENCY"], errors="coerce").fillna(0.0)

        entries = []
        for (_, row), frequency in zip(df.iterrows(), frequencies):
            lemma = row["LEMMA"].strip()
            if not lemma:
                continue
            entries.append(LexiconEntry(
                lemma=lemma,
                part_of_speech=row["POS"].strip(),
                frequency=float(frequency),
                frequency_raw=row["FREQUENCY"].strip(),
                inflections=split_inflections(row["INFLECTIONS"]),
                inflections_raw=row["INFLECTIONS"],
            ))

        logger.info("Loaded %d lexicon entries from %s", len(entries), path)
        return cls(entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> List[LexiconEntry]:
        return list(self._entries)

    def lookup(self, word: str) -> Optional[LexiconEntry]:
        """Find the entry for a word by lemma, then by inflection."""
        key = clean_word(word.strip()).lower()
        if not key:
            return None
        entry = self._by_lemma.get(key)
        if entry is None:
            entry = self._by_inflection.get(key)
        return entry

    def word_type(self, word: str) -> str:
        """
        Bracketed part-of-speech annotation for a grid cell.

        Returns "" for an empty word and "[unknown]" when nothing matches.
        """
        if not clean_word(word.strip()):
            return ""
        entry = self.lookup(word)
        if entry is None:
            return UNKNOWN
        return f"[{entry.part_of_speech_label}]"

    def describe(self, word: str) -> WordDetails:
        """Lookup result formatted for display."""
        cleaned = clean_word(word.strip())
        entry = self.lookup(cleaned)
        if entry is None:
            return WordDetails(word=cleaned)
        return WordDetails(
            word=cleaned,
            part_of_speech=entry.part_of_speech_label,
            frequency=entry.frequency_raw or _format_frequency(entry.frequency),
            inflections=entry.inflections_raw,
            found=True,
        )

    def top_variants(self, pos: str, exclude_lemma: str, limit: int = 10) -> List[str]:
        """Most frequent lemmas sharing a part of speech, excluding one lemma."""
        pos = pos.lower()
        exclude = exclude_lemma.lower()
        candidates = [
            e for e in self._entries
            if e.part_of_speech.lower() == pos and e.lemma.lower() != exclude
        ]
        candidates.sort(key=lambda e: e.frequency, reverse=True)
        return [e.lemma for e in candidates[:limit]]


def load_lexicon(path: Optional[str | Path]) -> Lexicon:
    """
    Load the word list for a service session.

    A missing or unreadable file is logged and yields an empty lexicon, so
    every lookup reports "[unknown]" instead of failing the service.
    """
    if not path:
        return Lexicon()
    try:
        return Lexicon.from_csv(path)
    except (OSError, ValueError) as e:
        logger.error("Error loading word list %s: %s", path, e)
        return Lexicon()

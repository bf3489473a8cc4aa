"""Word list lookup for part-of-speech annotations."""

from .models import LexiconEntry, WordDetails, POS_LABELS, UNKNOWN, part_of_speech_label
from .lookup import Lexicon, clean_word, split_inflections, load_lexicon

__all__ = [
    # Models
    "LexiconEntry",
    "WordDetails",
    "POS_LABELS",
    "UNKNOWN",
    "part_of_speech_label",
    # Lookup
    "Lexicon",
    "clean_word",
    "split_inflections",
    "load_lexicon",
]

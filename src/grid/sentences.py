"""Sentence derivation from grid snapshots."""

import re
from typing import List, Sequence

from .models import DerivedSentences, PLACEHOLDER


# Punctuation removed from every word of a vertical sentence
_VERTICAL_PUNCTUATION = re.compile(r'[.,!?;:]+')

# A sentence ends after . ! or ? followed by whitespace
_SENTENCE_BOUNDARY = re.compile(r'(?<=[.!?])\s+')


def split_into_sentences(text: str) -> List[str]:
    """Split text into sentences after '.', '!' or '?' followed by whitespace."""
    text = text.strip()
    if not text:
        return []
    return _SENTENCE_BOUNDARY.split(text)


def derive_vertical(snapshot: Sequence[Sequence[str]]) -> List[str]:
    """
    Read each column top-to-bottom into a sentence.

    Empty cells become the placeholder token and punctuation is stripped
    from inside every word, so each sentence has exactly one token per row.
    """
    if not snapshot:
        return []

    num_cols = len(snapshot[0])
    sentences = []
    for c in range(num_cols):
        col_words = []
        for row in snapshot:
            word = row[c] or PLACEHOLDER
            col_words.append(_VERTICAL_PUNCTUATION.sub("", word))
        sentences.append(" ".join(col_words))
    return sentences


def derive_horizontal(snapshot: Sequence[Sequence[str]]) -> List[str]:
    """
    Flatten the grid row-major and re-split it on sentence punctuation.

    Empty cells are dropped (no placeholder) and punctuation is kept. A grid
    with no words yields a single placeholder sentence.
    """
    flat_words = [word for row in snapshot for word in row if word != ""]
    text = " ".join(flat_words)
    if not text:
        text = PLACEHOLDER
    return split_into_sentences(text)


def derive_sentences(snapshot: Sequence[Sequence[str]]) -> DerivedSentences:
    """Derive both sentence sets from a grid snapshot."""
    return DerivedSentences(
        vertical=derive_vertical(snapshot),
        horizontal=derive_horizontal(snapshot),
    )

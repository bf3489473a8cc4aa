"""
Test suite for sentence derivation.

Covers:
- Vertical sentences (placeholders, punctuation stripping, token count)
- Horizontal sentences (flattening, re-splitting, empty grid)
- Sentence splitting rules
"""

import pytest

from src.grid import (
    Grid,
    PLACEHOLDER,
    derive_vertical,
    derive_horizontal,
    derive_sentences,
    split_into_sentences,
)


def snapshot_of(words):
    """Row-major words padded to a 5x3 snapshot."""
    return Grid.from_words(words).snapshot()


class TestVerticalSentences:
    """Test cases for column sentences."""

    def test_one_sentence_per_column(self):
        """A 5x3 grid yields three vertical sentences."""
        assert len(derive_vertical(snapshot_of([]))) == 3

    def test_empty_column_uses_placeholders(self):
        """A column of empty cells is five placeholder tokens."""
        sentences = derive_vertical(snapshot_of([]))
        assert sentences[0] == "____ ____ ____ ____ ____"

    def test_reads_top_to_bottom(self):
        """Column 0 is made of cells 0, 3, 6, 9, 12."""
        words = ["The", "a", "b", "cat", "c", "d", "sat", "e", "f", "on", "g", "h", "mats", "i", "j"]
        sentences = derive_vertical(snapshot_of(words))
        assert sentences[0] == "The cat sat on mats"
        assert sentences[1] == "a c e g i"

    def test_punctuation_stripped_inside_words(self):
        """Punctuation is removed anywhere in the word, not just trimmed."""
        words = ["cat,", "", "", "do.g", "", "", "yes!?", "", "", "a;b:c", "", "", "end.", "", ""]
        sentences = derive_vertical(snapshot_of(words))
        assert sentences[0] == "cat dog yes abc end"

    def test_token_count_equals_rows(self):
        """Every vertical sentence has exactly one token per row."""
        words = ["one", "", "three.", "", "!", "", "x", "", "", "", "y", "", "", "", "z"]
        for sentence in derive_vertical(snapshot_of(words)):
            assert len(sentence.split(" ")) == 5

    def test_cells_are_trimmed(self):
        """Whitespace-only cells count as empty."""
        words = ["  ", "", "", " cat ", "", "", "", "", "", "", "", "", "", "", ""]
        sentences = derive_vertical(snapshot_of(words))
        assert sentences[0] == "____ cat ____ ____ ____"

    def test_idempotent(self):
        """Deriving twice from the same snapshot gives the same output."""
        snapshot = snapshot_of(["Hello.", "World", "Foo!", "Bar"])
        assert derive_vertical(snapshot) == derive_vertical(snapshot)


class TestHorizontalSentences:
    """Test cases for row-major flattened sentences."""

    def test_resplit_on_punctuation(self):
        """Sentence boundaries follow punctuation, not rows."""
        sentences = derive_horizontal(snapshot_of(["Hello.", "World", "Foo!", "Bar"]))
        assert sentences == ["Hello.", "World Foo!", "Bar"]

    def test_empty_grid_is_single_placeholder(self):
        """A grid with no words gives one placeholder sentence."""
        assert derive_horizontal(snapshot_of([])) == [PLACEHOLDER]

    def test_empty_cells_dropped(self):
        """Empty cells are dropped, not replaced with placeholders."""
        words = ["The", "", "cat", "", "", "sat."]
        assert derive_horizontal(snapshot_of(words)) == ["The cat sat."]

    def test_punctuation_preserved(self):
        """Commas and other marks stay in horizontal sentences."""
        words = ["cat,", "dog", "bird"]
        assert derive_horizontal(snapshot_of(words)) == ["cat, dog bird"]

    def test_question_mark_splits(self):
        words = ["Why?", "Because", "yes."]
        assert derive_horizontal(snapshot_of(words)) == ["Why?", "Because yes."]

    def test_no_split_without_following_space(self):
        """Punctuation at the very end does not create an empty sentence."""
        words = ["One.", "Two."]
        assert derive_horizontal(snapshot_of(words)) == ["One.", "Two."]

    def test_sentence_count_varies_with_punctuation(self):
        """Unlike vertical sentences, the count depends on content."""
        one = derive_horizontal(snapshot_of(["a", "b", "c", "d"]))
        four = derive_horizontal(snapshot_of(["a.", "b.", "c.", "d"]))
        assert len(one) == 1
        assert len(four) == 4


class TestPunctuationScope:
    """Punctuation handling differs between the two sentence sets."""

    def test_comma_stripped_vertically_kept_horizontally(self):
        derived = derive_sentences(snapshot_of(["cat,", "sat"]))
        assert derived.vertical[0].split(" ")[0] == "cat"
        assert derived.horizontal == ["cat, sat"]


class TestSplitIntoSentences:
    """Test cases for the sentence splitter."""

    def test_empty_text(self):
        assert split_into_sentences("") == []

    def test_whitespace_only(self):
        assert split_into_sentences("   ") == []

    def test_multiple_spaces_between_sentences(self):
        assert split_into_sentences("One.   Two!  Three") == ["One.", "Two!", "Three"]

    def test_other_punctuation_does_not_split(self):
        assert split_into_sentences("a; b: c, d") == ["a; b: c, d"]

    @pytest.mark.parametrize("text", ["Hi. there", "Hi! there", "Hi? there"])
    def test_terminal_marks(self, text):
        assert len(split_into_sentences(text)) == 2


class TestDerivedSentences:
    """Test cases for the combined result."""

    def test_all_orders_vertical_first(self):
        derived = derive_sentences(snapshot_of(["Hello.", "World"]))
        assert derived.all == [*derived.vertical, *derived.horizontal]
        assert derived.all[:3] == derived.vertical

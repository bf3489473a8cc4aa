"""
Test suite for lexicon lookup.

Tests:
- Word cleaning
- Lemma and inflection lookups, including first-match tie-breaks
- Part-of-speech labels and details formatting
- CSV loading failures
"""

import pytest

from src.lexicon import (
    Lexicon,
    LexiconEntry,
    UNKNOWN,
    clean_word,
    split_inflections,
    load_lexicon,
    part_of_speech_label,
)


class TestCleanWord:
    """Test cases for punctuation stripping before lookup."""

    @pytest.mark.parametrize("raw,expected", [
        ("cat", "cat"),
        ("cat,", "cat"),
        ("(cat)", "cat"),
        ("...cat!?", "cat"),
        ("don't", "don't"),
        ("a.b", "a.b"),
        ("!!!", ""),
    ])
    def test_clean(self, raw, expected):
        assert clean_word(raw) == expected

    def test_split_inflections(self):
        assert split_inflections("ran, running,runs") == ["ran", "running", "runs"]
        assert split_inflections("") == []


class TestLookup:
    """Test cases for lemma and inflection lookups."""

    def test_lemma_match(self, lexicon):
        entry = lexicon.lookup("cat")
        assert entry.lemma == "cat"
        assert entry.part_of_speech == "n"
        assert entry.frequency == 80

    def test_case_insensitive(self, lexicon):
        assert lexicon.lookup("CAT").lemma == "cat"
        assert lexicon.lookup("london").lemma == "London"

    def test_punctuation_cleaned(self, lexicon):
        assert lexicon.lookup("(Cat),").lemma == "cat"

    def test_inflection_fallback(self, lexicon):
        """'ran' has no lemma row and resolves through inflections."""
        entry = lexicon.lookup("ran")
        assert entry.lemma == "run"

    def test_inflection_first_in_file_order(self, lexicon):
        """'ran' is listed under both run and sprint; the earlier row wins."""
        assert lexicon.lookup("ran").lemma == "run"

    def test_lemma_beats_inflection(self):
        lexicon = Lexicon([
            LexiconEntry(lemma="saw", part_of_speech="v", inflections=["seen"]),
            LexiconEntry(lemma="see", part_of_speech="v", inflections=["saw"]),
        ])
        assert lexicon.lookup("saw").lemma == "saw"

    def test_duplicate_lemma_first_wins(self):
        lexicon = Lexicon([
            LexiconEntry(lemma="bear", part_of_speech="n"),
            LexiconEntry(lemma="bear", part_of_speech="v"),
        ])
        assert lexicon.lookup("bear").part_of_speech == "n"

    def test_not_found(self, lexicon):
        assert lexicon.lookup("zebra") is None

    def test_empty_word(self, lexicon):
        assert lexicon.lookup("") is None
        assert lexicon.lookup("?!") is None


class TestPartOfSpeech:
    """Test cases for POS code translation."""

    @pytest.mark.parametrize("code,label", [
        ("v", "verb"),
        ("fw", "function word"),
        ("n", "noun"),
        ("r", "adverb"),
        ("j", "adjective"),
        ("u", "interjection"),
        ("m", "numeral"),
        ("k", "proper noun"),
        ("abbr", "abbreviation"),
        ("V", "verb"),
    ])
    def test_known_codes(self, code, label):
        assert part_of_speech_label(code) == label

    def test_unknown_code_passes_through(self):
        assert part_of_speech_label("zz") == "zz"

    def test_word_type(self, lexicon):
        assert lexicon.word_type("quickest") == "[adjective]"
        assert lexicon.word_type("foxes") == "[zz]"
        assert lexicon.word_type("nothing") == UNKNOWN
        assert lexicon.word_type("  ") == ""


class TestDescribe:
    """Test cases for the details view."""

    def test_found(self, lexicon):
        details = lexicon.describe("running.")
        assert details.word == "running"
        assert details.part_of_speech == "verb"
        assert details.frequency == "120"
        assert details.inflections == "ran, running, runs"
        assert details.found is True

    def test_frequency_shown_as_written(self, tmp_path):
        path = tmp_path / "words.csv"
        path.write_text("LEMMA,POS,FREQUENCY,INFLECTIONS\ncat,n,1.2e3,\ndog,n,lots,\n")
        lexicon = Lexicon.from_csv(path)
        assert lexicon.describe("cat").frequency == "1.2e3"
        assert lexicon.describe("dog").frequency == "lots"
        assert lexicon.lookup("cat").frequency == 1200.0

    def test_frequency_without_source_text(self):
        lexicon = Lexicon([LexiconEntry(lemma="cat", part_of_speech="n", frequency=80.0)])
        assert lexicon.describe("cat").frequency == "80"

    def test_not_found_uses_sentinel(self, lexicon):
        details = lexicon.describe("zebra")
        assert details.word == "zebra"
        assert details.part_of_speech == UNKNOWN
        assert details.frequency == UNKNOWN
        assert details.inflections == UNKNOWN
        assert details.found is False


class TestTopVariants:
    """Test cases for same-POS suggestions."""

    def test_sorted_by_frequency(self, lexicon):
        assert lexicon.top_variants("n", "cat") == ["dog"]
        assert lexicon.top_variants("v", "") == ["run", "sprint"]

    def test_limit(self, lexicon):
        assert lexicon.top_variants("v", "", limit=1) == ["run"]


class TestLoading:
    """Test cases for reading the CSV word list."""

    def test_entry_count(self, lexicon):
        assert len(lexicon) == 12

    def test_missing_column(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("LEMMA,POS\ncat,n\n")
        with pytest.raises(ValueError):
            Lexicon.from_csv(path)

    def test_non_numeric_frequency(self, tmp_path):
        path = tmp_path / "words.csv"
        path.write_text("LEMMA,POS,FREQUENCY,INFLECTIONS\ncat,n,lots,\n")
        assert Lexicon.from_csv(path).lookup("cat").frequency == 0.0

    def test_blank_lemma_rows_skipped(self, tmp_path):
        path = tmp_path / "words.csv"
        path.write_text("LEMMA,POS,FREQUENCY,INFLECTIONS\ncat,n,1,\n,,,\n")
        assert len(Lexicon.from_csv(path)) == 1

    def test_load_lexicon_missing_file_is_empty(self, tmp_path):
        lexicon = load_lexicon(tmp_path / "missing.csv")
        assert len(lexicon) == 0
        assert lexicon.word_type("cat") == UNKNOWN

    def test_load_lexicon_without_path(self):
        assert len(load_lexicon(None)) == 0

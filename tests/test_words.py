"""
Tests for Words and Patterns
============================
Tests for WordCategory lookup, WordPattern parsing/serialization and the
built-in word tables.
"""

import dataclasses
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit.words import (
    DEFAULT_ADJECTIVES,
    DEFAULT_ADVERBS,
    DEFAULT_NOUNS,
    DEFAULT_VERBS,
    DEFAULT_WORDS,
    Word,
    WordCategory,
    WordPattern,
    default_patterns,
)

ADJ = WordCategory.ADJECTIVE
NOUN = WordCategory.NOUN
VERB = WordCategory.VERB
ADV = WordCategory.ADVERB


class TestWordCategory:
    """Tests for category lookup."""

    @pytest.mark.parametrize("text,expected", [
        ("Noun", NOUN),
        ("noun", NOUN),
        ("VERB", VERB),
        ("  Adjective ", ADJ),
        ("adverb", ADV),
    ])
    def test_from_name(self, text, expected):
        """Category names are matched case-insensitively."""
        assert WordCategory.from_name(text) is expected

    @pytest.mark.parametrize("text", ["", "pronoun", "Nouns", None])
    def test_from_name_unknown(self, text):
        """Unknown names return None."""
        assert WordCategory.from_name(text) is None

    def test_str(self):
        assert str(ADJ) == "Adjective"


class TestWord:
    """Tests for the Word value type."""

    def test_word_is_immutable(self):
        word = Word("Car", NOUN)
        with pytest.raises(AttributeError):
            word.value = "Bus"

    def test_word_equality(self):
        assert Word("Car", NOUN) == Word("Car", NOUN)
        assert Word("Open", VERB) != Word("Open", ADJ)


class TestWordPatternParse:
    """Tests for WordPattern.parse()."""

    def test_comma(self):
        assert WordPattern.parse("Adjective,Noun").categories == (ADJ, NOUN)

    def test_plus(self):
        assert WordPattern.parse("Verb+Adverb+Noun").categories == (VERB, ADV, NOUN)

    def test_pipe_and_semicolon(self):
        assert WordPattern.parse("Noun|Verb;Adjective").categories == (NOUN, VERB, ADJ)

    def test_whitespace_and_case(self):
        assert WordPattern.parse(" adjective , NOUN ").categories == (ADJ, NOUN)

    def test_unknown_tokens_dropped(self):
        """Unrecognized tokens are silently skipped."""
        assert WordPattern.parse("Adjective,Foo,Noun").categories == (ADJ, NOUN)

    def test_empty_separators_ignored(self):
        assert WordPattern.parse(",,Noun++Verb,").categories == (NOUN, VERB)

    @pytest.mark.parametrize("text", ["", "   ", None, "Foo,Bar"])
    def test_empty_result(self, text):
        """Blank or fully unrecognized input gives an empty pattern."""
        pattern = WordPattern.parse(text)
        assert len(pattern) == 0
        assert pattern.categories == ()

    def test_repeated_categories_kept(self):
        assert WordPattern.parse("Noun,Noun").categories == (NOUN, NOUN)


class TestWordPatternSerialization:
    """Tests for to_string(), display_name() and equality."""

    def test_to_string(self):
        assert WordPattern.of(ADJ, NOUN).to_string() == "Adjective,Noun"
        assert str(WordPattern.of(VERB, NOUN)) == "Verb,Noun"

    def test_display_name(self):
        assert WordPattern.of(VERB, ADV, NOUN).display_name() == "Verb + Adverb + Noun"

    @pytest.mark.parametrize("text", [
        "Adjective,Noun",
        "verb+adverb+noun",
        "Noun|Noun",
        "Adverb;Verb",
    ])
    def test_reparse_serialized_forms(self, text):
        """Parsing either serialized form gives back the same categories."""
        pattern = WordPattern.parse(text)
        assert WordPattern.parse(pattern.to_string()) == pattern
        assert WordPattern.parse(pattern.display_name()) == pattern

    def test_equality_is_ordered(self):
        assert WordPattern.of(ADJ, NOUN) == WordPattern.parse("adjective+noun")
        assert WordPattern.of(ADJ, NOUN) != WordPattern.of(NOUN, ADJ)
        assert WordPattern.of(NOUN) != WordPattern.of(NOUN, NOUN)

    def test_hash_matches_equality(self):
        patterns = {WordPattern.of(ADJ, NOUN), WordPattern.parse("Adjective,Noun")}
        assert len(patterns) == 1

    def test_not_equal_to_other_types(self):
        assert WordPattern.of(NOUN) != "Noun"

    def test_pattern_is_immutable(self):
        """Stored patterns cannot be edited in place, so their hash never drifts."""
        pattern = WordPattern.parse("Adjective,Noun")
        with pytest.raises(dataclasses.FrozenInstanceError):
            pattern.categories = (VERB,)
        with pytest.raises(AttributeError):
            pattern.categories.append(VERB)
        assert pattern.categories == (ADJ, NOUN)

    def test_pattern_usable_as_set_member(self):
        pattern = WordPattern.of(VERB, NOUN)
        seen = {pattern}
        assert WordPattern.parse("verb+noun") in seen
        assert hash(pattern) == hash(WordPattern.parse("Verb,Noun"))


class TestDefaults:
    """Tests for built-in word and pattern tables."""

    def test_default_patterns(self):
        patterns = default_patterns()
        assert [p.to_string() for p in patterns] == [
            "Adjective,Noun",
            "Verb,Noun",
            "Noun,Verb",
            "Noun,Noun",
        ]

    def test_default_patterns_are_fresh_copies(self):
        first = default_patterns()
        first.append(WordPattern.of(VERB))
        assert default_patterns()[0].categories == (ADJ, NOUN)
        assert len(default_patterns()) == 4

    @pytest.mark.parametrize("table", [
        DEFAULT_NOUNS, DEFAULT_VERBS, DEFAULT_ADJECTIVES, DEFAULT_ADVERBS,
    ])
    def test_tables_have_about_fifty_words(self, table):
        assert 45 <= len(table) <= 55

    @pytest.mark.parametrize("table", [
        DEFAULT_NOUNS, DEFAULT_VERBS, DEFAULT_ADJECTIVES, DEFAULT_ADVERBS,
    ])
    def test_words_are_capitalized_identifiers(self, table):
        for word in table:
            assert word.isalpha()
            assert word[0].isupper()

    def test_all_categories_covered(self):
        assert set(DEFAULT_WORDS) == set(WordCategory)

"""Tests for whole-word phrase matching used by dislike and like checks."""

from services.word_match import phrase_matches, token_matches, tokenize


def test_tokenize_lowercases_and_strips_punctuation():
    """Test that tokenize lower-cases and drops punctuation."""
    assert tokenize("Boiled Eggs (2)") == ["boiled", "eggs", "2"]
    assert tokenize("  Curd,  Rice. ") == ["curd", "rice"]
    assert tokenize("") == []
    assert tokenize(None) == []


def test_single_word_matches_plural_but_not_prefix():
    """Test that a word matches its plural but not a prefix."""
    assert phrase_matches(tokenize("Egg Omelette"), "egg")
    assert phrase_matches(tokenize("Eggs"), "egg")
    assert not phrase_matches(tokenize("Eggplant Curry"), "egg")


def test_es_plural_and_reverse_direction():
    """Test -es plurals in both directions."""
    assert token_matches("tomatoes", "tomato")
    assert token_matches("tomato", "tomatoes")
    assert not token_matches("eggplant", "egg")


def test_multi_word_phrase_requires_contiguous_run():
    """Test that a phrase must match a contiguous run of words."""
    assert phrase_matches(tokenize("Spicy Butter Chicken Curry"), "butter chicken")
    assert not phrase_matches(tokenize("Chicken with Butter"), "butter chicken")


def test_phrase_longer_than_name_never_matches():
    """Test that a phrase longer than the name never matches."""
    assert not phrase_matches(tokenize("Dal"), "dal tadka")
    assert not phrase_matches(tokenize("Dal"), "   ")

"""
Unit tests for text normalization: lowercasing, punctuation stripping, whitespace splitting.
Run: pytest tests/test_text_processor.py
"""

from moviesim.text_processor import TokenSequence, preprocess


def test_lowercases_and_strips_punctuation():
	tokens = preprocess("Hello, World!  It's   me.")
	assert list(tokens) == ["hello", "world", "its", "me"]


def test_keeps_word_characters():
	# Underscores and digits are word characters
	assert preprocess("Room_101 in 1984") == ["room_101", "in", "1984"]


def test_hyphenated_words_are_joined():
	assert preprocess("co-dependent sci-fi") == ["codependent", "scifi"]


def test_empty_and_blank_text_yield_nothing():
	assert list(preprocess("")) == []
	assert len(preprocess("   \n\t ")) == 0
	assert list(preprocess("?!...")) == []


def test_sequence_is_restartable():
	tokens = preprocess("space robots fight")
	first = list(tokens)
	second = list(tokens)
	assert first == second == ["space", "robots", "fight"]
	assert len(tokens) == 3


def test_none_is_treated_as_empty():
	assert list(TokenSequence(None)) == []

"""
Unit tests for the TF-IDF pipeline: term frequency, IDF, vector assembly and sparse cosine similarity.
Run: pytest tests/test_tfidf.py
"""

import math

import pytest

from moviesim.errors import EmptyCorpusError
from moviesim.models import Movie
from moviesim.text_processor import preprocess
from moviesim.tfidf import calculate_idf, calculate_term_frequency, calculate_tfidf, cosine_similarity


def make_movie(title, description):
	return Movie(title=title, genres=["Drama"], description=description, year=2000, rating=7.0)


# ---------- term frequency ----------

def test_term_frequency_relative_counts():
	tf = calculate_term_frequency(["a", "a", "b"])
	assert tf == pytest.approx({"a": 2 / 3, "b": 1 / 3})


def test_term_frequency_reconstructs_counts():
	tokens = preprocess("the cat and the hat saw the bat").to_list()
	tf = calculate_term_frequency(tokens)
	total = len(tokens)
	for word, freq in tf.items():
		assert freq * total == pytest.approx(tokens.count(word))
	assert sum(freq * total for freq in tf.values()) == pytest.approx(total)


def test_term_frequency_empty_document():
	assert calculate_term_frequency(preprocess("")) == {}


def test_term_frequency_accepts_token_sequence():
	assert calculate_term_frequency(preprocess("Go go GO!")) == {"go": 1.0}


# ---------- inverse document frequency ----------

def test_idf_counts_each_document_once():
	idf = calculate_idf([["a", "b", "b", "b"], ["a"]])
	assert idf["a"] == 0.0
	assert idf["b"] == pytest.approx(math.log(2))


def test_idf_word_in_every_document_is_zero():
	docs = [["space", "x"], ["space", "y"], ["z", "space"]]
	assert calculate_idf(docs)["space"] == 0.0


def test_idf_one_entry_per_distinct_word():
	idf = calculate_idf([["a", "b"], ["c"], []])
	assert set(idf) == {"a", "b", "c"}
	assert idf["c"] == pytest.approx(math.log(3))


def test_idf_empty_corpus_fails_fast():
	with pytest.raises(EmptyCorpusError):
		calculate_idf([])


# ---------- TF-IDF vectors ----------

def test_tfidf_vectors_are_keyed_by_title_and_sparse():
	vectors = calculate_tfidf([
		make_movie("A", "space robots fight"),
		make_movie("B", "romantic dinner"),
	])
	assert set(vectors) == {"A", "B"}
	assert set(vectors["A"]) == {"space", "robots", "fight"}
	assert vectors["A"]["space"] == pytest.approx((1 / 3) * math.log(2))


def test_tfidf_empty_description_gives_empty_vector():
	vectors = calculate_tfidf([make_movie("A", ""), make_movie("B", "words here")])
	assert vectors["A"] == {}


def test_tfidf_empty_corpus_fails_fast():
	with pytest.raises(EmptyCorpusError):
		calculate_tfidf([])


def test_tfidf_duplicate_title_keeps_later_document():
	vectors = calculate_tfidf([
		make_movie("Same", "first text"),
		make_movie("Same", "second words"),
		make_movie("Other", "first"),
	])
	assert set(vectors["Same"]) == {"second", "words"}


# ---------- cosine similarity ----------

def test_cosine_identical_vectors():
	vec = {"a": 0.5, "b": 0.25}
	assert cosine_similarity(vec, dict(vec)) == pytest.approx(1.0, abs=1e-9)


def test_cosine_disjoint_vectors_is_exactly_zero():
	assert cosine_similarity({"a": 1.0}, {"b": 2.0}) == 0.0


def test_cosine_zero_magnitude():
	assert cosine_similarity({}, {"a": 1.0}) == 0.0
	assert cosine_similarity({"a": 0.0}, {"a": 0.0}) == 0.0


def test_cosine_uses_full_magnitude_of_each_vector():
	# Only "a" is shared; the extra key of vec2 still counts in its magnitude
	vec1 = {"a": 1.0}
	vec2 = {"a": 1.0, "b": 1.0}
	assert cosine_similarity(vec1, vec2) == pytest.approx(1 / math.sqrt(2))


def test_cosine_is_symmetric():
	vec1 = {"a": 0.1, "b": 0.7, "c": 0.3, "d": 1e-8}
	vec2 = {"d": 0.9, "b": 0.2, "e": 0.4, "a": 0.3}
	assert cosine_similarity(vec1, vec2) == cosine_similarity(vec2, vec1)


# ---------- scenarios ----------

def test_scenario_shared_and_unrelated_descriptions():
	vectors = calculate_tfidf([
		make_movie("A", "space robots fight"),
		make_movie("B", "space robots fight"),
		make_movie("C", "romantic dinner date"),
	])
	assert cosine_similarity(vectors["A"], vectors["B"]) == pytest.approx(1.0, abs=1e-9)
	assert cosine_similarity(vectors["A"], vectors["C"]) == 0.0


def test_scenario_single_document_corpus_self_similarity_is_zero():
	vectors = calculate_tfidf([make_movie("Solo", "one two two three")])
	assert all(weight == 0.0 for weight in vectors["Solo"].values())
	assert cosine_similarity(vectors["Solo"], vectors["Solo"]) == 0.0


def test_cosine_parallel_vectors_never_exceed_one():
	vec = {"a": 1.0, "b": 1.0, "c": 1.0}
	assert cosine_similarity(vec, dict(vec)) <= 1.0
	assert cosine_similarity(vec, {"a": 3.0, "b": 3.0, "c": 3.0}) <= 1.0


def test_cosine_vanishing_weights_give_zero():
	assert cosine_similarity({"a": 1e-170}, {"a": 1e-170}) == 0.0

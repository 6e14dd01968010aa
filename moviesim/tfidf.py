"""
TF-IDF module.
Builds sparse term-weight vectors for movie descriptions and compares them with cosine similarity.

Vectors are plain dicts keyed by word: a missing key means weight 0.
"""

import math  # log and sqrt
from collections import Counter  # word counts per document
from typing import Dict, Iterable, List, Sequence

from loguru import logger  # console logger

from .errors import EmptyCorpusError
from .models import Movie
from .text_processor import preprocess

SparseVector = Dict[str, float]


def calculate_term_frequency(words: Iterable[str]) -> SparseVector:
	"""
	Relative frequency of every distinct word in one document:
	TF(word) = occurrences of word / total words.
	An empty document yields an empty mapping.
	"""
	word_counts = Counter(words)
	total_words = sum(word_counts.values())
	if total_words == 0:
		return {}
	return {word: count / total_words for word, count in word_counts.items()}


def calculate_idf(documents: Sequence[Iterable[str]]) -> SparseVector:
	"""
	Inverse document frequency over the whole corpus:
	IDF(word) = ln(total documents / documents containing word).
	Each document counts at most once per word, so a word found in every
	document scores exactly 0.
	"""
	total_documents = len(documents)
	if total_documents == 0:
		raise EmptyCorpusError("cannot compute IDF over an empty corpus")

	# Vocabulary of every document must be known before any score is final
	document_counts: Counter = Counter()
	for doc in documents:
		document_counts.update(set(doc))

	return {
		word: math.log(total_documents / count)
		for word, count in document_counts.items()
	}


def calculate_tfidf(movies: Sequence[Movie]) -> Dict[str, SparseVector]:
	"""
	Compute one TF-IDF vector per movie description, keyed by movie title.
	IDF is computed once over all descriptions; titles are expected to be unique
	(a repeated title replaces the earlier vector).
	"""
	documents: List[List[str]] = [preprocess(movie.description).to_list() for movie in movies]
	idf_scores = calculate_idf(documents)
	logger.debug(f"[TFIDF] Corpus of {len(documents)} documents, vocabulary size {len(idf_scores)}")

	tfidf_vectors: Dict[str, SparseVector] = {}
	for movie, document in zip(movies, documents):
		tf_scores = calculate_term_frequency(document)
		if movie.title in tfidf_vectors:
			logger.warning(f"[TFIDF] Duplicate title '{movie.title}' overwrites an earlier vector")
		tfidf_vectors[movie.title] = {word: tf * idf_scores[word] for word, tf in tf_scores.items()}

	return tfidf_vectors


def cosine_similarity(vec1: SparseVector, vec2: SparseVector) -> float:
	"""
	Cosine similarity between two sparse vectors.
	Returns 0.0 when either vector has zero magnitude.
	"""
	# fsum is exactly rounded, so the result does not depend on key order
	dot_product = math.fsum(weight * vec2.get(word, 0.0) for word, weight in vec1.items())

	magnitude1 = math.sqrt(math.fsum(weight * weight for weight in vec1.values()))
	magnitude2 = math.sqrt(math.fsum(weight * weight for weight in vec2.values()))

	denominator = magnitude1 * magnitude2
	if denominator == 0:
		return 0.0

	# Clamp: the rounded magnitudes can push parallel vectors just past 1
	return max(-1.0, min(1.0, dot_product / denominator))

"""
Similarity engine module.
Builds TF-IDF vectors once for a corpus and answers genre/description similarity queries by title.
"""

from dataclasses import dataclass  # lightweight containers for results
from typing import Dict, List, Optional  # type annotations for clarity

from rapidfuzz import process, fuzz  # fuzzy title matching

# Import loguru for console logging
from loguru import logger  # simple structured logger

from . import config  # report thresholds and fuzzy cutoff
from .errors import MovieNotFoundError
from .genres import genre_similarity
from .models import Movie
from .tfidf import calculate_tfidf, cosine_similarity

METHODS = ("genre", "tfidf")


@dataclass
class SimilarityResult:
	movie: Movie  # compared movie
	score: float  # raw cosine similarity


class SimilarityEngine:
	"""
	Facade over the genre and TF-IDF similarity paths for one fixed corpus.
	The corpus is a snapshot: vectors are computed in the constructor and never updated.
	"""

	def __init__(self, movies: List[Movie]):
		self.movies = list(movies)  # keep corpus order for reports
		self._by_title: Dict[str, Movie] = {m.title: m for m in self.movies}
		self._by_lower: Dict[str, str] = {m.title.lower(): m.title for m in self.movies}

		logger.info(f"[Engine] Computing TF-IDF vectors for {len(self.movies)} movies")
		self.tfidf_vectors = calculate_tfidf(self.movies)  # raises EmptyCorpusError on an empty corpus
		logger.info(f"[Engine] Ready with {len(self.tfidf_vectors)} vectors")

	def titles(self) -> List[str]:
		return [m.title for m in self.movies]

	def resolve_title(self, query: str, fuzzy: bool = False) -> str:
		"""
		Map a user-supplied title onto a corpus title: exact match, then case-insensitive.
		With fuzzy=True, fall back to the best fuzzy match above the cutoff.
		Scoring methods always resolve strictly.
		"""
		if query in self._by_title:
			return query

		cleaned = (query or '').strip()
		if cleaned.lower() in self._by_lower:
			return self._by_lower[cleaned.lower()]

		if fuzzy and cleaned:
			best = process.extractOne(cleaned, list(self._by_title), scorer=fuzz.WRatio)
			if best and best[1] >= config.TITLE_MATCH_THRESHOLD:
				logger.debug(f"[Engine] Title fuzzy match: '{query}' -> '{best[0]}' (score={best[1]:.1f})")
				return best[0]

		raise MovieNotFoundError(query)

	def get_movie(self, title: str) -> Movie:
		return self._by_title[self.resolve_title(title)]

	def tfidf_similarity(self, title_a: str, title_b: str) -> float:
		"""Cosine similarity between the TF-IDF vectors of two movie descriptions."""
		a = self.resolve_title(title_a)
		b = self.resolve_title(title_b)
		return cosine_similarity(self.tfidf_vectors[a], self.tfidf_vectors[b])

	def genre_similarity(self, title_a: str, title_b: str) -> float:
		"""Cosine similarity between the genre vectors of two movies."""
		return genre_similarity(self.get_movie(title_a).genres, self.get_movie(title_b).genres)

	def similarity(self, title_a: str, title_b: str, method: str = "tfidf") -> float:
		if method == "tfidf":
			return self.tfidf_similarity(title_a, title_b)
		if method == "genre":
			return self.genre_similarity(title_a, title_b)
		raise ValueError(f"Unknown similarity method: {method!r} (expected one of {', '.join(METHODS)})")

	def compare(self, title: str, method: str = "tfidf", threshold: Optional[float] = None) -> List[SimilarityResult]:
		"""
		Score every other movie against `title` and keep those strictly above the threshold.
		Results stay in corpus order.
		"""
		if method not in METHODS:
			raise ValueError(f"Unknown similarity method: {method!r} (expected one of {', '.join(METHODS)})")
		if threshold is None:
			threshold = config.GENRE_REPORT_THRESHOLD if method == "genre" else config.TFIDF_REPORT_THRESHOLD

		reference = self.resolve_title(title)
		results: List[SimilarityResult] = []
		for movie in self.movies:
			if movie.title == reference:  # skip comparing with itself
				continue
			score = self.similarity(reference, movie.title, method)
			if score > threshold:
				results.append(SimilarityResult(movie=movie, score=score))

		logger.debug(f"[Engine] compare '{reference}' method={method} threshold={threshold} -> {len(results)} movies")
		return results

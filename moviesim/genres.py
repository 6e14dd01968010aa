"""
Genre similarity module.
Encodes a movie's genres as a dense 0/1 vector over the canonical enumeration
and compares two such vectors with cosine similarity.
"""

# Import NumPy for the dense fixed-length genre vectors
import numpy as np  # numeric arrays
from typing import Iterable, Sequence  # type hints

from .models import CANONICAL_GENRES  # immutable ordered genre list


def to_genre_vector(genres: Iterable[str], enumeration: Sequence[str] = CANONICAL_GENRES) -> np.ndarray:
	"""
	Build a 0/1 integer vector with a 1 at index i iff the movie has enumeration[i].
	Genres outside the enumeration are ignored.
	"""
	movie_genres = set(genres)  # lookup by value
	return np.array([1 if genre in movie_genres else 0 for genre in enumeration], dtype=np.int64)


def genre_similarity(
	genres_a: Iterable[str],
	genres_b: Iterable[str],
	enumeration: Sequence[str] = CANONICAL_GENRES,
) -> float:
	"""
	Cosine similarity between two movies' genre lists.
	Returns 0.0 if either movie has no recognized genre.
	"""
	# Both vectors must come from the same enumeration to be comparable
	v1 = to_genre_vector(genres_a, enumeration)
	v2 = to_genre_vector(genres_b, enumeration)

	dot = int(np.dot(v1, v2))  # count of shared genres
	squared1 = int(np.sum(v1 * v1))  # genre count of each movie
	squared2 = int(np.sum(v2 * v2))

	if squared1 == 0 or squared2 == 0:
		return 0.0

	# Product of norms taken under one root; exact for identical genre sets
	return dot / float(np.sqrt(squared1 * squared2))

"""
Data models for the Movie Similarity Engine.
Defines the movie record, the canonical genre enumeration and field validation.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Import typing helpers for precise and self-documenting types
from typing import Iterable, List, Tuple  # lists and fixed-size tuples

from . import config  # year/rating bounds
from .errors import MovieValidationError  # raised on invalid fields


# Canonical genre enumeration; position i is dimension i of every genre vector
CANONICAL_GENRES: Tuple[str, ...] = (
	"Action",
	"Comedy",
	"Drama",
	"Sci-Fi",
	"Horror",
	"Romance",
	"Animation",
	"Documentary",
)


def is_valid_genre(genre: str) -> bool:
	"""Return True if the genre name is part of the canonical enumeration."""
	return genre in CANONICAL_GENRES


@dataclass
class Movie:
	"""
	Represents a single movie.
	Only title, description and genres feed the similarity computations;
	year and rating are validated and carried along for display.
	"""
	title: str  # unique identifier within a corpus
	genres: List[str] = field(default_factory=list)  # canonical genre names (e.g., ["Action", "Sci-Fi"])
	description: str = ""  # free-text synopsis, may be empty
	year: int = 0  # release year
	rating: float = 0.0  # rating on a 0-10 scale

	@classmethod
	def create(
		cls,
		title: str,
		genres: Iterable[str],
		description: str,
		year: int,
		rating: float,
	) -> "Movie":
		"""
		Validate the raw fields and build a Movie.
		Raises MovieValidationError naming the first offending field.
		"""
		genres = list(genres)

		if not title or not title.strip():
			raise MovieValidationError("title cannot be empty")

		if not (config.MIN_RELEASE_YEAR <= year <= config.MAX_RELEASE_YEAR):
			raise MovieValidationError(
				f"release year must be between {config.MIN_RELEASE_YEAR} and {config.MAX_RELEASE_YEAR}, got {year}"
			)

		# written as a range check so NaN fails too
		if not (config.MIN_RATING <= rating <= config.MAX_RATING):
			raise MovieValidationError(
				f"rating must be between {config.MIN_RATING:g} and {config.MAX_RATING:g}, got {rating:.2f}"
			)

		if not genres:
			raise MovieValidationError("movie must have at least one genre")

		for genre in genres:
			if not is_valid_genre(genre):
				raise MovieValidationError(f"invalid genre: {genre}")

		return cls(
			title=title,
			genres=genres,
			description=description or "",
			year=year,
			rating=rating,
		)

	def __str__(self) -> str:
		return (
			f"Title: {self.title}\n"
			f"Genres: {', '.join(self.genres)}\n"
			f"Description: {self.description}\n"
			f"ReleaseYear: {self.year}\n"
			f"Rating: {self.rating:.1f}"
		)

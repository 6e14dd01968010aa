"""
Error types for the Movie Similarity Engine.
They derive from built-in exceptions so callers can catch them broadly.
"""


class MovieValidationError(ValueError):
	"""A movie record failed field validation (title, year, rating or genres)."""


class EmptyCorpusError(ValueError):
	"""IDF was requested over a corpus with zero documents."""


class MovieNotFoundError(KeyError):
	"""A title could not be resolved against the loaded corpus."""

	def __init__(self, title: str):
		super().__init__(title)
		self.title = title

	def __str__(self) -> str:
		return f"Movie not found: {self.title!r}"

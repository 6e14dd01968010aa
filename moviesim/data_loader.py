"""
Data loading module.
Handles loading movies from CSV/JSONL and validating every record before it reaches the similarity code.
"""

# Standard libs for CSV/JSON parsing, typing, and paths
import csv  # read the title,genres,description,year,rating layout
import json  # read JSON lines
from typing import Any, Callable, Dict, Iterable, List, Set, Tuple  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our Movie data class used across the project
from .models import Movie  # validated movie record
from .errors import MovieValidationError  # raised for malformed records

# Console logging
from loguru import logger  # console logger


class DataLoader:
	"""
	Loads movie records and validates them.
	In strict mode the first bad record aborts the load; otherwise it is logged and skipped.
	"""

	CSV_COLUMNS = ('title', 'genres', 'description', 'year', 'rating')  # expected order

	def __init__(self, strict: bool = True):
		"""Initialize the loader; strict decides whether bad records raise or are skipped."""
		self.strict = strict  # failure policy for malformed records

	def load_movies_from_csv(self, filepath: str) -> List[Movie]:
		"""
		Load movies from a CSV file with a header row followed by
		title, genres, description, year, rating records.
		The genres column holds a comma-separated list (quoted in the file).
		"""
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		with open(filepath, 'r', encoding='utf-8', newline='') as f:
			reader = csv.reader(f)
			header = next(reader, None)  # skip header row
			if header is None:
				raise MovieValidationError(f"{filepath}: file is empty, expected a header row")
			# Data starts on line 2, right after the header
			rows = ((line_num, row) for line_num, row in enumerate(reader, 2) if row)  # tolerate blank lines
			movies = self._collect(rows, self._record_from_row, filepath)

		logger.info(f"[DataLoader] Successfully loaded {len(movies)} movies.")  # summary
		return movies

	def load_movies_from_jsonl(self, filepath: str) -> List[Movie]:
		"""
		Load movies from a JSON Lines (JSONL) file where each line is one JSON object
		with title, genres, description (or overview), year and rating.
		"""
		filepath = Path(filepath)  # normalize path

		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		with open(filepath, 'r', encoding='utf-8') as f:
			lines = ((line_num, line) for line_num, line in enumerate(f, 1) if line.strip())  # tolerate blank lines
			movies = self._collect(lines, self._record_from_json, filepath)

		logger.info(f"[DataLoader] Successfully loaded {len(movies)} movies.")  # summary
		return movies

	def _collect(
		self,
		records: Iterable[Tuple[int, Any]],
		to_dict: Callable[[Any], Dict],
		filepath: Path,
	) -> List[Movie]:
		"""
		Turn raw (line number, payload) records into Movies, enforcing validation and unique titles.
		Errors carry the line number so the offending record is easy to find.
		"""
		movies: List[Movie] = []  # accumulator
		seen_titles: Set[str] = set()  # titles are the similarity identifiers
		for line_num, raw in records:
			try:
				movie = self._parse_movie_data(to_dict(raw))  # convert payload -> Movie
				if movie.title in seen_titles:
					raise MovieValidationError(f"duplicate title: {movie.title}")
			except (MovieValidationError, json.JSONDecodeError) as e:
				message = f"{filepath}:{line_num}: {e}"
				if self.strict:
					raise MovieValidationError(message) from e
				logger.warning(f"[DataLoader] Skipping record | {message}")  # lenient mode
				continue
			seen_titles.add(movie.title)
			movies.append(movie)
		return movies

	def _record_from_row(self, row: List[str]) -> Dict:
		"""Map a CSV row onto the column names, rejecting rows of the wrong width."""
		if len(row) != len(self.CSV_COLUMNS):
			raise MovieValidationError(
				f"expected {len(self.CSV_COLUMNS)} columns, got {len(row)}"
			)
		return dict(zip(self.CSV_COLUMNS, row))

	def _record_from_json(self, line: str) -> Dict:
		"""Parse one JSON line; non-object payloads are rejected."""
		data = json.loads(line)
		if not isinstance(data, dict):
			raise MovieValidationError("expected a JSON object")
		return data

	def _parse_movie_data(self, data: Dict) -> Movie:
		"""
		Convert a raw dictionary into a validated Movie.
		Numeric fields must parse; everything else is checked by Movie.create.
		"""
		genres = self._parse_comma_separated(data.get('genres', []))  # list of genres
		description = data.get('description')
		if description is None:
			description = data.get('overview', '')  # JSONL datasets often call it overview

		return Movie.create(
			title=str(data.get('title') or '').strip(),
			genres=genres,
			description=str(description or ''),
			year=self._parse_number(data.get('year'), int, 'year'),
			rating=self._parse_number(data.get('rating'), float, 'rating'),
		)

	def _parse_number(self, value, cast, field_name: str):
		"""Parse a numeric field, raising a validation error instead of silently defaulting."""
		try:
			return cast(str(value).strip())
		except (TypeError, ValueError):
			raise MovieValidationError(f"{field_name} is not a valid number: {value!r}") from None

	def _parse_comma_separated(self, value) -> List[str]:
		"""
		Normalize a value that may be None, a list, or a comma-separated string
		into a list of clean strings.
		"""
		if value is None:  # missing field
			return []  # treat as empty list
		if isinstance(value, list):  # already a list
			return [str(item).strip() for item in value if item]  # clean each
		if isinstance(value, str):  # comma-separated string
			return [item.strip() for item in value.split(',') if item.strip()]  # split/trim
		return []  # any other type becomes empty

	def get_all_genres(self, movies: List[Movie]) -> List[str]:
		"""Return a sorted list of all unique genres in the dataset."""
		genres = set()  # unique genres
		for movie in movies:  # iterate
			genres.update(movie.genres)
		return sorted(list(genres))  # sorted output

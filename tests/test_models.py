"""
Unit tests for Movie construction and field validation.
Run: pytest tests/test_models.py
"""

import pytest

from moviesim import config
from moviesim.errors import MovieValidationError
from moviesim.models import CANONICAL_GENRES, Movie, is_valid_genre


def create(**overrides):
	fields = dict(title="The Matrix", genres=["Action", "Sci-Fi"], description="hackers", year=1999, rating=8.7)
	fields.update(overrides)
	return Movie.create(**fields)


def test_create_valid_movie():
	movie = create()
	assert movie.title == "The Matrix"
	assert movie.genres == ["Action", "Sci-Fi"]
	assert movie.year == 1999


def test_canonical_genres_are_immutable_and_ordered():
	assert isinstance(CANONICAL_GENRES, tuple)
	assert CANONICAL_GENRES[0] == "Action"
	assert CANONICAL_GENRES[3] == "Sci-Fi"
	assert is_valid_genre("Documentary")
	assert not is_valid_genre("sci-fi")


@pytest.mark.parametrize("overrides, fragment", [
	({"title": ""}, "title"),
	({"title": "   "}, "title"),
	({"year": 1887}, "release year"),
	({"rating": -0.1}, "rating"),
	({"rating": 10.5}, "rating"),
	({"rating": float("nan")}, "rating"),
	({"genres": []}, "at least one genre"),
	({"genres": ["Action", "Western"]}, "invalid genre: Western"),
])
def test_invalid_fields(overrides, fragment):
	with pytest.raises(MovieValidationError, match=fragment):
		create(**overrides)


def test_boundaries_are_inclusive(monkeypatch):
	monkeypatch.setattr(config, "MAX_RELEASE_YEAR", 2025)
	assert create(year=1888).year == 1888
	assert create(year=2025).year == 2025
	assert create(rating=0.0).rating == 0.0
	assert create(rating=10.0).rating == 10.0
	with pytest.raises(MovieValidationError):
		create(year=2026)


def test_validation_error_is_value_error():
	with pytest.raises(ValueError):
		create(year=1500)


def test_str_lists_every_field():
	text = str(create())
	assert "Title: The Matrix" in text
	assert "Genres: Action, Sci-Fi" in text
	assert "ReleaseYear: 1999" in text

"""
Runtime settings for the Movie Similarity Engine.
Every value can be overridden with a MOVIESIM_* environment variable.
"""

import os  # environment lookups
from datetime import date  # current year for the release-year ceiling
from pathlib import Path  # filesystem-safe paths

# Project root (one level above this package)
ROOT_DIR = Path(__file__).resolve().parents[1]

DATA_PATH = Path(os.getenv("MOVIESIM_DATA_PATH", str(ROOT_DIR / "data" / "movies.csv")))  # default dataset

MIN_RELEASE_YEAR = int(os.getenv("MOVIESIM_MIN_YEAR", "1888"))  # first known film
MAX_RELEASE_YEAR = int(os.getenv("MOVIESIM_MAX_YEAR", str(date.today().year)))  # inclusive
MIN_RATING = 0.0
MAX_RATING = 10.0

GENRE_REPORT_THRESHOLD = float(os.getenv("MOVIESIM_GENRE_THRESHOLD", "0.4"))  # only show relatively similar movies
TFIDF_REPORT_THRESHOLD = float(os.getenv("MOVIESIM_TFIDF_THRESHOLD", "0.0"))  # any shared vocabulary

TITLE_MATCH_THRESHOLD = int(os.getenv("MOVIESIM_TITLE_MATCH_THRESHOLD", "85"))  # rapidfuzz WRatio cutoff

API_URL = os.getenv("MOVIESIM_API_URL", "http://localhost:8000")  # used by the Streamlit UI

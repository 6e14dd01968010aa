"""
FastAPI server exposing the movie similarity API.
Endpoints:
- GET /health: basic health check
- GET /movies: titles in the loaded corpus
- GET /similarity?a=...&b=...&method=tfidf|genre: similarity between two movies
- GET /movies/{title:path}/similar?method=...&threshold=...: movies above a score threshold

Startup loads the dataset configured by MOVIESIM_DATA_PATH (data/movies.csv by default)
and computes the TF-IDF vectors once.
"""

# Import standard libraries for timing and paths
import time  # measure startup and request latencies
from typing import List, Literal, Optional  # precise typing for clarity
from pathlib import Path  # path-safe filesystem handling

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, HTTPException, Query  # FastAPI primitives
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for data loading and similarity
from moviesim import config  # data path
from moviesim.data_loader import DataLoader  # loads and validates movies
from moviesim.errors import MovieNotFoundError  # unknown titles -> 404
from moviesim.similarity_engine import SimilarityEngine  # similarity facade

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Instantiate the FastAPI application with metadata
app = FastAPI(title="Movie Similarity API", version="1.0.0")  # web app

# Globals that hold the engine instance and measured startup time
ENGINE: Optional[SimilarityEngine] = None  # will point to the initialized engine
STARTUP_TIME_S: float = 0.0  # measures how long startup took

Method = Literal["tfidf", "genre"]


# Pydantic model that describes the shape of a single movie in responses
class MovieOut(BaseModel):
	title: str  # unique title
	year: int  # release year
	genres: List[str]  # list of genres
	rating: float  # rating 0..10
	description: Optional[str] = None  # short synopsis snippet


class SimilarityResponse(BaseModel):
	a: str  # resolved first title
	b: str  # resolved second title
	method: str  # tfidf or genre
	score: float  # cosine similarity


class SimilarItem(BaseModel):
	movie: MovieOut  # compared movie
	score: float  # cosine similarity


class SimilarResponse(BaseModel):
	title: str  # resolved reference title
	method: str  # tfidf or genre
	threshold: float  # scores must be strictly greater than this
	results: List[SimilarItem]  # corpus order


def _movie_out(m) -> MovieOut:
	return MovieOut(
		title=m.title,
		year=m.year,
		genres=m.genres,
		rating=m.rating,
		description=m.description[:350] if m.description else None,
	)


def _require_engine() -> SimilarityEngine:
	if ENGINE is None:  # engine must be ready to serve
		logger.warning("[API] Request received but engine not initialized")  # guard log
		raise HTTPException(status_code=503, detail="Engine not initialized")
	return ENGINE


def _load_movies(data_path: Path):
	loader = DataLoader()  # create loader instance
	if data_path.suffix == '.jsonl':
		return loader.load_movies_from_jsonl(str(data_path))
	return loader.load_movies_from_csv(str(data_path))


# FastAPI startup hook to initialize the engine once
@app.on_event("startup")
async def startup_event():
	"""Load the dataset and build the similarity engine."""
	global ENGINE, STARTUP_TIME_S  # refer to module-level globals
	start = time.time()  # start timer for startup latency

	data_path = Path(config.DATA_PATH)
	logger.info(f"[API] Startup: loading movies from {data_path}...")  # log intent
	movies = _load_movies(data_path)  # read dataset
	ENGINE = SimilarityEngine(movies)  # computes TF-IDF vectors

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s with {len(movies)} movies.")  # summary log


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness and readiness checks."""
	return {
		"status": "ok",  # constant indicator
		"engine_ready": ENGINE is not None,  # True if engine initialized
		"movies": len(ENGINE.movies) if ENGINE is not None else 0,  # corpus size
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


@app.get("/movies", response_model=List[MovieOut])
async def list_movies():
	"""Return every movie in corpus order."""
	engine = _require_engine()
	return [_movie_out(m) for m in engine.movies]


@app.get("/similarity", response_model=SimilarityResponse)
async def similarity(
	a: str = Query(..., description="First movie title"),
	b: str = Query(..., description="Second movie title"),
	method: Method = "tfidf",
):
	"""Cosine similarity between two movies by description (tfidf) or genres (genre)."""
	engine = _require_engine()
	try:
		title_a = engine.resolve_title(a)
		title_b = engine.resolve_title(b)
	except MovieNotFoundError as e:
		raise HTTPException(status_code=404, detail=str(e))

	score = engine.similarity(title_a, title_b, method)
	logger.debug(f"[API] /similarity '{title_a}' vs '{title_b}' method={method} -> {score:.3f}")
	return SimilarityResponse(a=title_a, b=title_b, method=method, score=round(score, 6))


@app.get("/movies/{title:path}/similar", response_model=SimilarResponse)  # titles may contain "/"
async def similar(title: str, method: Method = "tfidf", threshold: Optional[float] = None):
	"""List movies whose similarity to `title` is above the threshold."""
	engine = _require_engine()
	if threshold is None:
		threshold = config.GENRE_REPORT_THRESHOLD if method == "genre" else config.TFIDF_REPORT_THRESHOLD

	# Time the comparison for latency insight
	start = time.time()  # start timer
	try:
		reference = engine.resolve_title(title)
	except MovieNotFoundError as e:
		raise HTTPException(status_code=404, detail=str(e))
	results = engine.compare(reference, method=method, threshold=threshold)
	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /similar '{reference}' served {len(results)} results in {elapsed_ms:.2f} ms")  # summary

	return SimilarResponse(
		title=reference,
		method=method,
		threshold=threshold,
		results=[SimilarItem(movie=_movie_out(r.movie), score=round(r.score, 6)) for r in results],
	)

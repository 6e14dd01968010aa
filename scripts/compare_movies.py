"""
Compare one movie against the rest of the dataset.

This script:
1) Loads movies from data/movies.csv (or --data)
2) Reports genre cosine similarities above 0.4
3) Reports TF-IDF description similarities above 0

Usage:
    python -m scripts.compare_movies
    python -m scripts.compare_movies --title "Alien" --data data/movies.jsonl
"""

import argparse  # command-line options
import sys  # exit status
import time  # measure step timings
from pathlib import Path  # filesystem-safe paths

from loguru import logger  # console logging

from moviesim import config  # default paths and thresholds
from moviesim.data_loader import DataLoader  # data ingestion
from moviesim.errors import MovieNotFoundError  # unknown --title
from moviesim.similarity_engine import SimilarityEngine  # similarity facade


def load_movies(data_path: Path):
	loader = DataLoader()
	if data_path.suffix == '.jsonl':
		return loader.load_movies_from_jsonl(str(data_path))
	return loader.load_movies_from_csv(str(data_path))


def main(argv=None):
	parser = argparse.ArgumentParser(description="Movie similarity report")
	parser.add_argument('--data', type=Path, default=config.DATA_PATH, help="CSV or JSONL movie file")
	parser.add_argument('--title', default=None, help="reference movie (defaults to the first one)")
	args = parser.parse_args(argv)

	logger.info("Movie recommender system starting...")

	t0 = time.time()  # start timer
	movies = load_movies(args.data)
	logger.info(f"Loaded {len(movies)} movies")

	engine = SimilarityEngine(movies)
	logger.info(f"Engine ready in {time.time() - t0:.2f}s")

	try:
		reference = engine.resolve_title(args.title, fuzzy=True) if args.title else movies[0].title
	except MovieNotFoundError as e:
		logger.error(str(e))
		return 1
	if args.title and reference != args.title:
		logger.info(f"Using closest title match '{reference}' for '{args.title}'")

	logger.info(f"Cosine Similarities with {reference}:")
	for result in engine.compare(reference, method="genre"):
		logger.info(f"- {result.movie.title}: {result.score:.2f}")

	logger.info(f"TF-IDF Similarities with {reference}:")
	for result in engine.compare(reference, method="tfidf"):
		logger.info(f"- {result.movie.title}: {result.score:.2f}")

	return 0


if __name__ == '__main__':
	sys.exit(main())  # invoke report

"""
Streamlit UI for the Movie Similarity Engine.
Calls the local FastAPI server (MOVIESIM_API_URL, http://localhost:8000 by default),
or runs locally by loading the dataset and building the engine in-process.

Run API (optional):   uvicorn api:app --reload
Run UI:                streamlit run streamlit_app.py
"""

# HTTP client to call the API when running in API mode
import requests  # make web requests to the FastAPI server
# Streamlit framework to build a simple interactive UI
import streamlit as st  # UI primitives
# Typing to make function signatures clearer
from typing import Optional  # indicates values can be None

# Local engine imports for fallback/local mode (when API isn't used)
from moviesim import config  # data path and API URL
from moviesim.data_loader import DataLoader  # load movies from file
from moviesim.similarity_engine import SimilarityEngine  # genre and TF-IDF similarity

# Configure Streamlit page (title and layout width)
st.set_page_config(page_title="Movie Similarity", layout="wide")  # wide layout

# Main page title
st.title("🎬 Movie Similarity Explorer")  # friendly header


# Cache the local engine so the corpus is processed once per session
@st.cache_resource(show_spinner=True)
def init_local_engine() -> Optional[SimilarityEngine]:
	"""Create a local SimilarityEngine from the configured dataset."""
	try:
		loader = DataLoader()  # create loader
		data_path = config.DATA_PATH
		if data_path.suffix == '.jsonl':
			movies = loader.load_movies_from_jsonl(str(data_path))
		else:
			movies = loader.load_movies_from_csv(str(data_path))
		return SimilarityEngine(movies)  # success
	except Exception as e:
		# Show an error in the UI so users know local mode failed
		st.error(f"Failed to initialize local engine: {e}")
		return None  # signal failure


# Sidebar contains configuration controls
with st.sidebar:
	st.header("Settings")  # section label
	method = st.radio("Method", ["tfidf", "genre"], horizontal=True)  # similarity path
	default_threshold = config.GENRE_REPORT_THRESHOLD if method == "genre" else config.TFIDF_REPORT_THRESHOLD
	threshold = st.slider("Threshold", min_value=0.0, max_value=1.0, value=float(default_threshold), step=0.05)
	api_url = st.text_input("API URL", config.API_URL)  # where the API lives
	use_local = st.toggle("Use local engine", value=False, help="If enabled or API is unreachable, the app runs fully locally.")

# If not forcing local, check quickly whether the API is reachable
api_available = False  # default assumption
if not use_local:
	try:
		h = requests.get(f"{api_url}/health", timeout=3)  # ping API health endpoint
		api_available = h.ok  # True if server responded 200 OK
	except requests.RequestException:
		api_available = False  # health check failed
		st.sidebar.info("API not reachable; will use local engine.")  # inform user

local_engine: Optional[SimilarityEngine] = None  # placeholder
if use_local or not api_available:
	with st.spinner("Initializing local engine..."):
		local_engine = init_local_engine()
		if local_engine is not None:
			st.sidebar.success("Local engine ready.")  # success note
		else:
			st.sidebar.error("Local engine failed to initialize.")  # error note


def fetch_titles():
	if local_engine is not None:
		return local_engine.titles()
	resp = requests.get(f"{api_url}/movies", timeout=30)
	resp.raise_for_status()
	return [m["title"] for m in resp.json()]


def fetch_similar(title: str):
	"""Return a payload shaped like the API's /movies/{title}/similar response."""
	if local_engine is not None:
		results = local_engine.compare(title, method=method, threshold=threshold)
		return {
			"title": title,
			"results": [
				{"movie": {"title": r.movie.title, "year": r.movie.year, "genres": r.movie.genres}, "score": r.score}
				for r in results
			],
		}
	resp = requests.get(
		f"{api_url}/movies/{requests.utils.quote(title, safe='')}/similar",
		params={"method": method, "threshold": threshold},
		timeout=60,
	)
	resp.raise_for_status()
	return resp.json()


try:
	titles = fetch_titles()
except requests.RequestException as e:
	st.error(f"API request failed: {e}")
	titles = []

if titles:
	reference = st.selectbox("Reference movie", titles)  # movie to compare against
	other = st.selectbox("Compare with (optional)", ["-"] + titles)  # pairwise score

	if st.button("Compare", type="primary"):
		with st.spinner("Computing similarities..."):
			try:
				if other != "-":
					if local_engine is not None:
						score = local_engine.similarity(reference, other, method)
					else:
						resp = requests.get(
							f"{api_url}/similarity", params={"a": reference, "b": other, "method": method}, timeout=30
						)
						resp.raise_for_status()
						score = resp.json()["score"]
					st.metric(f"{method} similarity: {reference} vs {other}", f"{score:.3f}")
					st.divider()

				payload = fetch_similar(reference)
				st.success(f"{len(payload['results'])} movies above {threshold:.2f}")
				for item in payload["results"]:
					movie = item["movie"]
					st.write(f"- **{movie['title']}** ({movie['year']}) · {', '.join(movie['genres'])} · {item['score']:.2f}")
			except requests.RequestException as e:  # network/API errors
				st.error(f"API request failed: {e}")  # show human-friendly message

# Show a footer indicator of current mode
st.sidebar.markdown("---")  # separator
if local_engine is not None:
	st.sidebar.caption("Mode: Local engine")  # mode label
else:
	st.sidebar.caption("Mode: API client (ensure uvicorn api:app --reload is running)")  # mode label

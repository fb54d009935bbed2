"""Runtime settings read from the environment."""
import os

API_BASE = os.getenv(
    "ROSTER_API_BASE", "https://fsa-puppy-bowl.herokuapp.com/api"
).rstrip("/")
COHORT_NAME = os.getenv("ROSTER_COHORT", "2306-FSA-ET-WEB-FT-SF")
API_URL = f"{API_BASE}/{COHORT_NAME}"

REQUEST_TIMEOUT = float(os.getenv("ROSTER_REQUEST_TIMEOUT", "10"))

# The first client fetched single players from `/players<id>`; keep it reachable
LEGACY_SINGLE_PLAYER_PATH = (
    os.getenv("ROSTER_LEGACY_SINGLE_PLAYER_PATH", "").lower() == "true"
)

PORT = int(os.environ.get("PORT", 8050))
DEBUG = os.getenv("ROSTER_DEBUG", "").lower() == "true"

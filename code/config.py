import os

from dotenv import load_dotenv

# Example .env:
# OSRM_URL=http://localhost:5000
# OSRM_PROFILE=bike
load_dotenv()

OSRM_URL = os.getenv("OSRM_URL", "https://routing.openstreetmap.de/routed-bike")
OSRM_PROFILE = os.getenv("OSRM_PROFILE", "driving")  # routed-bike serves its bike profile as "driving"
OVERPASS_URL = os.getenv("OVERPASS_URL", "https://overpass-api.de/api/interpreter")

HTTP_TIMEOUT_S = float(os.getenv("HTTP_TIMEOUT_S", "25"))
RECOMPUTE_DEBOUNCE_S = float(os.getenv("RECOMPUTE_DEBOUNCE_S", "1.0"))

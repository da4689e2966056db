from pathlib import Path
import os, sys
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables (real env vars win over secret.env)
load_dotenv(BASE_DIR / "secret.env")

OMDB_API_KEY = os.getenv("OMDB_API_KEY")
OMDB_URL     = os.getenv("OMDB_URL", "https://www.omdbapi.com/")

# File / folder paths
LOG_PATH = Path(os.getenv("MOVIE_EXPLORER_LOG", BASE_DIR / "movie_explorer.log"))

# UI constants
WINDOW_TITLE     = "🎬 Movie Explorer"
BACKGROUND_COLOR = "#101820"
TEXT_COLOR       = "#E0E0E0"
ACCENT_COLOR     = "#64B5F6"       # light blue
INPUT_BACKGROUND = "#1E2A38"
POSTER_HEIGHT    = 400


# Problems found while reading the env; main() copies them into the log
SETTINGS_WARNINGS: list[str] = []


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        msg = f"{name}={raw!r} is not a number; using {default}"
        SETTINGS_WARNINGS.append(msg)
        print(msg, file=sys.stderr)
        return default


OMDB_TIMEOUT = _env_float("OMDB_TIMEOUT", 10.0)

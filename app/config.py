"""Configuration from environment."""

from deps import List, load_dotenv, os

load_dotenv()

DEFAULT_MAX_FIXES = 50000


def get_log_level() -> str:
    """Root log level name. Default: INFO."""
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_cors_origins() -> List[str]:
    """Allowed CORS origins, comma separated. Default: *."""
    raw = os.environ.get("CORS_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def get_host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip()


def get_port() -> int:
    try:
        return int(os.environ.get("PORT", "8000"))
    except ValueError:
        return 8000


def get_max_fixes() -> int:
    """Upper bound on fix messages accepted in one request."""
    try:
        value = int(os.environ.get("MAX_FIXES", str(DEFAULT_MAX_FIXES)))
    except ValueError:
        return DEFAULT_MAX_FIXES
    return value if value > 0 else DEFAULT_MAX_FIXES

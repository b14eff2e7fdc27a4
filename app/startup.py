"""Startup logging setup and configuration checks."""

from deps import Path, logging
from .config import get_cors_origins, get_log_level, get_max_fixes

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure the root logger from LOG_LEVEL (unknown names fall back to INFO)."""
    level_name = get_log_level()
    level = logging.getLevelName(level_name)
    known = isinstance(level, int)
    if not known:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)
    if not known:
        logger.warning("Unknown LOG_LEVEL %r, using INFO", level_name)


def validate_config() -> None:
    """Log the effective configuration and warn when .env is missing."""
    if not Path(".env").exists():
        logger.info(".env file not found; using environment and defaults.")
    if get_cors_origins() == ["*"]:
        logger.warning("CORS_ORIGINS not set; allowing all origins.")
    logger.info("Max fix messages per request: %d", get_max_fixes())

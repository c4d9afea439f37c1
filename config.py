import logging
import os

from dotenv import load_dotenv

from constants import DEFAULT_USER_AGENT

load_dotenv()

logger = logging.getLogger(__name__)


def env_positive_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        value = 0
    if not value > 0:
        logger.warning("Ignoring %s=%r, expected a positive number; using %s", name, raw, default)
        return default
    return value


def env_log_level(name: str, default: str = "INFO") -> str:
    raw = os.getenv(name, default).strip().upper()
    if not isinstance(logging.getLevelName(raw), int):
        logger.warning("Ignoring unknown %s=%r; using %s", name, raw, default)
        return default
    return raw


class Config:
    FETCH_TIMEOUT: float = env_positive_float("RECIPE_FETCH_TIMEOUT", 15.0)
    USER_AGENT: str = os.getenv("RECIPE_USER_AGENT") or DEFAULT_USER_AGENT
    LOG_LEVEL: str = env_log_level("LOG_LEVEL")


config = Config()

"""Runtime settings read from the environment. A local ``.env`` file is honoured."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Limits applied by the converters."""

    max_abs_year: int = 1_000_000  # Largest |year| accepted by either calendar
    max_search_steps: int = 64  # Year bracketing steps before giving up


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from ``LUACH_*`` environment variables.

    The result is cached; call ``get_settings.cache_clear()`` to reload.

    Raises:
        ValueError: If a variable is set but is not a positive integer.
    """
    load_dotenv()
    settings = Settings(
        max_abs_year=_int_env("LUACH_MAX_ABS_YEAR", Settings.max_abs_year),
        max_search_steps=_int_env("LUACH_MAX_SEARCH_STEPS", Settings.max_search_steps),
    )
    logger.debug("Loaded settings: %s", settings)
    return settings

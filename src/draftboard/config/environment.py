"""Environment overrides for runtime knobs."""

from __future__ import annotations

import logging
import os


logger = logging.getLogger(__name__)

IMPORT_YIELD_EVERY_ENV = "DRAFTBOARD_IMPORT_YIELD_EVERY"
STATS_API_URL_ENV = "DRAFTBOARD_STATS_API_URL"

IMPORT_YIELD_EVERY_DEFAULT = 25
STATS_API_URL_DEFAULT = "https://statsapi.mlb.com/api/v1"


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def import_yield_every() -> int:
    return _env_int(IMPORT_YIELD_EVERY_ENV, IMPORT_YIELD_EVERY_DEFAULT, min_value=1)


def stats_api_url() -> str:
    return os.getenv(STATS_API_URL_ENV) or STATS_API_URL_DEFAULT

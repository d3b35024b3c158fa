import logging
import os

logger = logging.getLogger(__name__)


def _canon_prefix(val):
    """
    Normalize API prefix to always be exactly like '/api':
      - defaults to '/api' when unset/empty
      - ensures a single leading slash
      - removes any trailing slash (except for root)
    """
    val = (val or "/api").strip()
    if not val.startswith("/"):
        val = "/" + val
    if len(val) > 1 and val.endswith("/"):
        val = val[:-1]
    return val


def _parse_positive_int(env_var: str, default: int) -> int:
    raw_value = os.getenv(env_var)
    if raw_value is None or not raw_value.strip():
        return default

    try:
        value = int(raw_value)
    except ValueError:
        logger.warning(
            "%s is not a valid integer (got %r); defaulting to %d",
            env_var,
            raw_value,
            default,
        )
        return default

    if value < 1:
        logger.warning("%s must be at least 1; defaulting to %d", env_var, default)
        return default

    return value


API_PREFIX = _canon_prefix(os.getenv("API_PREFIX"))

# Best of three; a third set may be a super tiebreak.
MAX_SETS_PER_MATCH = _parse_positive_int("MAX_SETS_PER_MATCH", 3)
MAX_GAMES_PER_SET = _parse_positive_int("MAX_GAMES_PER_SET", 99)

import os


def _canon_prefix(val):
    """
    Normalize a channel prefix to look like 'lanescore':
      - defaults to 'lanescore' when unset/empty
      - strips surrounding whitespace and any trailing ':' separators
    """
    val = (val or "lanescore").strip().rstrip(":")
    return val or "lanescore"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _rate_env(name: str, default: float = 0.0) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


DEFAULT_HANDICAP_BASE = _int_env("HANDICAP_BASE", 200)

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379")
SCORE_CHANNEL_PREFIX = _canon_prefix(os.getenv("SCORE_CHANNEL_PREFIX"))

SENTRY_DSN = os.getenv("SENTRY_DSN")
SENTRY_ENVIRONMENT = (os.getenv("SENTRY_ENVIRONMENT") or "").strip() or None
SENTRY_TRACES_SAMPLE_RATE = _rate_env("SENTRY_TRACES_SAMPLE_RATE")

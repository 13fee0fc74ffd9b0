"""
Configuration, loaded from the environment (.env supported).
"""
import os
from pathlib import Path

from dotenv import load_dotenv

from utils.errors import ConfigurationError

load_dotenv()


def _int_env(name: str, default=None):
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


# ── Logging ──────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
_log_file = os.getenv("LOG_FILE", "").strip()
LOG_FILE = Path(_log_file) if _log_file else None

# ── Mock data ────────────────────────────────────────────────────────
# Unset means fresh random data on every refresh.
MOCK_SEED = _int_env("MOCK_SEED")
MATCHES_PER_LEAGUE = _int_env("MATCHES_PER_LEAGUE", 6)
if MATCHES_PER_LEAGUE < 1:
    raise ConfigurationError("MATCHES_PER_LEAGUE must be at least 1")

# ── Export ───────────────────────────────────────────────────────────
EXPORT_FILE_NAME = os.getenv("EXPORT_FILE_NAME", "scoutpredict_export.csv")

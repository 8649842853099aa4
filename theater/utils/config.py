"""Load and read environment configuration. Uses python-dotenv.

Only the Streamlit adapter and logging read configuration; pricing has no knobs.
Callers should use the accessor functions below rather than reading `os.environ`
directly.
"""

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
import os


def _project_root() -> Path:
    """Resolve project root (the directory holding the theater package)."""
    return Path(__file__).resolve().parent.parent.parent


def load_config() -> None:
    """
    Load .env from project root. Idempotent; safe to call multiple times.
    Uses override=True so .env values take precedence over existing env vars.
    """
    env_path = _project_root() / ".env"
    load_dotenv(env_path, override=True)


def get_optional(key: str, default: str = "") -> str:
    """Get optional env var; return default if missing or empty."""
    load_config()
    val = os.getenv(key, "").strip()
    return val if val else default


# --- Public config accessors ---

def log_level() -> int:
    """Optional: THEATER_LOG_LEVEL as a logging level. Default INFO."""
    name = get_optional("THEATER_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for names it does not know
    return level if isinstance(level, int) else logging.INFO


def log_file() -> Optional[Path]:
    """Optional: THEATER_LOG_FILE path for a file log handler."""
    val = get_optional("THEATER_LOG_FILE", "")
    return Path(val) if val else None


def project_root() -> Path:
    """Project root directory."""
    return _project_root()

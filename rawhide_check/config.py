"""Centralised settings for rawhide-check.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).  Command-line options
take precedence over both for a single run.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from rawhide_check import __version__

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

DEFAULT_BASE_URL = "https://packages.fedoraproject.org/pkgs"
DEFAULT_DISTRIBUTION = "Fedora Rawhide"


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Package tracker
    # ------------------------------------------------------------------
    base_url: str = field(
        default_factory=lambda: os.environ.get("RAWHIDE_CHECK_BASE_URL", DEFAULT_BASE_URL)
    )
    distribution: str = field(
        default_factory=lambda: os.environ.get(
            "RAWHIDE_CHECK_DISTRIBUTION", DEFAULT_DISTRIBUTION
        )
    )

    # ------------------------------------------------------------------
    # HTTP client
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "RAWHIDE_CHECK_USER_AGENT", f"rawhide-check/{__version__}"
        )
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("RAWHIDE_CHECK_LOG_LEVEL", "INFO").upper()
    )


# Module-level singleton — import this everywhere:
#   from rawhide_check.config import settings
settings = Settings()

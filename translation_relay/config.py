"""Environment variable loading with defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .envdefault first (base defaults), then .env (overrides)
_base_dir = Path(__file__).resolve().parent.parent
load_dotenv(_base_dir / ".envdefault")
load_dotenv(_base_dir / ".env", override=True)

# Provider
TRANSLATION_PROVIDER: str = os.environ.get("TRANSLATION_PROVIDER", "google")

# Google Cloud Translation
GOOGLE_API_KEY: str = os.environ.get("GOOGLE_API_KEY", "")
PROXY_URL: str = os.environ.get("PROXY_URL", "")

# Seconds; 0 disables the timeout
_timeout = float(os.environ.get("REQUEST_TIMEOUT", "30"))
REQUEST_TIMEOUT: float | None = _timeout if _timeout > 0 else None

# Languages used by the command-line entry point (empty means "en")
SOURCE_LANG: str = os.environ.get("SOURCE_LANG", "")
TARGET_LANG: str = os.environ.get("TARGET_LANG", "")

# Logging
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")


# ── HTTP ──────────────────────────────────────────────────
HOST: str = os.getenv("HOST", "127.0.0.1")
PORT: int = int(os.getenv("PORT", "3000"))
DEBUG: bool = _as_bool(os.getenv("DEBUG", "false"))
API_PREFIX: str = os.getenv("API_PREFIX", "/api/v1").rstrip("/")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Store ─────────────────────────────────────────────────
# Seed a freshly created store with the fixture cars.
SEED_FIXTURES: bool = _as_bool(os.getenv("SEED_FIXTURES", "true"))

"""
Runtime settings for the storefront backend, read once from the environment.

HOST                  interface to bind (default 127.0.0.1)
PORT                  port to listen on (default 3001)
LOG_LEVEL             loguru level for stderr output (default INFO)
RECOMMENDATION_LIMIT  products attached to each assistant reply (default 3)
RANDOM_SEED           seed for the fallback shuffle; unset means nondeterministic
CORS_ORIGINS          comma-separated allowed origins (default *)
"""

import os

HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "3001"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
RECOMMENDATION_LIMIT = int(os.environ.get("RECOMMENDATION_LIMIT", "3"))
_seed = os.environ.get("RANDOM_SEED", "").strip()
RANDOM_SEED = int(_seed) if _seed else None
CORS_ORIGINS = [origin.strip() for origin in os.environ.get("CORS_ORIGINS", "*").split(",") if origin.strip()]

"""
Centralized configuration loader.

Reads the ENVIRONMENT env-var and merges the correct environment module
(config_prod or config_local) into a single settings namespace.

Usage:
    from configs.config import get_config
    cfg = get_config()
    print(cfg.MONGODB_URL)
"""

import os
import importlib
import logging
from types import SimpleNamespace

logger = logging.getLogger(__name__)

# ── Environment detection ────────────────────────────────────────────────
ENVIRONMENT = os.getenv("ENVIRONMENT", "production")

# ── Shared constants (environment-independent) ───────────────────────────

# Database
MONGODB_URL = os.getenv("MONGODB_URL", "mongodb://127.0.0.1:27017/bangla_digest")
DATABASE_NAME = os.getenv("DATABASE_NAME", "bangla_digest")
JOBS_COLLECTION = "processing_jobs"

# Security
ADMIN_API_KEY = os.getenv("ADMIN_API_KEY", "change-me-in-production")
MAX_UPLOAD_SIZE = 25 * 1024 * 1024  # 25 MB per file, the Whisper upload cap

# Rate limits (slowapi syntax)
SUBMIT_RATE_LIMIT = "20/hour"
POLL_RATE_LIMIT = "120/minute"
ADMIN_RATE_LIMIT = "10/minute"

# Provider credentials (server-side defaults, overridable per request)
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")

# Gemini / translation and summary
GEMINI_MODEL_NAME = os.getenv("GEMINI_MODEL_NAME", "gemini-2.0-flash")
PROMPT_MAX_CHARS = 30000
MAX_OUTPUT_TOKENS = 8000
TRANSLATION_TEMPERATURE = 0.3
SUMMARY_TEMPERATURE = 0.4

# Whisper / transcription
WHISPER_MODEL_NAME = "whisper-1"
TRANSCRIPTION_LANGUAGE = "en"

# Applied to every outbound provider request
PROVIDER_TIMEOUT_SECONDS = float(os.getenv("PROVIDER_TIMEOUT_SECONDS", "120"))

# Text extraction
PDF_MIN_TEXT_LENGTH = 50
PDF_MAX_TEXT_LENGTH = 50000
MIN_COMBINED_TEXT_LENGTH = 10

# Logging
LOG_FILE_APP = "app.log"
LOG_FILE_ERRORS = "errors.log"
LOG_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
LOG_BACKUP_COUNT = 5


# ── Config loader ────────────────────────────────────────────────────────

_config_cache = None


def get_config() -> SimpleNamespace:
    """
    Return a merged configuration namespace.

    Environment-specific values from config_local or config_prod
    override the shared defaults defined above.
    """
    global _config_cache
    if _config_cache is not None:
        return _config_cache

    # Start with all module-level constants
    base = {
        key: value
        for key, value in globals().items()
        if key.isupper() and not key.startswith("_")
    }

    # Overlay environment-specific settings
    env_module_name = (
        "configs.config_local" if ENVIRONMENT == "development"
        else "configs.config_prod"
    )
    try:
        env_module = importlib.import_module(env_module_name)
        for key in dir(env_module):
            if key.isupper():
                base[key] = getattr(env_module, key)
        logger.info("Loaded configuration from %s", env_module_name)
    except ImportError:
        logger.warning(
            "Environment config '%s' not found; using shared defaults.",
            env_module_name,
        )

    _config_cache = SimpleNamespace(**base)
    return _config_cache

"""
Shared utility functions and singletons used across multiple modules.
"""

import random
import string

from slowapi import Limiter
from slowapi.util import get_remote_address

# ── Shared rate-limiter instance ─────────────────────────────────────────
# Created here (not in main.py) so that route modules can import it
# without a circular dependency.
limiter = Limiter(key_func=get_remote_address)

JOB_ID_LENGTH = 12


def generate_job_id() -> str:
    """Generate an opaque job ID (e.g., 'job_a1b2c3d4e5f6')."""
    chars = string.ascii_lowercase + string.digits
    random_part = "".join(random.SystemRandom().choices(chars, k=JOB_ID_LENGTH))
    return f"job_{random_part}"


def resolve_credential(supplied, default):
    """Prefer a caller-supplied key, falling back to the configured default."""
    if supplied and supplied.strip():
        return supplied.strip()
    if default and default.strip():
        return default.strip()
    return None

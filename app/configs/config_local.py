"""
Development / local environment configuration overrides.

Only values that DIFFER from production need to be declared here.
The base config.py merges these on top of the production defaults.
"""

# FastAPI docs are enabled in development
DOCS_ENABLED = True

# Shorter provider timeout so a stalled call surfaces quickly while iterating
PROVIDER_TIMEOUT_SECONDS = 60.0

# Generous limits for manual testing
SUBMIT_RATE_LIMIT = "200/hour"

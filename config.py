"""
Configuration constants for the graph algorithm tracer.

Everything tunable lives here and can be overridden from the environment.
Never hardcode the secret key.
"""

import os
import secrets


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# =============================================================================
# Server Configuration
# =============================================================================

# Flask session signing key (random per process when unset)
SECRET_KEY = os.environ.get("GRAPH_TRACER_SECRET_KEY") or secrets.token_hex(32)

HOST = os.environ.get("GRAPH_TRACER_HOST", "127.0.0.1")
PORT = int(os.environ.get("GRAPH_TRACER_PORT", "5000"))
DEBUG = _env_bool("GRAPH_TRACER_DEBUG", False)

# =============================================================================
# Logging Configuration
# =============================================================================

LOG_LEVEL = os.environ.get("GRAPH_TRACER_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# =============================================================================
# Graph Defaults
# =============================================================================

# Directedness of a fresh session graph
DEFAULT_DIRECTED = _env_bool("GRAPH_TRACER_DIRECTED", False)

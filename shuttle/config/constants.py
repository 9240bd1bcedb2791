"""
Centralized constants for shuttle.

Paths, defaults and environment variable definitions live here so the
settings loader, the CLI and the tests share one source of truth.
"""

from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

SHUTTLE_CONFIG_DIR = Path.home() / ".config" / "shuttle"
SHUTTLE_CACHE_DIR = Path.home() / ".cache" / "shuttle"

DEFAULT_CONFIG_FILE = SHUTTLE_CONFIG_DIR / "config.json"
DEFAULT_CACHE_FILE = SHUTTLE_CACHE_DIR / "items.json"
DEFAULT_LOG_FILE = SHUTTLE_CONFIG_DIR / "shuttle.log"

# =============================================================================
# MATCHING
# =============================================================================

DEFAULT_MATCHER = "fuzzy"
VALID_MATCHERS = ["simple", "fuzzy"]

# =============================================================================
# PROVIDERS
# =============================================================================

DEFAULT_GITHUB_ENDPOINT = "https://api.github.com"
GITHUB_PAGE_SIZE = 100  # Only the first page is fetched
DEFAULT_HTTP_TIMEOUT_SECONDS = 10.0

# =============================================================================
# UI
# =============================================================================

# Rows kept above the selection when the list scrolls
SCROLL_CONTEXT_ROWS = 8
MAX_VISIBLE_ROWS = 50  # Rows rendered below the scroll offset

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================

ENV_VAR_DEFINITIONS = {
    "SHUTTLE_CONFIG": {
        "description": "Path to the JSON configuration file",
        "default": None,
        "valid_values": None,
    },
    "SHUTTLE_CACHE": {
        "description": "Path to the item cache snapshot",
        "default": None,
        "valid_values": None,
    },
    "SHUTTLE_MATCHER": {
        "description": "Matcher used to filter items",
        "default": None,
        "valid_values": VALID_MATCHERS,
    },
    "GITHUB_TOKEN": {
        "description": "Token sent to the GitHub API",
        "default": None,
        "valid_values": None,
        "sensitive": True,
    },
}

"""
Configuration constants for WikiWalker.

Tunable values are defined here. Overrides are read from environment
variables (a local .env file is picked up if present).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Trajectory Configuration
# =============================================================================

# A trajectory needs a source and at least one click
MIN_TRAJECTORY_LENGTH = 2

# Default number of clicks to predict from a starting article
DEFAULT_TRAJECTORY_STEPS = int(os.environ.get("WIKIWALKER_TRAJECTORY_STEPS", "5"))

# =============================================================================
# Clickthrough Configuration
# =============================================================================

# Returned by clickthroughs() when there is no direct link to count
NO_DIRECT_CLICKTHROUGHS = -1

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

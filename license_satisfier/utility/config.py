"""
Application Configuration Module.

This module manages the loading of environment variables. It defines
configuration constants used throughout the application for:
- The compatibility ranges table (optional override of the bundled file)
- The DNF expansion safety cap
- Logging verbosity
"""

import os
from dotenv import load_dotenv

load_dotenv()

# ==============================================================================
# DATA FILES
# ==============================================================================

# Optional path to a ranges JSON file replacing the bundled ranges.json
LICENSE_RANGES_PATH = os.getenv("LICENSE_RANGES_PATH")

# ==============================================================================
# EXPANSION LIMITS
# ==============================================================================

# Maximum number of AND-clauses a single expression may expand to
MAX_DNF_CLAUSES = int(os.getenv("MAX_DNF_CLAUSES", "4096"))

# ==============================================================================
# LOGGING
# ==============================================================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

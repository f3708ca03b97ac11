"""Centralized path definitions for the Huddle application.

Single source of truth for application paths. The base directory can be
moved with the HUDDLE_HOME environment variable.
"""

import os
from pathlib import Path

# Base application directory
HUDDLE_DIR = Path(os.environ.get("HUDDLE_HOME", Path.home() / ".huddle"))

# Subdirectories
DATA_DIR = HUDDLE_DIR / "data"
LOGS_DIR = HUDDLE_DIR / "logs"

# Specific files
CONFIG_PATH = HUDDLE_DIR / "config.json"

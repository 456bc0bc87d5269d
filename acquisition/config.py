"""Configuration for the Target Acquisition server."""

import os

# Challenge generation
TARGET_COUNT_MIN = int(os.getenv("TARGET_COUNT_MIN", "5"))
TARGET_COUNT_MAX = int(os.getenv("TARGET_COUNT_MAX", "8"))
TARGET_EXTENT_X = float(os.getenv("TARGET_EXTENT_X", "100"))
TARGET_EXTENT_Y = float(os.getenv("TARGET_EXTENT_Y", "100"))
TARGET_EXTENT_Z = float(os.getenv("TARGET_EXTENT_Z", "50"))  # flatter vertical spread

# Timing
ANSWER_DEADLINE_SECONDS = float(os.getenv("ANSWER_DEADLINE_SECONDS", "1"))
SWEEP_INTERVAL_SECONDS = float(os.getenv("SWEEP_INTERVAL_SECONDS", "2"))
SWEEP_MAX_AGE_SECONDS = float(os.getenv("SWEEP_MAX_AGE_SECONDS", "2"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# API
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "6969"))

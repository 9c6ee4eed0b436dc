"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path
from typing import Optional

# Load .env file if it exists
try:
    from dotenv import load_dotenv
    env_path = Path(__file__).parent.parent.parent / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
except ImportError:
    pass

# Hand size limits for a single 52-card deck
MIN_HAND_SIZE = 5
MAX_HAND_SIZE = 52

# Simulation defaults
DEFAULT_HAND_SIZE = int(os.getenv("POKER_HAND_SIZE", "5"))
DEFAULT_HAND_COUNT = int(os.getenv("POKER_HAND_COUNT", "10000"))

_seed = os.getenv("POKER_SEED", "")
DEFAULT_SEED: Optional[int] = int(_seed) if _seed else None

# Report
DEFAULT_REPORT_PATH = Path(os.getenv("POKER_REPORT_PATH", "hand_results.csv"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

"""Central Configuration for ToolBank Health Metrics."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Base Directory (Root of the project)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Load Environment Variables
load_dotenv(BASE_DIR / ".env")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# Logging
LOG_LEVEL = os.getenv("TOOLBANK_LOG_LEVEL", "INFO").upper()

# Calculator Defaults
DEFAULT_UNIT_SYSTEM = os.getenv("TOOLBANK_DEFAULT_UNIT_SYSTEM", "metric").lower()

# Form bounds (the limits the calculator forms enforce); opt-in, off by default
STRICT_BOUNDS = _env_flag("TOOLBANK_STRICT_BOUNDS", False)
WEIGHT_BOUNDS = (1, 1000)
HEIGHT_BOUNDS = (1, 300)
AGE_BOUNDS = (1, 120)

# Unit conversion factors
LB_TO_KG = 0.453592
KG_TO_LB = 2.20462
INCH_TO_CM = 2.54
ML_PER_CUP = 240
ML_PER_OUNCE = 29.5735

"""Environment-driven settings for the metrics query layer."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(override=True)

DB_PATH = Path(
    os.getenv("HEALTHCARE_METRICS_DB", str(Path(__file__).parent / "healthcare_metrics.db"))
)
LOG_LEVEL = os.getenv("HEALTHCARE_METRICS_LOG_LEVEL", "WARNING").upper()

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent

# ── Input ─────────────────────────────────────────────────────────────────────
WEATHER_DATA_PATH = os.getenv(
    "WEATHER_DATA_PATH", str(PROJECT_ROOT / "data" / "weatherdata.csv")
)
CSV_DELIMITER = ","
EXPECTED_FIELD_COUNT = 4  # date, temperature (°C), humidity (%), precipitation (mm)

# ── Report ────────────────────────────────────────────────────────────────────
REPORT_MONTH = 8  # August
HOT_DAY_THRESHOLD_F = 86.0

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

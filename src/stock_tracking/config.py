import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

# ===================== input =================================================
DATE_FORMAT = "%Y-%m-%d"

# ===================== indicators ============================================
SMA_WINDOW = int(os.getenv("STOCK_TRACKING_SMA_WINDOW", "30"))

# ===================== logging ===============================================
LOG_LEVEL = os.getenv("STOCK_TRACKING_LOG_LEVEL", "WARNING").upper()
LOG_TO_FILE = os.getenv("STOCK_TRACKING_LOG_TO_FILE", "false").lower() in (
    "1",
    "true",
    "yes",
)
LOG_DIR = Path(os.getenv("STOCK_TRACKING_LOG_DIR", str(PROJECT_ROOT / "logs")))

# ===================== quote provider ========================================
QUOTE_INTERVAL = "1d"

"""Application configuration constants."""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
DATA_DIR = Path(os.getenv("LISTING_DATA_DIR", str(ROOT_DIR / "data")))

RECORDS_FILE = Path(os.getenv("LISTING_RECORDS_FILE", str(DATA_DIR / "companies.csv")))

LOG_LEVEL = os.getenv("LISTING_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

PAGE_SIZE_OPTIONS = [10, 25, 50, 100]
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 100

REQUIRED_RECORD_COLUMNS = [
    "company_id",
    "name",
    "tier",
    "email",
    "phone",
    "created_at",
]

FILTER_COLUMNS = ["tier"]

TABLE_COLUMNS = [
    "company_id",
    "name",
    "tier",
    "email",
    "phone",
    "created_at",
]

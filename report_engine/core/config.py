# report_engine/core/config.py
"""Environment-driven settings for the report engine."""

import os

from dotenv import load_dotenv

load_dotenv()

# ===== DATABASES =====
# Service database: request logs
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./report_engine_config.db")

# Reporting data store: ledgers, tellers, employees, ...
REPORTING_DATABASE_URL = os.getenv(
    "REPORTING_DATABASE_URL", "sqlite:///./report_engine_datawarehouse.db"
)

# ===== APPLICATION =====
APPLICATION_ID = os.getenv("APPLICATION_ID", "Unknown")

# ===== PAGINATION =====
DEFAULT_PAGE_SIZE = int(os.getenv("REPORT_DEFAULT_PAGE_SIZE", "20"))
MAX_PAGE_SIZE = int(os.getenv("REPORT_MAX_PAGE_SIZE", "500"))

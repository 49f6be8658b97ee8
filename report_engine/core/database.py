# report_engine/core/database.py
"""Database configuration with separate service and reporting databases."""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from report_engine.core.config import DATABASE_URL, REPORTING_DATABASE_URL

# ===== SERVICE DATABASE =====
# Stores request logs
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {},
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


# ===== REPORTING DATA STORE =====
# Read by the report specifications: ledgers, accounts, tellers, employees
dw_engine = create_engine(
    REPORTING_DATABASE_URL,
    connect_args={"check_same_thread": False}
    if REPORTING_DATABASE_URL.startswith("sqlite")
    else {},
)
DWSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=dw_engine)
DWBase = declarative_base()


# ===== SESSION GENERATOR =====


def get_dw_db():
    """Get reporting data store session."""
    db = DWSessionLocal()
    try:
        yield db
    finally:
        db.close()


# ===== TABLE CREATION =====


def create_all_tables():
    """Create tables in both databases."""
    # Import models to ensure they're registered with Base classes
    from report_engine.logging.models import RequestLog  # noqa: F401
    from report_engine.datawarehouse import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    DWBase.metadata.create_all(bind=dw_engine)


def init_db():
    """Initialize databases; existing tables are left untouched."""
    create_all_tables()

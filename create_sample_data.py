#!/usr/bin/env python3
"""Script to create sample ledgers, teller transactions and employees for the report engine."""

import logging

from report_engine.core.database import DWSessionLocal, init_db
from report_engine.datawarehouse.sample_data import seed_sample_data


def create_sample_data():
    """Create tables if needed, then replace the reporting data with the sample set."""
    init_db()

    dw_db = DWSessionLocal()
    try:
        print("Creating sample reporting data...")
        seed_sample_data(dw_db)
        print("Sample data created.")
    except Exception as e:
        print(f"Error creating sample data: {e}")
        dw_db.rollback()
        raise
    finally:
        dw_db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_sample_data()

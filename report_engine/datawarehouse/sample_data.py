"""Sample reporting data covering all built-in reports."""

import logging
from datetime import date

from sqlalchemy.orm import Session

from report_engine.datawarehouse.models import (
    Account,
    Employee,
    Ledger,
    Office,
    Teller,
    TellerTransaction,
)

logger = logging.getLogger(__name__)


LEDGERS = [
    # id, identifier, description, type, parent
    (1, "1000", "Assets", "ASSET", None),
    (2, "1100", "Cash", "ASSET", 1),
    (3, "1200", "Receivables", "ASSET", 1),
    (4, "2000", "Liabilities", "LIABILITY", None),
    (5, "2100", "Deposits", "LIABILITY", 4),
    (6, "3000", "Equity", "EQUITY", None),
]

ACCOUNTS = [
    (1, "1100-01", "Vault Cash", 25000.0, 2),
    (2, "1100-02", "Teller Cash", 5000.0, 2),
    (3, "1200-01", "Loan Receivables", 120000.0, 3),
    (4, "2100-01", "Savings Deposits", 90000.0, 5),
]

TELLERS = [(1, "T-001"), (2, "T-002"), (3, "T-003")]

TRANSACTIONS = [
    {
        "id": 1,
        "teller_id": 1,
        "transaction_type": "CASH_DEPOSIT",
        "transaction_date": date(2024, 1, 5),
        "customer_identifier": "C-100",
        "customer_account_identifier": "2100-01",
        "target_account_identifier": None,
        "clerk": "clerk1",
        "amount": 500.0,
        "a_state": "CONFIRMED",
    },
    {
        "id": 2,
        "teller_id": 1,
        "transaction_type": "CASH_WITHDRAWAL",
        "transaction_date": date(2024, 2, 10),
        "customer_identifier": "C-101",
        "customer_account_identifier": "2100-01",
        "target_account_identifier": None,
        "clerk": "clerk1",
        "amount": 200.0,
        "a_state": "PENDING",
    },
    {
        "id": 3,
        "teller_id": 2,
        "transaction_type": "TRANSFER",
        "transaction_date": date(2024, 1, 20),
        "customer_identifier": "C-102",
        "customer_account_identifier": "2100-01",
        "target_account_identifier": "2100-02",
        "clerk": "clerk2",
        "amount": 1000.0,
        "a_state": "CONFIRMED",
    },
    {
        "id": 4,
        "teller_id": 2,
        "transaction_type": "CASH_DEPOSIT",
        "transaction_date": date(2024, 3, 1),
        "customer_identifier": "C-103",
        "customer_account_identifier": "2100-01",
        "target_account_identifier": None,
        "clerk": "clerk2",
        "amount": 75.0,
        "a_state": "CANCELED",
    },
]

OFFICES = [(1, "HQ", "Head Office"), (2, "BR1", "Downtown Branch")]

EMPLOYEES = [
    # id, username, given, middle, surname, created by, office
    (1, "alice", "Alice", None, "Anders", "admin", 1),
    (2, "bob", "Bob", "J", "Baker", "admin", 2),
    (3, "carol", "Carol", None, "Clark", "admin", None),
]


def clear_sample_data(dw_db: Session) -> None:
    for model in (TellerTransaction, Teller, Account, Ledger, Employee, Office):
        dw_db.query(model).delete()
    dw_db.commit()


def seed_sample_data(dw_db: Session) -> None:
    """Replace the reporting data with the sample set."""
    clear_sample_data(dw_db)

    for id_, identifier, description, a_type, parent in LEDGERS:
        dw_db.add(
            Ledger(
                id=id_,
                identifier=identifier,
                description=description,
                a_type=a_type,
                parent_ledger_id=parent,
            )
        )
    dw_db.flush()

    for id_, identifier, name, balance, ledger_id in ACCOUNTS:
        dw_db.add(Account(id=id_, identifier=identifier, a_name=name, balance=balance, ledger_id=ledger_id))

    for id_, identifier in TELLERS:
        dw_db.add(Teller(id=id_, identifier=identifier))
    dw_db.flush()

    for transaction in TRANSACTIONS:
        dw_db.add(TellerTransaction(**transaction))

    for id_, identifier, name in OFFICES:
        dw_db.add(Office(id=id_, identifier=identifier, a_name=name))
    dw_db.flush()

    for id_, username, given, middle, surname, created_by, office_id in EMPLOYEES:
        dw_db.add(
            Employee(
                id=id_,
                identifier=username,
                given_name=given,
                middle_name=middle,
                surname=surname,
                created_by=created_by,
                assigned_office_id=office_id,
            )
        )

    dw_db.commit()
    logger.info(
        "Seeded %d ledgers, %d accounts, %d transactions, %d employees",
        len(LEDGERS),
        len(ACCOUNTS),
        len(TRANSACTIONS),
        len(EMPLOYEES),
    )

# report_engine/datawarehouse/__init__.py

from .models import Ledger, Account, Teller, TellerTransaction, Office, Employee

__all__ = [
    # Accounting
    "Ledger",
    "Account",
    # Teller
    "Teller",
    "TellerTransaction",
    # Organization
    "Office",
    "Employee",
]

"""Database models for the reporting data store (read by the report specifications)."""

from sqlalchemy import Column, Integer, String, Float, Date, ForeignKey
from sqlalchemy.orm import relationship
from report_engine.core.database import DWBase as Base


# ===== ACCOUNTING =====


class Ledger(Base):
    """Ledger; sub-ledgers point at their parent through parent_ledger_id."""

    __tablename__ = "thoth_ledgers"

    id = Column(Integer, primary_key=True)
    identifier = Column(String(34), nullable=False, unique=True)
    description = Column(String(2048), nullable=True)
    a_type = Column(String(32), nullable=True)  # ASSET, LIABILITY, EQUITY, REVENUE, EXPENSE
    parent_ledger_id = Column(Integer, ForeignKey("thoth_ledgers.id"), nullable=True)

    sub_ledgers = relationship("Ledger")
    accounts = relationship("Account", back_populates="ledger")


class Account(Base):
    """Account booked against a ledger."""

    __tablename__ = "thoth_accounts"

    id = Column(Integer, primary_key=True)
    identifier = Column(String(34), nullable=False, unique=True)
    a_name = Column(String(256), nullable=False)
    balance = Column(Float, nullable=True)
    ledger_id = Column(Integer, ForeignKey("thoth_ledgers.id"), nullable=False)

    ledger = relationship("Ledger", back_populates="accounts")


# ===== TELLER =====


class Teller(Base):
    """Teller (cash drawer) operated by clerks."""

    __tablename__ = "tajet_teller"

    id = Column(Integer, primary_key=True)
    identifier = Column(String(32), nullable=False, unique=True)

    transactions = relationship("TellerTransaction", back_populates="teller")


class TellerTransaction(Base):
    """Single teller-cashier transaction."""

    __tablename__ = "tajet_teller_transactions"

    id = Column(Integer, primary_key=True)
    teller_id = Column(Integer, ForeignKey("tajet_teller.id"), nullable=False)
    transaction_type = Column(String(32), nullable=False)
    transaction_date = Column(Date, nullable=False)
    customer_identifier = Column(String(32), nullable=False)
    customer_account_identifier = Column(String(34), nullable=False)
    target_account_identifier = Column(String(34), nullable=True)
    clerk = Column(String(32), nullable=True)
    amount = Column(Float, nullable=False)
    a_state = Column(String(256), nullable=False)  # PENDING, CONFIRMED, CANCELED

    teller = relationship("Teller", back_populates="transactions")


# ===== ORGANIZATION =====


class Office(Base):
    """Branch office."""

    __tablename__ = "horus_offices"

    id = Column(Integer, primary_key=True)
    identifier = Column(String(32), nullable=False, unique=True)
    a_name = Column(String(256), nullable=False)

    employees = relationship("Employee", back_populates="office")


class Employee(Base):
    """Employee, optionally assigned to an office."""

    __tablename__ = "horus_employees"

    id = Column(Integer, primary_key=True)
    identifier = Column(String(32), nullable=False, unique=True)
    given_name = Column(String(256), nullable=False)
    middle_name = Column(String(256), nullable=True)
    surname = Column(String(256), nullable=False)
    created_by = Column(String(32), nullable=False)
    assigned_office_id = Column(Integer, ForeignKey("horus_offices.id"), nullable=True)

    office = relationship("Office", back_populates="employees")

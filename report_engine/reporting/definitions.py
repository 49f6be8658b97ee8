"""Built-in report specifications: accounting, teller and organization reports."""

from report_engine.query.schemas import ColumnMapping, HierarchyLevel, LevelDefinition
from report_engine.reporting.schemas import DisplayableField, Operator, QueryParameter, ValueType
from report_engine.reporting.specification import SpecificationConfig


# ===== ACCOUNTING / BALANCE SHEET =====
# ledger -> sub-ledger -> account

LEDGER_MAPPING = ColumnMapping.of(
    ("Id", "ledger.id"),
    ("Identifier", "ledger.identifier"),
    ("Ledger", "ledger.description"),
)

ACCOUNT_MAPPING = ColumnMapping.of(
    ("Parent Ledger", "acc.ledger_id"),
    ("Account Identifier", "acc.identifier"),
    ("Account Name", "acc.a_name"),
    ("Account Balance", "acc.balance"),
)

BALANCE_SHEET = SpecificationConfig(
    category="Accounting",
    identifier="Balancesheet",
    name="Balance Sheet",
    description="Balance sheet report",
    displayable_fields=(
        DisplayableField(name="Id", type=ValueType.TEXT, mandatory=True),
        DisplayableField(name="Identifier", type=ValueType.TEXT, mandatory=True),
        DisplayableField(name="Ledger", type=ValueType.TEXT, mandatory=True),
        DisplayableField(name="Account Identifier", type=ValueType.TEXT, mandatory=True),
        DisplayableField(name="Account Name", type=ValueType.TEXT, mandatory=True),
        DisplayableField(name="Account Balance", type=ValueType.TEXT, mandatory=True),
    ),
    query_parameters=(),
    levels=(
        LevelDefinition(
            level=HierarchyLevel.ROOT,
            table_name="thoth_ledgers",
            alias="ledger",
            mapping=LEDGER_MAPPING,
            order_by="ledger.identifier",
            fixed_condition="ledger.parent_ledger_id IS NULL",
        ),
        LevelDefinition(
            level=HierarchyLevel.CHILD,
            table_name="thoth_ledgers",
            alias="ledger",
            mapping=LEDGER_MAPPING,
            order_by="ledger.identifier",
            parent_key="ledger.parent_ledger_id",
        ),
        LevelDefinition(
            level=HierarchyLevel.GRANDCHILD,
            table_name="thoth_accounts",
            alias="acc",
            mapping=ACCOUNT_MAPPING,
            order_by="acc.identifier",
            parent_key="acc.ledger_id",
        ),
    ),
    summary_columns=(0, 1, 2),  # id, identifier, description of each sub-ledger
)


# ===== TELLER / TRANSACTIONS =====
# teller -> transaction

TELLER_MAPPING = ColumnMapping.of(
    ("Teller Id", "teller.id"),
    ("Teller", "teller.identifier"),
)

TRANSACTION_MAPPING = ColumnMapping.of(
    ("Transaction Type", "trx.transaction_type"),
    ("Transaction Date", "trx.transaction_date"),
    ("Customer", "trx.customer_identifier"),
    ("Source Account", "trx.customer_account_identifier"),
    ("Target Account", "trx.target_account_identifier"),
    ("Clerk", "trx.clerk"),
    ("Amount", "trx.amount"),
    ("Status", "trx.a_state"),
)

TELLER_TRANSACTIONS = SpecificationConfig(
    category="Teller",
    identifier="Transactions",
    name="Teller Transactions",
    description="List all teller-cashier transactions.",
    displayable_fields=(
        DisplayableField(name="Teller Id", type=ValueType.TEXT, mandatory=True),
        DisplayableField(name="Teller", type=ValueType.TEXT, mandatory=True),
        DisplayableField(name="Transaction Type", type=ValueType.TEXT, mandatory=True),
        DisplayableField(name="Transaction Date", type=ValueType.DATE, mandatory=True),
        DisplayableField(name="Customer", type=ValueType.TEXT, mandatory=True),
        DisplayableField(name="Source Account", type=ValueType.TEXT, mandatory=True),
        DisplayableField(name="Target Account", type=ValueType.TEXT),
        DisplayableField(name="Clerk", type=ValueType.TEXT),
        DisplayableField(name="Amount", type=ValueType.NUMBER, mandatory=True),
        DisplayableField(name="Status", type=ValueType.TEXT, mandatory=True),
    ),
    query_parameters=(
        QueryParameter(name="Transaction Date", type=ValueType.DATE, operator=Operator.BETWEEN),
        QueryParameter(name="Status", type=ValueType.TEXT, operator=Operator.IN),
    ),
    levels=(
        LevelDefinition(
            level=HierarchyLevel.ROOT,
            table_name="tajet_teller",
            alias="teller",
            mapping=TELLER_MAPPING,
            order_by="teller.id",
        ),
        LevelDefinition(
            level=HierarchyLevel.CHILD,
            table_name="tajet_teller_transactions",
            alias="trx",
            mapping=TRANSACTION_MAPPING,
            order_by="trx.id",
            parent_key="trx.teller_id",
        ),
    ),
)


# ===== ORGANIZATION / EMPLOYEE =====
# employee -> office; the office id leads so it keys the office lookup

EMPLOYEE_MAPPING = ColumnMapping.of(
    ("Office Id", "he.assigned_office_id"),
    ("Username", "he.identifier"),
    ("First Name", "he.given_name"),
    ("Middle Name", "he.middle_name"),
    ("Last Name", "he.surname"),
    ("Created By", "he.created_by"),
)

OFFICE_MAPPING = ColumnMapping.of(
    ("Office Name", "ho.a_name"),
)

EMPLOYEE_LISTING = SpecificationConfig(
    category="Organization",
    identifier="Employee",
    name="Employee Listing",
    description="List of all employees.",
    displayable_fields=(
        DisplayableField(name="Office Id", type=ValueType.TEXT, mandatory=True),
        DisplayableField(name="Username", type=ValueType.TEXT, mandatory=True),
        DisplayableField(name="First Name", type=ValueType.TEXT, mandatory=True),
        DisplayableField(name="Middle Name", type=ValueType.TEXT),
        DisplayableField(name="Last Name", type=ValueType.TEXT, mandatory=True),
        DisplayableField(name="Created By", type=ValueType.TEXT, mandatory=True),
        DisplayableField(name="Office Name", type=ValueType.TEXT, mandatory=True),
    ),
    query_parameters=(),
    levels=(
        LevelDefinition(
            level=HierarchyLevel.ROOT,
            table_name="horus_employees",
            alias="he",
            mapping=EMPLOYEE_MAPPING,
            order_by="he.identifier",
        ),
        LevelDefinition(
            level=HierarchyLevel.CHILD,
            table_name="horus_offices",
            alias="ho",
            mapping=OFFICE_MAPPING,
            order_by="ho.id",
            parent_key="ho.id",
        ),
    ),
)


BUILTIN_SPECIFICATIONS = (BALANCE_SHEET, TELLER_TRANSACTIONS, EMPLOYEE_LISTING)

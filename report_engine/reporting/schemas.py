"""Pydantic schemas for report definitions, requests and pages."""

from typing import Optional, List
from enum import Enum
from pydantic import BaseModel, ConfigDict


class ValueType(str, Enum):
    """Value types for fields and parameters."""

    TEXT = "TEXT"
    NUMBER = "NUMBER"
    DATE = "DATE"


class Operator(str, Enum):
    """Filter operators; criteria of one query level are always ANDed."""

    EQUALS = "EQUALS"
    IN = "IN"
    LIKE = "LIKE"
    BETWEEN = "BETWEEN"
    GREATER = "GREATER"
    LESSER = "LESSER"


# Operators whose value is a comma-delimited list
LIST_OPERATORS = (Operator.IN, Operator.BETWEEN)


# ===== DEFINITION SCHEMAS =====


class DisplayableField(BaseModel):
    """A column that can be requested."""

    name: str
    type: ValueType = ValueType.TEXT
    mandatory: bool = False

    model_config = ConfigDict(frozen=True)


class QueryParameter(BaseModel):
    """A filter: declared on a definition without value, supplied in a request with one."""

    name: str
    type: ValueType = ValueType.TEXT
    operator: Operator = Operator.EQUALS
    mandatory: bool = False
    value: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def has_value(self) -> bool:
        """Parameters without a value are treated as 'filter not applied'.

        A list value made only of delimiters (",", " , ") carries no value either.
        """
        return bool(self.split_values())

    def split_values(self) -> List[str]:
        """Values of the parameter; list operators split on commas."""
        if self.value is None or self.value.strip() == "":
            return []
        if self.operator in LIST_OPERATORS:
            return [item.strip() for item in self.value.split(",") if item.strip()]
        return [self.value.strip()]


class ReportDefinition(BaseModel):
    """Metadata of one report type."""

    identifier: str
    name: str
    description: Optional[str] = None
    query_parameters: List[QueryParameter] = []
    displayable_fields: List[DisplayableField] = []


# ===== REQUEST SCHEMAS =====


class ReportRequest(BaseModel):
    """Columns to show (in header order) and filters to apply."""

    query_parameters: List[QueryParameter] = []
    displayable_fields: List[DisplayableField] = []

    def field_names(self) -> List[str]:
        return [field.name for field in self.displayable_fields]


# ===== PAGE SCHEMAS =====


class Header(BaseModel):
    column_names: List[str] = []


class Value(BaseModel):
    """One cell: zero or more strings."""

    values: List[str] = []


class Row(BaseModel):
    values: List[Value] = []


class ReportPage(BaseModel):
    """One page of a generated report. Never persisted."""

    name: str
    description: Optional[str] = None
    header: Header
    rows: List[Row] = []
    has_more: bool = False
    generated_by: str
    generated_on: str


class ReportPreview(BaseModel):
    """Root query of a report as it would be executed."""

    sql: str
    parameters: dict = {}
    columns: List[str] = []

"""Translation of report filters into SQL criteria with bound values."""

from typing import Optional
from sqlalchemy import literal_column
from sqlalchemy.sql.elements import ColumnElement

from report_engine.reporting.schemas import Operator, QueryParameter


class CriteriaBuilder:
    """Builds one WHERE-clause criterion per filter parameter."""

    @staticmethod
    def build_criteria(column_expression: str, parameter: QueryParameter) -> Optional[ColumnElement]:
        """
        Build the criterion for ``parameter`` applied to ``column_expression``.

        Returns None for parameters without a value; those filters are simply
        not applied. Values are always bound, never interpolated.
        """
        if not parameter.has_value():
            return None

        column = literal_column(column_expression)
        values = parameter.split_values()
        operator = parameter.operator

        if operator == Operator.EQUALS:
            return column == values[0]
        elif operator == Operator.IN:
            return column.in_(values)
        elif operator == Operator.LIKE:
            return column.like(f"%{values[0]}%")
        elif operator == Operator.BETWEEN:
            if len(values) != 2:
                raise ValueError(
                    f"BETWEEN on '{parameter.name}' requires exactly two values, got {len(values)}"
                )
            return column.between(values[0], values[1])
        elif operator == Operator.GREATER:
            return column > values[0]
        elif operator == Operator.LESSER:
            return column < values[0]
        else:
            raise ValueError(f"Unsupported operator: {operator}")

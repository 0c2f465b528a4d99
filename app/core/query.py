"""
Filter and sort descriptors shared by every table query.

Filters are ANDed in the order supplied; a sort is a single ORDER BY on one
column. The same descriptors are built from HTTP query strings by
``Filter.parse``.
"""

from enum import Enum
from typing import Iterable, Optional, Union

from pydantic import BaseModel


FilterValue = Union[bool, int, float, str]


class FilterOperator(str, Enum):
    EQ = "eq"
    NEQ = "neq"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    LIKE = "like"
    ILIKE = "ilike"


class Filter(BaseModel):
    column: str
    value: FilterValue
    operator: FilterOperator = FilterOperator.EQ

    @classmethod
    def parse(cls, raw: str) -> "Filter":
        """Build a filter from ``column:operator:value`` (or ``column:value`` for eq)"""
        parts = raw.split(":", 2)
        if len(parts) == 2:
            column, value = parts
            operator = FilterOperator.EQ
        elif len(parts) == 3:
            column, op, value = parts
            try:
                operator = FilterOperator(op.lower())
            except ValueError:
                raise ValueError(f"Unknown filter operator '{op}'")
        else:
            raise ValueError(f"Invalid filter '{raw}', expected column:operator:value")
        if not column:
            raise ValueError(f"Invalid filter '{raw}', column is empty")
        return cls(column=column, value=value, operator=operator)


class SortSpec(BaseModel):
    column: str
    ascending: bool = True


def apply_filters(query, filters: Optional[Iterable[Filter]]):
    """Chain one builder call per filter, in order"""
    for f in filters or []:
        if f.operator in (FilterOperator.LIKE, FilterOperator.ILIKE):
            query = getattr(query, f.operator.value)(f.column, str(f.value))
        else:
            query = getattr(query, f.operator.value)(f.column, f.value)
    return query


def apply_sort(query, sort: Optional[SortSpec], default: SortSpec):
    order = sort or default
    return query.order(order.column, desc=not order.ascending)

"""
Core dependencies shared by the module routers: list query parsing,
delete confirmation and conversion of query results into HTTP responses.
"""

from fastapi import HTTPException, Query, status
from app.core.query import Filter, SortSpec
from app.core.result import QueryResult
from typing import Any, List, Optional
import logging

logger = logging.getLogger(__name__)


def get_filters(
    filter: List[str] = Query(
        default=[],
        description="Repeatable; column:operator:value, operator one of eq, neq, gt, gte, lt, lte, like, ilike"
    )
) -> List[Filter]:
    """Parse repeated ?filter= parameters into Filter descriptors"""
    try:
        return [Filter.parse(raw) for raw in filter]
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def get_sort(sort_by: Optional[str] = None, ascending: bool = True) -> Optional[SortSpec]:
    """Single-column sort; None falls back to the table default (created_at desc)"""
    if not sort_by:
        return None
    return SortSpec(column=sort_by, ascending=ascending)


def require_delete_confirmation(confirm: bool = False) -> None:
    """Destructive calls must be confirmed explicitly with ?confirm=true"""
    if not confirm:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Deletion requires confirmation; repeat the request with confirm=true"
        )


def unwrap_result(result: QueryResult) -> Any:
    """Return result data or raise the matching HTTPException"""
    if result.ok:
        return result.data

    error = result.error
    if error.is_not_found:
        status_code = status.HTTP_404_NOT_FOUND
    elif error.is_conflict:
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    logger.info(f"Query failed ({status_code}): {error}")
    raise HTTPException(status_code=status_code, detail=str(error))

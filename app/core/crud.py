"""
Generic CRUD over a single Supabase table.

Every entity service (clients, profiles, groups, industries, benchmarks)
delegates to a ``TableQueries`` bound to its table and response model, so all
of them share the same filtering, default ordering, timestamping and failure
normalization.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, Type

from pydantic import BaseModel
from supabase import Client

from app.config.settings import settings
from app.core.query import Filter, SortSpec, apply_filters, apply_sort
from app.core.result import QueryError, QueryResult

logger = logging.getLogger(__name__)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class TableQueries:
    def __init__(
        self,
        supabase: Client,
        table: str,
        model: Optional[Type[BaseModel]] = None,
        label: Optional[str] = None,
        default_sort: Optional[SortSpec] = None,
    ):
        self.supabase = supabase
        self.table = table
        self.model = model
        self.label = label or table
        self.default_sort = default_sort or SortSpec(
            column=settings.default_sort_column, ascending=False
        )

    def _to_model(self, row: Dict[str, Any]):
        return self.model(**row) if self.model else row

    def select_all(
        self,
        sort: Optional[SortSpec] = None,
        filters: Optional[Iterable[Filter]] = None,
    ) -> QueryResult:
        """Fetch all rows matching every filter, newest first unless a sort is given"""
        try:
            query = self.supabase.table(self.table).select("*")
            query = apply_filters(query, filters)
            query = apply_sort(query, sort, self.default_sort)
            result = query.execute()
            return QueryResult.success([self._to_model(row) for row in result.data or []])
        except Exception as e:
            logger.error(f"Error listing {self.table}: {e}")
            return QueryResult.failure(e)

    def select_one(self, column: str, value: Any) -> QueryResult:
        try:
            result = self.supabase.table(self.table)\
                .select("*")\
                .eq(column, value)\
                .single()\
                .execute()

            if not result.data:
                return QueryResult.failure(QueryError.not_found(self.label))

            return QueryResult.success(self._to_model(result.data))
        except Exception as e:
            logger.warning(f"Error fetching {self.table} by {column}: {e}")
            return QueryResult.failure(e)

    def select_by_id(self, record_id: str) -> QueryResult:
        return self.select_one("id", record_id)

    def insert(self, fields: Dict[str, Any]) -> QueryResult:
        """Insert a row and return it with its generated id and timestamps"""
        try:
            result = self.supabase.table(self.table).insert(fields).execute()

            if not result.data:
                return QueryResult.failure(QueryError(f"Failed to create {self.label}"))

            return QueryResult.success(self._to_model(result.data[0]))
        except Exception as e:
            logger.error(f"Error inserting into {self.table}: {e}")
            return QueryResult.failure(e)

    def update(self, record_id: str, fields: Dict[str, Any]) -> QueryResult:
        """Apply a partial update; updated_at is always stamped fresh"""
        try:
            update_data = {**fields, "updated_at": utc_now_iso()}

            result = self.supabase.table(self.table)\
                .update(update_data)\
                .eq("id", record_id)\
                .execute()

            if not result.data:
                return QueryResult.failure(QueryError.not_found(self.label))

            return QueryResult.success(self._to_model(result.data[0]))
        except Exception as e:
            logger.error(f"Error updating {self.table} {record_id}: {e}")
            return QueryResult.failure(e)

    def upsert(self, fields: Dict[str, Any], on_conflict: str) -> QueryResult:
        try:
            result = self.supabase.table(self.table)\
                .upsert(fields, on_conflict=on_conflict)\
                .execute()

            if not result.data:
                return QueryResult.failure(QueryError(f"Failed to upsert {self.label}"))

            return QueryResult.success(self._to_model(result.data[0]))
        except Exception as e:
            logger.error(f"Error upserting into {self.table}: {e}")
            return QueryResult.failure(e)

    def delete(self, record_id: str) -> QueryResult:
        """Hard delete by id; a missing row is reported as not found"""
        try:
            result = self.supabase.table(self.table)\
                .delete()\
                .eq("id", record_id)\
                .execute()

            if not result.data:
                return QueryResult.failure(QueryError.not_found(self.label))

            return QueryResult.success(None)
        except Exception as e:
            logger.error(f"Error deleting from {self.table} {record_id}: {e}")
            return QueryResult.failure(e)

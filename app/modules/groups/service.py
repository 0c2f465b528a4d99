from supabase import Client
from app.core.crud import TableQueries
from app.core.query import Filter, SortSpec
from app.core.result import QueryResult
from app.modules.groups.schemas import GroupCreate, GroupUpdate, GroupResponse
from typing import List, Optional


class GroupService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.queries = TableQueries(supabase, "groups", GroupResponse, label="Group")

    def select_groups(
        self,
        sort: Optional[SortSpec] = None,
        filters: Optional[List[Filter]] = None
    ) -> QueryResult:
        """List groups, typically filtered by client_id"""
        return self.queries.select_all(sort, filters)

    def select_group_by_id(self, group_id: str) -> QueryResult:
        return self.queries.select_by_id(group_id)

    def insert_group(self, group_data: GroupCreate) -> QueryResult:
        """Create a group; names are unique per client"""
        return self.queries.insert(group_data.model_dump(mode="json"))

    def update_group(self, group_id: str, group_data: GroupUpdate) -> QueryResult:
        return self.queries.update(group_id, group_data.model_dump(mode="json", exclude_unset=True))

    def delete_group(self, group_id: str) -> QueryResult:
        """Delete group (memberships cascade)"""
        return self.queries.delete(group_id)

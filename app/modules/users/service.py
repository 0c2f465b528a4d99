from supabase import Client
from app.core.crud import TableQueries
from app.core.query import Filter, SortSpec
from app.core.result import QueryResult
from app.modules.users.schemas import UserCreate, UserUpdate, UserResponse
from typing import List, Optional


class UserService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.queries = TableQueries(supabase, "profiles", UserResponse, label="User")

    def select_users(
        self,
        sort: Optional[SortSpec] = None,
        filters: Optional[List[Filter]] = None
    ) -> QueryResult:
        """List user profiles, e.g. filtered by client_id or an ilike on name"""
        return self.queries.select_all(sort, filters)

    def select_user_by_id(self, user_id: str) -> QueryResult:
        """Get user profile by ID"""
        return self.queries.select_by_id(user_id)

    def select_user_by_email(self, email: str) -> QueryResult:
        """Get user profile by its unique email"""
        return self.queries.select_one("email", email)

    def insert_user(self, user_data: UserCreate) -> QueryResult:
        return self.queries.insert(user_data.model_dump(mode="json"))

    def update_user(self, user_id: str, user_data: UserUpdate) -> QueryResult:
        """Update user profile; only fields present in the payload are written"""
        return self.queries.update(user_id, user_data.model_dump(mode="json", exclude_unset=True))

    def delete_user(self, user_id: str) -> QueryResult:
        """Delete user profile (group memberships cascade)"""
        return self.queries.delete(user_id)

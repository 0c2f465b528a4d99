"""
Assignment queries between profiles and clients, industries and groups.

Single-valued links (profile -> client, profile -> industry) are foreign keys
on ``profiles`` and are assigned by update and unassigned by nulling the
column. Group membership is a ``group_members`` row per (group, profile);
manager status is its ``role``. Rows written with the older ``leader``
role are read and matched as managers.

Every method returns a ``QueryResult`` whose error message is prefixed with
the action that failed, e.g. ``Failed to assign user to group: ...``.
"""

import logging
from typing import Any, Optional

from supabase import Client

from app.core.crud import utc_now_iso
from app.core.result import QueryError, QueryResult
from app.modules.groups.schemas import LEGACY_MANAGER_ROLES, GroupMemberResponse, MemberRole
from app.modules.users.schemas import UserResponse

logger = logging.getLogger(__name__)

MEMBERSHIP_CONFLICT_TARGET = "group_id,profile_id"


class RelationshipService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _failure(self, e: Exception, action: str) -> QueryResult:
        logger.error(f"{action}: {e}")
        return QueryResult.failure(e, action)

    # User <-> Client / Industry

    def _select_profiles(self, column: str, value: str, action: str) -> QueryResult:
        try:
            result = self.supabase.table("profiles")\
                .select("*")\
                .eq(column, value)\
                .execute()
            return QueryResult.success([UserResponse(**row) for row in result.data or []])
        except Exception as e:
            return self._failure(e, action)

    def _select_profile(self, user_id: str, action: str) -> QueryResult:
        try:
            result = self.supabase.table("profiles")\
                .select("*")\
                .eq("id", user_id)\
                .single()\
                .execute()

            if not result.data:
                return QueryResult.failure(QueryError.not_found("User"), action)

            return QueryResult.success(UserResponse(**result.data))
        except Exception as e:
            return self._failure(e, action)

    def _set_profile_link(self, user_id: str, column: str, value: Optional[str], action: str) -> QueryResult:
        try:
            result = self.supabase.table("profiles")\
                .update({column: value, "updated_at": utc_now_iso()})\
                .eq("id", user_id)\
                .execute()

            if not result.data:
                return QueryResult.failure(QueryError.not_found("User"), action)

            return QueryResult.success(UserResponse(**result.data[0]))
        except Exception as e:
            return self._failure(e, action)

    def get_users_by_client_id(self, client_id: str) -> QueryResult:
        """All profiles assigned to a client (empty list when none)"""
        return self._select_profiles("client_id", client_id, "Failed to fetch users by client")

    def get_client_by_user_id(self, user_id: str) -> QueryResult:
        """The user's profile; its client_id is None when unassigned"""
        return self._select_profile(user_id, "Failed to fetch client by user")

    def assign_user_to_client(self, user_id: str, client_id: str) -> QueryResult:
        return self._set_profile_link(user_id, "client_id", client_id, "Failed to assign user to client")

    def unassign_user_from_client(self, user_id: str) -> QueryResult:
        return self._set_profile_link(user_id, "client_id", None, "Failed to unassign user from client")

    def get_users_by_industry_id(self, industry_id: str) -> QueryResult:
        return self._select_profiles("industry_id", industry_id, "Failed to fetch users by industry")

    def get_industry_by_user_id(self, user_id: str) -> QueryResult:
        return self._select_profile(user_id, "Failed to fetch industry by user")

    def assign_user_to_industry(self, user_id: str, industry_id: str) -> QueryResult:
        return self._set_profile_link(user_id, "industry_id", industry_id, "Failed to assign user to industry")

    def unassign_user_from_industry(self, user_id: str) -> QueryResult:
        return self._set_profile_link(user_id, "industry_id", None, "Failed to unassign user from industry")

    # User <-> Group

    def _select_memberships(self, action: str, roles: Optional[list] = None, **match: Any) -> QueryResult:
        try:
            query = self.supabase.table("group_members").select("*")
            for column, value in match.items():
                query = query.eq(column, value)
            if roles:
                query = query.in_("role", roles)
            result = query.execute()
            return QueryResult.success([GroupMemberResponse(**row) for row in result.data or []])
        except Exception as e:
            return self._failure(e, action)

    def get_membership(self, group_id: str, user_id: str) -> QueryResult:
        """The membership row for (group, user), or None when not a member"""
        result = self._select_memberships(
            "Failed to fetch group membership", group_id=group_id, profile_id=user_id
        )
        if not result.ok:
            return result
        return QueryResult.success(result.data[0] if result.data else None)

    def get_users_by_group_id(self, group_id: str) -> QueryResult:
        return self._select_memberships("Failed to fetch users by group", group_id=group_id)

    def get_groups_by_user_id(self, user_id: str) -> QueryResult:
        return self._select_memberships("Failed to fetch groups by user", profile_id=user_id)

    def assign_user_to_group(self, group_id: str, user_id: str, position: Optional[str] = None) -> QueryResult:
        """Add a plain member; an existing membership is rejected by the (group_id, profile_id) constraint"""
        action = "Failed to assign user to group"
        try:
            result = self.supabase.table("group_members").insert({
                "group_id": group_id,
                "profile_id": user_id,
                "role": MemberRole.MEMBER.value,
                "position": position
            }).execute()

            if not result.data:
                return QueryResult.failure(QueryError("No membership row returned"), action)

            return QueryResult.success(GroupMemberResponse(**result.data[0]))
        except Exception as e:
            return self._failure(e, action)

    def remove_user_from_group(self, group_id: str, user_id: str) -> QueryResult:
        """Delete the membership whatever its role"""
        action = "Failed to remove user from group"
        try:
            result = self.supabase.table("group_members")\
                .delete()\
                .eq("group_id", group_id)\
                .eq("profile_id", user_id)\
                .execute()

            if not result.data:
                return QueryResult.failure(QueryError.not_found("Group membership"), action)

            return QueryResult.success(None)
        except Exception as e:
            return self._failure(e, action)

    # Manager <-> Group

    def get_managers_by_group_id(self, group_id: str) -> QueryResult:
        return self._select_memberships(
            "Failed to fetch managers by group", roles=MemberRole.manager_values(), group_id=group_id
        )

    def get_groups_where_user_is_manager(self, user_id: str) -> QueryResult:
        return self._select_memberships(
            "Failed to fetch managed groups by user", roles=MemberRole.manager_values(), profile_id=user_id
        )

    def assign_manager_to_group(self, group_id: str, user_id: str, position: Optional[str] = None) -> QueryResult:
        """Make the user a manager of the group, joining it first if needed.

        A single upsert on the (group_id, profile_id) conflict target, so an
        existing membership is promoted in place and concurrent calls cannot
        create a second row. An existing position is kept unless a new one is
        given.
        """
        action = "Failed to assign manager to group"
        row = {
            "group_id": group_id,
            "profile_id": user_id,
            "role": MemberRole.MANAGER.value
        }
        if position is not None:
            row["position"] = position
        try:
            result = self.supabase.table("group_members")\
                .upsert(row, on_conflict=MEMBERSHIP_CONFLICT_TARGET)\
                .execute()

            if not result.data:
                return QueryResult.failure(QueryError("No membership row returned"), action)

            return QueryResult.success(GroupMemberResponse(**result.data[0]))
        except Exception as e:
            return self._failure(e, action)

    def remove_manager_from_group(self, group_id: str, user_id: str) -> QueryResult:
        """Demote a manager back to member; the membership itself is kept"""
        action = "Failed to remove manager from group"
        try:
            result = self.supabase.table("group_members")\
                .update({"role": MemberRole.MEMBER.value})\
                .eq("group_id", group_id)\
                .eq("profile_id", user_id)\
                .in_("role", MemberRole.manager_values())\
                .execute()

            if not result.data:
                return QueryResult.failure(QueryError.not_found("Group manager"), action)

            return QueryResult.success(GroupMemberResponse(**result.data[0]))
        except Exception as e:
            return self._failure(e, action)

    def migrate_legacy_manager_roles(self) -> QueryResult:
        """Rewrite 'leader' membership roles to 'manager'; returns the rows changed"""
        action = "Failed to migrate legacy manager roles"
        try:
            result = self.supabase.table("group_members")\
                .update({"role": MemberRole.MANAGER.value})\
                .in_("role", list(LEGACY_MANAGER_ROLES))\
                .execute()
            return QueryResult.success([GroupMemberResponse(**row) for row in result.data or []])
        except Exception as e:
            return self._failure(e, action)

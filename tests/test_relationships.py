"""Tests for client, industry, group and manager assignments.

Scenario tests run against the in-memory Supabase fake; call-shape tests use
the MagicMock builder.
"""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import call

from postgrest.exceptions import APIError

from app.modules.groups.schemas import GroupMemberResponse, MemberRole
from app.modules.relationships.service import RelationshipService


class TestUserClientAssignment:
    """Tests for the profile -> client foreign key."""

    def test_assign_then_unassign(self, fake_supabase, user_row, client_row):
        service = RelationshipService(fake_supabase)

        assigned = service.assign_user_to_client(user_row["id"], client_row["id"])
        assert assigned.ok
        assert assigned.data.client_id == client_row["id"]

        users = service.get_users_by_client_id(client_row["id"]).unwrap()
        assert [u.id for u in users] == [user_row["id"]]

        service.unassign_user_from_client(user_row["id"]).unwrap()

        assert service.get_users_by_client_id(client_row["id"]).unwrap() == []
        assert service.get_client_by_user_id(user_row["id"]).unwrap().client_id is None

    def test_no_users_returns_empty_list(self, fake_supabase, client_row):
        result = RelationshipService(fake_supabase).get_users_by_client_id(client_row["id"])

        assert result.ok
        assert result.data == []

    def test_assign_unknown_user_is_not_found(self, fake_supabase, client_row):
        result = RelationshipService(fake_supabase).assign_user_to_client("missing", client_row["id"])

        assert not result.ok
        assert result.error.is_not_found
        assert str(result.error).startswith("Failed to assign user to client: ")

    def test_backend_error_is_prefixed_with_action(self, mock_supabase):
        supabase, builder = mock_supabase()
        builder.execute.side_effect = APIError({"message": "Database error", "code": "XX000"})

        result = RelationshipService(supabase).get_users_by_client_id("client1")

        assert not result.ok
        assert str(result.error) == "Failed to fetch users by client: Database error"
        assert result.error.message == "Database error"
        assert result.error.action == "Failed to fetch users by client"


class TestUserIndustryAssignment:
    """Tests for the profile -> industry foreign key."""

    def test_assign_and_unassign_industry(self, fake_supabase, user_row, industry_row):
        service = RelationshipService(fake_supabase)

        service.assign_user_to_industry(user_row["id"], industry_row["id"]).unwrap()
        assert service.get_industry_by_user_id(user_row["id"]).unwrap().industry_id == industry_row["id"]
        assert len(service.get_users_by_industry_id(industry_row["id"]).unwrap()) == 1

        profile = service.unassign_user_from_industry(user_row["id"]).unwrap()

        assert profile.industry_id is None
        assert service.get_users_by_industry_id(industry_row["id"]).unwrap() == []

    def test_unassign_sets_null_and_stamps_updated_at(self, mock_supabase):
        supabase, builder = mock_supabase([])

        RelationshipService(supabase).unassign_user_from_industry("u1")

        sent = builder.update.call_args.args[0]
        assert sent["industry_id"] is None
        assert "updated_at" in sent
        builder.eq.assert_called_once_with("id", "u1")


class TestGroupMembership:
    """Tests for membership rows and the member/manager lifecycle."""

    def test_assign_user_to_group_with_position(self, fake_supabase, group_row, user_row):
        service = RelationshipService(fake_supabase)

        member = service.assign_user_to_group(group_row["id"], user_row["id"], "Peer").unwrap()

        assert isinstance(member, GroupMemberResponse)
        assert member.role == MemberRole.MEMBER
        assert member.position == "Peer"
        assert [m.profile_id for m in service.get_users_by_group_id(group_row["id"]).unwrap()] == [user_row["id"]]
        assert [m.group_id for m in service.get_groups_by_user_id(user_row["id"]).unwrap()] == [group_row["id"]]

    def test_assigning_twice_is_rejected(self, fake_supabase, group_row, user_row):
        service = RelationshipService(fake_supabase)
        service.assign_user_to_group(group_row["id"], user_row["id"]).unwrap()

        again = service.assign_user_to_group(group_row["id"], user_row["id"])

        assert not again.ok
        assert again.error.is_conflict
        assert len(fake_supabase.rows("group_members")) == 1

    def test_membership_lifecycle(self, fake_supabase, group_row, user_row):
        service = RelationshipService(fake_supabase)
        group_id, user_id = group_row["id"], user_row["id"]

        assert service.get_membership(group_id, user_id).unwrap() is None

        service.assign_user_to_group(group_id, user_id).unwrap()
        assert service.get_membership(group_id, user_id).unwrap().role == MemberRole.MEMBER

        service.assign_manager_to_group(group_id, user_id).unwrap()
        assert service.get_membership(group_id, user_id).unwrap().is_manager

        service.remove_manager_from_group(group_id, user_id).unwrap()
        assert service.get_membership(group_id, user_id).unwrap().role == MemberRole.MEMBER

        service.remove_user_from_group(group_id, user_id).unwrap()
        assert service.get_membership(group_id, user_id).unwrap() is None

    def test_remove_from_group_deletes_managers_too(self, fake_supabase, group_row, user_row):
        service = RelationshipService(fake_supabase)
        service.assign_manager_to_group(group_row["id"], user_row["id"]).unwrap()

        assert service.remove_user_from_group(group_row["id"], user_row["id"]).ok
        assert fake_supabase.rows("group_members") == []

    def test_remove_non_member_is_not_found(self, fake_supabase, group_row, user_row):
        result = RelationshipService(fake_supabase).remove_user_from_group(group_row["id"], user_row["id"])

        assert result.error.is_not_found


class TestManagerAssignment:
    """Tests for promoting and demoting group managers."""

    def test_new_member_becomes_manager_in_one_row(self, fake_supabase, group_row, user_row):
        service = RelationshipService(fake_supabase)

        manager = service.assign_manager_to_group(group_row["id"], user_row["id"]).unwrap()

        assert manager.role == MemberRole.MANAGER
        assert len(fake_supabase.rows("group_members")) == 1

    def test_repeat_assignment_updates_same_row(self, fake_supabase, group_row, user_row):
        service = RelationshipService(fake_supabase)

        first = service.assign_manager_to_group(group_row["id"], user_row["id"]).unwrap()
        second = service.assign_manager_to_group(group_row["id"], user_row["id"]).unwrap()

        assert first.id == second.id
        assert len(fake_supabase.rows("group_members")) == 1

    def test_existing_member_promoted_keeps_position(self, fake_supabase, group_row, user_row):
        service = RelationshipService(fake_supabase)
        member = service.assign_user_to_group(group_row["id"], user_row["id"], "Director").unwrap()

        manager = service.assign_manager_to_group(group_row["id"], user_row["id"]).unwrap()

        assert manager.id == member.id
        assert manager.position == "Director"
        assert manager.is_manager

    def test_assignment_is_a_single_upsert(self, mock_supabase):
        """No read precedes the write, so there is no check-then-act window."""
        row = {
            "id": "m1", "group_id": "g1", "profile_id": "u1",
            "role": "manager", "created_at": "2024-01-01T00:00:00+00:00",
        }
        supabase, builder = mock_supabase([row])

        RelationshipService(supabase).assign_manager_to_group("g1", "u1")

        assert builder.method_calls == [
            call.upsert(
                {"group_id": "g1", "profile_id": "u1", "role": "manager"},
                on_conflict="group_id,profile_id",
            ),
            call.execute(),
        ]

    def test_concurrent_assignments_leave_one_row(self, fake_supabase, group_row, user_row):
        service = RelationshipService(fake_supabase)

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(
                lambda _: service.assign_manager_to_group(group_row["id"], user_row["id"]),
                range(8),
            ))

        assert all(r.ok for r in results)
        assert len(fake_supabase.rows("group_members")) == 1

    def test_listings_only_include_managers(self, fake_supabase, group_row, user_row):
        service = RelationshipService(fake_supabase)
        other = fake_supabase.seed("profiles", username="bob", name="Bob", email="bob@acme.test")
        service.assign_user_to_group(group_row["id"], other["id"]).unwrap()
        service.assign_manager_to_group(group_row["id"], user_row["id"]).unwrap()

        managers = service.get_managers_by_group_id(group_row["id"]).unwrap()
        managed = service.get_groups_where_user_is_manager(user_row["id"]).unwrap()

        assert [m.profile_id for m in managers] == [user_row["id"]]
        assert [m.group_id for m in managed] == [group_row["id"]]
        assert service.get_groups_where_user_is_manager(other["id"]).unwrap() == []

    def test_remove_manager_from_plain_member_is_not_found(self, fake_supabase, group_row, user_row):
        service = RelationshipService(fake_supabase)
        service.assign_user_to_group(group_row["id"], user_row["id"]).unwrap()

        result = service.remove_manager_from_group(group_row["id"], user_row["id"])

        assert result.error.is_not_found
        assert str(result.error).startswith("Failed to remove manager from group: ")
        assert len(fake_supabase.rows("group_members")) == 1


class TestLegacyLeaderRole:
    """Membership rows written with role 'leader' count as managers."""

    def _seed_rows(self, fake_supabase, group_row, user_row):
        other = fake_supabase.seed("profiles", username="bob", name="Bob", email="bob@acme.test")
        fake_supabase.seed("group_members", group_id=group_row["id"], profile_id=user_row["id"], role="leader")
        fake_supabase.seed("group_members", group_id=group_row["id"], profile_id=other["id"], role="member")
        return other

    def test_member_listing_reads_leader_as_manager(self, fake_supabase, group_row, user_row):
        self._seed_rows(fake_supabase, group_row, user_row)

        result = RelationshipService(fake_supabase).get_users_by_group_id(group_row["id"])

        assert result.ok
        roles = {m.profile_id: m.role for m in result.data}
        assert roles[user_row["id"]] == MemberRole.MANAGER
        assert len(roles) == 2

    def test_manager_listings_include_leader_rows(self, fake_supabase, group_row, user_row):
        other = self._seed_rows(fake_supabase, group_row, user_row)
        service = RelationshipService(fake_supabase)

        managers = service.get_managers_by_group_id(group_row["id"]).unwrap()

        assert [m.profile_id for m in managers] == [user_row["id"]]
        assert [g.group_id for g in service.get_groups_where_user_is_manager(user_row["id"]).unwrap()] == [group_row["id"]]
        assert service.get_groups_where_user_is_manager(other["id"]).unwrap() == []

    def test_leader_can_be_demoted(self, fake_supabase, group_row, user_row):
        self._seed_rows(fake_supabase, group_row, user_row)

        demoted = RelationshipService(fake_supabase).remove_manager_from_group(group_row["id"], user_row["id"]).unwrap()

        assert demoted.role == MemberRole.MEMBER

    def test_reassigning_rewrites_role_to_manager(self, fake_supabase, group_row, user_row):
        self._seed_rows(fake_supabase, group_row, user_row)

        RelationshipService(fake_supabase).assign_manager_to_group(group_row["id"], user_row["id"]).unwrap()

        stored = [r for r in fake_supabase.rows("group_members") if r["profile_id"] == user_row["id"]]
        assert [r["role"] for r in stored] == ["manager"]

    def test_migration_rewrites_only_leader_rows(self, fake_supabase, group_row, user_row):
        self._seed_rows(fake_supabase, group_row, user_row)

        migrated = RelationshipService(fake_supabase).migrate_legacy_manager_roles().unwrap()

        assert [m.profile_id for m in migrated] == [user_row["id"]]
        assert sorted(r["role"] for r in fake_supabase.rows("group_members")) == ["manager", "member"]

    def test_manager_query_matches_both_role_names(self, mock_supabase):
        supabase, builder = mock_supabase([])

        RelationshipService(supabase).get_managers_by_group_id("g1")

        builder.eq.assert_called_once_with("group_id", "g1")
        builder.in_.assert_called_once_with("role", ["manager", "leader"])

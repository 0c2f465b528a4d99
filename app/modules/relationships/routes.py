from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.groups.schemas import GroupMemberAdd, GroupMemberResponse
from app.modules.users.schemas import UserResponse
from app.modules.relationships.schemas import ClientAssign, IndustryAssign, ManagerAssign
from app.modules.relationships.service import RelationshipService
from app.core.dependencies import require_delete_confirmation, unwrap_result
from supabase import Client
from typing import List, Optional

router = APIRouter(tags=["relationships"])


def get_relationship_service(supabase: Client = Depends(get_supabase)) -> RelationshipService:
    return RelationshipService(supabase)


# User <-> Client

@router.get("/clients/{client_id}/users", response_model=List[UserResponse])
async def list_client_users(
    client_id: str,
    service: RelationshipService = Depends(get_relationship_service)
):
    return unwrap_result(service.get_users_by_client_id(client_id))


@router.get("/users/{user_id}/client", response_model=UserResponse)
async def get_user_client(
    user_id: str,
    service: RelationshipService = Depends(get_relationship_service)
):
    """Profile of the user; client_id is null when unassigned"""
    return unwrap_result(service.get_client_by_user_id(user_id))


@router.put("/users/{user_id}/client", response_model=UserResponse)
async def assign_user_to_client(
    user_id: str,
    body: ClientAssign,
    service: RelationshipService = Depends(get_relationship_service)
):
    return unwrap_result(service.assign_user_to_client(user_id, body.client_id))


@router.delete("/users/{user_id}/client", response_model=UserResponse)
async def unassign_user_from_client(
    user_id: str,
    service: RelationshipService = Depends(get_relationship_service)
):
    return unwrap_result(service.unassign_user_from_client(user_id))


# User <-> Industry

@router.get("/industries/{industry_id}/users", response_model=List[UserResponse])
async def list_industry_users(
    industry_id: str,
    service: RelationshipService = Depends(get_relationship_service)
):
    return unwrap_result(service.get_users_by_industry_id(industry_id))


@router.get("/users/{user_id}/industry", response_model=UserResponse)
async def get_user_industry(
    user_id: str,
    service: RelationshipService = Depends(get_relationship_service)
):
    return unwrap_result(service.get_industry_by_user_id(user_id))


@router.put("/users/{user_id}/industry", response_model=UserResponse)
async def assign_user_to_industry(
    user_id: str,
    body: IndustryAssign,
    service: RelationshipService = Depends(get_relationship_service)
):
    return unwrap_result(service.assign_user_to_industry(user_id, body.industry_id))


@router.delete("/users/{user_id}/industry", response_model=UserResponse)
async def unassign_user_from_industry(
    user_id: str,
    service: RelationshipService = Depends(get_relationship_service)
):
    return unwrap_result(service.unassign_user_from_industry(user_id))


# User <-> Group

@router.get("/groups/{group_id}/members", response_model=List[GroupMemberResponse])
async def list_group_members(
    group_id: str,
    service: RelationshipService = Depends(get_relationship_service)
):
    return unwrap_result(service.get_users_by_group_id(group_id))


@router.get("/users/{user_id}/groups", response_model=List[GroupMemberResponse])
async def list_user_groups(
    user_id: str,
    service: RelationshipService = Depends(get_relationship_service)
):
    return unwrap_result(service.get_groups_by_user_id(user_id))


@router.post("/groups/{group_id}/members", response_model=GroupMemberResponse, status_code=201)
async def add_group_member(
    group_id: str,
    member_data: GroupMemberAdd,
    service: RelationshipService = Depends(get_relationship_service)
):
    return unwrap_result(service.assign_user_to_group(group_id, member_data.user_id, member_data.position))


@router.delete(
    "/groups/{group_id}/members/{user_id}",
    status_code=204,
    dependencies=[Depends(require_delete_confirmation)]
)
async def remove_group_member(
    group_id: str,
    user_id: str,
    service: RelationshipService = Depends(get_relationship_service)
):
    unwrap_result(service.remove_user_from_group(group_id, user_id))
    return None


# Manager <-> Group

@router.get("/groups/{group_id}/managers", response_model=List[GroupMemberResponse])
async def list_group_managers(
    group_id: str,
    service: RelationshipService = Depends(get_relationship_service)
):
    return unwrap_result(service.get_managers_by_group_id(group_id))


@router.get("/users/{user_id}/managed-groups", response_model=List[GroupMemberResponse])
async def list_managed_groups(
    user_id: str,
    service: RelationshipService = Depends(get_relationship_service)
):
    return unwrap_result(service.get_groups_where_user_is_manager(user_id))


@router.put("/groups/{group_id}/managers/{user_id}", response_model=GroupMemberResponse)
async def assign_group_manager(
    group_id: str,
    user_id: str,
    body: Optional[ManagerAssign] = None,
    service: RelationshipService = Depends(get_relationship_service)
):
    """Promote (or add) the user as group manager"""
    position = body.position if body else None
    return unwrap_result(service.assign_manager_to_group(group_id, user_id, position))


@router.delete("/groups/{group_id}/managers/{user_id}", response_model=GroupMemberResponse)
async def remove_group_manager(
    group_id: str,
    user_id: str,
    service: RelationshipService = Depends(get_relationship_service)
):
    """Demote the manager to a plain member"""
    return unwrap_result(service.remove_manager_from_group(group_id, user_id))

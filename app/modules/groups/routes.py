from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.groups.schemas import GroupCreate, GroupUpdate, GroupResponse
from app.modules.groups.service import GroupService
from app.core.dependencies import get_filters, get_sort, require_delete_confirmation, unwrap_result
from app.core.query import Filter, SortSpec
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/groups", tags=["groups"])


def get_group_service(supabase: Client = Depends(get_supabase)) -> GroupService:
    return GroupService(supabase)


@router.get("", response_model=List[GroupResponse])
async def list_groups(
    sort: Optional[SortSpec] = Depends(get_sort),
    filters: List[Filter] = Depends(get_filters),
    service: GroupService = Depends(get_group_service)
):
    """List groups, e.g. ?filter=client_id:<id>&sort_by=name"""
    return unwrap_result(service.select_groups(sort, filters))


@router.post("", response_model=GroupResponse, status_code=201)
async def create_group(
    group_data: GroupCreate,
    service: GroupService = Depends(get_group_service)
):
    return unwrap_result(service.insert_group(group_data))


@router.get("/{group_id}", response_model=GroupResponse)
async def get_group(
    group_id: str,
    service: GroupService = Depends(get_group_service)
):
    return unwrap_result(service.select_group_by_id(group_id))


@router.put("/{group_id}", response_model=GroupResponse)
async def update_group(
    group_id: str,
    group_data: GroupUpdate,
    service: GroupService = Depends(get_group_service)
):
    return unwrap_result(service.update_group(group_id, group_data))


@router.delete("/{group_id}", status_code=204, dependencies=[Depends(require_delete_confirmation)])
async def delete_group(
    group_id: str,
    service: GroupService = Depends(get_group_service)
):
    unwrap_result(service.delete_group(group_id))
    return None

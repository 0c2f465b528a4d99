from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.users.schemas import UserCreate, UserUpdate, UserResponse
from app.modules.users.service import UserService
from app.core.dependencies import get_filters, get_sort, require_delete_confirmation, unwrap_result
from app.core.query import Filter, SortSpec
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(supabase: Client = Depends(get_supabase)) -> UserService:
    return UserService(supabase)


@router.get("", response_model=List[UserResponse])
async def list_users(
    sort: Optional[SortSpec] = Depends(get_sort),
    filters: List[Filter] = Depends(get_filters),
    service: UserService = Depends(get_user_service)
):
    """List users with optional sort and filters"""
    return unwrap_result(service.select_users(sort, filters))


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(
    user_data: UserCreate,
    service: UserService = Depends(get_user_service)
):
    return unwrap_result(service.insert_user(user_data))


@router.get("/by-email", response_model=UserResponse)
async def get_user_by_email(
    email: str,
    service: UserService = Depends(get_user_service)
):
    return unwrap_result(service.select_user_by_email(email))


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service)
):
    return unwrap_result(service.select_user_by_id(user_id))


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    user_data: UserUpdate,
    service: UserService = Depends(get_user_service)
):
    return unwrap_result(service.update_user(user_id, user_data))


@router.delete("/{user_id}", status_code=204, dependencies=[Depends(require_delete_confirmation)])
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service)
):
    unwrap_result(service.delete_user(user_id))
    return None

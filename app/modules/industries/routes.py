from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.industries.schemas import IndustryCreate, IndustryUpdate, IndustryResponse
from app.modules.industries.service import IndustryService
from app.core.dependencies import get_filters, get_sort, require_delete_confirmation, unwrap_result
from app.core.query import Filter, SortSpec
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/industries", tags=["industries"])


def get_industry_service(supabase: Client = Depends(get_supabase)) -> IndustryService:
    return IndustryService(supabase)


@router.get("", response_model=List[IndustryResponse])
async def list_industries(
    sort: Optional[SortSpec] = Depends(get_sort),
    filters: List[Filter] = Depends(get_filters),
    service: IndustryService = Depends(get_industry_service)
):
    return unwrap_result(service.select_industries(sort, filters))


@router.post("", response_model=IndustryResponse, status_code=201)
async def create_industry(
    industry_data: IndustryCreate,
    service: IndustryService = Depends(get_industry_service)
):
    return unwrap_result(service.insert_industry(industry_data))


@router.get("/{industry_id}", response_model=IndustryResponse)
async def get_industry(
    industry_id: str,
    service: IndustryService = Depends(get_industry_service)
):
    return unwrap_result(service.select_industry_by_id(industry_id))


@router.put("/{industry_id}", response_model=IndustryResponse)
async def update_industry(
    industry_id: str,
    industry_data: IndustryUpdate,
    service: IndustryService = Depends(get_industry_service)
):
    return unwrap_result(service.update_industry(industry_id, industry_data))


@router.delete("/{industry_id}", status_code=204, dependencies=[Depends(require_delete_confirmation)])
async def delete_industry(
    industry_id: str,
    service: IndustryService = Depends(get_industry_service)
):
    unwrap_result(service.delete_industry(industry_id))
    return None

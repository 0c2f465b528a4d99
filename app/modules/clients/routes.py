from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.clients.schemas import ClientCreate, ClientUpdate, ClientResponse
from app.modules.clients.service import ClientService
from app.core.dependencies import get_filters, get_sort, require_delete_confirmation, unwrap_result
from app.core.query import Filter, SortSpec
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/clients", tags=["clients"])


def get_client_service(supabase: Client = Depends(get_supabase)) -> ClientService:
    return ClientService(supabase)


@router.get("", response_model=List[ClientResponse])
async def list_clients(
    sort: Optional[SortSpec] = Depends(get_sort),
    filters: List[Filter] = Depends(get_filters),
    service: ClientService = Depends(get_client_service)
):
    """List clients with optional sort and filters"""
    return unwrap_result(service.select_clients(sort, filters))


@router.post("", response_model=ClientResponse, status_code=201)
async def create_client(
    client_data: ClientCreate,
    service: ClientService = Depends(get_client_service)
):
    return unwrap_result(service.insert_client(client_data))


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: str,
    service: ClientService = Depends(get_client_service)
):
    return unwrap_result(service.select_client_by_id(client_id))


@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: str,
    client_data: ClientUpdate,
    service: ClientService = Depends(get_client_service)
):
    return unwrap_result(service.update_client(client_id, client_data))


@router.delete("/{client_id}", status_code=204, dependencies=[Depends(require_delete_confirmation)])
async def delete_client(
    client_id: str,
    service: ClientService = Depends(get_client_service)
):
    """Delete client (groups cascade, member profiles keep a null client_id)"""
    unwrap_result(service.delete_client(client_id))
    return None

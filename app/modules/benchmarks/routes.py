from fastapi import APIRouter, Depends
from app.database.supabase_client import get_supabase
from app.modules.benchmarks.schemas import BenchmarkCreate, BenchmarkUpdate, BenchmarkResponse
from app.modules.benchmarks.service import BenchmarkService
from app.core.dependencies import get_filters, get_sort, require_delete_confirmation, unwrap_result
from app.core.query import Filter, SortSpec
from supabase import Client
from typing import List, Optional

router = APIRouter(prefix="/benchmarks", tags=["benchmarks"])


def get_benchmark_service(supabase: Client = Depends(get_supabase)) -> BenchmarkService:
    return BenchmarkService(supabase)


@router.get("", response_model=List[BenchmarkResponse])
async def list_benchmarks(
    sort: Optional[SortSpec] = Depends(get_sort),
    filters: List[Filter] = Depends(get_filters),
    service: BenchmarkService = Depends(get_benchmark_service)
):
    """List benchmarks, e.g. ?filter=value:gte:50&filter=value:lte:90&filter=industry_id:<id>"""
    return unwrap_result(service.select_benchmarks(sort, filters))


@router.post("", response_model=BenchmarkResponse, status_code=201)
async def create_benchmark(
    benchmark_data: BenchmarkCreate,
    service: BenchmarkService = Depends(get_benchmark_service)
):
    """Create a benchmark; one per (dimension, industry) pair"""
    return unwrap_result(service.insert_benchmark(benchmark_data))


@router.get("/{benchmark_id}", response_model=BenchmarkResponse)
async def get_benchmark(
    benchmark_id: str,
    service: BenchmarkService = Depends(get_benchmark_service)
):
    return unwrap_result(service.select_benchmark_by_id(benchmark_id))


@router.put("/{benchmark_id}", response_model=BenchmarkResponse)
async def update_benchmark(
    benchmark_id: str,
    benchmark_data: BenchmarkUpdate,
    service: BenchmarkService = Depends(get_benchmark_service)
):
    return unwrap_result(service.update_benchmark(benchmark_id, benchmark_data))


@router.delete("/{benchmark_id}", status_code=204, dependencies=[Depends(require_delete_confirmation)])
async def delete_benchmark(
    benchmark_id: str,
    service: BenchmarkService = Depends(get_benchmark_service)
):
    unwrap_result(service.delete_benchmark(benchmark_id))
    return None

from supabase import Client
from app.core.crud import TableQueries
from app.core.query import Filter, FilterOperator, SortSpec
from app.core.result import QueryResult
from app.modules.benchmarks.schemas import BenchmarkCreate, BenchmarkUpdate, BenchmarkResponse
from typing import List, Optional


class BenchmarkService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.queries = TableQueries(supabase, "benchmarks", BenchmarkResponse, label="Benchmark")

    def select_benchmarks(
        self,
        sort: Optional[SortSpec] = None,
        filters: Optional[List[Filter]] = None
    ) -> QueryResult:
        return self.queries.select_all(sort, filters)

    def select_benchmarks_in_range(
        self,
        minimum: float,
        maximum: float,
        sort: Optional[SortSpec] = None
    ) -> QueryResult:
        """Benchmarks whose value lies in [minimum, maximum], inclusive on both ends"""
        filters = [
            Filter(column="value", value=minimum, operator=FilterOperator.GTE),
            Filter(column="value", value=maximum, operator=FilterOperator.LTE),
        ]
        return self.queries.select_all(sort, filters)

    def select_benchmark_by_id(self, benchmark_id: str) -> QueryResult:
        return self.queries.select_by_id(benchmark_id)

    def insert_benchmark(self, benchmark_data: BenchmarkCreate) -> QueryResult:
        return self.queries.insert(benchmark_data.model_dump(mode="json"))

    def update_benchmark(self, benchmark_id: str, benchmark_data: BenchmarkUpdate) -> QueryResult:
        return self.queries.update(benchmark_id, benchmark_data.model_dump(mode="json", exclude_unset=True))

    def delete_benchmark(self, benchmark_id: str) -> QueryResult:
        return self.queries.delete(benchmark_id)

from supabase import Client
from app.core.crud import TableQueries
from app.core.query import Filter, SortSpec
from app.core.result import QueryResult
from app.modules.industries.schemas import IndustryCreate, IndustryUpdate, IndustryResponse
from typing import List, Optional


class IndustryService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.queries = TableQueries(supabase, "industries", IndustryResponse, label="Industry")

    def select_industries(
        self,
        sort: Optional[SortSpec] = None,
        filters: Optional[List[Filter]] = None
    ) -> QueryResult:
        return self.queries.select_all(sort, filters)

    def select_industry_by_id(self, industry_id: str) -> QueryResult:
        return self.queries.select_by_id(industry_id)

    def insert_industry(self, industry_data: IndustryCreate) -> QueryResult:
        return self.queries.insert(industry_data.model_dump(mode="json"))

    def update_industry(self, industry_id: str, industry_data: IndustryUpdate) -> QueryResult:
        return self.queries.update(industry_id, industry_data.model_dump(mode="json", exclude_unset=True))

    def delete_industry(self, industry_id: str) -> QueryResult:
        """Delete industry; its benchmarks cascade and profiles are detached"""
        return self.queries.delete(industry_id)

from supabase import Client
from app.core.crud import TableQueries
from app.core.query import Filter, SortSpec
from app.core.result import QueryResult
from app.modules.clients.schemas import ClientCreate, ClientUpdate, ClientResponse
from typing import List, Optional


class ClientService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.queries = TableQueries(supabase, "clients", ClientResponse, label="Client")

    def select_clients(
        self,
        sort: Optional[SortSpec] = None,
        filters: Optional[List[Filter]] = None
    ) -> QueryResult:
        """List clients, newest first by default"""
        return self.queries.select_all(sort, filters)

    def select_client_by_id(self, client_id: str) -> QueryResult:
        return self.queries.select_by_id(client_id)

    def insert_client(self, client_data: ClientCreate) -> QueryResult:
        """Create a client. Duplicate names surface whatever error the table constraint raises."""
        return self.queries.insert(client_data.model_dump(mode="json"))

    def update_client(self, client_id: str, client_data: ClientUpdate) -> QueryResult:
        return self.queries.update(client_id, client_data.model_dump(mode="json", exclude_unset=True))

    def delete_client(self, client_id: str) -> QueryResult:
        return self.queries.delete(client_id)

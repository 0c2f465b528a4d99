"""
Supabase client handles.

The API uses the anon key so row level security applies; admin scripts such
as the demo seeder use the service-role key. Handles are created on first use
and cached per key.
"""

import logging
from typing import Dict, Optional

from supabase import create_client, Client
from app.config.settings import settings

logger = logging.getLogger(__name__)


class SupabaseClient:
    _clients: Dict[str, Client] = {}

    @classmethod
    def _connect(cls, role: str, key: Optional[str]) -> Client:
        if role not in cls._clients:
            if not settings.supabase_url or not key:
                raise RuntimeError(f"Supabase {role} credentials are not configured")
            logger.info(f"Connecting to Supabase as {role}")
            cls._clients[role] = create_client(settings.supabase_url, key)
        return cls._clients[role]

    @classmethod
    def get_client(cls) -> Client:
        return cls._connect("anon", settings.supabase_key)

    @classmethod
    def get_service_client(cls) -> Client:
        """Service-role handle (bypasses RLS); falls back to the anon handle when no service key is set"""
        if not settings.supabase_service_role_key:
            logger.warning("SUPABASE_SERVICE_ROLE_KEY not set; using the anon key")
            return cls.get_client()
        return cls._connect("service_role", settings.supabase_service_role_key)

    @classmethod
    def reset_client(cls):
        cls._clients.clear()


def get_supabase() -> Client:
    """FastAPI dependency for the request-scoped query layer"""
    return SupabaseClient.get_client()

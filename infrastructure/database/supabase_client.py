"""
Supabase client initialization.
Single point of backend connection (tables, storage, auth admin).
"""

from supabase import create_client, Client
from supabase.lib.client_options import ClientOptions
import asyncio
import concurrent.futures
import logging
from functools import wraps
from typing import Optional

from config.settings import settings

logger = logging.getLogger(__name__)

_client: Optional[Client] = None


def _credentials(service: bool) -> tuple[str, str]:
    url = settings.supabase_url
    key = (settings.supabase_service_key or settings.supabase_key) if service else settings.supabase_key
    if not url or not key:
        logger.error(
            "Supabase credentials not configured! "
            f"SUPABASE_URL: {'set' if url else 'MISSING'}, "
            f"SUPABASE_{'SERVICE_' if service else ''}KEY: {'set' if key else 'MISSING'}"
        )
        raise RuntimeError("Supabase credentials not configured (check your .env)")
    return url, key


def get_supabase() -> Client:
    """Shared service-role client for tables, storage and auth admin"""
    global _client
    if _client is None:
        url, key = _credentials(service=True)
        # Schema isolation: staging may use a separate schema
        if settings.db_schema != "public":
            _client = create_client(url, key, options=ClientOptions(schema=settings.db_schema))
        else:
            _client = create_client(url, key)
    return _client


def new_auth_client() -> Client:
    """
    Fresh anon client for a single auth flow.
    A Supabase client keeps the signed-in session in memory, so sign-ins for
    different chat users must not share one.
    """
    url, key = _credentials(service=False)
    return create_client(url, key)


# Dedicated bounded thread pool for DB operations - prevents exhausting the
# default executor when many Supabase calls run concurrently.
_db_executor = concurrent.futures.ThreadPoolExecutor(
    max_workers=10,
    thread_name_prefix="supabase-db",
)


def run_sync(func):
    """
    Decorator to run synchronous Supabase operations in async context.
    Supabase Python SDK is synchronous, so we need this wrapper.
    Uses a dedicated bounded thread pool instead of the default executor.
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(_db_executor, lambda: func(*args, **kwargs))
    return wrapper

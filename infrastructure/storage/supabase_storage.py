"""
Supabase Storage implementation of image storage.
"""

import logging
from typing import Optional

from supabase import Client

from config.settings import settings
from core.domain.constants import IMAGE_CONTENT_TYPE
from core.interfaces.storage import IImageStorage
from infrastructure.database.supabase_client import get_supabase, run_sync

logger = logging.getLogger(__name__)


class SupabaseImageStorage(IImageStorage):
    """Images live in one bucket; the handle is the object path"""

    def __init__(self, client: Optional[Client] = None, bucket: Optional[str] = None):
        self._client = client
        self.bucket = bucket or settings.storage_bucket

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_supabase()
        return self._client

    @run_sync
    def _upload_sync(self, data: bytes, path: str) -> str:
        self.client.storage.from_(self.bucket).upload(
            path=path,
            file=data,
            file_options={"content-type": IMAGE_CONTENT_TYPE},
        )
        return path

    async def upload(self, data: bytes, path: str) -> str:
        handle = await self._upload_sync(data, path)
        logger.info(f"[STORAGE] Uploaded {len(data)} bytes to {self.bucket}/{path}")
        return handle

    @run_sync
    def _public_url_sync(self, handle: str) -> str:
        return self.client.storage.from_(self.bucket).get_public_url(handle)

    async def public_url(self, handle: str) -> str:
        return await self._public_url_sync(handle)

    @run_sync
    def _delete_sync(self, handle: str) -> None:
        self.client.storage.from_(self.bucket).remove([handle])

    async def delete(self, handle: str) -> None:
        await self._delete_sync(handle)
        logger.info(f"[STORAGE] Removed {self.bucket}/{handle}")

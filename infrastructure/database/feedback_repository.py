"""
Supabase implementation of Feedback repository.
"""

from typing import Optional, List
from uuid import UUID
from supabase import Client
from core.domain.constants import FEEDBACK_TABLE
from core.domain.models import FeedbackCreate, FeedbackMessage
from core.interfaces.repositories import IFeedbackRepository
from infrastructure.database.supabase_client import get_supabase, run_sync


class SupabaseFeedbackRepository(IFeedbackRepository):
    """Supabase implementation of feedback repository"""

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_supabase()
        return self._client

    def _to_model(self, data: dict) -> FeedbackMessage:
        return FeedbackMessage(
            id=data["id"],
            submitted_by=data["submitted_by"],
            body=data.get("body") or "",
            submitted_at=data.get("submitted_at"),
            read=data.get("read", False),
        )

    @run_sync
    def _create_sync(self, data: FeedbackCreate) -> dict:
        response = self.client.table(FEEDBACK_TABLE).insert({
            "submitted_by": data.submitted_by,
            "body": data.body,
            "read": False,
        }).execute()
        return response.data[0]

    async def create(self, data: FeedbackCreate) -> FeedbackMessage:
        row = await self._create_sync(data)
        return self._to_model(row)

    @run_sync
    def _list_unread_sync(self) -> List[dict]:
        response = self.client.table(FEEDBACK_TABLE).select("*")\
            .eq("read", False)\
            .order("submitted_at")\
            .execute()
        return response.data or []

    async def list_unread(self) -> List[FeedbackMessage]:
        data = await self._list_unread_sync()
        return [self._to_model(d) for d in data]

    @run_sync
    def _get_by_id_sync(self, feedback_id: UUID) -> Optional[dict]:
        response = self.client.table(FEEDBACK_TABLE).select("*").eq("id", str(feedback_id)).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, feedback_id: UUID) -> Optional[FeedbackMessage]:
        data = await self._get_by_id_sync(feedback_id)
        return self._to_model(data) if data else None

    @run_sync
    def _mark_read_sync(self, feedback_id: UUID) -> Optional[dict]:
        response = self.client.table(FEEDBACK_TABLE).update({"read": True})\
            .eq("id", str(feedback_id))\
            .execute()
        return response.data[0] if response.data else None

    async def mark_read(self, feedback_id: UUID) -> Optional[FeedbackMessage]:
        data = await self._mark_read_sync(feedback_id)
        return self._to_model(data) if data else None

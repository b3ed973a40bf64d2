"""
Supabase implementation of Match repository.

Membership changes and account cleanup go through Postgres functions
(see schema.sql) so the check and the write happen in one transaction.
"""

import logging
from typing import Optional, List
from uuid import UUID
from supabase import Client
from core.domain.constants import (
    MATCHES_TABLE,
    RPC_DETACH_USER,
    RPC_JOIN_MATCH,
    RPC_LEAVE_MATCH,
)
from core.domain.models import Match, MatchCreate
from core.interfaces.repositories import IMatchRepository
from infrastructure.database.supabase_client import get_supabase, run_sync

logger = logging.getLogger(__name__)


def _scalar(value):
    """RPC results come back either bare or wrapped in a one-row list"""
    if isinstance(value, list):
        if not value:
            return None
        value = value[0]
        if isinstance(value, dict) and len(value) == 1:
            return next(iter(value.values()))
    return value


class SupabaseMatchRepository(IMatchRepository):
    """Supabase implementation of match repository"""

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_supabase()
        return self._client

    def _to_model(self, data: dict) -> Match:
        """Convert database row to Match model"""
        return Match(
            id=data["id"],
            name=data["name"],
            capacity=data["capacity"],
            date_time=data["date_time"],
            location=data["location"],
            latitude=data["latitude"],
            longitude=data["longitude"],
            venue_price=data.get("venue_price") or 0,
            price_per_player=data.get("price_per_player") or 0,
            gender=data["gender"],
            description=data.get("description") or "",
            image_url=data.get("image_url") or "",
            live=data.get("live", True),
            created_by=data.get("created_by"),
            created_at=data.get("created_at"),
            members=data.get("members") or [],
        )

    @run_sync
    def _get_by_id_sync(self, match_id: UUID) -> Optional[dict]:
        response = self.client.table(MATCHES_TABLE).select("*").eq("id", str(match_id)).execute()
        return response.data[0] if response.data else None

    async def get_by_id(self, match_id: UUID) -> Optional[Match]:
        data = await self._get_by_id_sync(match_id)
        return self._to_model(data) if data else None

    @run_sync
    def _create_sync(self, match_data: MatchCreate) -> dict:
        data = {
            "name": match_data.name,
            "capacity": match_data.capacity,
            "date_time": match_data.date_time.isoformat(),
            "location": match_data.location,
            "latitude": match_data.latitude,
            "longitude": match_data.longitude,
            "venue_price": match_data.venue_price,
            "price_per_player": match_data.price_per_player,
            "gender": match_data.gender.value,
            "description": match_data.description,
            "image_url": match_data.image_url,
            "live": True,
            "created_by": match_data.created_by,
            "members": [],
        }
        response = self.client.table(MATCHES_TABLE).insert(data).execute()
        return response.data[0]

    async def create(self, match_data: MatchCreate) -> Match:
        data = await self._create_sync(match_data)
        return self._to_model(data)

    @run_sync
    def _list_live_sync(self) -> List[dict]:
        response = self.client.table(MATCHES_TABLE).select("*")\
            .eq("live", True)\
            .order("date_time")\
            .execute()
        return response.data or []

    async def list_live(self) -> List[Match]:
        data = await self._list_live_sync()
        return [self._to_model(d) for d in data]

    @run_sync
    def _list_live_for_member_sync(self, email: str) -> List[dict]:
        response = self.client.table(MATCHES_TABLE).select("*")\
            .eq("live", True)\
            .contains("members", [email])\
            .order("date_time")\
            .execute()
        return response.data or []

    async def list_live_for_member(self, email: str) -> List[Match]:
        data = await self._list_live_for_member_sync(email)
        return [self._to_model(d) for d in data]

    @run_sync
    def _set_live_sync(self, match_id: UUID, live: bool) -> Optional[dict]:
        response = self.client.table(MATCHES_TABLE).update({"live": live})\
            .eq("id", str(match_id))\
            .execute()
        return response.data[0] if response.data else None

    async def set_live(self, match_id: UUID, live: bool) -> Optional[Match]:
        data = await self._set_live_sync(match_id, live)
        return self._to_model(data) if data else None

    @run_sync
    def _rpc_sync(self, fn: str, params: dict):
        response = self.client.rpc(fn, params).execute()
        return _scalar(response.data)

    async def add_member(self, match_id: UUID, email: str) -> str:
        return await self._rpc_sync(RPC_JOIN_MATCH, {
            "p_match_id": str(match_id),
            "p_email": email,
        })

    async def remove_member(self, match_id: UUID, email: str) -> str:
        return await self._rpc_sync(RPC_LEAVE_MATCH, {
            "p_match_id": str(match_id),
            "p_email": email,
        })

    async def detach_user(self, email: str) -> int:
        touched = await self._rpc_sync(RPC_DETACH_USER, {"p_email": email})
        return int(touched or 0)

"""
Supabase implementation of User repository.
"""

from typing import Optional
from supabase import Client
from core.domain.constants import USERS_TABLE
from core.domain.models import UserProfile, UserProfileUpdate
from core.interfaces.repositories import IUserRepository
from infrastructure.database.supabase_client import get_supabase, run_sync


class SupabaseUserRepository(IUserRepository):
    """Supabase implementation of user repository"""

    def __init__(self, client: Optional[Client] = None):
        self._client = client

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = get_supabase()
        return self._client

    def _to_model(self, data: dict) -> UserProfile:
        """Convert database row to UserProfile model"""
        return UserProfile(
            email=data["email"],
            forename=data.get("forename") or "",
            surname=data.get("surname") or "",
            is_admin=bool(data.get("is_admin", False)),
            matches=data.get("matches") or [],
        )

    @run_sync
    def _get_by_email_sync(self, email: str) -> Optional[dict]:
        response = self.client.table(USERS_TABLE).select("*").eq("email", email).execute()
        return response.data[0] if response.data else None

    async def get_by_email(self, email: str) -> Optional[UserProfile]:
        data = await self._get_by_email_sync(email)
        return self._to_model(data) if data else None

    @run_sync
    def _create_sync(self, profile: UserProfile) -> dict:
        data = {
            "email": profile.email,
            "forename": profile.forename,
            "surname": profile.surname,
            "is_admin": profile.is_admin,
            "matches": profile.matches,
        }
        response = self.client.table(USERS_TABLE).insert(data).execute()
        return response.data[0]

    async def create(self, profile: UserProfile) -> UserProfile:
        data = await self._create_sync(profile)
        return self._to_model(data)

    @run_sync
    def _update_sync(self, email: str, data: UserProfileUpdate) -> Optional[dict]:
        update_dict = data.model_dump(exclude_unset=True, exclude_none=True)
        if not update_dict:
            return None
        response = self.client.table(USERS_TABLE).update(update_dict).eq("email", email).execute()
        return response.data[0] if response.data else None

    async def update(self, email: str, data: UserProfileUpdate) -> Optional[UserProfile]:
        row = await self._update_sync(email, data)
        return self._to_model(row) if row else None

    @run_sync
    def _delete_sync(self, email: str) -> None:
        self.client.table(USERS_TABLE).delete().eq("email", email).execute()

    async def delete(self, email: str) -> None:
        await self._delete_sync(email)

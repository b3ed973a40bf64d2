"""
Session context - who is signed in on a given chat client.

One SessionContext per client, held by a SessionRegistry that is created at
app start and handed to the Telegram layer through middleware. Nothing here is
persisted: restarting the bot signs everybody out.
"""

import logging
from typing import Dict, Optional

from core.domain.models import AuthSession, SessionState, UserProfile
from core.interfaces.repositories import IUserRepository

logger = logging.getLogger(__name__)


class SessionContext:
    """Holds the current profile with an explicit reload"""

    def __init__(self, user_repo: IUserRepository, auth: Optional[AuthSession] = None):
        self.user_repo = user_repo
        self.auth = auth
        self.profile: Optional[UserProfile] = None
        self.state = SessionState.UNAUTHENTICATED if auth is None else SessionState.LOADING

    @property
    def email(self) -> Optional[str]:
        return self.auth.email if self.auth else None

    @property
    def is_authenticated(self) -> bool:
        return self.state == SessionState.AUTHENTICATED and self.profile is not None

    async def load(self) -> Optional[UserProfile]:
        """Fetch the profile for the signed-in identity. None if no session or no profile."""
        if not self.email:
            self.profile = None
            self.state = SessionState.UNAUTHENTICATED
            return None

        self.state = SessionState.LOADING
        try:
            profile = await self.user_repo.get_by_email(self.email)
        except Exception as e:
            logger.error(f"[SESSION] Error fetching profile for {self.email}: {e}")
            profile = None

        if profile is None:
            logger.warning(f"[SESSION] No profile document for {self.email}")

        self.profile = profile
        self.state = SessionState.AUTHENTICATED if profile else SessionState.UNAUTHENTICATED
        return profile

    async def reload(self) -> Optional[UserProfile]:
        """Re-run load() and replace the held profile (e.g. after an edit)"""
        return await self.load()

    async def start(self, auth: AuthSession) -> Optional[UserProfile]:
        """Attach a fresh sign-in and load its profile"""
        self.auth = auth
        return await self.load()

    def clear(self) -> None:
        self.auth = None
        self.profile = None
        self.state = SessionState.UNAUTHENTICATED


class SessionRegistry:
    """In-memory map of chat client id -> SessionContext"""

    def __init__(self, user_repo: IUserRepository):
        self.user_repo = user_repo
        self._sessions: Dict[int, SessionContext] = {}

    def get(self, client_id: int) -> SessionContext:
        session = self._sessions.get(client_id)
        if session is None:
            session = SessionContext(self.user_repo)
            self._sessions[client_id] = session
        return session

    def drop(self, client_id: int) -> None:
        self._sessions.pop(client_id, None)

    def __len__(self) -> int:
        return len(self._sessions)

"""
Repository interfaces - abstractions for data access.
This allows swapping implementations (Supabase -> PostgreSQL -> in-memory for tests, etc.)
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from uuid import UUID
from core.domain.models import (
    UserProfile, UserProfileUpdate,
    Match, MatchCreate,
    FeedbackMessage, FeedbackCreate,
)


class IUserRepository(ABC):
    """Interface for user profile data access"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[UserProfile]:
        """Get profile by email (primary key)"""
        pass

    @abstractmethod
    async def create(self, profile: UserProfile) -> UserProfile:
        """Create a new profile"""
        pass

    @abstractmethod
    async def update(self, email: str, data: UserProfileUpdate) -> Optional[UserProfile]:
        """Update profile fields, returns None if nothing matched"""
        pass

    @abstractmethod
    async def delete(self, email: str) -> None:
        """Delete the profile row"""
        pass


class IMatchRepository(ABC):
    """Interface for match data access"""

    @abstractmethod
    async def get_by_id(self, match_id: UUID) -> Optional[Match]:
        """Get match by ID (live or archived)"""
        pass

    @abstractmethod
    async def create(self, match_data: MatchCreate) -> Match:
        """Insert a live match with no members"""
        pass

    @abstractmethod
    async def list_live(self) -> List[Match]:
        """Live matches ordered by date_time ascending"""
        pass

    @abstractmethod
    async def list_live_for_member(self, email: str) -> List[Match]:
        """Live matches whose member list contains email, ordered by date_time"""
        pass

    @abstractmethod
    async def set_live(self, match_id: UUID, live: bool) -> Optional[Match]:
        """Flip the liveness flag"""
        pass

    @abstractmethod
    async def add_member(self, match_id: UUID, email: str) -> str:
        """
        Atomic conditional append.
        Returns one of: 'joined', 'already_member', 'full', 'not_found'.
        """
        pass

    @abstractmethod
    async def remove_member(self, match_id: UUID, email: str) -> str:
        """
        Atomic removal.
        Returns one of: 'left', 'not_member', 'not_found'.
        """
        pass

    @abstractmethod
    async def detach_user(self, email: str) -> int:
        """
        Strip email from every match's members and created_by in one batch.
        Returns number of matches touched.
        """
        pass


class IFeedbackRepository(ABC):
    """Interface for feedback data access"""

    @abstractmethod
    async def create(self, data: FeedbackCreate) -> FeedbackMessage:
        pass

    @abstractmethod
    async def list_unread(self) -> List[FeedbackMessage]:
        """Unread messages, oldest first"""
        pass

    @abstractmethod
    async def get_by_id(self, feedback_id: UUID) -> Optional[FeedbackMessage]:
        pass

    @abstractmethod
    async def mark_read(self, feedback_id: UUID) -> Optional[FeedbackMessage]:
        pass

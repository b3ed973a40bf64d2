"""
Domain models - the core of business logic.
These models are transport-agnostic (work with Telegram, a web API, etc.)
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from uuid import UUID
from enum import Enum


# === ENUMS ===

class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    MIXED = "Mixed"


class MatchState(str, Enum):
    """Visibility of a match. Unsaved drafts live in the upload form only."""
    LIVE = "live"
    ARCHIVED = "archived"


class Role(str, Enum):
    ADMIN = "admin"
    PLAYER = "player"


class SessionState(str, Enum):
    LOADING = "loading"
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


# === USER ===

class UserProfile(BaseModel):
    """Stored profile, keyed by email"""
    email: str
    forename: str
    surname: str
    is_admin: bool = False
    matches: List[str] = Field(default_factory=list)  # reserved, never populated

    @property
    def role(self) -> Role:
        return Role.ADMIN if self.is_admin else Role.PLAYER


class UserProfileUpdate(BaseModel):
    """Data for updating a profile"""
    forename: Optional[str] = None
    surname: Optional[str] = None


class AuthSession(BaseModel):
    """Result of a successful sign-in with the identity provider"""
    user_id: str
    email: str
    email_verified: bool = False
    access_token: Optional[str] = None


# === MATCH ===

class Coordinates(BaseModel):
    latitude: float
    longitude: float


class MatchDraft(BaseModel):
    """A match being composed by an admin - nothing persisted yet"""
    name: Optional[str] = None
    capacity: Optional[int] = None
    date_time: Optional[datetime] = None
    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    venue_price: Optional[float] = None
    price_per_player: Optional[float] = None
    gender: Optional[Gender] = None
    description: Optional[str] = None
    image: Optional[bytes] = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class MatchCreate(BaseModel):
    """Fully validated data for persisting a live match"""
    name: str
    capacity: int = Field(gt=0)
    date_time: datetime
    location: str
    latitude: float
    longitude: float
    venue_price: float = Field(ge=0)
    price_per_player: float = Field(ge=0)
    gender: Gender
    description: str
    image_url: str
    created_by: Optional[str] = None


class Match(BaseModel):
    """Full match model"""
    id: UUID
    name: str
    capacity: int
    date_time: datetime
    location: str
    latitude: float
    longitude: float
    venue_price: float
    price_per_player: float
    gender: Gender
    description: str
    image_url: str
    live: bool = True
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    members: List[str] = Field(default_factory=list)  # join order

    class Config:
        from_attributes = True

    @property
    def state(self) -> MatchState:
        return MatchState.LIVE if self.live else MatchState.ARCHIVED

    @property
    def spots_left(self) -> int:
        return max(self.capacity - len(self.members), 0)

    @property
    def is_full(self) -> bool:
        return len(self.members) >= self.capacity

    def has_member(self, email: str) -> bool:
        return email in self.members


# === FEEDBACK ===

class FeedbackCreate(BaseModel):
    submitted_by: str
    body: str


class FeedbackMessage(BaseModel):
    id: UUID
    submitted_by: str
    body: str
    submitted_at: Optional[datetime] = None
    read: bool = False

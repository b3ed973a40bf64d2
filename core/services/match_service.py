"""
Match service - the lifecycle of a battle.

  Draft (admin form) -> Live (listed, joinable) -> Archived (hidden, kept)

Creation is all-or-nothing: validate -> geocode -> upload image -> insert.
If the insert fails after the image is uploaded, the image is removed again
so no orphaned blob is left behind.
"""

import logging
import re
from typing import List
from uuid import UUID

from core.domain.constants import (
    IMAGE_FOLDER,
    REQUIRED_MATCH_FIELDS,
)
from core.domain.errors import (
    AlreadyMemberError,
    GeocodingError,
    MatchFullError,
    MatchNotFoundError,
    MatchValidationError,
    NotAMemberError,
    PermissionDeniedError,
    StoreError,
    UploadError,
)
from core.domain.models import (
    Coordinates,
    Match,
    MatchCreate,
    MatchDraft,
    UserProfile,
)
from core.interfaces.repositories import IMatchRepository
from core.interfaces.storage import IGeocoder, IImageStorage

logger = logging.getLogger(__name__)


def image_path_for(draft: MatchDraft) -> str:
    """Images/{DD-MM-YYYY}-{HH-MM}-{name-with-dashes}.jpg"""
    date = draft.date_time.strftime("%d-%m-%Y")
    time = draft.date_time.strftime("%H-%M")
    name = re.sub(r"\s+", "-", draft.name.strip())
    return f"{IMAGE_FOLDER}/{date}-{time}-{name}.jpg"


def missing_fields(draft: MatchDraft) -> List[str]:
    """Names of required fields that are absent or blank"""
    missing = []
    for field in REQUIRED_MATCH_FIELDS:
        value = getattr(draft, field)
        if value is None:
            missing.append(field)
        elif isinstance(value, (str, bytes)) and not value.strip():
            missing.append(field)
    return missing


class MatchService:
    """Service for match lifecycle operations"""

    def __init__(self, match_repo: IMatchRepository, storage: IImageStorage, geocoder: IGeocoder):
        self.match_repo = match_repo
        self.storage = storage
        self.geocoder = geocoder

    # -----------------------------------------------------------------
    # Draft -> Live
    # -----------------------------------------------------------------

    def validate_draft(self, draft: MatchDraft) -> List[str]:
        return missing_fields(draft)

    async def geocode(self, address: str) -> Coordinates:
        """Resolve a free-text address. Raises GeocodingError on a miss."""
        if not address or not address.strip():
            raise GeocodingError(address or "")
        try:
            coords = await self.geocoder.geocode(address.strip())
        except GeocodingError:
            raise
        except Exception as e:
            logger.error(f"[MATCH] Geocoder failed for '{address}': {e}")
            raise GeocodingError(address, "Failed to geocode address.") from e
        if coords is None:
            logger.info(f"[MATCH] No geocoding result for '{address}'")
            raise GeocodingError(address)
        return coords

    async def create_match(self, draft: MatchDraft, creator: UserProfile) -> Match:
        """Validate, geocode, upload and persist a live match"""
        if not creator.is_admin:
            raise PermissionDeniedError("create matches")

        # Coordinates are derived from location, so report the rest first
        missing = [f for f in self.validate_draft(draft) if f not in ("latitude", "longitude")]
        if missing:
            logger.info(f"[MATCH] Draft rejected, missing: {missing}")
            raise MatchValidationError(missing)

        if not draft.has_coordinates:
            coords = await self.geocode(draft.location)
            draft = draft.model_copy(update={
                "latitude": coords.latitude,
                "longitude": coords.longitude,
            })

        path = image_path_for(draft)
        try:
            handle = await self.storage.upload(draft.image, path)
            image_url = await self.storage.public_url(handle)
        except Exception as e:
            logger.error(f"[MATCH] Image upload failed for {path}: {e}")
            raise UploadError("Failed to upload image. Please try again.") from e

        match_data = MatchCreate(
            name=draft.name.strip(),
            capacity=draft.capacity,
            date_time=draft.date_time,
            location=draft.location.strip(),
            latitude=draft.latitude,
            longitude=draft.longitude,
            venue_price=draft.venue_price,
            price_per_player=draft.price_per_player,
            gender=draft.gender,
            description=draft.description.strip(),
            image_url=image_url,
            created_by=creator.email,
        )

        try:
            match = await self.match_repo.create(match_data)
        except Exception as e:
            logger.error(f"[MATCH] Insert failed, removing uploaded image {handle}: {e}")
            await self._discard_image(handle)
            raise StoreError("Failed to upload match.") from e

        logger.info(f"[MATCH] Created {match.id} '{match.name}' by {creator.email}")
        return match

    async def _discard_image(self, handle: str) -> None:
        try:
            await self.storage.delete(handle)
        except Exception as e:
            logger.error(f"[MATCH] Could not remove orphaned image {handle}: {e}")

    # -----------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------

    async def get(self, match_id: UUID) -> Match:
        match = await self.match_repo.get_by_id(match_id)
        if match is None:
            raise MatchNotFoundError(match_id)
        return match

    async def list_live(self) -> List[Match]:
        return await self.match_repo.list_live()

    async def list_joined(self, email: str) -> List[Match]:
        return await self.match_repo.list_live_for_member(email)

    # -----------------------------------------------------------------
    # Membership
    # -----------------------------------------------------------------

    async def join(self, match_id: UUID, email: str) -> Match:
        """Add email to the match if there is room. Atomic in the store."""
        outcome = await self.match_repo.add_member(match_id, email)
        logger.info(f"[MATCH] join {match_id} by {email}: {outcome}")

        if outcome == "already_member":
            raise AlreadyMemberError(match_id)
        if outcome == "full":
            raise MatchFullError(match_id)
        if outcome == "not_found":
            raise MatchNotFoundError(match_id)
        return await self.get(match_id)

    async def cancel(self, match_id: UUID, email: str) -> Match:
        """Remove email from the member list"""
        outcome = await self.match_repo.remove_member(match_id, email)
        logger.info(f"[MATCH] cancel {match_id} by {email}: {outcome}")

        if outcome == "not_member":
            raise NotAMemberError(match_id)
        if outcome == "not_found":
            raise MatchNotFoundError(match_id)
        return await self.get(match_id)

    # -----------------------------------------------------------------
    # Live -> Archived
    # -----------------------------------------------------------------

    async def archive(self, match_id: UUID, actor: UserProfile) -> Match:
        """Hide a match from all listings. Archiving twice is a no-op."""
        if not actor.is_admin:
            raise PermissionDeniedError("archive matches")

        match = await self.get(match_id)
        if not match.live:
            return match

        updated = await self.match_repo.set_live(match_id, False)
        if updated is None:
            raise MatchNotFoundError(match_id)
        logger.info(f"[MATCH] Archived {match_id} by {actor.email}")
        return updated

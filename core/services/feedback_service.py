"""
Feedback service - players send requests, admins read them.
"""

import logging
from typing import List
from uuid import UUID

from core.domain.constants import MAX_FEEDBACK_LENGTH
from core.domain.errors import (
    FeedbackNotFoundError,
    PermissionDeniedError,
    StoreError,
    ValidationFailed,
)
from core.domain.models import FeedbackCreate, FeedbackMessage, UserProfile
from core.interfaces.repositories import IFeedbackRepository

logger = logging.getLogger(__name__)


class FeedbackService:

    def __init__(self, feedback_repo: IFeedbackRepository):
        self.feedback_repo = feedback_repo

    async def submit(self, email: str, body: str) -> FeedbackMessage:
        body = (body or "").strip()
        if not body:
            raise ValidationFailed("Please write some feedback first.")
        if len(body) > MAX_FEEDBACK_LENGTH:
            raise ValidationFailed(f"Feedback must be at most {MAX_FEEDBACK_LENGTH} characters.")
        try:
            message = await self.feedback_repo.create(FeedbackCreate(submitted_by=email, body=body))
        except Exception as e:
            logger.error(f"[FEEDBACK] Submit failed for {email}: {e}")
            raise StoreError("Failed to submit feedback.") from e
        logger.info(f"[FEEDBACK] {message.id} from {email}")
        return message

    async def list_unread(self, actor: UserProfile) -> List[FeedbackMessage]:
        if not actor.is_admin:
            raise PermissionDeniedError("read feedback")
        return await self.feedback_repo.list_unread()

    async def mark_read(self, feedback_id: UUID, actor: UserProfile) -> FeedbackMessage:
        if not actor.is_admin:
            raise PermissionDeniedError("read feedback")
        message = await self.feedback_repo.get_by_id(feedback_id)
        if message is None:
            raise FeedbackNotFoundError(feedback_id)
        if message.read:
            return message
        updated = await self.feedback_repo.mark_read(feedback_id)
        return updated or message

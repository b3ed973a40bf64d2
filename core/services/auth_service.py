"""
Auth service - registration, sign-in, profile edits and account deletion.
Platform-agnostic, works through interfaces.
"""

import logging
from typing import Optional

from core.domain.constants import MAX_NAME_LENGTH, MIN_NAME_LENGTH, PASSWORD_PATTERN
from core.domain.errors import (
    AccountDeletionError,
    AuthError,
    StoreError,
    ValidationFailed,
    WeakPasswordError,
)
from core.domain.models import AuthSession, UserProfile, UserProfileUpdate
from core.interfaces.identity import IIdentityProvider
from core.interfaces.repositories import IMatchRepository, IUserRepository
from core.services.session import SessionContext
from config.features import features

logger = logging.getLogger(__name__)


def is_strong_password(password: str) -> bool:
    return bool(password) and PASSWORD_PATTERN.match(password) is not None


class AuthService:
    """Service for identity and profile operations"""

    def __init__(
        self,
        identity: IIdentityProvider,
        user_repo: IUserRepository,
        match_repo: IMatchRepository,
    ):
        self.identity = identity
        self.user_repo = user_repo
        self.match_repo = match_repo

    def validate_name(self, name: str) -> tuple[bool, str]:
        """Validate forename / surname"""
        name = (name or "").strip()
        if len(name) < MIN_NAME_LENGTH:
            return False, "Please enter your name"
        if len(name) > MAX_NAME_LENGTH:
            return False, f"Name must be at most {MAX_NAME_LENGTH} characters"
        return True, ""

    # === REGISTRATION / SIGN-IN ===

    async def register(self, email: str, password: str, forename: str, surname: str) -> UserProfile:
        """Create identity (sends verification email) and the profile document"""
        email = (email or "").strip().lower()
        if not email or not password:
            raise ValidationFailed("Please enter both your email and password.")
        for value in (forename, surname):
            ok, error = self.validate_name(value)
            if not ok:
                raise ValidationFailed(error)
        if not is_strong_password(password):
            raise WeakPasswordError()

        await self.identity.sign_up(email, password)

        profile = UserProfile(
            email=email,
            forename=forename.strip(),
            surname=surname.strip(),
            is_admin=False,
            matches=[],
        )
        try:
            profile = await self.user_repo.create(profile)
        except Exception as e:
            logger.error(f"[AUTH] Identity created but profile write failed for {email}: {e}")
            raise StoreError("Registration failed. Please try again.") from e

        logger.info(f"[AUTH] Registered {email}")
        return profile

    async def sign_in(self, email: str, password: str) -> AuthSession:
        email = (email or "").strip().lower()
        if not email or not password:
            raise ValidationFailed("Please enter both your email and password.")

        auth = await self.identity.sign_in(email, password)

        if features.REQUIRE_EMAIL_VERIFICATION and not auth.email_verified:
            logger.info(f"[AUTH] Unverified sign-in for {email}, resending verification")
            await self.identity.send_verification(email)
            raise AuthError(AuthError.EMAIL_NOT_VERIFIED)

        logger.info(f"[AUTH] Signed in {email}")
        return auth

    async def reset_password(self, email: str) -> None:
        email = (email or "").strip().lower()
        if not email:
            raise ValidationFailed("Please enter your email.")
        await self.identity.send_password_reset(email)
        logger.info(f"[AUTH] Password reset requested for {email}")

    async def sign_out(self, session: SessionContext) -> None:
        token = session.auth.access_token if session.auth else None
        await self.identity.sign_out(token)
        logger.info(f"[AUTH] Signed out {session.email}")
        session.clear()

    # === PROFILE ===

    async def update_profile(self, email: str, forename: str, surname: str) -> Optional[UserProfile]:
        """Update names. Callers should reload their session afterwards."""
        for value in (forename, surname):
            ok, error = self.validate_name(value)
            if not ok:
                raise ValidationFailed(error)
        try:
            return await self.user_repo.update(
                email,
                UserProfileUpdate(forename=forename.strip(), surname=surname.strip()),
            )
        except Exception as e:
            logger.error(f"[AUTH] Profile update failed for {email}: {e}")
            raise StoreError("Failed to update details.") from e

    # === ACCOUNT DELETION ===

    async def delete_account(self, session: SessionContext, password: str) -> None:
        """
        Irreversible. Each step must succeed before the next one starts:
          1. re-authenticate with the fresh password
          2. strip the email from every match (one batch)
          3. delete profile
          4. delete identity
          5. clear session
        A failure stops the workflow; completed steps are not rolled back.
        """
        email = session.email
        if not email:
            raise AuthError(AuthError.OTHER, "You are not signed in.")
        if not password:
            raise ValidationFailed("Please enter your password.")

        try:
            auth = await self.identity.reauthenticate(email, password)
        except Exception as e:
            raise AccountDeletionError("re-authentication", e) from e

        try:
            touched = await self.match_repo.detach_user(email)
            logger.info(f"[AUTH] Detached {email} from {touched} matches")
        except Exception as e:
            raise AccountDeletionError("match cleanup", e) from e

        try:
            await self.user_repo.delete(email)
        except Exception as e:
            raise AccountDeletionError("profile deletion", e) from e

        try:
            await self.identity.delete_identity(auth.user_id)
        except Exception as e:
            raise AccountDeletionError("identity deletion", e) from e

        session.clear()
        logger.info(f"[AUTH] Account deleted: {email}")

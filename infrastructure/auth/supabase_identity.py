"""
Supabase Auth implementation of the identity provider.

Each sign-in uses its own anon client (see new_auth_client) because the SDK
keeps the session on the client object. Admin calls (delete, sign-out of a
token) go through the shared service-role client.
"""

import logging
from typing import Callable, Optional

from supabase import AuthApiError, AuthError as SupabaseAuthError, Client

from core.domain.errors import AuthError
from core.domain.models import AuthSession
from core.interfaces.identity import IIdentityProvider
from infrastructure.database.supabase_client import get_supabase, new_auth_client, run_sync

logger = logging.getLogger(__name__)

# GoTrue error codes -> our codes
_CODE_MAP = {
    "user_not_found": AuthError.USER_NOT_FOUND,
    "invalid_credentials": AuthError.WRONG_PASSWORD,
    "email_not_confirmed": AuthError.EMAIL_NOT_VERIFIED,
    "user_already_exists": AuthError.EMAIL_IN_USE,
    "email_exists": AuthError.EMAIL_IN_USE,
}


def map_auth_error(e: Exception) -> AuthError:
    """Translate an SDK auth exception into a typed AuthError"""
    code = getattr(e, "code", None)
    if code in _CODE_MAP:
        return AuthError(_CODE_MAP[code])
    message = str(getattr(e, "message", "") or e)
    if "Invalid login credentials" in message:
        return AuthError(AuthError.WRONG_PASSWORD)
    if "Email not confirmed" in message:
        return AuthError(AuthError.EMAIL_NOT_VERIFIED)
    return AuthError(AuthError.OTHER, message or None)


def _to_session(response, email: str) -> AuthSession:
    user = response.user
    session = response.session
    return AuthSession(
        user_id=str(user.id),
        email=user.email or email,
        email_verified=getattr(user, "email_confirmed_at", None) is not None,
        access_token=session.access_token if session else None,
    )


class SupabaseIdentityProvider(IIdentityProvider):
    """Email/password auth backed by Supabase"""

    def __init__(
        self,
        admin_client: Optional[Client] = None,
        auth_client_factory: Callable[[], Client] = new_auth_client,
    ):
        self._admin_client = admin_client
        self._auth_client_factory = auth_client_factory

    @property
    def admin_client(self) -> Client:
        if self._admin_client is None:
            self._admin_client = get_supabase()
        return self._admin_client

    @run_sync
    def _sign_up_sync(self, email: str, password: str):
        client = self._auth_client_factory()
        return client.auth.sign_up({"email": email, "password": password})

    async def sign_up(self, email: str, password: str) -> AuthSession:
        try:
            response = await self._sign_up_sync(email, password)
        except (AuthApiError, SupabaseAuthError) as e:
            logger.warning(f"[AUTH] sign_up failed for {email}: {e}")
            raise map_auth_error(e) from e
        # With confirmations on, an existing email comes back with no identities
        if response.user is None or response.user.identities == []:
            raise AuthError(AuthError.EMAIL_IN_USE)
        return _to_session(response, email)

    @run_sync
    def _sign_in_sync(self, email: str, password: str):
        client = self._auth_client_factory()
        return client.auth.sign_in_with_password({"email": email, "password": password})

    async def sign_in(self, email: str, password: str) -> AuthSession:
        try:
            response = await self._sign_in_sync(email, password)
        except (AuthApiError, SupabaseAuthError) as e:
            logger.info(f"[AUTH] sign_in failed for {email}: {e}")
            error = map_auth_error(e)
            if error.code == AuthError.EMAIL_NOT_VERIFIED:
                await self.send_verification(email)
            raise error from e
        return _to_session(response, email)

    @run_sync
    def _resend_sync(self, email: str) -> None:
        client = self._auth_client_factory()
        client.auth.resend({"type": "signup", "email": email})

    async def send_verification(self, email: str) -> None:
        try:
            await self._resend_sync(email)
        except (AuthApiError, SupabaseAuthError) as e:
            logger.error(f"[AUTH] Could not resend verification to {email}: {e}")
            raise map_auth_error(e) from e

    @run_sync
    def _reset_sync(self, email: str) -> None:
        client = self._auth_client_factory()
        client.auth.reset_password_for_email(email)

    async def send_password_reset(self, email: str) -> None:
        try:
            await self._reset_sync(email)
        except (AuthApiError, SupabaseAuthError) as e:
            logger.error(f"[AUTH] Password reset failed for {email}: {e}")
            raise map_auth_error(e) from e

    async def reauthenticate(self, email: str, password: str) -> AuthSession:
        return await self.sign_in(email, password)

    @run_sync
    def _delete_sync(self, user_id: str) -> None:
        self.admin_client.auth.admin.delete_user(user_id)

    async def delete_identity(self, user_id: str) -> None:
        try:
            await self._delete_sync(user_id)
        except (AuthApiError, SupabaseAuthError) as e:
            raise map_auth_error(e) from e

    @run_sync
    def _sign_out_sync(self, access_token: str) -> None:
        self.admin_client.auth.admin.sign_out(access_token)

    async def sign_out(self, access_token: str = None) -> None:
        if not access_token:
            return
        try:
            await self._sign_out_sync(access_token)
        except (AuthApiError, SupabaseAuthError) as e:
            logger.error(f"[AUTH] sign_out failed: {e}")
            raise AuthError(AuthError.OTHER, "Failed to sign out.") from e

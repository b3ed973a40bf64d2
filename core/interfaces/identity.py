"""
Identity interface - abstraction over the hosted auth provider.
Implementations raise core.domain.errors.AuthError with a typed code.
"""

from abc import ABC, abstractmethod
from core.domain.models import AuthSession


class IIdentityProvider(ABC):
    """Email/password identity provider"""

    @abstractmethod
    async def sign_up(self, email: str, password: str) -> AuthSession:
        """Create identity and trigger the verification email"""
        pass

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> AuthSession:
        """Verify credentials. Does not check email verification."""
        pass

    @abstractmethod
    async def send_verification(self, email: str) -> None:
        """Resend the verification email"""
        pass

    @abstractmethod
    async def send_password_reset(self, email: str) -> None:
        pass

    @abstractmethod
    async def reauthenticate(self, email: str, password: str) -> AuthSession:
        """Confirm a fresh credential before a destructive action"""
        pass

    @abstractmethod
    async def delete_identity(self, user_id: str) -> None:
        """Remove the identity record; the email can no longer sign in"""
        pass

    @abstractmethod
    async def sign_out(self, access_token: str = None) -> None:
        pass

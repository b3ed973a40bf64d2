from core.interfaces.repositories import (
    IUserRepository,
    IMatchRepository,
    IFeedbackRepository,
)
from core.interfaces.identity import IIdentityProvider
from core.interfaces.storage import IImageStorage, IGeocoder

__all__ = [
    # Repositories
    "IUserRepository",
    "IMatchRepository",
    "IFeedbackRepository",
    # Identity
    "IIdentityProvider",
    # Storage
    "IImageStorage",
    "IGeocoder",
]

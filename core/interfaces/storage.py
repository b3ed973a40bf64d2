"""
Blob storage and geocoding interfaces.
"""

from abc import ABC, abstractmethod
from typing import Optional
from core.domain.models import Coordinates


class IImageStorage(ABC):
    """Stores uploaded images and resolves public URLs"""

    @abstractmethod
    async def upload(self, data: bytes, path: str) -> str:
        """Upload bytes at path, returns an opaque handle"""
        pass

    @abstractmethod
    async def public_url(self, handle: str) -> str:
        """Resolve handle to a publicly fetchable URL"""
        pass

    @abstractmethod
    async def delete(self, handle: str) -> None:
        pass


class IGeocoder(ABC):
    """Free-text address -> coordinates"""

    @abstractmethod
    async def geocode(self, address: str) -> Optional[Coordinates]:
        """First result for address, or None when nothing matched"""
        pass

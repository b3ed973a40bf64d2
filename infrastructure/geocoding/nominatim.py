"""
Nominatim (OpenStreetMap) geocoder.
"""

import logging
from typing import Optional

import httpx

from config.settings import settings
from core.domain.models import Coordinates
from core.interfaces.storage import IGeocoder

logger = logging.getLogger(__name__)


class NominatimGeocoder(IGeocoder):
    """Free-text address -> first search hit"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url or settings.geocoder_url
        self.user_agent = user_agent or settings.geocoder_user_agent
        self.timeout = timeout or settings.geocoder_timeout
        self._transport = transport

    async def geocode(self, address: str) -> Optional[Coordinates]:
        params = {"q": address, "format": "json", "limit": 1}
        headers = {"User-Agent": self.user_agent}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            response = await client.get(self.base_url, params=params, headers=headers)
            response.raise_for_status()
            results = response.json()

        if not results:
            return None

        hit = results[0]
        logger.debug(f"[GEOCODE] '{address}' -> {hit.get('display_name')}")
        return Coordinates(latitude=float(hit["lat"]), longitude=float(hit["lon"]))

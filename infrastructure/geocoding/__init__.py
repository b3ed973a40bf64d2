from infrastructure.geocoding.nominatim import NominatimGeocoder

__all__ = [
    "NominatimGeocoder",
]

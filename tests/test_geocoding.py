"""Tests for the Nominatim geocoder over a mock transport."""
import httpx
import pytest

from infrastructure.geocoding import NominatimGeocoder

URL = 'https://geo.test/search'


def _geocoder(handler):
    return NominatimGeocoder(base_url=URL, user_agent='pitchside-tests', timeout=1,
                             transport=httpx.MockTransport(handler))


async def test_first_hit_is_used():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json=[
            {'lat': '51.4618', 'lon': '-0.1384', 'display_name': 'Clapham Common'},
            {'lat': '0', 'lon': '0', 'display_name': 'Elsewhere'},
        ])

    coords = await _geocoder(handler).geocode('Clapham Common')

    assert (coords.latitude, coords.longitude) == (51.4618, -0.1384)
    assert seen[0].url.params['q'] == 'Clapham Common'
    assert seen[0].url.params['limit'] == '1'
    assert seen[0].headers['user-agent'] == 'pitchside-tests'


async def test_no_results():
    coords = await _geocoder(lambda request: httpx.Response(200, json=[])).geocode('Atlantis')
    assert coords is None


async def test_server_error_raises():
    with pytest.raises(httpx.HTTPStatusError):
        await _geocoder(lambda request: httpx.Response(503)).geocode('Clapham')

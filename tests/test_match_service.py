"""Tests for the match lifecycle: upload, listing, join / cancel, archive."""
import asyncio
from datetime import datetime
from uuid import uuid4

import pytest

from core.domain.errors import (
    AlreadyMemberError, GeocodingError, MatchFullError, MatchNotFoundError,
    MatchValidationError, NotAMemberError, PermissionDeniedError, StoreError,
    UploadError,
)
from core.domain.models import MatchDraft, MatchState
from core.services.match_service import image_path_for, missing_fields

from tests.fakes import CLAPHAM_COORDS


# === UPLOAD ===

async def test_create_match_goes_live_with_no_members(match_service, draft, admin, storage):
    match = await match_service.create_match(draft, admin)

    assert match.live is True
    assert match.state == MatchState.LIVE
    assert match.members == []
    assert match.created_by == admin.email
    assert (match.latitude, match.longitude) == CLAPHAM_COORDS
    assert match.image_url == 'https://cdn.test/Images/01-03-2024-18-00-Friday-5s.jpg'
    assert 'Images/01-03-2024-18-00-Friday-5s.jpg' in storage.blobs


async def test_create_match_reads_back_from_live_list(match_service, draft, admin):
    await match_service.create_match(draft, admin)

    live = await match_service.list_live()
    assert len(live) == 1
    match = live[0]
    assert match.name == 'Friday 5s'
    assert match.capacity == draft.capacity
    assert match.date_time == draft.date_time
    assert match.location == draft.location
    assert match.venue_price == draft.venue_price
    assert match.price_per_player == draft.price_per_player
    assert match.gender == draft.gender
    assert match.description == draft.description
    assert match.image_url
    assert match.latitude is not None and match.longitude is not None
    assert match.spots_left == 10


async def test_create_match_missing_fields_writes_nothing(match_service, admin, storage, match_repo, geocoder):
    draft = MatchDraft(name='Friday 5s', capacity=10)

    with pytest.raises(MatchValidationError) as exc:
        await match_service.create_match(draft, admin)

    assert 'location' in exc.value.missing
    assert 'image' in exc.value.missing
    assert str(exc.value).startswith('Please fill out all fields')
    assert storage.blobs == {}
    assert match_repo.writes == 0
    assert geocoder.queries == []


async def test_create_match_blank_description_is_missing(match_service, draft, admin):
    with pytest.raises(MatchValidationError) as exc:
        await match_service.create_match(draft.model_copy(update={'description': '   '}), admin)
    assert exc.value.missing == ['description']


async def test_create_match_unknown_address_writes_nothing(match_service, draft, admin, storage, match_repo):
    with pytest.raises(GeocodingError):
        await match_service.create_match(draft.model_copy(update={'location': 'Nowhere'}), admin)

    assert storage.blobs == {}
    assert match_repo.writes == 0


async def test_create_match_keeps_given_coordinates(match_service, draft, admin, geocoder):
    draft = draft.model_copy(update={'latitude': 51.5, 'longitude': -0.12})
    match = await match_service.create_match(draft, admin)

    assert geocoder.queries == []
    assert (match.latitude, match.longitude) == (51.5, -0.12)


async def test_create_match_upload_failure_writes_nothing(match_service, draft, admin, storage, match_repo):
    storage.fail_upload = True

    with pytest.raises(UploadError):
        await match_service.create_match(draft, admin)
    assert match_repo.writes == 0


async def test_create_match_insert_failure_removes_image(match_service, draft, admin, storage, match_repo):
    match_repo.fail_create = True

    with pytest.raises(StoreError) as exc:
        await match_service.create_match(draft, admin)

    assert str(exc.value) == 'Failed to upload match.'
    assert storage.blobs == {}


async def test_player_cannot_create_match(match_service, draft, player, storage):
    with pytest.raises(PermissionDeniedError):
        await match_service.create_match(draft, player)
    assert storage.blobs == {}


def test_image_path_replaces_whitespace():
    draft = MatchDraft(name='Sunday  league\tfinal', date_time=datetime(2024, 12, 8, 9, 5))
    assert image_path_for(draft) == 'Images/08-12-2024-09-05-Sunday-league-final.jpg'


def test_missing_fields_on_empty_draft():
    assert 'name' in missing_fields(MatchDraft())
    assert len(missing_fields(MatchDraft())) == 11


# === GEOCODE ===

async def test_geocode_blank_address(match_service):
    with pytest.raises(GeocodingError):
        await match_service.geocode('   ')


async def test_geocode_wraps_collaborator_failure(match_service, geocoder):
    async def broken(address):
        raise ConnectionError('offline')
    geocoder.geocode = broken

    with pytest.raises(GeocodingError) as exc:
        await match_service.geocode('Clapham')
    assert str(exc.value) == 'Failed to geocode address.'


# === LISTING ===

async def test_list_live_orders_by_kickoff(live_match, match_service):
    await live_match(name='Late', date_time=datetime(2024, 3, 2, 20, 0))
    await live_match(name='Early', date_time=datetime(2024, 3, 1, 8, 0))

    assert [m.name for m in await match_service.list_live()] == ['Early', 'Late']


async def test_list_joined_only_shows_my_live_matches(live_match, match_service, admin):
    mine = await live_match(name='Mine')
    await live_match(name='Other')
    archived = await live_match(name='Old')
    await match_service.join(mine.id, 'pat@pitch.test')
    await match_service.join(archived.id, 'pat@pitch.test')
    await match_service.archive(archived.id, admin)

    joined = await match_service.list_joined('pat@pitch.test')
    assert [m.name for m in joined] == ['Mine']


# === JOIN / CANCEL ===

async def test_join_adds_member(live_match, match_service):
    match = await live_match()

    joined = await match_service.join(match.id, 'pat@pitch.test')
    assert joined.members == ['pat@pitch.test']
    assert joined.has_member('pat@pitch.test')


async def test_join_twice_is_rejected(live_match, match_service):
    match = await live_match()
    await match_service.join(match.id, 'pat@pitch.test')

    with pytest.raises(AlreadyMemberError):
        await match_service.join(match.id, 'pat@pitch.test')
    assert (await match_service.get(match.id)).members == ['pat@pitch.test']


async def test_join_full_match_is_rejected(live_match, match_service):
    match = await live_match(capacity=1)
    await match_service.join(match.id, 'a@pitch.test')

    with pytest.raises(MatchFullError):
        await match_service.join(match.id, 'b@pitch.test')
    assert (await match_service.get(match.id)).is_full


async def test_concurrent_joins_never_exceed_capacity(live_match, match_service):
    match = await live_match(capacity=1)

    results = await asyncio.gather(
        match_service.join(match.id, 'a@pitch.test'),
        match_service.join(match.id, 'b@pitch.test'),
        return_exceptions=True,
    )

    assert sum(1 for r in results if isinstance(r, MatchFullError)) == 1
    assert len((await match_service.get(match.id)).members) == 1


async def test_join_unknown_match(match_service):
    with pytest.raises(MatchNotFoundError):
        await match_service.join(uuid4(), 'pat@pitch.test')


async def test_join_archived_match(live_match, match_service, admin):
    match = await live_match()
    await match_service.archive(match.id, admin)

    with pytest.raises(MatchNotFoundError):
        await match_service.join(match.id, 'pat@pitch.test')


async def test_cancel_removes_member_and_frees_spot(live_match, match_service):
    match = await live_match(capacity=1)
    await match_service.join(match.id, 'a@pitch.test')

    cancelled = await match_service.cancel(match.id, 'a@pitch.test')
    assert cancelled.members == []
    assert (await match_service.join(match.id, 'b@pitch.test')).members == ['b@pitch.test']


async def test_cancel_when_not_member(live_match, match_service):
    match = await live_match()
    with pytest.raises(NotAMemberError):
        await match_service.cancel(match.id, 'pat@pitch.test')


async def test_cancel_archived_match_leaves_members(live_match, match_service, admin):
    match = await live_match()
    await match_service.join(match.id, 'a@pitch.test')
    await match_service.archive(match.id, admin)

    with pytest.raises(MatchNotFoundError):
        await match_service.cancel(match.id, 'a@pitch.test')
    assert (await match_service.get(match.id)).members == ['a@pitch.test']


# === ARCHIVE ===

async def test_archive_hides_match_but_keeps_row(live_match, match_service, admin):
    match = await live_match()

    archived = await match_service.archive(match.id, admin)

    assert archived.state == MatchState.ARCHIVED
    assert await match_service.list_live() == []
    assert (await match_service.get(match.id)).live is False


async def test_archive_twice_is_noop(live_match, match_service, match_repo, admin):
    match = await live_match()
    await match_service.archive(match.id, admin)
    writes = match_repo.writes

    again = await match_service.archive(match.id, admin)
    assert again.live is False
    assert match_repo.writes == writes


async def test_player_cannot_archive(live_match, match_service, player):
    match = await live_match()
    with pytest.raises(PermissionDeniedError):
        await match_service.archive(match.id, player)
    assert (await match_service.get(match.id)).live is True


async def test_archive_unknown_match(match_service, admin):
    with pytest.raises(MatchNotFoundError):
        await match_service.archive(uuid4(), admin)

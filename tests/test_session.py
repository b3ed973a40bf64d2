"""Tests for SessionContext / SessionRegistry."""
from core.domain.models import AuthSession, SessionState
from core.services.session import SessionContext, SessionRegistry
from tests.fakes import admin_profile


def _auth(email='player@pitch.test'):
    return AuthSession(user_id=f'uid-{email}', email=email, email_verified=True)


async def test_new_session_is_unauthenticated(user_repo):
    session = SessionContext(user_repo)

    assert session.state == SessionState.UNAUTHENTICATED
    assert session.email is None
    assert await session.load() is None


async def test_start_loads_profile(user_repo, player):
    await user_repo.create(player)
    session = SessionContext(user_repo)

    profile = await session.start(_auth())

    assert profile == player
    assert session.is_authenticated
    assert session.state == SessionState.AUTHENTICATED


async def test_start_without_profile_document(user_repo):
    session = SessionContext(user_repo)

    assert await session.start(_auth()) is None
    assert not session.is_authenticated


async def test_load_swallows_store_errors(user_repo):
    async def broken(email):
        raise RuntimeError('store down')
    user_repo.get_by_email = broken
    session = SessionContext(user_repo, _auth())

    assert await session.load() is None
    assert session.state == SessionState.UNAUTHENTICATED


async def test_reload_picks_up_role_change(user_repo, player):
    await user_repo.create(player)
    session = SessionContext(user_repo)
    await session.start(_auth())

    await user_repo.create(admin_profile(player.email))
    await session.reload()

    assert session.profile.is_admin


async def test_clear(user_repo, player):
    await user_repo.create(player)
    session = SessionContext(user_repo)
    await session.start(_auth())

    session.clear()

    assert session.profile is None
    assert session.auth is None
    assert not session.is_authenticated


def test_registry_keeps_one_session_per_client(user_repo):
    registry = SessionRegistry(user_repo)

    first = registry.get(1)
    assert registry.get(1) is first
    assert registry.get(2) is not first
    assert len(registry) == 2

    registry.drop(1)
    registry.drop(99)
    assert len(registry) == 1
    assert registry.get(1) is not first

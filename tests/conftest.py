import os
from datetime import datetime

import pytest

# Settings / Features read the environment at import time
os.environ.setdefault('TELEGRAM_BOT_TOKEN', '123456:TEST-token')
os.environ.setdefault('REQUIRE_EMAIL_VERIFICATION', 'true')

from config.features import features  # noqa: E402
from core.domain.models import Gender, MatchDraft  # noqa: E402
from core.services import AuthService, FeedbackService, MatchService, SessionContext  # noqa: E402
from tests.fakes import (  # noqa: E402
    FakeFeedbackRepo, FakeGeocoder, FakeIdentity, FakeMatchRepo, FakeStorage,
    FakeUserRepo, admin_profile, player_profile, CLAPHAM, CLAPHAM_COORDS,
)


@pytest.fixture
def match_repo():
    return FakeMatchRepo()


@pytest.fixture
def user_repo():
    return FakeUserRepo()


@pytest.fixture
def feedback_repo():
    return FakeFeedbackRepo()


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def geocoder():
    return FakeGeocoder({CLAPHAM: CLAPHAM_COORDS})


@pytest.fixture
def identity():
    return FakeIdentity()


@pytest.fixture
def match_service(match_repo, storage, geocoder):
    return MatchService(match_repo=match_repo, storage=storage, geocoder=geocoder)


@pytest.fixture
def auth_service(identity, user_repo, match_repo):
    return AuthService(identity=identity, user_repo=user_repo, match_repo=match_repo)


@pytest.fixture
def feedback_service(feedback_repo):
    return FeedbackService(feedback_repo=feedback_repo)


@pytest.fixture
def admin():
    return admin_profile()


@pytest.fixture
def player():
    return player_profile()


@pytest.fixture
def draft():
    """A complete draft, minus coordinates (geocoded on upload)."""
    return MatchDraft(
        name='Friday 5s', capacity=10, date_time=datetime(2024, 3, 1, 18, 0),
        location=CLAPHAM, venue_price=60, price_per_player=6,
        gender=Gender.MIXED, description='Bring bibs', image=b'\xff\xd8jpeg',
    )


@pytest.fixture
def live_match(match_service, draft, admin):
    """Factory: upload a live match, optionally overriding draft fields."""
    async def _make(**overrides):
        return await match_service.create_match(draft.model_copy(update=overrides), admin)
    return _make


@pytest.fixture
def no_email_verification(monkeypatch):
    monkeypatch.setattr(features, 'REQUIRE_EMAIL_VERIFICATION', False)


@pytest.fixture
def signed_in(user_repo, identity):
    """Factory: a registered, verified user with a loaded SessionContext."""
    async def _make(profile=None, password='Passw0rd1'):
        profile = profile or player_profile()
        identity.add(profile.email, password)
        await user_repo.create(profile)
        session = SessionContext(user_repo)
        await session.start(await identity.sign_in(profile.email, password))
        return session
    return _make

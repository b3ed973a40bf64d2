"""Tests for the games handlers with Telegram objects mocked out."""
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram.fsm.context import FSMContext
from aiogram.fsm.storage.base import StorageKey
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.types import CallbackQuery

from adapters.telegram import render
from adapters.telegram.handlers import games
from adapters.telegram.states import CreateMatchStates
from core.domain.errors import ValidationFailed


def _callback(data):
    callback = MagicMock()
    callback.__class__ = CallbackQuery
    callback.data = data
    callback.answer = AsyncMock()
    callback.message.answer = AsyncMock()
    callback.message.edit_text = AsyncMock()
    return callback


def _sent_text(mock):
    return mock.call_args.args[0]


@pytest.fixture
def state():
    return FSMContext(storage=MemoryStorage(), key=StorageKey(bot_id=1, chat_id=1, user_id=1))


@pytest.fixture(autouse=True)
def fake_services(monkeypatch, match_service):
    monkeypatch.setattr(games, 'match_service', match_service)


async def test_ask_join_escapes_match_name(live_match, signed_in):
    match = await live_match(name='U<12 & Co')
    callback = _callback(f'match_join_{match.id}')

    await games.ask_join(callback, await signed_in())

    text = _sent_text(callback.message.answer)
    assert 'U&lt;12 &amp; Co' in text
    assert 'U<12' not in text


async def test_confirm_cancel_escapes_match_name(live_match, match_service, signed_in):
    match = await live_match(name='A & B')
    session = await signed_in()
    await match_service.join(match.id, session.email)
    callback = _callback(f'match_cancelok_{match.id}')

    await games.confirm_cancel(callback, session)

    assert 'A &amp; B' in _sent_text(callback.message.edit_text)


async def test_alert_escapes_error_text():
    callback = _callback('menu_games')

    await render.alert(callback, ValidationFailed('<script> & co'))

    assert '&lt;script&gt; &amp; co' in _sent_text(callback.message.answer)


async def test_upload_alerts_when_photo_download_fails(monkeypatch, state, match_service, admin, signed_in, draft):
    bot = MagicMock()
    bot.download = AsyncMock(side_effect=RuntimeError('telegram timeout'))
    monkeypatch.setattr(games, 'bot', bot)
    await state.set_state(CreateMatchStates.confirming)
    await state.update_data(
        name=draft.name, capacity=draft.capacity, date_time=draft.date_time.isoformat(),
        location=draft.location, venue_price=draft.venue_price,
        price_per_player=draft.price_per_player, gender=draft.gender.value,
        description=draft.description, photo_file_id='file-1',
    )
    callback = _callback('create_upload')

    await games.create_upload(callback, state, await signed_in(admin))

    assert 'Could not fetch the photo' in _sent_text(callback.message.answer)
    callback.message.edit_text.assert_not_called()
    assert await match_service.list_live() == []
    assert await state.get_state() == CreateMatchStates.waiting_image.state
    assert (await state.get_data())['name'] == draft.name

"""Tests for player feedback and the admin inbox."""
from uuid import uuid4

import pytest

from core.domain.errors import (
    FeedbackNotFoundError, PermissionDeniedError, StoreError, ValidationFailed,
)


async def test_submit_strips_body(feedback_service, player):
    message = await feedback_service.submit(player.email, '  More Sunday games please  ')

    assert message.body == 'More Sunday games please'
    assert message.submitted_by == player.email
    assert message.read is False


@pytest.mark.parametrize('body', ['', '   ', 'x' * 2001])
async def test_submit_rejects_bad_body(feedback_service, feedback_repo, player, body):
    with pytest.raises(ValidationFailed):
        await feedback_service.submit(player.email, body)
    assert feedback_repo.rows == {}


async def test_submit_store_failure(feedback_service, feedback_repo, player):
    feedback_repo.fail_create = True
    with pytest.raises(StoreError) as exc:
        await feedback_service.submit(player.email, 'hello')
    assert str(exc.value) == 'Failed to submit feedback.'


async def test_admin_reads_and_marks(feedback_service, admin, player):
    first = await feedback_service.submit(player.email, 'first')
    await feedback_service.submit(player.email, 'second')

    unread = await feedback_service.list_unread(admin)
    assert [m.body for m in unread] == ['first', 'second']

    marked = await feedback_service.mark_read(first.id, admin)
    assert marked.read is True
    assert [m.body for m in await feedback_service.list_unread(admin)] == ['second']


async def test_mark_read_twice(feedback_service, admin, player):
    message = await feedback_service.submit(player.email, 'hi')
    await feedback_service.mark_read(message.id, admin)

    again = await feedback_service.mark_read(message.id, admin)
    assert again.read is True


async def test_mark_read_unknown(feedback_service, admin):
    with pytest.raises(FeedbackNotFoundError):
        await feedback_service.mark_read(uuid4(), admin)


async def test_players_cannot_read_inbox(feedback_service, player):
    with pytest.raises(PermissionDeniedError):
        await feedback_service.list_unread(player)
    with pytest.raises(PermissionDeniedError):
        await feedback_service.mark_read(uuid4(), player)

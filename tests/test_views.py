"""Tests for role dispatch and match cards."""
from datetime import datetime, timezone

from adapters.telegram.views import (
    AdminView, PlayerView, cancelled_text, confirm_cancel_text, confirm_join_text,
    error_text, format_local_time, format_match, format_price, view_for,
)
from adapters.telegram.states import CreateMatchStates
from core.domain.models import Role
from locales import t


def _callbacks(markup):
    return [button.callback_data for row in markup.inline_keyboard for button in row]


def test_view_for_dispatches_on_role(admin, player, match_service, feedback_service):
    assert isinstance(view_for(admin, match_service, feedback_service), AdminView)
    assert isinstance(view_for(player, match_service, feedback_service), PlayerView)
    assert view_for(admin, match_service, feedback_service).role == Role.ADMIN


def test_games_tab_label_depends_on_role(admin, player, match_service, feedback_service):
    admin_menu = view_for(admin, match_service, feedback_service).menu()
    player_menu = view_for(player, match_service, feedback_service).menu()

    admin_labels = [b.text for row in admin_menu.reply_markup.inline_keyboard for b in row]
    player_labels = [b.text for row in player_menu.reply_markup.inline_keyboard for b in row]
    assert t('tab_games_admin') in admin_labels
    assert t('tab_games_player') in player_labels


async def test_admin_games_opens_upload_form(admin, match_service, feedback_service):
    screens = await view_for(admin, match_service, feedback_service).games()
    assert screens[0].next_state == CreateMatchStates.waiting_name


async def test_player_games_lists_live_cards(player, live_match, match_service, feedback_service):
    match = await live_match()

    screens = await view_for(player, match_service, feedback_service).games()

    assert len(screens) == 1
    assert screens[0].photo_url == match.image_url
    assert f'match_join_{match.id}' in _callbacks(screens[0].reply_markup)


async def test_player_games_empty(player, match_service, feedback_service):
    screens = await view_for(player, match_service, feedback_service).games()
    assert screens[0].text == t('no_live_matches')


async def test_joined_card_offers_cancel(player, live_match, match_service, feedback_service):
    match = await live_match()
    await match_service.join(match.id, player.email)

    screens = await view_for(player, match_service, feedback_service).schedule()

    card = screens[-1]
    assert t('joined_badge') in card.text
    assert f'match_cancel_{match.id}' in _callbacks(card.reply_markup)


async def test_full_card_has_no_join(player, live_match, match_service, feedback_service):
    match = await live_match(capacity=1)
    await match_service.join(match.id, 'someone@pitch.test')

    screens = await view_for(player, match_service, feedback_service).games()

    assert t('full_badge') in screens[0].text
    assert _callbacks(screens[0].reply_markup) == [f'match_map_{match.id}']


async def test_admin_schedule_has_archive(admin, live_match, match_service, feedback_service):
    match = await live_match()

    screens = await view_for(admin, match_service, feedback_service).schedule()

    assert f'match_archive_{match.id}' in _callbacks(screens[-1].reply_markup)


async def test_admin_settings_shows_unread_count(admin, player, match_service, feedback_service):
    await feedback_service.submit(player.email, 'hello')

    screen = await view_for(admin, match_service, feedback_service).settings()

    assert 'settings_inbox' in _callbacks(screen.reply_markup)
    labels = [b.text for row in screen.reply_markup.inline_keyboard for b in row]
    assert t('btn_inbox', count=1) in labels


async def test_player_settings_offers_feedback(player, match_service, feedback_service):
    screen = await view_for(player, match_service, feedback_service).settings()
    assert 'settings_feedback' in _callbacks(screen.reply_markup)
    assert 'settings_inbox' not in _callbacks(screen.reply_markup)


async def test_format_match_escapes_html(live_match):
    match = await live_match(name='<b>Fives</b>', description='A & B')
    text = format_match(match)
    assert '&lt;b&gt;Fives&lt;/b&gt;' in text
    assert 'A &amp; B' in text


def test_format_price():
    assert format_price(6) == '6'
    assert format_price(6.5) == '6.5'
    assert format_price(6.25) == '6.25'


async def test_confirmations_escape_match_name(live_match):
    match = await live_match(name='U<12 & Co')

    for text in (confirm_join_text(match), confirm_cancel_text(match), cancelled_text(match)):
        assert 'U&lt;12 &amp; Co' in text
        assert 'U<12' not in text


def test_error_text_escapes_message():
    text = error_text(RuntimeError('bad <token> & stuff'))
    assert 'bad &lt;token&gt; &amp; stuff' in text


def test_local_time_converts_utc_to_configured_zone():
    # 17:00 UTC in June is 18:00 in London
    assert format_local_time(datetime(2024, 6, 1, 17, 0, tzinfo=timezone.utc)) == 'Sat 01 Jun 2024, 18:00'
    assert format_local_time(datetime(2024, 3, 1, 18, 0)) == 'Fri 01 Mar 2024, 18:00'

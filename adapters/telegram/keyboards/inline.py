"""
Inline keyboards for Telegram bot.

Callback data format:
  menu_{games|schedule|settings}
  match_{action}_{match_id}
  feedback_read_{feedback_id}
"""

from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton
from aiogram.utils.keyboard import InlineKeyboardBuilder

from core.domain.models import Gender, Match, FeedbackMessage
from locales import t


# === WELCOME / MENU ===

def get_welcome_keyboard() -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_register"), callback_data="auth_register")
    builder.button(text=t("btn_sign_in"), callback_data="auth_sign_in")
    builder.button(text=t("btn_forgot"), callback_data="auth_reset")
    builder.adjust(2, 1)
    return builder.as_markup()


def get_main_menu_keyboard(games_label: str) -> InlineKeyboardMarkup:
    """Three tabs; the games label depends on the role"""
    builder = InlineKeyboardBuilder()
    builder.button(text=games_label, callback_data="menu_games")
    builder.button(text=t("tab_schedule"), callback_data="menu_schedule")
    builder.button(text=t("tab_settings"), callback_data="menu_settings")
    builder.adjust(1, 2)
    return builder.as_markup()


def get_back_to_menu_keyboard() -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_back"), callback_data="menu_main")
    return builder.as_markup()


# === MATCH CARDS ===

def _map_button(match: Match) -> InlineKeyboardButton:
    return InlineKeyboardButton(
        text=t("btn_map"),
        callback_data=f"match_map_{match.id}",
    )


def get_player_match_keyboard(match: Match, email: str) -> InlineKeyboardMarkup:
    """Join or cancel, depending on membership"""
    builder = InlineKeyboardBuilder()
    if match.has_member(email):
        builder.button(text=t("btn_cancel_spot"), callback_data=f"match_cancel_{match.id}")
    elif not match.is_full:
        builder.button(text=t("btn_join"), callback_data=f"match_join_{match.id}")
    builder.add(_map_button(match))
    builder.adjust(2)
    return builder.as_markup()


def get_admin_match_keyboard(match: Match) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_archive"), callback_data=f"match_archive_{match.id}")
    builder.add(_map_button(match))
    builder.adjust(2)
    return builder.as_markup()


def get_confirm_keyboard(action: str, match_id) -> InlineKeyboardMarkup:
    """Confirm step for join / cancel"""
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_confirm"), callback_data=f"match_{action}ok_{match_id}")
    builder.button(text=t("btn_keep"), callback_data="menu_games")
    builder.adjust(2)
    return builder.as_markup()


# === CREATE FORM ===

def get_gender_keyboard() -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    for gender in Gender:
        builder.button(text=gender.value, callback_data=f"gender_{gender.value}")
    builder.adjust(3)
    return builder.as_markup()


def get_create_confirm_keyboard() -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_upload"), callback_data="create_upload")
    builder.button(text=t("btn_discard"), callback_data="create_discard")
    builder.adjust(2)
    return builder.as_markup()


# === SETTINGS ===

def get_settings_keyboard(is_admin: bool, unread_count: int = 0) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_edit_profile"), callback_data="settings_edit")
    if is_admin:
        builder.button(text=t("btn_inbox", count=unread_count), callback_data="settings_inbox")
    else:
        builder.button(text=t("btn_feedback"), callback_data="settings_feedback")
    builder.button(text=t("btn_sign_out"), callback_data="settings_sign_out")
    builder.button(text=t("btn_delete_account"), callback_data="settings_delete")
    builder.button(text=t("btn_back"), callback_data="menu_main")
    builder.adjust(2, 2, 1)
    return builder.as_markup()


def get_sign_out_keyboard() -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_sign_out"), callback_data="settings_sign_out_ok")
    builder.button(text=t("btn_keep"), callback_data="menu_settings")
    builder.adjust(2)
    return builder.as_markup()


def get_feedback_keyboard(message: FeedbackMessage) -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text=t("btn_mark_read"), callback_data=f"feedback_read_{message.id}")
    return builder.as_markup()

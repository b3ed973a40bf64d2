from adapters.telegram.keyboards.inline import (
    get_welcome_keyboard,
    get_main_menu_keyboard,
    get_back_to_menu_keyboard,
    get_player_match_keyboard,
    get_admin_match_keyboard,
    get_confirm_keyboard,
    get_gender_keyboard,
    get_create_confirm_keyboard,
    get_settings_keyboard,
    get_sign_out_keyboard,
    get_feedback_keyboard,
)

__all__ = [
    "get_welcome_keyboard",
    "get_main_menu_keyboard",
    "get_back_to_menu_keyboard",
    "get_player_match_keyboard",
    "get_admin_match_keyboard",
    "get_confirm_keyboard",
    "get_gender_keyboard",
    "get_create_confirm_keyboard",
    "get_settings_keyboard",
    "get_sign_out_keyboard",
    "get_feedback_keyboard",
]

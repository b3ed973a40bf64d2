"""
FSM States for Telegram bot.
"""

from aiogram.fsm.state import State, StatesGroup


class RegisterStates(StatesGroup):
    """FSM states for account registration"""
    waiting_forename = State()
    waiting_surname = State()
    waiting_email = State()
    waiting_password = State()


class SignInStates(StatesGroup):
    """FSM states for sign-in and password reset"""
    waiting_email = State()
    waiting_password = State()
    waiting_reset_email = State()


class CreateMatchStates(StatesGroup):
    """FSM states for the admin match upload form"""
    waiting_name = State()
    waiting_capacity = State()
    waiting_date_time = State()
    waiting_location = State()
    waiting_venue_price = State()
    waiting_price_per_player = State()
    choosing_gender = State()
    waiting_description = State()
    waiting_image = State()
    confirming = State()


class ProfileEditStates(StatesGroup):
    """FSM states for profile editing"""
    waiting_forename = State()
    waiting_surname = State()


class FeedbackStates(StatesGroup):
    waiting_body = State()


class DeleteAccountStates(StatesGroup):
    """Re-authentication before account deletion"""
    waiting_password = State()

"""
Helpers shared by handlers: sending Screens, alerts, session guards.
"""

import logging
from typing import Iterable, Optional, Union

from aiogram.exceptions import TelegramBadRequest
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from adapters.telegram.keyboards import get_welcome_keyboard
from adapters.telegram.loader import feedback_service, match_service
from adapters.telegram.views import RoleView, Screen, error_text, view_for
from core.services.session import SessionContext
from locales import t

logger = logging.getLogger(__name__)

# Telegram rejects photo captions longer than this
CAPTION_LIMIT = 1024


def _message_of(target: Union[Message, CallbackQuery]) -> Message:
    return target.message if isinstance(target, CallbackQuery) else target


async def send_screens(target: Union[Message, CallbackQuery], screens: Iterable[Screen],
                       state: Optional[FSMContext] = None) -> None:
    message = _message_of(target)
    for screen in screens:
        if not await _send_with_photo(message, screen):
            await message.answer(screen.text, reply_markup=screen.reply_markup)
        if screen.next_state and state:
            await state.set_state(screen.next_state)


async def _send_with_photo(message: Message, screen: Screen) -> bool:
    """True if the text went out as the photo caption"""
    if not screen.photo_url:
        return False
    try:
        if len(screen.text) <= CAPTION_LIMIT:
            await message.answer_photo(screen.photo_url, caption=screen.text,
                                       reply_markup=screen.reply_markup)
            return True
        await message.answer_photo(screen.photo_url)
    except TelegramBadRequest as e:
        logger.warning(f"Could not send match image {screen.photo_url}: {e}")
    return False


async def alert(target: Union[Message, CallbackQuery], error: Exception) -> None:
    """Show a failure to the user"""
    await _message_of(target).answer(error_text(error))


async def show_welcome(target: Union[Message, CallbackQuery], prefix: str = "") -> None:
    text = f"{prefix}\n\n{t('welcome')}" if prefix else t("welcome")
    await _message_of(target).answer(text, reply_markup=get_welcome_keyboard())


async def current_view(target: Union[Message, CallbackQuery],
                       session: SessionContext) -> Optional[RoleView]:
    """Resolve the role view once for this render, or send the user to sign in"""
    if not session.is_authenticated:
        await show_welcome(target, t("sign_in_required"))
        return None
    return view_for(session.profile, match_service, feedback_service)


async def delete_quietly(message: Message) -> None:
    """Remove a message that held a password"""
    try:
        await message.delete()
    except TelegramBadRequest as e:
        logger.debug(f"Could not delete message {message.message_id}: {e}")

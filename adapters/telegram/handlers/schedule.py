"""
Schedule handler - the second tab.

Players see the live battles they joined; admins see every live match
with an archive button.
"""

import html
import logging
from uuid import UUID

from aiogram import Router, F
from aiogram.exceptions import TelegramBadRequest
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery

from adapters.telegram.keyboards import get_back_to_menu_keyboard
from adapters.telegram.loader import match_service
from adapters.telegram.render import alert, current_view, send_screens
from core.domain.errors import PitchsideError
from core.services.session import SessionContext
from locales import t

logger = logging.getLogger(__name__)
router = Router()


@router.callback_query(F.data == "menu_schedule")
async def show_schedule(callback: CallbackQuery, state: FSMContext, session: SessionContext):
    await state.clear()
    await callback.answer()
    view = await current_view(callback, session)
    if not view:
        return
    try:
        screens = await view.schedule()
    except PitchsideError as e:
        await alert(callback, e)
        return
    await send_screens(callback, screens, state)


@router.callback_query(F.data.startswith("match_archive_"))
async def archive_match(callback: CallbackQuery, session: SessionContext):
    await callback.answer()
    if not await current_view(callback, session):
        return
    match_id = UUID(callback.data.rsplit("_", 1)[1])
    try:
        match = await match_service.archive(match_id, session.profile)
    except PitchsideError as e:
        await alert(callback, e)
        return

    try:
        await callback.message.edit_reply_markup(reply_markup=None)
    except TelegramBadRequest as e:
        logger.debug(f"Could not drop archive button for {match_id}: {e}")
    await callback.message.answer(
        t("archived", name=html.escape(match.name)),
        reply_markup=get_back_to_menu_keyboard(),
    )

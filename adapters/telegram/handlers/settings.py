"""
Settings handler - the third tab.

Edit name, feedback (players send, admins read), sign out, delete account.
"""

import html
import logging
from uuid import UUID

from aiogram import Router, F
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from adapters.telegram.keyboards import (
    get_back_to_menu_keyboard,
    get_feedback_keyboard,
    get_sign_out_keyboard,
)
from adapters.telegram.loader import auth_service, feedback_service
from adapters.telegram.render import alert, current_view, delete_quietly, send_screens, show_welcome
from adapters.telegram.states import DeleteAccountStates, FeedbackStates, ProfileEditStates
from adapters.telegram.views import format_local_time
from config.features import features
from core.domain.errors import PitchsideError, ValidationFailed
from core.services.session import SessionContext, SessionRegistry
from locales import t

logger = logging.getLogger(__name__)
router = Router()


@router.callback_query(F.data == "menu_settings")
async def show_settings(callback: CallbackQuery, state: FSMContext, session: SessionContext):
    await state.clear()
    await callback.answer()
    view = await current_view(callback, session)
    if view:
        await send_screens(callback, [await view.settings()])


# === EDIT NAME ===

@router.callback_query(F.data == "settings_edit")
async def edit_start(callback: CallbackQuery, state: FSMContext, session: SessionContext):
    await callback.answer()
    if not await current_view(callback, session):
        return
    await state.set_state(ProfileEditStates.waiting_forename)
    await callback.message.answer(t("ask_new_forename", current=html.escape(session.profile.forename)))


@router.message(ProfileEditStates.waiting_forename, F.text)
async def edit_forename(message: Message, state: FSMContext, session: SessionContext):
    ok, error = auth_service.validate_name(message.text)
    if not ok:
        await alert(message, ValidationFailed(error))
        return
    await state.update_data(forename=message.text.strip())
    await state.set_state(ProfileEditStates.waiting_surname)
    current = html.escape(session.profile.surname) if session.profile else ""
    await message.answer(t("ask_new_surname", current=current))


@router.message(ProfileEditStates.waiting_surname, F.text)
async def edit_surname(message: Message, state: FSMContext, session: SessionContext):
    if not await current_view(message, session):
        await state.clear()
        return
    data = await state.get_data()
    try:
        await auth_service.update_profile(session.email, data.get("forename", ""), message.text)
    except PitchsideError as e:
        await alert(message, e)
        return

    await state.clear()
    # The held profile is stale until reloaded
    await session.reload()
    view = await current_view(message, session)
    if view:
        await message.answer(t("profile_updated"))
        await send_screens(message, [await view.settings()])


# === FEEDBACK ===

@router.callback_query(F.data == "settings_feedback")
async def feedback_start(callback: CallbackQuery, state: FSMContext, session: SessionContext):
    await callback.answer()
    if not await current_view(callback, session):
        return
    await state.set_state(FeedbackStates.waiting_body)
    await callback.message.answer(t("ask_feedback"))


@router.message(FeedbackStates.waiting_body, F.text)
async def feedback_body(message: Message, state: FSMContext, session: SessionContext):
    if not await current_view(message, session):
        await state.clear()
        return
    try:
        await feedback_service.submit(session.email, message.text)
    except PitchsideError as e:
        await alert(message, e)
        return
    await state.clear()
    await message.answer(t("feedback_sent"), reply_markup=get_back_to_menu_keyboard())


@router.callback_query(F.data == "settings_inbox")
async def show_inbox(callback: CallbackQuery, session: SessionContext):
    await callback.answer()
    if not await current_view(callback, session):
        return
    try:
        unread = await feedback_service.list_unread(session.profile)
    except PitchsideError as e:
        await alert(callback, e)
        return

    if not unread:
        await callback.message.answer(t("no_unread_feedback"), reply_markup=get_back_to_menu_keyboard())
        return
    for item in unread:
        date = format_local_time(item.submitted_at) if item.submitted_at else ""
        await callback.message.answer(
            t("feedback_item", sender=html.escape(item.submitted_by), date=date,
              body=html.escape(item.body)),
            reply_markup=get_feedback_keyboard(item),
        )


@router.callback_query(F.data.startswith("feedback_read_"))
async def mark_feedback_read(callback: CallbackQuery, session: SessionContext):
    if not await current_view(callback, session):
        await callback.answer()
        return
    feedback_id = UUID(callback.data.rsplit("_", 1)[1])
    try:
        await feedback_service.mark_read(feedback_id, session.profile)
    except PitchsideError as e:
        await callback.answer()
        await alert(callback, e)
        return
    await callback.message.edit_reply_markup(reply_markup=None)
    await callback.answer(t("marked_read"))


# === SIGN OUT ===

@router.callback_query(F.data == "settings_sign_out")
async def sign_out_confirm(callback: CallbackQuery):
    await callback.message.answer(t("confirm_sign_out"), reply_markup=get_sign_out_keyboard())
    await callback.answer()


@router.callback_query(F.data == "settings_sign_out_ok")
async def sign_out(callback: CallbackQuery, state: FSMContext, session: SessionContext):
    await state.clear()
    await callback.answer()
    try:
        await auth_service.sign_out(session)
    except PitchsideError as e:
        # Drop the local session anyway, the token is useless to us now
        session.clear()
        logger.warning(f"Remote sign-out failed: {e}")
    await show_welcome(callback, t("signed_out"))


# === DELETE ACCOUNT ===

@router.callback_query(F.data == "settings_delete")
async def delete_start(callback: CallbackQuery, state: FSMContext, session: SessionContext):
    await callback.answer()
    if not await current_view(callback, session):
        return
    await state.set_state(DeleteAccountStates.waiting_password)
    await callback.message.answer(t("confirm_delete"), reply_markup=get_back_to_menu_keyboard())


@router.message(DeleteAccountStates.waiting_password, F.text)
async def delete_password(message: Message, state: FSMContext, session: SessionContext,
                          sessions: SessionRegistry):
    password = message.text
    if features.DELETE_PASSWORD_MESSAGES:
        await delete_quietly(message)
    await state.clear()

    try:
        await auth_service.delete_account(session, password)
    except PitchsideError as e:
        await alert(message, e)
        return

    sessions.drop(message.from_user.id)
    await show_welcome(message, t("account_deleted"))

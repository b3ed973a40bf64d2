"""
Start handler - /start, main menu, registration, sign-in and password reset.
"""

import logging
from aiogram import Router, F
from aiogram.filters import Command, CommandStart
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from adapters.telegram.loader import auth_service
from adapters.telegram.render import alert, current_view, delete_quietly, send_screens, show_welcome
from adapters.telegram.states import RegisterStates, SignInStates
from config.features import features
from core.domain.errors import PitchsideError, ValidationFailed
from core.services.session import SessionContext
from locales import t

logger = logging.getLogger(__name__)
router = Router()


# === ENTRY POINTS ===

@router.message(CommandStart())
@router.message(Command("menu"))
async def cmd_start(message: Message, state: FSMContext, session: SessionContext):
    """Welcome for guests, main menu for signed-in users"""
    await state.clear()
    if not session.is_authenticated:
        await show_welcome(message)
        return
    view = await current_view(message, session)
    await send_screens(message, [view.menu()])


@router.callback_query(F.data == "menu_main")
async def show_main_menu(callback: CallbackQuery, state: FSMContext, session: SessionContext):
    await state.clear()
    await callback.answer()
    view = await current_view(callback, session)
    if view:
        await send_screens(callback, [view.menu()])


# === REGISTRATION ===

@router.callback_query(F.data == "auth_register")
async def register_start(callback: CallbackQuery, state: FSMContext):
    await state.clear()
    await state.set_state(RegisterStates.waiting_forename)
    await callback.message.answer(t("ask_forename"))
    await callback.answer()


@router.message(RegisterStates.waiting_forename, F.text)
async def register_forename(message: Message, state: FSMContext):
    ok, error = auth_service.validate_name(message.text)
    if not ok:
        await alert(message, ValidationFailed(error))
        return
    await state.update_data(forename=message.text.strip())
    await state.set_state(RegisterStates.waiting_surname)
    await message.answer(t("ask_surname"))


@router.message(RegisterStates.waiting_surname, F.text)
async def register_surname(message: Message, state: FSMContext):
    ok, error = auth_service.validate_name(message.text)
    if not ok:
        await alert(message, ValidationFailed(error))
        return
    await state.update_data(surname=message.text.strip())
    await state.set_state(RegisterStates.waiting_email)
    await message.answer(t("ask_email"))


@router.message(RegisterStates.waiting_email, F.text)
async def register_email(message: Message, state: FSMContext):
    await state.update_data(email=message.text.strip())
    await state.set_state(RegisterStates.waiting_password)
    await message.answer(t("ask_password"))


@router.message(RegisterStates.waiting_password, F.text)
async def register_password(message: Message, state: FSMContext):
    password = message.text
    if features.DELETE_PASSWORD_MESSAGES:
        await delete_quietly(message)

    data = await state.get_data()
    try:
        await auth_service.register(
            email=data.get("email", ""),
            password=password,
            forename=data.get("forename", ""),
            surname=data.get("surname", ""),
        )
    except PitchsideError as e:
        await alert(message, e)
        # Weak password: stay here and let them try another one
        return

    await state.clear()
    await show_welcome(message, t("registered"))


# === SIGN IN ===

@router.callback_query(F.data == "auth_sign_in")
async def sign_in_start(callback: CallbackQuery, state: FSMContext):
    await state.clear()
    await state.set_state(SignInStates.waiting_email)
    await callback.message.answer(t("ask_sign_in_email"))
    await callback.answer()


@router.message(SignInStates.waiting_email, F.text)
async def sign_in_email(message: Message, state: FSMContext):
    await state.update_data(email=message.text.strip())
    await state.set_state(SignInStates.waiting_password)
    await message.answer(t("ask_sign_in_password"))


@router.message(SignInStates.waiting_password, F.text)
async def sign_in_password(message: Message, state: FSMContext, session: SessionContext):
    password = message.text
    if features.DELETE_PASSWORD_MESSAGES:
        await delete_quietly(message)

    data = await state.get_data()
    await state.clear()
    try:
        auth = await auth_service.sign_in(data.get("email", ""), password)
    except PitchsideError as e:
        await alert(message, e)
        await show_welcome(message)
        return

    profile = await session.start(auth)
    if profile is None:
        logger.warning(f"Signed in {auth.email} but no profile document exists")
        session.clear()
        await show_welcome(message, t("error_generic"))
        return

    view = await current_view(message, session)
    await send_screens(message, [view.menu()])


# === PASSWORD RESET ===

@router.callback_query(F.data == "auth_reset")
async def reset_start(callback: CallbackQuery, state: FSMContext):
    await state.clear()
    await state.set_state(SignInStates.waiting_reset_email)
    await callback.message.answer(t("ask_reset_email"))
    await callback.answer()


@router.message(SignInStates.waiting_reset_email, F.text)
async def reset_email(message: Message, state: FSMContext):
    await state.clear()
    try:
        await auth_service.reset_password(message.text)
    except PitchsideError as e:
        await alert(message, e)
        return
    await show_welcome(message, t("reset_sent"))

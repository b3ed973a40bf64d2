"""
Games handler - the first tab.

Players: browse live battles, join / cancel a spot, see the pitch on a map.
Admins: the match upload form (name -> ... -> photo -> preview -> upload).
"""

import logging
from uuid import UUID

from aiogram import Router, F
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from adapters.telegram.keyboards import (
    get_back_to_menu_keyboard,
    get_confirm_keyboard,
    get_create_confirm_keyboard,
    get_gender_keyboard,
)
from adapters.telegram.loader import bot, match_service
from adapters.telegram.render import alert, current_view, send_screens
from adapters.telegram.states import CreateMatchStates
from adapters.telegram.parsing import parse_kickoff, parse_price
from adapters.telegram.views import (
    cancelled_text,
    confirm_cancel_text,
    confirm_join_text,
    format_draft,
    joined_text,
)
from config.features import features
from core.domain.constants import (
    MAX_CAPACITY,
    MAX_DESCRIPTION_LENGTH,
    MAX_MATCH_NAME_LENGTH,
)
from core.domain.errors import PitchsideError, UploadError, ValidationFailed
from core.domain.models import Gender, MatchDraft
from core.services.session import SessionContext
from locales import t

logger = logging.getLogger(__name__)
router = Router()


def _match_id(data: str) -> UUID:
    """match_{action}_{uuid} -> uuid"""
    return UUID(data.rsplit("_", 1)[1])


# === TAB ===

@router.callback_query(F.data == "menu_games")
async def show_games(callback: CallbackQuery, state: FSMContext, session: SessionContext):
    await state.clear()
    await callback.answer()
    view = await current_view(callback, session)
    if not view:
        return
    try:
        screens = await view.games()
    except PitchsideError as e:
        await alert(callback, e)
        return
    await send_screens(callback, screens, state)


# === JOIN / CANCEL ===

@router.callback_query(F.data.startswith("match_join_"))
async def ask_join(callback: CallbackQuery, session: SessionContext):
    await callback.answer()
    if not await current_view(callback, session):
        return
    try:
        match = await match_service.get(_match_id(callback.data))
    except PitchsideError as e:
        await alert(callback, e)
        return
    await callback.message.answer(
        confirm_join_text(match),
        reply_markup=get_confirm_keyboard("join", match.id),
    )


@router.callback_query(F.data.startswith("match_joinok_"))
async def confirm_join(callback: CallbackQuery, session: SessionContext):
    await callback.answer()
    if not await current_view(callback, session):
        return
    try:
        match = await match_service.join(_match_id(callback.data), session.email)
    except PitchsideError as e:
        await alert(callback, e)
        return
    await callback.message.edit_text(
        joined_text(match),
        reply_markup=get_back_to_menu_keyboard(),
    )


@router.callback_query(F.data.startswith("match_cancel_"))
async def ask_cancel(callback: CallbackQuery, session: SessionContext):
    await callback.answer()
    if not await current_view(callback, session):
        return
    try:
        match = await match_service.get(_match_id(callback.data))
    except PitchsideError as e:
        await alert(callback, e)
        return
    await callback.message.answer(
        confirm_cancel_text(match),
        reply_markup=get_confirm_keyboard("cancel", match.id),
    )


@router.callback_query(F.data.startswith("match_cancelok_"))
async def confirm_cancel(callback: CallbackQuery, session: SessionContext):
    await callback.answer()
    if not await current_view(callback, session):
        return
    try:
        match = await match_service.cancel(_match_id(callback.data), session.email)
    except PitchsideError as e:
        await alert(callback, e)
        return
    await callback.message.edit_text(
        cancelled_text(match),
        reply_markup=get_back_to_menu_keyboard(),
    )


@router.callback_query(F.data.startswith("match_map_"))
async def show_on_map(callback: CallbackQuery):
    await callback.answer()
    try:
        match = await match_service.get(_match_id(callback.data))
    except PitchsideError as e:
        await alert(callback, e)
        return
    await callback.message.answer_location(latitude=match.latitude, longitude=match.longitude)


# === ADMIN: UPLOAD FORM ===

@router.message(CreateMatchStates.waiting_name, F.text)
async def create_name(message: Message, state: FSMContext):
    name = message.text.strip()
    if not name or len(name) > MAX_MATCH_NAME_LENGTH:
        await alert(message, ValidationFailed(f"Name must be 1-{MAX_MATCH_NAME_LENGTH} characters."))
        return
    await state.update_data(name=name)
    await state.set_state(CreateMatchStates.waiting_capacity)
    await message.answer(t("ask_capacity"))


@router.message(CreateMatchStates.waiting_capacity, F.text)
async def create_capacity(message: Message, state: FSMContext):
    try:
        capacity = int(message.text.strip())
    except ValueError:
        capacity = 0
    if not 1 <= capacity <= MAX_CAPACITY:
        await message.answer(t("bad_capacity", max=MAX_CAPACITY))
        return
    await state.update_data(capacity=capacity)
    await state.set_state(CreateMatchStates.waiting_date_time)
    await message.answer(t("ask_date_time"))


@router.message(CreateMatchStates.waiting_date_time, F.text)
async def create_date_time(message: Message, state: FSMContext):
    try:
        when = parse_kickoff(message.text)
    except ValueError:
        await message.answer(t("bad_date"))
        return
    await state.update_data(date_time=when.isoformat())
    await state.set_state(CreateMatchStates.waiting_location)
    await message.answer(t("ask_location"))


@router.message(CreateMatchStates.waiting_location, F.text)
async def create_location(message: Message, state: FSMContext):
    """Geocode straight away so the admin can check the pin"""
    address = message.text.strip()
    try:
        coords = await match_service.geocode(address)
    except PitchsideError as e:
        await alert(message, e)
        return

    await state.update_data(location=address, latitude=coords.latitude, longitude=coords.longitude)
    await message.answer(t("location_found", lat=coords.latitude, lon=coords.longitude))
    if features.SHOW_MAP_PREVIEW:
        await message.answer_location(latitude=coords.latitude, longitude=coords.longitude)
    await state.set_state(CreateMatchStates.waiting_venue_price)
    await message.answer(t("ask_venue_price"))


@router.message(CreateMatchStates.waiting_venue_price, F.text)
async def create_venue_price(message: Message, state: FSMContext):
    try:
        price = parse_price(message.text)
    except ValueError:
        await message.answer(t("bad_number"))
        return
    await state.update_data(venue_price=price)
    await state.set_state(CreateMatchStates.waiting_price_per_player)
    await message.answer(t("ask_price_per_player"))


@router.message(CreateMatchStates.waiting_price_per_player, F.text)
async def create_price_per_player(message: Message, state: FSMContext):
    try:
        price = parse_price(message.text)
    except ValueError:
        await message.answer(t("bad_number"))
        return
    await state.update_data(price_per_player=price)
    await state.set_state(CreateMatchStates.choosing_gender)
    await message.answer(t("ask_gender"), reply_markup=get_gender_keyboard())


@router.callback_query(CreateMatchStates.choosing_gender, F.data.startswith("gender_"))
async def create_gender(callback: CallbackQuery, state: FSMContext):
    gender = Gender(callback.data.split("_", 1)[1])
    await state.update_data(gender=gender.value)
    await state.set_state(CreateMatchStates.waiting_description)
    await callback.message.edit_text(f"{t('ask_gender')} <b>{gender.value}</b>")
    await callback.message.answer(t("ask_description"))
    await callback.answer()


@router.message(CreateMatchStates.waiting_description, F.text)
async def create_description(message: Message, state: FSMContext):
    description = message.text.strip()
    if len(description) > MAX_DESCRIPTION_LENGTH:
        await alert(message, ValidationFailed(
            f"Description must be at most {MAX_DESCRIPTION_LENGTH} characters."
        ))
        return
    await state.update_data(description=description)
    await state.set_state(CreateMatchStates.waiting_image)
    await message.answer(t("ask_image"))


@router.message(CreateMatchStates.waiting_image, F.photo)
async def create_image(message: Message, state: FSMContext):
    # Largest size is last
    await state.update_data(photo_file_id=message.photo[-1].file_id)
    await state.set_state(CreateMatchStates.confirming)
    draft = _draft_from(await state.get_data())
    await message.answer(
        t("create_preview", card=format_draft(draft)),
        reply_markup=get_create_confirm_keyboard(),
    )


@router.message(CreateMatchStates.waiting_image)
async def create_image_wrong_type(message: Message):
    await message.answer(t("bad_photo"))


def _draft_from(data: dict, image: bytes = None) -> MatchDraft:
    return MatchDraft(
        name=data.get("name"),
        capacity=data.get("capacity"),
        date_time=data.get("date_time"),
        location=data.get("location"),
        latitude=data.get("latitude"),
        longitude=data.get("longitude"),
        venue_price=data.get("venue_price"),
        price_per_player=data.get("price_per_player"),
        gender=data.get("gender"),
        description=data.get("description"),
        image=image,
    )


@router.callback_query(CreateMatchStates.confirming, F.data == "create_upload")
async def create_upload(callback: CallbackQuery, state: FSMContext, session: SessionContext):
    await callback.answer()
    if not await current_view(callback, session):
        return

    data = await state.get_data()
    try:
        photo = await bot.download(data["photo_file_id"])
    except Exception as e:
        logger.error(f"Could not download match photo {data.get('photo_file_id')}: {e}")
        await alert(callback, UploadError("Could not fetch the photo from Telegram. Please send it again."))
        await state.set_state(CreateMatchStates.waiting_image)
        return
    draft = _draft_from(data, image=photo.getvalue() if photo else None)

    try:
        match = await match_service.create_match(draft, session.profile)
    except PitchsideError as e:
        # Keep the form so the admin can retry the upload
        await alert(callback, e)
        return

    await state.clear()
    logger.info(f"Match {match.id} uploaded via Telegram by {session.email}")
    await callback.message.edit_text(t("created"), reply_markup=get_back_to_menu_keyboard())


@router.callback_query(CreateMatchStates.confirming, F.data == "create_discard")
async def create_discard(callback: CallbackQuery, state: FSMContext):
    await state.clear()
    await callback.message.edit_text(t("discarded"), reply_markup=get_back_to_menu_keyboard())
    await callback.answer()

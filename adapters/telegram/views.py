"""
Role views - what each tab shows for an admin vs a regular player.

The role is resolved once per render with view_for(); handlers never branch
on is_admin themselves. Views return Screens and leave sending to handlers.
"""

import html
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional
from zoneinfo import ZoneInfo

from aiogram.fsm.state import State
from aiogram.types import InlineKeyboardMarkup

from adapters.telegram.keyboards.inline import (
    get_admin_match_keyboard,
    get_back_to_menu_keyboard,
    get_main_menu_keyboard,
    get_player_match_keyboard,
    get_settings_keyboard,
)
from adapters.telegram.states.forms import CreateMatchStates
from config.settings import settings
from core.domain.constants import DATE_TIME_DISPLAY_FORMAT
from core.domain.models import Match, MatchDraft, Role, UserProfile
from core.services.feedback_service import FeedbackService
from core.services.match_service import MatchService
from locales import t

logger = logging.getLogger(__name__)


@dataclass
class Screen:
    text: str
    reply_markup: Optional[InlineKeyboardMarkup] = None
    photo_url: Optional[str] = None
    next_state: Optional[State] = None


def format_price(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".") if value % 1 else f"{value:.0f}"


def format_local_time(when: datetime) -> str:
    """Stored times come back in UTC; show them in the configured zone"""
    if when.tzinfo is not None:
        when = when.astimezone(ZoneInfo(settings.timezone))
    return when.strftime(DATE_TIME_DISPLAY_FORMAT)


def confirm_join_text(match: Match) -> str:
    return t("confirm_join", name=html.escape(match.name), price=format_price(match.price_per_player))


def confirm_cancel_text(match: Match) -> str:
    return t("confirm_cancel", name=html.escape(match.name))


def joined_text(match: Match) -> str:
    return t("joined", date=format_local_time(match.date_time))


def cancelled_text(match: Match) -> str:
    return t("cancelled", name=html.escape(match.name))


def error_text(error: Exception) -> str:
    # Provider errors can carry raw SDK text
    return t("error", message=html.escape(str(error)))


def format_match(match: Match, email: Optional[str] = None) -> str:
    """Match card body (HTML)"""
    badge = ""
    if email and match.has_member(email):
        badge = f"  {t('joined_badge')}"
    elif match.is_full:
        badge = f"  {t('full_badge')}"

    return (
        f"<b>{html.escape(match.name)}</b>{badge}\n"
        f"\U0001f5d3 {format_local_time(match.date_time)}\n"
        f"\U0001f4cd {html.escape(match.location)}\n"
        f"\U0001f465 {len(match.members)}/{match.capacity} · {match.gender.value}\n"
        f"\U0001f4b7 £{format_price(match.price_per_player)} per player"
        f" (venue £{format_price(match.venue_price)})\n\n"
        f"{html.escape(match.description)}"
    )


def format_draft(draft: MatchDraft) -> str:
    """Preview of an admin's draft before upload"""
    when = format_local_time(draft.date_time) if draft.date_time else "?"
    gender = draft.gender.value if draft.gender else "?"
    return (
        f"<b>{html.escape(draft.name or '')}</b>\n"
        f"\U0001f5d3 {when}\n"
        f"\U0001f4cd {html.escape(draft.location or '')}\n"
        f"\U0001f465 {draft.capacity} players · {gender}\n"
        f"\U0001f4b7 £{format_price(draft.price_per_player or 0)} per player"
        f" (venue £{format_price(draft.venue_price or 0)})\n\n"
        f"{html.escape(draft.description or '')}"
    )


class RoleView(ABC):
    """One render of the three tabs for a signed-in profile"""

    role: Role

    def __init__(self, profile: UserProfile, match_service: MatchService,
                 feedback_service: FeedbackService):
        self.profile = profile
        self.match_service = match_service
        self.feedback_service = feedback_service

    @property
    @abstractmethod
    def games_label(self) -> str:
        pass

    def menu(self) -> Screen:
        text = f"{t('welcome_back', name=html.escape(self.profile.forename))}\n\n{t('menu_header')}"
        return Screen(text=text, reply_markup=get_main_menu_keyboard(self.games_label))

    @abstractmethod
    async def games(self) -> List[Screen]:
        pass

    @abstractmethod
    async def schedule(self) -> List[Screen]:
        pass

    async def _unread_count(self) -> int:
        return 0

    async def settings(self) -> Screen:
        text = t(
            "settings_header",
            forename=html.escape(self.profile.forename),
            surname=html.escape(self.profile.surname),
            email=html.escape(self.profile.email),
            role=self.role.value,
        )
        keyboard = get_settings_keyboard(self.profile.is_admin, await self._unread_count())
        return Screen(text=text, reply_markup=keyboard)


class AdminView(RoleView):
    role = Role.ADMIN

    @property
    def games_label(self) -> str:
        return t("tab_games_admin")

    async def games(self) -> List[Screen]:
        """Admins upload games: start the create form"""
        return [Screen(text=t("create_intro"), next_state=CreateMatchStates.waiting_name)]

    async def schedule(self) -> List[Screen]:
        matches = await self.match_service.list_live()
        screens = [Screen(text=t("schedule_admin_header"))]
        if not matches:
            screens.append(Screen(text=t("no_live_matches"), reply_markup=get_back_to_menu_keyboard()))
            return screens
        for match in matches:
            screens.append(Screen(
                text=format_match(match),
                reply_markup=get_admin_match_keyboard(match),
                photo_url=match.image_url or None,
            ))
        return screens

    async def _unread_count(self) -> int:
        try:
            return len(await self.feedback_service.list_unread(self.profile))
        except Exception as e:
            logger.error(f"[VIEW] Could not count unread feedback: {e}")
            return 0


class PlayerView(RoleView):
    role = Role.PLAYER

    @property
    def games_label(self) -> str:
        return t("tab_games_player")

    def _cards(self, matches: List[Match]) -> List[Screen]:
        email = self.profile.email
        return [
            Screen(
                text=format_match(match, email),
                reply_markup=get_player_match_keyboard(match, email),
                photo_url=match.image_url or None,
            )
            for match in matches
        ]

    async def games(self) -> List[Screen]:
        matches = await self.match_service.list_live()
        if not matches:
            return [Screen(text=t("no_live_matches"), reply_markup=get_back_to_menu_keyboard())]
        return self._cards(matches)

    async def schedule(self) -> List[Screen]:
        matches = await self.match_service.list_joined(self.profile.email)
        screens = [Screen(text=t("schedule_player_header"))]
        if not matches:
            screens.append(Screen(text=t("no_joined_matches"), reply_markup=get_back_to_menu_keyboard()))
            return screens
        return screens + self._cards(matches)


_VIEWS = {
    Role.ADMIN: AdminView,
    Role.PLAYER: PlayerView,
}


def view_for(profile: UserProfile, match_service: MatchService,
             feedback_service: FeedbackService) -> RoleView:
    return _VIEWS[profile.role](profile, match_service, feedback_service)

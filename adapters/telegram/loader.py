"""
Telegram bot loader - initializes bot, dispatcher, and services.
"""

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.enums import ParseMode
from config.settings import settings

# Infrastructure
from infrastructure.database import (
    SupabaseUserRepository,
    SupabaseMatchRepository,
    SupabaseFeedbackRepository,
)
from infrastructure.auth import SupabaseIdentityProvider
from infrastructure.storage import SupabaseImageStorage
from infrastructure.geocoding import NominatimGeocoder

# Core services
from core.services import (
    MatchService,
    AuthService,
    FeedbackService,
    SessionRegistry,
)


# === BOT INITIALIZATION ===
bot = Bot(
    token=settings.telegram_bot_token,
    default=DefaultBotProperties(parse_mode=ParseMode.HTML),
)
storage = MemoryStorage()
dp = Dispatcher(storage=storage)


# === REPOSITORIES ===
user_repo = SupabaseUserRepository()
match_repo = SupabaseMatchRepository()
feedback_repo = SupabaseFeedbackRepository()


# === COLLABORATORS ===
identity = SupabaseIdentityProvider()
image_storage = SupabaseImageStorage()
geocoder = NominatimGeocoder()


# === BUSINESS SERVICES ===
match_service = MatchService(
    match_repo=match_repo,
    storage=image_storage,
    geocoder=geocoder,
)
auth_service = AuthService(
    identity=identity,
    user_repo=user_repo,
    match_repo=match_repo,
)
feedback_service = FeedbackService(feedback_repo=feedback_repo)


# === SESSIONS ===
sessions = SessionRegistry(user_repo=user_repo)

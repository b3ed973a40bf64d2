from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


class Settings(BaseSettings):
    """Application settings - reads from environment variables"""

    # Telegram
    telegram_bot_token: str = ""

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""  # anon key, used for auth flows
    supabase_service_key: str = ""  # tables, storage, admin user deletion
    storage_bucket: str = "match-images"
    db_schema: str = "public"

    # Geocoding (Nominatim-compatible)
    geocoder_url: str = "https://nominatim.openstreetmap.org/search"
    geocoder_user_agent: str = "pitchside-bot/1.0"
    geocoder_timeout: float = 10.0

    # Kick-off times are entered and shown in this zone
    timezone: str = "Europe/London"

    # Environment
    env: str = "development"
    debug: bool = False

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,  # SUPABASE_URL == supabase_url
    )


# Create settings instance
settings = Settings()

"""
Feature Flags - Easy on/off toggle for features.
Change values here to enable/disable functionality.
"""

import os


class Features:
    """Feature toggles - set via env vars or defaults"""

    # === AUTH ===
    REQUIRE_EMAIL_VERIFICATION: bool = os.getenv("REQUIRE_EMAIL_VERIFICATION", "true").lower() == "true"
    DELETE_PASSWORD_MESSAGES: bool = os.getenv("DELETE_PASSWORD_MESSAGES", "true").lower() == "true"

    # === MATCHES ===
    SHOW_MAP_PREVIEW: bool = os.getenv("SHOW_MAP_PREVIEW", "true").lower() == "true"

    # === RATE LIMITING ===
    RATE_LIMIT_PER_MINUTE: int = int(os.getenv("RATE_LIMIT_PER_MINUTE", "30"))

    # === DEBUG ===
    DEBUG_MODE: bool = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def to_dict(cls) -> dict:
        """Get all features as dict (useful for logging)"""
        return {
            "require_email_verification": cls.REQUIRE_EMAIL_VERIFICATION,
            "delete_password_messages": cls.DELETE_PASSWORD_MESSAGES,
            "show_map_preview": cls.SHOW_MAP_PREVIEW,
            "rate_limit_per_minute": cls.RATE_LIMIT_PER_MINUTE,
            "debug_mode": cls.DEBUG_MODE,
        }


# Shortcut
features = Features()

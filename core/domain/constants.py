"""
Domain constants - table names, limits, formats.
Centralized here for easy modification.
"""

import re

# Tables
USERS_TABLE = "users"
MATCHES_TABLE = "matches"
FEEDBACK_TABLE = "feedback"

# Postgres functions (see infrastructure/database/schema.sql)
RPC_JOIN_MATCH = "join_match"
RPC_LEAVE_MATCH = "leave_match"
RPC_DETACH_USER = "detach_user_from_matches"

# Blob storage
IMAGE_FOLDER = "Images"
IMAGE_CONTENT_TYPE = "image/jpeg"

# Fields a draft needs before it can go live
REQUIRED_MATCH_FIELDS = [
    "name",
    "capacity",
    "date_time",
    "location",
    "latitude",
    "longitude",
    "venue_price",
    "price_per_player",
    "gender",
    "description",
    "image",
]

# Passwords: at least 1 uppercase, 1 digit, 8 letters/digits
PASSWORD_PATTERN = re.compile(r"^(?=.*[A-Z])(?=.*\d)[A-Za-z\d]{8,}$")

# Limits
MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 50
MAX_MATCH_NAME_LENGTH = 80
MAX_DESCRIPTION_LENGTH = 1000
MAX_FEEDBACK_LENGTH = 2000
MAX_CAPACITY = 50

# Input formats (Telegram forms)
DATE_TIME_INPUT_FORMAT = "%d/%m/%Y %H:%M"
DATE_TIME_DISPLAY_FORMAT = "%a %d %b %Y, %H:%M"

# === Rate limiting ===
RATE_LIMIT_INTERVAL_SECONDS = 60

"""
Parsing of free-text answers in the admin upload form.
"""

from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from config.settings import settings
from core.domain.constants import DATE_TIME_INPUT_FORMAT


def parse_price(text: str) -> float:
    value = float(text.strip().lstrip("£").replace(",", "."))
    if value < 0:
        raise ValueError("negative price")
    return value


def parse_kickoff(text: str, tz: Optional[str] = None) -> datetime:
    """DD/MM/YYYY HH:MM in the configured zone -> aware datetime"""
    naive = datetime.strptime(text.strip(), DATE_TIME_INPUT_FORMAT)
    return naive.replace(tzinfo=ZoneInfo(tz or settings.timezone))

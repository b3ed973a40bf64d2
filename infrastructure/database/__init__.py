from infrastructure.database.user_repository import SupabaseUserRepository
from infrastructure.database.match_repository import SupabaseMatchRepository
from infrastructure.database.feedback_repository import SupabaseFeedbackRepository

__all__ = [
    "SupabaseUserRepository",
    "SupabaseMatchRepository",
    "SupabaseFeedbackRepository",
]

from core.services.match_service import MatchService
from core.services.auth_service import AuthService
from core.services.feedback_service import FeedbackService
from core.services.session import SessionContext, SessionRegistry

__all__ = [
    "MatchService",
    "AuthService",
    "FeedbackService",
    "SessionContext",
    "SessionRegistry",
]

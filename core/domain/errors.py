"""
Domain errors.

Services raise these; adapters catch PitchsideError and show the message to the user.
Collaborator failures (store, storage, geocoder, identity) are wrapped so that
callers never see SDK exceptions.
"""

from typing import List, Optional


class PitchsideError(Exception):
    """Base class for all errors surfaced to the user"""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


# === Validation (recovered locally, nothing written) ===

class ValidationFailed(PitchsideError):
    pass


class MatchValidationError(ValidationFailed):
    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__("Please fill out all fields: " + ", ".join(self.missing))


class WeakPasswordError(ValidationFailed):
    def __init__(self):
        super().__init__(
            "Password must be at least 8 characters and contain "
            "an uppercase letter and a number."
        )


class GeocodingError(ValidationFailed):
    def __init__(self, address: str, message: str = "Address not found."):
        self.address = address
        super().__init__(message)


# === Lifecycle ===

class PermissionDeniedError(PitchsideError):
    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Only administrators can {action}.")


class MatchNotFoundError(PitchsideError):
    def __init__(self, match_id):
        self.match_id = match_id
        super().__init__("This match no longer exists or has been archived.")


class MatchFullError(PitchsideError):
    def __init__(self, match_id):
        self.match_id = match_id
        super().__init__("Sorry, this match is already full.")


class AlreadyMemberError(PitchsideError):
    def __init__(self, match_id):
        self.match_id = match_id
        super().__init__("You have already joined this match.")


class NotAMemberError(PitchsideError):
    def __init__(self, match_id):
        self.match_id = match_id
        super().__init__("You are not part of this match.")


class FeedbackNotFoundError(PitchsideError):
    def __init__(self, feedback_id):
        self.feedback_id = feedback_id
        super().__init__("Feedback message not found.")


# === Collaborator failures ===

class StoreError(PitchsideError):
    pass


class UploadError(PitchsideError):
    pass


class AuthError(PitchsideError):
    """Identity provider failure with a typed code"""

    USER_NOT_FOUND = "user_not_found"
    WRONG_PASSWORD = "wrong_password"
    EMAIL_NOT_VERIFIED = "email_not_verified"
    EMAIL_IN_USE = "email_in_use"
    OTHER = "other"

    def __init__(self, code: str, message: Optional[str] = None):
        self.code = code
        super().__init__(message or _AUTH_MESSAGES.get(code, "Authentication failed."))


_AUTH_MESSAGES = {
    AuthError.USER_NOT_FOUND: "No user found with this email.",
    AuthError.WRONG_PASSWORD: "Incorrect password.",
    AuthError.EMAIL_NOT_VERIFIED: (
        "A new verification link has been sent to the entered email. "
        "You must verify your email address before logging in."
    ),
    AuthError.EMAIL_IN_USE: "That email address is already in use.",
}


class AccountDeletionError(PitchsideError):
    """Deletion halted at `step`; earlier steps are not rolled back"""

    def __init__(self, step: str, cause: Exception):
        self.step = step
        self.cause = cause
        super().__init__(f"Failed to delete account ({step}): {cause}")

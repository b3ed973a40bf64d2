from adapters.telegram.states.forms import (
    RegisterStates,
    SignInStates,
    CreateMatchStates,
    ProfileEditStates,
    FeedbackStates,
    DeleteAccountStates,
)

__all__ = [
    "RegisterStates",
    "SignInStates",
    "CreateMatchStates",
    "ProfileEditStates",
    "FeedbackStates",
    "DeleteAccountStates",
]

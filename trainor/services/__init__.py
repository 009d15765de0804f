from .auth import AuthService, AuthState
from .result import NOT_AUTHENTICATED, Result
from .workout import WorkoutService

__all__ = [
    "AuthService",
    "AuthState",
    "WorkoutService",
    "Result",
    "NOT_AUTHENTICATED",
]

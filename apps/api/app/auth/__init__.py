"""Auth package: bearer-token dependency and token verification."""

from app.auth.dependencies import get_current_user
from app.auth.jwt import verify_access_token

__all__ = [
    "get_current_user",
    "verify_access_token",
]

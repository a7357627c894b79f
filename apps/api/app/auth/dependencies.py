"""FastAPI auth dependency: get_current_user."""

import uuid

import sentry_sdk
import structlog
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from app.auth.jwt import verify_access_token
from app.schemas.auth import CurrentUser

logger = structlog.get_logger()

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CurrentUser:
    """
    Verify the bearer token and build the caller's identity.

    Users live with the auth provider, so the `sub` claim is the user id;
    there is no local user table to consult.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    try:
        payload = verify_access_token(credentials.credentials)
    except JWTError as e:
        logger.warning("jwt_verification_failed", error=str(e))
        raise _unauthorized("Invalid or expired token") from e

    subject = payload.get("sub")
    if not subject:
        raise _unauthorized("Token missing subject claim")
    try:
        user_id = uuid.UUID(str(subject))
    except ValueError as e:
        logger.warning("jwt_subject_not_uuid", sub=subject)
        raise _unauthorized("Token subject is not a user id") from e

    current_user = CurrentUser(user_id=user_id, email=payload.get("email") or "")

    # Enrich Sentry scope with identity (PII-free: no email)
    sentry_sdk.set_user({"id": str(user_id)})

    return current_user

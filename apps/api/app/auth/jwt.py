"""HS256 access-token verification for the hosted auth provider.

Tokens are signed with the project JWT secret and carry `sub` (user UUID),
`email` and `aud` ("authenticated") claims.
"""

from jose import jwt

from app.core.config import settings

ALGORITHMS = ["HS256"]


def verify_access_token(token: str) -> dict:
    """
    Verify an access token and return its claims.

    Raises JWTError on any validation failure (signature, expiry, audience,
    issuer when configured).
    """
    return jwt.decode(
        token,
        settings.AUTH_JWT_SECRET,
        algorithms=ALGORITHMS,
        audience=settings.AUTH_JWT_AUDIENCE or None,
        issuer=settings.AUTH_JWT_ISSUER or None,
        options={
            "verify_aud": bool(settings.AUTH_JWT_AUDIENCE),
            "verify_iss": bool(settings.AUTH_JWT_ISSUER),
            "verify_exp": True,
        },
    )

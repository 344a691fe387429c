"""Admin credential checks and bearer token helpers."""
from __future__ import annotations

import hmac
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from sounds_like_home.core.settings import settings

ADMIN_SUBJECT = "admin"


def check_admin_password(password: str) -> bool:
    """Return True if ``password`` matches the configured admin password."""
    return hmac.compare_digest(
        password.encode("utf-8"),
        settings.admin_password.encode("utf-8"),
    )


def create_access_token(subject: str = ADMIN_SUBJECT) -> str:
    """Create a signed JWT for an authenticated admin session."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.admin_token_expire_minutes)
    to_encode: dict[str, object] = {"sub": subject, "exp": expire}
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str) -> str | None:
    """Return the token subject, or None if the token is invalid or expired."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None
    subject = payload.get("sub")
    return subject if isinstance(subject, str) else None

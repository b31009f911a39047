from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from app.config import Settings

# Registered claims added on issue and stripped again on verify
_RESERVED_CLAIMS = {"exp", "iat"}


class InvalidTokenError(Exception):
    pass


def issue_token(identity: dict, settings: Settings, expires_delta: timedelta | None = None) -> str:
    now = datetime.now(timezone.utc)
    to_encode = {k: v for k, v in identity.items() if k not in _RESERVED_CLAIMS}
    to_encode["iat"] = now
    to_encode["exp"] = now + (expires_delta or timedelta(hours=settings.token_ttl_hours))
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: Settings) -> dict:
    """Return the identity embedded in ``token``.

    Raises InvalidTokenError when the signature does not match, the token has
    expired, or it is not a JWT at all.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as exc:
        raise InvalidTokenError(str(exc)) from exc
    return {k: v for k, v in payload.items() if k not in _RESERVED_CLAIMS}

import logging

from fastapi import Depends, HTTPException, Request

from app.config import Settings, get_settings
from app.utils.security import InvalidTokenError, verify_token

logger = logging.getLogger(__name__)

UNAUTHORIZED = "unauthorized access"


async def require_session(request: Request, settings: Settings = Depends(get_settings)) -> dict:
    token = request.cookies.get(settings.cookie_name)
    if not token:
        raise HTTPException(status_code=401, detail=UNAUTHORIZED)
    try:
        return verify_token(token, settings)
    except InvalidTokenError as exc:
        logger.debug("Rejected session token: %s", exc)
        raise HTTPException(status_code=401, detail=UNAUTHORIZED) from exc

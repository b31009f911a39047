from fastapi import APIRouter, Depends, Response

from app.config import Settings, get_settings
from app.schemas.auth import SessionRequest, SessionResponse
from app.utils.security import issue_token

router = APIRouter(tags=["auth"])


def _cookie_policy(settings: Settings) -> dict:
    # Cross-site cookies in production, where the client is served from another origin
    return {
        "httponly": True,
        "secure": settings.is_production,
        "samesite": "none" if settings.is_production else "strict",
    }


@router.post("/jwt", response_model=SessionResponse)
async def create_session(
    req: SessionRequest,
    response: Response,
    settings: Settings = Depends(get_settings),
):
    token = issue_token(req.model_dump(), settings)
    response.set_cookie(key=settings.cookie_name, value=token, **_cookie_policy(settings))
    return SessionResponse()


@router.get("/logout", response_model=SessionResponse)
async def logout(response: Response, settings: Settings = Depends(get_settings)):
    response.delete_cookie(key=settings.cookie_name, **_cookie_policy(settings))
    return SessionResponse()

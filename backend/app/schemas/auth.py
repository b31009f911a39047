from pydantic import BaseModel, ConfigDict


class SessionRequest(BaseModel):
    # Any extra claims sent by the client are signed into the token too
    model_config = ConfigDict(extra="allow")

    email: str


class SessionResponse(BaseModel):
    success: bool = True

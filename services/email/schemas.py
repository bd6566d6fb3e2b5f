# services/email/schemas.py
from pydantic import BaseModel, Field
from typing import Optional

INVITE_FIELDS = ("to", "name", "inviter", "invite_link")

class InviteRequest(BaseModel):
    to: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    inviter: str = Field(..., min_length=1)
    invite_link: str = Field(..., min_length=1)

class EmailSendResponse(BaseModel):
    ok: bool
    status_code: int
    detail: Optional[str] = None

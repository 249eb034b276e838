from __future__ import annotations

from pydantic import BaseModel


class ChatRequestDTO(BaseModel):
    # Blank and missing messages are rejected by the use case with one message.
    message: str = ""


class ChatReplyDTO(BaseModel):
    message: str = "Reply successfully generated by Google AI."
    reply: str

# Proxy/schemas.py
from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HealthResponse(BaseModel):
    status: str = "ok"
    message: str = "Leave chat proxy is running"


class ChatIntent(str, Enum):
    BALANCE = "BALANCE"


class Message(BaseModel):
    """One transcript bubble. Frozen: the transcript is append-only."""
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    text: str


class ChatRequest(BaseModel):
    message: str = Field(..., description="User text, trimmed", examples=["what is my annual leave?"])
    employee_id: Optional[str] = Field(None, examples=["E001"])
    intent: Optional[ChatIntent] = None

    @field_validator("message")
    @classmethod
    def _non_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("message must not be empty")
        return v

    def to_payload(self) -> dict:
        # unset optionals are left out of the wire body
        return self.model_dump(mode="json", exclude_none=True)


class ChatResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    reply: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def from_payload(cls, data: Any) -> "ChatResponse":
        """Anything that is not a JSON object counts as an empty response."""
        if not isinstance(data, dict):
            return cls()
        return cls.model_validate(data)

    def display_text(self, placeholder: str = "No reply") -> str:
        if self.reply is not None:
            return self.reply
        if self.error is not None:
            return self.error
        return placeholder


class ProxyError(BaseModel):
    error: str

"""
Pydantic Schemas for Chat endpoints
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class ChatRequest(BaseModel):
    """Request schema for chat endpoint (one user message, no history)"""
    message: Optional[str] = Field(None, description="The student's message")


class ChatResponse(BaseModel):
    """Tutor reply"""
    reply: str = Field(..., description="Reply text from the tutor model")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"reply": "2 + 2 = 4. Adding two and two gives four."}
        }
    )

"""Sharing feed post model."""

from datetime import datetime

from pydantic import BaseModel, Field


class SNSPost(BaseModel):
    """A short message shared after a focus session."""

    id: str
    user_id: str
    user_name: str
    user_icon: str
    message: str
    focus_minutes: int = Field(ge=0)
    created_at: datetime
    is_own: bool = True

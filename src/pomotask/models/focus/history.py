"""Completed focus records."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

Visibility = Literal["public", "private"]


class FocusLog(BaseModel):
    """One finished focus interval, as consumed by the statistics aggregator."""

    id: str
    task_id: Optional[str] = None
    duration_minutes: int = Field(gt=0)
    completed_at: datetime
    message: Optional[str] = None
    visibility: Visibility = "public"
    created_at: datetime

from __future__ import annotations

from datetime import datetime
from typing import Optional

from schemas.base import CamelModel


class TeamCreate(CamelModel):
    name: Optional[str] = None
    color: Optional[str] = None


class TeamOut(CamelModel):
    id: int
    name: str
    color: str
    created_at: datetime | None = None


class DispositionRequest(CamelModel):
    """Body of use-question / skip-question."""

    question_id: Optional[int] = None
    user_name: Optional[str] = None


class DispositionResult(CamelModel):
    ok: bool
    message: str

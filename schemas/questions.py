# schemas/questions.py
from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from schemas.base import CamelModel

Category = Literal["personal", "work", "hypothetical", "creative", "thoughtful", "general"]
Difficulty = Literal["easy", "medium", "hard"]


class QuestionCreate(CamelModel):
    # text stays optional here so a missing value gets the "required" message, not a schema error
    text: Optional[str] = None
    category: Optional[Category] = None
    difficulty: Optional[Difficulty] = None


class QuestionUpdate(CamelModel):
    text: Optional[str] = None
    category: Optional[Category] = None
    difficulty: Optional[Difficulty] = None


class QuestionOut(CamelModel):
    id: int
    text: str
    category: str
    difficulty: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

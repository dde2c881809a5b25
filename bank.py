# Question bank administration: list, create, edit, delete.

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from errors import NotFound, ValidationFailed
from models import DEFAULT_CATEGORY, DEFAULT_DIFFICULTY, Question, SkipRecord, UsageRecord

logger = logging.getLogger(__name__)


def _clean_text(text: Optional[str]) -> str:
    s = (text or "").strip()
    if not s:
        raise ValidationFailed("Question text is required")
    return s


def get_question(db: Session, question_id: int) -> Question:
    q = db.get(Question, question_id)
    if q is None:
        raise NotFound("Question not found")
    return q


def list_questions(
    db: Session,
    category: Optional[str] = None,
    difficulty: Optional[str] = None,
) -> List[Question]:
    stmt = select(Question).order_by(Question.created_at.desc(), Question.id.desc())
    if category:
        stmt = stmt.where(Question.category == category)
    if difficulty:
        stmt = stmt.where(Question.difficulty == difficulty)
    return list(db.scalars(stmt))


def create_question(
    db: Session,
    text: Optional[str],
    category: Optional[str] = None,
    difficulty: Optional[str] = None,
) -> Question:
    q = Question(
        text=_clean_text(text),
        category=category or DEFAULT_CATEGORY,
        difficulty=difficulty or DEFAULT_DIFFICULTY,
    )
    db.add(q)
    db.commit()
    db.refresh(q)
    logger.info("question %s created (%s/%s)", q.id, q.category, q.difficulty)
    return q


def update_question(db: Session, question_id: int, changes: Dict[str, Any]) -> Question:
    """Partial update; keys absent from `changes` are left alone."""
    q = get_question(db, question_id)
    if "text" in changes:
        q.text = _clean_text(changes["text"])
    # null category/difficulty means "not sent", same as an absent key
    if changes.get("category") is not None:
        q.category = changes["category"]
    if changes.get("difficulty") is not None:
        q.difficulty = changes["difficulty"]
    db.commit()
    db.refresh(q)
    return q


def delete_question(db: Session, question_id: int) -> None:
    """Removes the question together with every usage/skip record pointing at it."""
    q = get_question(db, question_id)
    db.delete(q)
    used = db.execute(delete(UsageRecord).where(UsageRecord.question_id == question_id))
    skipped = db.execute(delete(SkipRecord).where(SkipRecord.question_id == question_id))
    db.commit()
    logger.info(
        "question %s deleted (%d usage, %d skip records removed)",
        question_id,
        used.rowcount,
        skipped.rowcount,
    )

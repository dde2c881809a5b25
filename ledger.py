# Teams and their use/skip ledgers.

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from errors import Conflict, NotFound, ValidationFailed
from models import DEFAULT_TEAM_COLOR, Question, SkipRecord, Team, UsageRecord

logger = logging.getLogger(__name__)

LedgerModel = Type[Union[UsageRecord, SkipRecord]]

# ledger model -> the word used in messages
_VERBS = {UsageRecord: "used", SkipRecord: "skipped"}


# --- Teams -----------------------------------------------------------------------


def get_team(db: Session, team_id: int) -> Team:
    team = db.get(Team, team_id)
    if team is None:
        raise NotFound("Team not found")
    return team


def list_teams(db: Session) -> List[Team]:
    return list(db.scalars(select(Team).order_by(Team.created_at, Team.id)))


def create_team(db: Session, name: Optional[str], color: Optional[str] = None) -> Team:
    clean = (name or "").strip()
    if not clean:
        raise ValidationFailed("Team name is required")
    # duplicate team names answer 400, not 409
    if db.scalar(select(Team.id).where(Team.name == clean)) is not None:
        raise Conflict("Team name already exists", status_code=400)

    team = Team(name=clean, color=color or DEFAULT_TEAM_COLOR)
    db.add(team)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("Team name already exists", status_code=400)
    db.refresh(team)
    logger.info("team %s created: %r", team.id, team.name)
    return team


# --- Use / skip ------------------------------------------------------------------


def _record(
    db: Session,
    model: LedgerModel,
    team_id: int,
    question_id: Optional[int],
    user_name: Optional[str],
) -> Union[UsageRecord, SkipRecord]:
    if question_id is None:
        raise ValidationFailed("Question ID is required")
    who = (user_name or "").strip()
    if not who:
        raise ValidationFailed("User name is required")

    get_team(db, team_id)
    if db.get(Question, question_id) is None:
        raise NotFound("Question not found")

    verb = _VERBS[model]
    existing = db.scalar(
        select(model.id).where(model.team_id == team_id, model.question_id == question_id)
    )
    if existing is not None:
        raise Conflict(f"Question already marked as {verb}")

    entry = model(team_id=team_id, question_id=question_id, user_name=who)
    db.add(entry)
    try:
        db.commit()
    except IntegrityError:
        # lost a race against a concurrent insert of the same pair
        db.rollback()
        raise Conflict(f"Question already marked as {verb}")
    db.refresh(entry)
    logger.info("team %s %s question %s (by %s)", team_id, verb, question_id, who)
    return entry


def record_use(
    db: Session, team_id: int, question_id: Optional[int], user_name: Optional[str]
) -> UsageRecord:
    return _record(db, UsageRecord, team_id, question_id, user_name)


def record_skip(
    db: Session, team_id: int, question_id: Optional[int], user_name: Optional[str]
) -> SkipRecord:
    return _record(db, SkipRecord, team_id, question_id, user_name)


def reset_team(db: Session, team_id: int) -> Tuple[int, int]:
    """Clears both ledgers for the team. Returns (used_removed, skipped_removed)."""
    get_team(db, team_id)
    used = db.execute(delete(UsageRecord).where(UsageRecord.team_id == team_id))
    skipped = db.execute(delete(SkipRecord).where(SkipRecord.team_id == team_id))
    db.commit()
    logger.info(
        "team %s reset (%d used, %d skipped removed)", team_id, used.rowcount, skipped.rowcount
    )
    return used.rowcount, skipped.rowcount


# --- Suggestions & stats ---------------------------------------------------------


def user_names(db: Session, team_id: Optional[int] = None) -> List[str]:
    names = set()
    for model in (UsageRecord, SkipRecord):
        stmt = select(model.user_name).distinct()
        if team_id is not None:
            stmt = stmt.where(model.team_id == team_id)
        names.update(db.scalars(stmt))
    return sorted(names)


def _ledger_rows(db: Session, model: LedgerModel, at_key: str) -> List[Dict[str, Any]]:
    stmt = (
        select(model, Team.name, Question.text)
        .join(Team, Team.id == model.team_id)
        .join(Question, Question.id == model.question_id)
        .order_by(model.created_at, model.id)
    )
    return [
        {
            "id": entry.id,
            "team_id": entry.team_id,
            "team_name": team_name,
            "question_id": entry.question_id,
            "question_text": question_text,
            "user_name": entry.user_name,
            at_key: entry.created_at,
        }
        for entry, team_name, question_text in db.execute(stmt)
    ]


def usage_stats(db: Session) -> Dict[str, Any]:
    usage = _ledger_rows(db, UsageRecord, "used_at")
    skipped = _ledger_rows(db, SkipRecord, "skipped_at")
    return {
        "usage": usage,
        "skipped": skipped,
        "summary": {
            "total_used": len(usage),
            "total_skipped": len(skipped),
            "total_questions": db.scalar(select(func.count(Question.id))) or 0,
            "total_teams": db.scalar(select(func.count(Team.id))) or 0,
        },
    }

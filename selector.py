# Picks the next ice-breaker question for a team.

from __future__ import annotations

import random as _rnd
from typing import List, Optional, Set

from sqlalchemy import select
from sqlalchemy.orm import Session

from errors import Exhausted
from models import Question, SkipRecord, UsageRecord


def unavailable_question_ids(db: Session, team_id: int) -> Set[int]:
    used = db.scalars(
        select(UsageRecord.question_id).where(UsageRecord.team_id == team_id).distinct()
    )
    skipped = db.scalars(
        select(SkipRecord.question_id).where(SkipRecord.team_id == team_id).distinct()
    )
    return set(used) | set(skipped)


def available_questions(db: Session, team_id: int) -> List[Question]:
    """
    Every question the team has neither used nor skipped, ordered by id.
    Recomputed on each call; nothing is cached between requests.
    """
    unavailable = unavailable_question_ids(db, team_id)
    stmt = select(Question).order_by(Question.id)
    if unavailable:
        stmt = stmt.where(Question.id.not_in(sorted(unavailable)))
    return list(db.scalars(stmt))


def pick_question(db: Session, team_id: int, rng: Optional[_rnd.Random] = None) -> Question:
    """
    Uniform draw from the team's available set. Read-only: the question only
    leaves the pool once it is recorded as used or skipped.
    """
    available = available_questions(db, team_id)
    if not available:
        raise Exhausted("No more questions available for this team")
    index = (rng or _rnd).randrange(len(available))
    return available[index]

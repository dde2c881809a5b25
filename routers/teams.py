from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

import ledger
import selector
from db import SessionLocal
from schemas.questions import QuestionOut
from schemas.teams import DispositionRequest, DispositionResult, TeamCreate, TeamOut

router = APIRouter(prefix="/api", tags=["teams"])


@router.get("/teams", response_model=List[TeamOut])
def list_teams():
    with SessionLocal() as db:
        return [TeamOut.model_validate(t) for t in ledger.list_teams(db)]


@router.post("/teams", response_model=TeamOut, status_code=status.HTTP_201_CREATED)
def create_team(body: TeamCreate):
    with SessionLocal() as db:
        return TeamOut.model_validate(ledger.create_team(db, body.name, body.color))


@router.get("/teams/{team_id}/question", response_model=QuestionOut)
def random_question(team_id: int):
    with SessionLocal() as db:
        ledger.get_team(db, team_id)
        return QuestionOut.model_validate(selector.pick_question(db, team_id))


@router.post("/teams/{team_id}/use-question", response_model=DispositionResult)
def use_question(team_id: int, body: DispositionRequest):
    with SessionLocal() as db:
        ledger.record_use(db, team_id, body.question_id, body.user_name)
    return DispositionResult(ok=True, message="Question marked as used")


@router.post("/teams/{team_id}/skip-question", response_model=DispositionResult)
def skip_question(team_id: int, body: DispositionRequest):
    with SessionLocal() as db:
        ledger.record_skip(db, team_id, body.question_id, body.user_name)
    return DispositionResult(ok=True, message="Question marked as skipped")


# user-name suggestions for the name autocomplete


@router.get("/teams/{team_id}/users", response_model=List[str])
def team_users(team_id: int):
    with SessionLocal() as db:
        ledger.get_team(db, team_id)
        return ledger.user_names(db, team_id)


@router.get("/users", response_model=List[str])
def all_users():
    with SessionLocal() as db:
        return ledger.user_names(db)

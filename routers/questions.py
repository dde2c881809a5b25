from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, status

import bank
from db import SessionLocal
from deps.auth import require_admin
from schemas.questions import Category, Difficulty, QuestionCreate, QuestionOut, QuestionUpdate
from schemas.teams import DispositionResult

router = APIRouter(
    prefix="/api/admin/questions", tags=["admin"], dependencies=[Depends(require_admin)]
)


@router.get("", response_model=List[QuestionOut])
def list_questions(category: Optional[Category] = None, difficulty: Optional[Difficulty] = None):
    with SessionLocal() as db:
        qs = bank.list_questions(db, category=category, difficulty=difficulty)
        return [QuestionOut.model_validate(q) for q in qs]


@router.post("", response_model=QuestionOut, status_code=status.HTTP_201_CREATED)
def create_question(body: QuestionCreate):
    with SessionLocal() as db:
        q = bank.create_question(db, body.text, body.category, body.difficulty)
        return QuestionOut.model_validate(q)


@router.put("/{question_id}", response_model=QuestionOut)
def update_question(question_id: int, body: QuestionUpdate):
    with SessionLocal() as db:
        q = bank.update_question(db, question_id, body.model_dump(exclude_unset=True))
        return QuestionOut.model_validate(q)


@router.delete("/{question_id}", response_model=DispositionResult)
def delete_question(question_id: int):
    with SessionLocal() as db:
        bank.delete_question(db, question_id)
    return DispositionResult(ok=True, message="Question deleted")

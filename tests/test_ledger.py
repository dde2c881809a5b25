import pytest
from sqlalchemy.exc import IntegrityError

import ledger
from db import SessionLocal
from errors import Conflict
from models import SkipRecord, Team, UsageRecord


@pytest.mark.parametrize("model", [UsageRecord, SkipRecord])
def test_storage_rejects_duplicate_pair(db, team, three_questions, model):
    q1 = three_questions[0]
    db.add(model(team_id=team.id, question_id=q1.id, user_name="ana"))
    db.commit()

    db.add(model(team_id=team.id, question_id=q1.id, user_name="ben"))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_use_and_skip_ledgers_are_independent(db, team, three_questions):
    q1 = three_questions[0]
    ledger.record_use(db, team.id, q1.id, "ana")
    # no cross-ledger exclusion at the storage layer
    ledger.record_skip(db, team.id, q1.id, "ben")
    assert db.query(UsageRecord).count() == 1
    assert db.query(SkipRecord).count() == 1


@pytest.mark.parametrize(
    "model, record, verb",
    [(UsageRecord, ledger.record_use, "used"), (SkipRecord, ledger.record_skip, "skipped")],
)
def test_losing_insert_race_is_conflict(db, team, three_questions, monkeypatch, model, record, verb):
    team_id, question_id = team.id, three_questions[0].id

    # another request commits the same pair between our pre-check and our insert
    with SessionLocal() as other:
        other.add(model(team_id=team_id, question_id=question_id, user_name="ben"))
        other.commit()
    monkeypatch.setattr(db, "scalar", lambda *args, **kwargs: None)

    with pytest.raises(Conflict) as exc:
        record(db, team_id, question_id, "ana")
    assert exc.value.status_code == 409
    assert exc.value.message == f"Question already marked as {verb}"

    monkeypatch.undo()
    assert db.query(model).filter_by(team_id=team_id, question_id=question_id).count() == 1


def test_losing_team_name_race_is_400_conflict(db, monkeypatch):
    with SessionLocal() as other:
        other.add(Team(name="Ops", color="#000000"))
        other.commit()
    monkeypatch.setattr(db, "scalar", lambda *args, **kwargs: None)

    with pytest.raises(Conflict) as exc:
        ledger.create_team(db, "Ops")
    assert exc.value.status_code == 400
    assert exc.value.message == "Team name already exists"


def test_storage_rejects_duplicate_team_name(db):
    db.add(Team(name="Ops", color="#000000"))
    db.commit()
    db.add(Team(name="Ops", color="#ffffff"))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_long_names_are_stored_whole(db, three_questions):
    long_team = "T" * 300
    long_user = "u" * 500
    team = ledger.create_team(db, long_team, color="#" + "a" * 100)
    entry = ledger.record_use(db, team.id, three_questions[0].id, long_user)
    assert team.name == long_team
    assert entry.user_name == long_user

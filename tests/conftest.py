import os
import tempfile

# Point the app at a throwaway SQLite file before db.py is imported anywhere.
_TMP_DIR = tempfile.mkdtemp(prefix="icebreaker-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR}/test.db"
os.environ.pop("ADMIN_TOKEN", None)

import pytest  # noqa: E402

from db import Base, SessionLocal, engine  # noqa: E402
from models import Question, Team  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def team(db):
    t = Team(name="Engineering Team", color="#3B82F6")
    db.add(t)
    db.commit()
    db.refresh(t)
    return t


@pytest.fixture
def three_questions(db):
    qs = [
        Question(text="q1 text", category="personal", difficulty="easy"),
        Question(text="q2 text", category="work", difficulty="medium"),
        Question(text="q3 text", category="creative", difficulty="hard"),
    ]
    db.add_all(qs)
    db.commit()
    for q in qs:
        db.refresh(q)
    return qs

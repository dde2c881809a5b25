import random

import pytest

import ledger
import selector
from errors import Exhausted
from models import Team


def test_available_is_bank_minus_used_minus_skipped(db, team, three_questions):
    q1, q2, q3 = three_questions
    ledger.record_use(db, team.id, q1.id, "ana")
    ledger.record_skip(db, team.id, q2.id, "ben")

    ids = [q.id for q in selector.available_questions(db, team.id)]
    assert ids == [q3.id]


@pytest.mark.parametrize("seed", [0, 1, 42, 1234])
def test_single_candidate_is_deterministic(db, team, three_questions, seed):
    q1, q2, q3 = three_questions
    ledger.record_use(db, team.id, q1.id, "ana")
    ledger.record_skip(db, team.id, q2.id, "ana")

    picked = selector.pick_question(db, team.id, rng=random.Random(seed))
    assert picked.id == q3.id


def test_pick_never_returns_disposed_question(db, team, three_questions):
    q1, _, _ = three_questions
    ledger.record_use(db, team.id, q1.id, "ana")
    rng = random.Random(7)
    for _ in range(50):
        assert selector.pick_question(db, team.id, rng=rng).id != q1.id


def test_pick_is_non_consuming(db, team, three_questions):
    for _ in range(5):
        selector.pick_question(db, team.id)
    assert len(selector.available_questions(db, team.id)) == 3


def test_ledgers_are_per_team(db, team, three_questions):
    other = Team(name="Design Team", color="#EF4444")
    db.add(other)
    db.commit()
    for q in three_questions:
        ledger.record_use(db, team.id, q.id, "ana")

    assert selector.available_questions(db, team.id) == []
    assert len(selector.available_questions(db, other.id)) == 3


def test_exhausted_then_reset(db, team, three_questions):
    for q in three_questions:
        ledger.record_skip(db, team.id, q.id, "ana")

    with pytest.raises(Exhausted):
        selector.pick_question(db, team.id)

    ledger.reset_team(db, team.id)
    assert selector.pick_question(db, team.id).id in {q.id for q in three_questions}


def test_empty_bank_is_exhausted(db, team):
    with pytest.raises(Exhausted):
        selector.pick_question(db, team.id)


class _StepRng:
    """randrange that walks 0, 1, 2, ... so every index is hit once."""

    def __init__(self):
        self.calls = []

    def randrange(self, n):
        i = len(self.calls) % n
        self.calls.append(n)
        return i


def test_draw_index_maps_onto_id_ordered_pool(db, team, three_questions):
    rng = _StepRng()
    picked = [selector.pick_question(db, team.id, rng=rng).id for _ in range(3)]
    assert picked == sorted(q.id for q in three_questions)
    # drawn over the whole available set each time
    assert rng.calls == [3, 3, 3]


def test_draw_is_uniform_over_available_set(db, team, three_questions):
    rng = random.Random(2024)
    counts = {q.id: 0 for q in three_questions}
    for _ in range(1500):
        counts[selector.pick_question(db, team.id, rng=rng).id] += 1
    assert all(400 <= c <= 600 for c in counts.values()), counts

from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_usage_stats_report(team, three_questions):
    q1, q2, _ = three_questions
    client.post(f"/api/teams/{team.id}/use-question", json={"questionId": q1.id, "userName": "ana"})
    client.post(f"/api/teams/{team.id}/skip-question", json={"questionId": q2.id, "userName": "ben"})

    r = client.get("/api/admin/usage-stats")
    assert r.status_code == 200
    body = r.json()

    assert len(body["usage"]) == 1
    used = body["usage"][0]
    assert used["teamId"] == team.id
    assert used["teamName"] == "Engineering Team"
    assert used["questionId"] == q1.id
    assert used["questionText"] == "q1 text"
    assert used["userName"] == "ana"
    assert "usedAt" in used

    assert len(body["skipped"]) == 1
    assert body["skipped"][0]["userName"] == "ben"
    assert "skippedAt" in body["skipped"][0]

    assert body["summary"] == {
        "totalUsed": 1,
        "totalSkipped": 1,
        "totalQuestions": 3,
        "totalTeams": 1,
    }


def test_reset_is_idempotent(team, three_questions):
    q1, q2, _ = three_questions
    client.post(f"/api/teams/{team.id}/use-question", json={"questionId": q1.id, "userName": "a"})
    client.post(f"/api/teams/{team.id}/skip-question", json={"questionId": q2.id, "userName": "a"})

    r = client.post(f"/api/admin/teams/{team.id}/reset")
    assert r.status_code == 200
    assert r.json()["removedUsed"] == 1 and r.json()["removedSkipped"] == 1

    r = client.post(f"/api/admin/teams/{team.id}/reset")
    assert r.status_code == 200
    assert r.json()["removedUsed"] == 0 and r.json()["removedSkipped"] == 0

    stats = client.get("/api/admin/usage-stats").json()
    assert stats["usage"] == [] and stats["skipped"] == []


def test_reset_then_use_again(team, three_questions):
    q1 = three_questions[0]
    body = {"questionId": q1.id, "userName": "a"}
    assert client.post(f"/api/teams/{team.id}/use-question", json=body).status_code == 200
    client.post(f"/api/admin/teams/{team.id}/reset")
    assert client.post(f"/api/teams/{team.id}/use-question", json=body).status_code == 200


def test_reset_unknown_team():
    assert client.post("/api/admin/teams/999/reset").status_code == 404


def test_admin_open_without_token(monkeypatch):
    monkeypatch.delenv("ADMIN_TOKEN", raising=False)
    assert client.get("/api/admin/questions").status_code == 200


def test_admin_token_required_when_configured(monkeypatch):
    monkeypatch.setenv("ADMIN_TOKEN", "secret")
    assert client.get("/api/admin/questions").status_code == 401
    assert client.get("/api/admin/usage-stats", headers={"x-admin-token": "nope"}).status_code == 401

    r = client.get("/api/admin/usage-stats", headers={"x-admin-token": "secret"})
    assert r.status_code == 200

    # public team routes are never guarded
    assert client.get("/api/teams").status_code == 200

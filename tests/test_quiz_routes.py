from quizapp.models.quiz_db import quiz_crud
from quizapp.models.quiz_db.attempt_db import QuizAttempt


def test_endpoints_require_a_session(client, catalog):
    assert client.get("/api/quiz/questions").json() == {"error": "Unauthorized"}
    assert client.get("/api/quiz/questions").status_code == 401

    response = client.post("/api/quiz/submit", json={"answers": [1, 0, 2]})
    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}

    assert client.get("/api/quiz/status").status_code == 401


def test_invalid_token_is_unauthorized(client, catalog):
    response = client.get("/api/quiz/questions", headers={"Authorization": "Bearer nope"})
    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_questions_hide_correct_index(client, catalog, headers):
    response = client.get("/api/quiz/questions", headers=headers)

    assert response.status_code == 200
    questions = response.json()["questions"]
    assert [q["text"] for q in questions] == ["First", "Second", "Third"]
    for q in questions:
        assert set(q) == {"id", "text", "options", "order"}


def test_scenario(client, catalog, make_user, auth_headers):
    first = auth_headers(make_user("first@example.com"))
    second = auth_headers(make_user("second@example.com"))
    third = auth_headers(make_user("third@example.com"))

    response = client.post("/api/quiz/submit", json={"answers": [1, 0, 2]}, headers=first)
    assert response.status_code == 200
    assert response.json() == {"score": 3, "total": 3}

    response = client.post("/api/quiz/submit", json={"answers": [1, 1, 1]}, headers=second)
    assert response.json() == {"score": 1, "total": 3}

    response = client.post("/api/quiz/submit", json={"answers": [0, 0]}, headers=third)
    assert response.status_code == 400
    assert response.json() == {"error": "Answer count mismatch"}

    for h in (first, second):
        response = client.post("/api/quiz/submit", json={"answers": [1, 0, 2]}, headers=h)
        assert response.status_code == 403
        assert response.json() == {"error": "Quiz already taken"}


def test_questions_forbidden_after_attempt(client, catalog, headers):
    client.post("/api/quiz/submit", json={"answers": [1, 0, 2]}, headers=headers)

    response = client.get("/api/quiz/questions", headers=headers)
    assert response.status_code == 403
    assert response.json() == {"error": "Quiz already taken"}


def test_invalid_answers_format(client, catalog, headers):
    for body in ({}, {"answers": "1,0,2"}, {"answers": {"0": 1}}):
        response = client.post("/api/quiz/submit", json=body, headers=headers)
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid answers format"}


def test_status(client, catalog, headers):
    assert client.get("/api/quiz/status", headers=headers).json() == {"taken": False}

    client.post("/api/quiz/submit", json={"answers": [1, 1, 1]}, headers=headers)

    assert client.get("/api/quiz/status", headers=headers).json() == {
        "taken": True,
        "score": 1,
        "total": 3,
    }


def test_race_loser_gets_already_taken(client, catalog, db, user, headers, monkeypatch):
    assert client.post("/api/quiz/submit", json={"answers": [1, 0, 2]}, headers=headers).status_code == 200
    monkeypatch.setattr(quiz_crud, "get_attempt_by_user", lambda db, user_id: None)

    response = client.post("/api/quiz/submit", json={"answers": [0, 0, 0]}, headers=headers)

    assert response.status_code == 403
    assert response.json() == {"error": "Quiz already taken"}
    assert db.query(QuizAttempt).filter(QuizAttempt.user_id == user.id).count() == 1


def test_bare_list_body_is_invalid_answers_format(client, catalog, headers):
    response = client.post("/api/quiz/submit", json=[1, 0, 2], headers=headers)

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid answers format"}


def test_unparseable_body_is_invalid_answers_format(client, catalog, headers):
    response = client.post(
        "/api/quiz/submit",
        content=b"{answers: [1, 0",
        headers={**headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid answers format"}
    assert client.get("/api/quiz/status", headers=headers).json() == {"taken": False}

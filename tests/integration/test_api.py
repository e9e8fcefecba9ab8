"""End-to-end API tests through FastAPI's TestClient."""

import pytest

API = "/api/v1"


# ======================================================================
# Helpers
# ======================================================================


def _register_and_login(client, email="ana@example.com", password="password123"):
    response = client.post(f"{API}/auth/register", json={"email": email, "password": password, "full_name": "Ana"})
    assert response.status_code == 201, response.text
    response = client.post(f"{API}/auth/token", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def auth(client):
    return _register_and_login(client)


@pytest.fixture
def with_subjects(client, auth):
    for name, difficulty, weight in [
        ("Anatomia", "very_easy", "low"),
        ("Bioquímica", "medium", "medium"),
        ("Cálculo", "very_hard", "high"),
    ]:
        response = client.post(f"{API}/subjects", json={"name": name, "difficulty": difficulty, "weight": weight},
                               headers=auth)
        assert response.status_code == 201, response.text
    return auth


# ======================================================================
# Service metadata and auth
# ======================================================================


class TestMeta:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestAuth:
    def test_me(self, client, auth):
        response = client.get(f"{API}/auth/me", headers=auth)
        assert response.status_code == 200
        assert response.json()["email"] == "ana@example.com"

    def test_oauth2_form_login(self, client, auth):
        response = client.post(f"{API}/auth/login", data={"username": "ana@example.com", "password": "password123"})
        assert response.status_code == 200
        assert response.json()["token_type"] == "bearer"

    def test_duplicate_registration(self, client, auth):
        response = client.post(f"{API}/auth/register", json={"email": "ana@example.com", "password": "password123"})
        assert response.status_code == 400

    def test_wrong_password(self, client, auth):
        response = client.post(f"{API}/auth/token", json={"email": "ana@example.com", "password": "nope-nope"})
        assert response.status_code == 401

    def test_study_endpoints_require_token(self, client):
        assert client.get(f"{API}/subjects").status_code == 401
        assert client.get(f"{API}/dashboard", headers={"Authorization": "Bearer garbage"}).status_code == 401

    def test_registration_creates_settings(self, client, auth):
        response = client.get(f"{API}/settings", headers=auth)
        assert response.status_code == 200
        assert response.json()["ask_hours"] is True


# ======================================================================
# Subjects
# ======================================================================


class TestSubjectsAPI:
    def test_create_returns_notification(self, client, auth):
        response = client.post(f"{API}/subjects", json={"name": "Física", "difficulty": "hard", "weight": "high"},
                               headers=auth)
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Matéria adicionada!"
        assert body["subject"]["difficulty"] == "hard"

    def test_blank_name_is_422(self, client, auth):
        response = client.post(f"{API}/subjects", json={"name": "  ", "difficulty": "hard", "weight": "high"},
                               headers=auth)
        assert response.status_code == 422

    def test_delete(self, client, with_subjects):
        subjects = client.get(f"{API}/subjects", headers=with_subjects).json()
        response = client.delete(f"{API}/subjects/{subjects[0]['id']}", headers=with_subjects)
        assert response.status_code == 200
        assert response.json()["message"] == "Matéria removida"
        assert len(client.get(f"{API}/subjects", headers=with_subjects).json()) == 2


# ======================================================================
# Cycles
# ======================================================================


class TestCyclesAPI:
    def test_full_lifecycle(self, client, with_subjects):
        headers = with_subjects

        dashboard = client.get(f"{API}/dashboard", headers=headers).json()
        assert dashboard["needs_hours_setup"] is True

        response = client.post(f"{API}/cycles", json={"weekly_hours": 20}, headers=headers)
        assert response.status_code == 201, response.text
        body = response.json()
        assert body["message"] == "Ciclo criado!"
        hours = {a["subject"]["name"]: a["hours_assigned"] for a in body["cycle"]["assignments"]}
        assert hours == {"Anatomia": 3.0, "Bioquímica": 6.0, "Cálculo": 11.0}

        assignment_id = body["cycle"]["assignments"][0]["id"]
        response = client.patch(f"{API}/cycles/assignments/{assignment_id}/hours", json={"delta": 1},
                                headers=headers)
        assert response.status_code == 200
        assert response.json()["hours_completed"] == 1.0

        response = client.patch(f"{API}/cycles/assignments/{assignment_id}/hours", json={"delta": -5},
                                headers=headers)
        assert response.json()["hours_completed"] == 0.0

        active = client.get(f"{API}/cycles/active", headers=headers).json()
        assert active["overall_progress"] == 0.0
        assert client.get(f"{API}/dashboard", headers=headers).json()["needs_hours_setup"] is False

        response = client.post(f"{API}/cycles/reset", headers=headers)
        assert response.status_code == 200
        assert response.json()["message"] == "Ciclo resetado"

        assert client.get(f"{API}/cycles/active", headers=headers).status_code == 404
        dashboard = client.get(f"{API}/dashboard", headers=headers).json()
        assert dashboard["needs_hours_setup"] is True
        assert dashboard["settings"]["current_cycle_id"] is None

        history = client.get(f"{API}/cycles", headers=headers).json()
        assert [c["status"] for c in history] == ["completed"]

    @pytest.mark.parametrize("weekly_hours", [0, 169, -1])
    def test_out_of_range_budget(self, client, with_subjects, weekly_hours):
        response = client.post(f"{API}/cycles", json={"weekly_hours": weekly_hours}, headers=with_subjects)
        assert response.status_code == 422
        assert client.get(f"{API}/cycles", headers=with_subjects).json() == []

    def test_cycle_without_subjects(self, client, auth):
        response = client.post(f"{API}/cycles", json={"weekly_hours": 20}, headers=auth)
        assert response.status_code == 400

    def test_cannot_touch_other_users_assignment(self, client, with_subjects):
        cycle = client.post(f"{API}/cycles", json={"weekly_hours": 20}, headers=with_subjects).json()["cycle"]
        intruder = _register_and_login(client, email="bruno@example.com")
        response = client.patch(f"{API}/cycles/assignments/{cycle['assignments'][0]['id']}/hours",
                                json={"delta": 1}, headers=intruder)
        assert response.status_code == 404

    def test_reset_without_cycle(self, client, auth):
        response = client.post(f"{API}/cycles/reset", headers=auth)
        assert response.status_code == 200
        assert client.get(f"{API}/settings", headers=auth).json()["ask_hours"] is True

    def test_blank_cycle_name_uses_default(self, client, with_subjects):
        response = client.post(f"{API}/cycles", json={"weekly_hours": 20, "name": "   "}, headers=with_subjects)
        assert response.status_code == 201, response.text
        assert response.json()["cycle"]["name"] == "Ciclo atual"

    def test_hours_overflow_is_422(self, client, with_subjects):
        cycle = client.post(f"{API}/cycles", json={"weekly_hours": 20}, headers=with_subjects).json()["cycle"]
        url = f"{API}/cycles/assignments/{cycle['assignments'][0]['id']}/hours"

        assert client.patch(url, json={"delta": 1e308}, headers=with_subjects).status_code == 200
        response = client.patch(url, json={"delta": 1e308}, headers=with_subjects)
        assert response.status_code == 422

        active = client.get(f"{API}/cycles/active", headers=with_subjects).json()
        assert active["assignments"][0]["hours_completed"] == 1e308

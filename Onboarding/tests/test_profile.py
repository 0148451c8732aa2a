import pytest
from django.db import connection
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from DailyChallenges import services
from DailyChallenges.agents import challenge_agent
from DailyChallenges.models import DayProblem
from Onboarding import views
from Onboarding.models import Profile

pytestmark = pytest.mark.django_db

BASE = "/api/Onboarding/profile"


@pytest.fixture
def fresh_client(make_user):
    user = make_user(email="fresh@example.com", name="")
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Token {Token.objects.create(user=user).key}")
    client.user = user
    return client


def test_is_onboarded_iff_skills_present(make_user):
    assert not make_user(email="a@example.com", skills=[]).profile.is_onboarded
    assert make_user(email="b@example.com", skills=["Go"]).profile.is_onboarded


def test_onboarding_status(fresh_client, api_client):
    assert fresh_client.get(f"{BASE}/onboarding_status/").data["body"] == {"is_onboarded": False}
    assert api_client.get(f"{BASE}/onboarding_status/").data["body"] == {"is_onboarded": True}


def test_get_and_patch_profile(api_client, user):
    response = api_client.get(f"{BASE}/me/")
    assert response.data["body"]["skills"] == ["Python", "Django"]
    assert response.data["body"]["email"] == user.email

    response = api_client.patch(f"{BASE}/me/", {"skills": "Rust, , Go ", "gender": "female"}, format="json")

    assert response.status_code == 200
    profile = Profile.objects.get(user=user)
    assert profile.skills == ["Rust", "Go"]
    assert profile.gender == "female"


def test_complete_onboarding_generates_first_batch(fresh_client):
    response = fresh_client.post(
        f"{BASE}/complete_onboarding/",
        {
            "name": "Ravi",
            "gender": "male",
            "skills": "React, Node.js, SQL",
            "problem_statement": "Crowd management at pilgrim sites",
        },
        format="json",
    )

    assert response.status_code == 201
    body = response.data["body"]
    assert body["profile"]["skills"] == ["React", "Node.js", "SQL"]
    assert body["profile"]["is_onboarded"] is True
    assert [p["day_number"] for p in body["created"]] == [1, 2, 3, 4, 5]
    assert body["failed_days"] == []

    problems = DayProblem.objects.filter(user=fresh_client.user)
    assert problems.count() == 5
    assert list(problems.filter(is_active=True).values_list("day_number", flat=True)) == [1]
    assert "Crowd management at pilgrim sites" in problems.get(day_number=2).problem_description


def test_complete_onboarding_uses_model_when_available(fresh_client, monkeypatch):
    monkeypatch.setattr(
        challenge_agent,
        "generate_response_with_groq",
        lambda messages, **kw: ("Title: Queue Simulator\nDescription: Simulate crowd queues.", {}),
    )

    response = fresh_client.post(
        f"{BASE}/complete_onboarding/",
        {"name": "Ravi", "skills": ["Python"], "problem_statement": "Crowd management"},
        format="json",
    )

    assert response.status_code == 201
    titles = set(DayProblem.objects.filter(user=fresh_client.user).values_list("problem_title", flat=True))
    assert titles == {"Queue Simulator"}


def test_complete_onboarding_requires_skills(fresh_client):
    response = fresh_client.post(
        f"{BASE}/complete_onboarding/",
        {"name": "Ravi", "skills": " , ", "problem_statement": "Crowd management"},
        format="json",
    )

    assert response.status_code == 400
    assert "skills" in response.data["body"]
    assert not DayProblem.objects.filter(user=fresh_client.user).exists()


def test_complete_onboarding_twice_does_not_duplicate_problems(api_client, user):
    payload = {"name": "Asha", "skills": ["Python"], "problem_statement": "Flood alerts"}
    api_client.post(f"{BASE}/complete_onboarding/", payload, format="json")
    response = api_client.post(f"{BASE}/complete_onboarding/", payload, format="json")

    assert response.status_code == 201
    assert response.data["body"]["created"] == []
    assert DayProblem.objects.filter(user=user).count() == 5


def test_complete_onboarding_reports_when_nothing_generated(fresh_client, monkeypatch):
    monkeypatch.setattr(
        views, "generate_problem_batch", lambda *args, **kwargs: {"created": [], "failed_days": [1, 2, 3, 4, 5]}
    )

    response = fresh_client.post(
        f"{BASE}/complete_onboarding/",
        {"name": "Ravi", "skills": ["Python"], "problem_statement": "Crowd management"},
        format="json",
    )

    assert response.status_code == 503
    assert response.data["success"] is False
    assert "no challenges could be generated" in response.data["message"]
    assert response.data["body"]["failed_days"] == [1, 2, 3, 4, 5]
    assert Profile.objects.get(user=fresh_client.user).skills == ["Python"]


@pytest.mark.django_db(transaction=True)
def test_complete_onboarding_calls_model_outside_transaction(fresh_client, monkeypatch):
    in_transaction = []

    def fake_generate(skills, statement, existing, day_number):
        in_transaction.append(connection.in_atomic_block)
        return {"problem_title": f"Problem {day_number}", "problem_description": "desc"}

    monkeypatch.setattr(services, "generate_problem_statement", fake_generate)

    response = fresh_client.post(
        f"{BASE}/complete_onboarding/",
        {"name": "Ravi", "skills": ["Python"], "problem_statement": "Crowd management"},
        format="json",
    )

    assert response.status_code == 201
    assert in_transaction == [False] * 5

import pytest
from django.contrib.auth import get_user_model
from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from Onboarding.models import Profile


@pytest.fixture(autouse=True)
def offline_settings(settings, tmp_path):
    # no Groq key: generation always takes the template path unless a test patches the call
    settings.GROQ_API_KEY = None
    settings.MEDIA_ROOT = str(tmp_path / "media")
    return settings


@pytest.fixture
def make_user(db):
    def _make_user(email="student@example.com", name="Asha", skills=None, problem_statement=None):
        user = get_user_model().objects.create_user(username=email, email=email, password="secret123")
        Profile.objects.create(
            user=user,
            name=name,
            skills=skills if skills is not None else [],
            problem_statement=problem_statement,
        )
        return user
    return _make_user


@pytest.fixture
def user(make_user):
    return make_user(skills=["Python", "Django"], problem_statement="Flood early-warning system")


@pytest.fixture
def api_client(user):
    client = APIClient()
    token, _ = Token.objects.get_or_create(user=user)
    client.credentials(HTTP_AUTHORIZATION=f"Token {token.key}")
    return client

# app/conftest.py
"""
pytest fixtures for API testing
"""
import copy

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

JOB_PAYLOAD = {
    "title": "Engineer",
    "type": "Full-Time",
    "location": "Remote",
    "description": "Build things",
    "salary": "100k",
    "company": {
        "name": "Acme",
        "description": "Widgets",
        "contactEmail": "a@acme.com",
        "contactPhone": "555-0100",
    },
}


@pytest.fixture
def job_payload():
    """
    유효한 채용 공고 생성 payload (테스트마다 새 복사본)
    """
    return copy.deepcopy(JOB_PAYLOAD)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    User = get_user_model()
    return User.objects.create_user(
        username="poster@example.com",
        email="poster@example.com",
        password="testpass123",
    )


@pytest.fixture
def access_token(user):
    return str(RefreshToken.for_user(user).access_token)


@pytest.fixture
def auth_client(access_token):
    """
    Bearer 토큰이 설정된 APIClient
    """
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {access_token}")
    return client

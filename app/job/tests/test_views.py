"""
Tests for JobPosting Views

채용 공고 API 엔드포인트 테스트
"""

from unittest.mock import MagicMock, patch

import pytest
from django.urls import resolve
from job.exceptions import StoreError
from job.models import JobPosting
from job.services import JobService
from rest_framework import status

JOBS_URL = "/api/jobs"


def job_url(job_id):
    return f"{JOBS_URL}/{job_id}"


def snapshot():
    return list(JobPosting.objects.order_by("posting_id").values())


@pytest.mark.django_db
class TestJobPostingViewSet:
    """JobPostingViewSet API 테스트"""

    def create_job(self, auth_client, job_payload, **overrides):
        job_payload.update(overrides)
        response = auth_client.post(JOBS_URL, job_payload, format="json")
        assert response.status_code == status.HTTP_200_OK
        return response.json()["job"]

    def test_list_empty(self, api_client):
        response = api_client.get(JOBS_URL)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_create_job_posting(self, auth_client, job_payload):
        # When
        response = auth_client.post(JOBS_URL, job_payload, format="json")

        # Then
        assert response.status_code == status.HTTP_200_OK
        job = response.json()["job"]
        assert job["id"]
        assert {k: v for k, v in job.items() if k != "id"} == job_payload
        assert JobPosting.objects.count() == 1

    def test_response_hides_internal_fields(self, auth_client, job_payload):
        job = self.create_job(auth_client, job_payload)

        assert set(job) == {
            "id",
            "title",
            "type",
            "location",
            "description",
            "salary",
            "company",
        }

    def test_create_missing_field(self, auth_client, job_payload):
        # Given
        del job_payload["salary"]

        # When
        response = auth_client.post(JOBS_URL, job_payload, format="json")

        # Then
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "error": "All fields must be filled",
            "fields": ["salary"],
        }
        assert JobPosting.objects.count() == 0

    def test_create_missing_company_field(self, auth_client, job_payload):
        job_payload["company"]["contactPhone"] = ""

        response = auth_client.post(JOBS_URL, job_payload, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "All company fields must be filled"

    def test_create_invalid_json(self, auth_client):
        response = auth_client.post(
            JOBS_URL, data="{not json", content_type="application/json"
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "error" in response.json()

    def test_create_without_token_is_rejected(self, api_client, job_payload):
        response = api_client.post(JOBS_URL, job_payload, format="json")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert "error" in response.json()
        assert JobPosting.objects.count() == 0

    @pytest.mark.parametrize(
        "header", ["Bearer", "Bearer not-a-jwt", "Bearer a b", "Basic dXNlcjpwYXNz"]
    )
    def test_create_with_bad_credential_is_rejected(
        self, api_client, job_payload, header
    ):
        api_client.credentials(HTTP_AUTHORIZATION=header)

        response = api_client.post(JOBS_URL, job_payload, format="json")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert JobPosting.objects.count() == 0

    def test_retrieve_job_posting(self, auth_client, api_client, job_payload):
        job = self.create_job(auth_client, job_payload)

        response = api_client.get(job_url(job["id"]))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == job

    def test_retrieve_not_found(self, api_client):
        response = api_client.get(job_url("00000000-0000-0000-0000-000000000000"))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Job not found"}

    def test_reads_ignore_invalid_token(self, auth_client, api_client, job_payload):
        job = self.create_job(auth_client, job_payload)
        api_client.credentials(HTTP_AUTHORIZATION="Bearer expired-or-garbage")

        assert api_client.get(JOBS_URL).status_code == status.HTTP_200_OK
        assert api_client.get(job_url(job["id"])).status_code == status.HTTP_200_OK

    def test_list_limit(self, auth_client, api_client, job_payload):
        for i in range(12):
            self.create_job(auth_client, job_payload, title=f"Job {i}")

        default = api_client.get(JOBS_URL).json()
        limited = api_client.get(JOBS_URL, {"_limit": 3}).json()
        everything = api_client.get(JOBS_URL, {"_limit": "abc"}).json()

        assert [job["title"] for job in default] == [f"Job {i}" for i in range(10)]
        assert len(limited) == 3
        assert len(everything) == 12

    def test_trailing_slash_is_accepted(self, api_client):
        assert api_client.get(f"{JOBS_URL}/").status_code == status.HTTP_200_OK

    @pytest.mark.parametrize("suffix", ["", "/"])
    def test_routes_resolve_with_and_without_slash(self, suffix):
        job_id = "00000000-0000-0000-0000-000000000000"

        assert resolve(f"{JOBS_URL}{suffix}").url_name == "job-list"
        match = resolve(f"{job_url(job_id)}{suffix}")
        assert match.url_name == "job-detail"
        assert match.kwargs == {"job_id": job_id}

    @pytest.mark.parametrize("suffix", ["", "/"])
    def test_crud_without_redirect(self, auth_client, api_client, job_payload, suffix):
        # When
        created = auth_client.post(f"{JOBS_URL}{suffix}", job_payload, format="json")
        job_id = created.json()["job"]["id"]
        fetched = api_client.get(f"{job_url(job_id)}{suffix}")
        updated = auth_client.put(
            f"{job_url(job_id)}{suffix}", {"title": "Lead"}, format="json"
        )
        deleted = auth_client.delete(f"{job_url(job_id)}{suffix}")

        # Then
        assert created.status_code == status.HTTP_200_OK
        assert fetched.status_code == status.HTTP_200_OK
        assert updated.json()["title"] == "Lead"
        assert deleted.status_code == status.HTTP_200_OK
        assert JobPosting.objects.count() == 0

    @pytest.mark.parametrize("raw, expected", [("2abc", 2), ("3.5", 3), (" 4", 4)])
    def test_list_limit_uses_leading_integer(
        self, auth_client, api_client, job_payload, raw, expected
    ):
        for i in range(5):
            self.create_job(auth_client, job_payload, title=f"Job {i}")

        response = api_client.get(JOBS_URL, {"_limit": raw})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == expected

    def test_list_oversized_limit_returns_everything(
        self, auth_client, api_client, job_payload
    ):
        self.create_job(auth_client, job_payload)

        response = api_client.get(JOBS_URL, {"_limit": "99999999999999999999"})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.json()) == 1

    def test_options_is_public(self, api_client):
        response = api_client.options(JOBS_URL)

        assert response.status_code == status.HTTP_200_OK

    def test_long_text_fields_are_stored(self, auth_client, job_payload):
        job_payload["salary"] = "Negotiable, " + "with equity " * 20
        job_payload["company"]["contactPhone"] = "+1 555 0100 ext. " + "9" * 60

        job = self.create_job(auth_client, job_payload)

        assert job["salary"] == job_payload["salary"]
        assert job["company"]["contactPhone"] == job_payload["company"]["contactPhone"]

    def test_update_job_posting(self, auth_client, job_payload):
        # Given
        job = self.create_job(auth_client, job_payload)

        # When
        response = auth_client.put(
            job_url(job["id"]),
            {"title": "Senior Engineer", "company": {"name": "Acme Corp"}},
            format="json",
        )

        # Then
        assert response.status_code == status.HTTP_200_OK
        updated = response.json()
        assert updated["id"] == job["id"]
        assert updated["title"] == "Senior Engineer"
        assert updated["company"]["name"] == "Acme Corp"
        assert updated["company"]["contactEmail"] == "a@acme.com"
        assert updated["salary"] == job["salary"]

    def test_update_ignores_id_in_body(self, auth_client, job_payload):
        job = self.create_job(auth_client, job_payload)
        body = {**job, "id": "00000000-0000-0000-0000-000000000000", "salary": "1"}

        response = auth_client.put(job_url(job["id"]), body, format="json")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["id"] == job["id"]
        assert response.json()["salary"] == "1"

    def test_patch_is_partial_update(self, auth_client, job_payload):
        job = self.create_job(auth_client, job_payload)

        response = auth_client.patch(
            job_url(job["id"]), {"location": "Berlin"}, format="json"
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["location"] == "Berlin"

    def test_update_without_data(self, auth_client, job_payload):
        job = self.create_job(auth_client, job_payload)

        response = auth_client.put(job_url(job["id"]), {}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Job ID and update data are required"}

    def test_update_blank_field(self, auth_client, job_payload):
        job = self.create_job(auth_client, job_payload)

        response = auth_client.put(job_url(job["id"]), {"title": ""}, format="json")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["fields"] == ["title"]
        assert JobPosting.objects.get().title == "Engineer"

    def test_update_not_found(self, auth_client):
        response = auth_client.put(
            job_url("00000000-0000-0000-0000-000000000000"),
            {"title": "x"},
            format="json",
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"error": "Job not found"}

    def test_update_without_token_leaves_store_unchanged(
        self, auth_client, api_client, job_payload
    ):
        job = self.create_job(auth_client, job_payload)
        before = snapshot()

        response = api_client.put(job_url(job["id"]), {"title": "x"}, format="json")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert snapshot() == before

    def test_delete_job_posting(self, auth_client, api_client, job_payload):
        job = self.create_job(auth_client, job_payload)

        response = auth_client.delete(job_url(job["id"]))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"acknowledged": True, "deletedCount": 1}
        assert api_client.get(job_url(job["id"])).status_code == (
            status.HTTP_400_BAD_REQUEST
        )

        again = auth_client.delete(job_url(job["id"]))
        assert again.status_code == status.HTTP_400_BAD_REQUEST
        assert again.json() == {"error": "Job not found"}

    def test_delete_without_token_leaves_store_unchanged(
        self, auth_client, api_client, job_payload
    ):
        job = self.create_job(auth_client, job_payload)
        before = snapshot()

        response = api_client.delete(job_url(job["id"]))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert snapshot() == before

    def test_store_error_is_reported_generically(self, api_client):
        repo = MagicMock()
        repo.find_all.side_effect = StoreError("Failed to retrieve job postings")

        with patch(
            "job.views.build_job_service", return_value=JobService(job_repo=repo)
        ):
            response = api_client.get(JOBS_URL)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"error": "Failed to retrieve job postings"}

    def test_full_lifecycle(self, auth_client, api_client, job_payload):
        """생성 → 조회 → 삭제 → 조회 실패"""
        created = auth_client.post(JOBS_URL, job_payload, format="json")
        assert created.status_code == status.HTTP_200_OK
        job = created.json()["job"]

        fetched = api_client.get(job_url(job["id"]))
        assert fetched.json() == job

        deleted = auth_client.delete(job_url(job["id"]))
        assert deleted.json()["deletedCount"] == 1

        missing = api_client.get(job_url(job["id"]))
        assert missing.status_code == status.HTTP_400_BAD_REQUEST
        assert missing.json()["error"] == "Job not found"

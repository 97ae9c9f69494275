from __future__ import annotations

from common.adapters.django_job_repo import DjangoJobPostingRepository
from job.services import JobService


def build_job_service() -> JobService:
    """
    Job 서비스 조립(Dependency Injection).
    """
    return JobService(job_repo=DjangoJobPostingRepository())

"""
Job Posting Service

채용 공고 CRUD 비즈니스 로직
"""

import logging
from typing import Any, List, Optional

from common.ports.job_repo import JobPostingRepositoryPort
from django.conf import settings
from job.domain.job_posting import (
    JOB_ID_REQUIRED_MESSAGE,
    UPDATE_DATA_REQUIRED_MESSAGE,
    build_job_posting_updates,
    validate_job_posting,
)
from job.dtos import DeleteJobPostingResultDTO
from job.exceptions import NotFoundError, ValidationError
from job.models import JobPosting

logger = logging.getLogger(__name__)


class JobService:
    """
    채용 공고 서비스

    요청 간 캐시 없이 매 호출마다 저장소에서 다시 읽습니다.
    """

    def __init__(self, *, job_repo: JobPostingRepositoryPort):
        self._job_repo = job_repo

    def create_job_posting(self, data: Any) -> JobPosting:
        """
        채용 공고 생성

        Args:
            data: title, type, location, description, salary, company

        Returns:
            생성된 JobPosting 객체 (public_id 포함)

        Raises:
            ValidationError: 필수 필드 누락
        """
        draft = validate_job_posting(data)
        job_posting = self._job_repo.insert(draft)
        logger.info(f"Created JobPosting {job_posting.public_id}")
        return job_posting

    def list_job_postings(self, limit: Optional[int] = None) -> List[JobPosting]:
        """
        채용 공고 목록 조회 (등록 순)

        Args:
            limit: 최대 개수. None 이면 JOB_LIST_DEFAULT_LIMIT,
                0 이하이면 전체 조회
        """
        if limit is None:
            limit = settings.JOB_LIST_DEFAULT_LIMIT
        return self._job_repo.find_all(limit=limit)

    def get_job_posting(self, job_id: Any) -> JobPosting:
        job_posting = self._job_repo.find_by_id(job_id)
        if job_posting is None:
            logger.warning(f"JobPosting {job_id} not found")
            raise NotFoundError()
        return job_posting

    def edit_job_posting(self, job_id: Any, updates: Any) -> JobPosting:
        """
        채용 공고 부분 수정

        전달된 필드만 변경하고 나머지는 그대로 둡니다.
        필수 필드 전체 검증은 다시 수행하지 않습니다.

        Raises:
            ValidationError: job_id 또는 수정 데이터가 비어 있음
            NotFoundError: 해당 공고 없음
        """
        if not job_id or not isinstance(updates, dict) or not updates:
            raise ValidationError(UPDATE_DATA_REQUIRED_MESSAGE)

        fields = build_job_posting_updates(updates)
        job_posting = self._job_repo.update_by_id(job_id, fields)
        logger.info(f"Updated JobPosting {job_id}: {sorted(fields)}")
        return job_posting

    def delete_job_posting(self, job_id: Any) -> DeleteJobPostingResultDTO:
        """
        채용 공고 삭제

        Raises:
            ValidationError: job_id 가 비어 있음
            NotFoundError: 삭제된 공고가 없음
        """
        if not job_id:
            raise ValidationError(JOB_ID_REQUIRED_MESSAGE)

        deleted = self._job_repo.delete_by_id(job_id)
        logger.info(f"Deleted JobPosting {job_id}")
        return DeleteJobPostingResultDTO(deleted_count=deleted)

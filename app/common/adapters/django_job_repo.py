from __future__ import annotations

import logging
import uuid
from typing import Any, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, transaction
from job.domain.job_posting import COLUMN_FIELD_PATHS, JobPostingDraft
from job.exceptions import NotFoundError, StoreError, ValidationError
from job.models import JobPosting

logger = logging.getLogger(__name__)

# DB 정수 범위를 넘는 LIMIT 는 이 값으로 제한
MAX_QUERY_LIMIT = 2**31 - 1


def _parse_public_id(job_id: Any) -> Optional[uuid.UUID]:
    if isinstance(job_id, uuid.UUID):
        return job_id
    try:
        return uuid.UUID(str(job_id))
    except (TypeError, ValueError, AttributeError):
        return None


def _to_validation_error(exc: DjangoValidationError) -> ValidationError:
    columns = exc.message_dict if hasattr(exc, "error_dict") else {}
    fields = [COLUMN_FIELD_PATHS.get(column, column) for column in columns]
    return ValidationError(f"Invalid job fields: {', '.join(fields)}", fields=fields)


class DjangoJobPostingRepository:
    """
    JobPosting 저장소 (Django ORM)

    - 모든 쓰기는 이 어댑터를 통해서만 수행
    - full_clean() 으로 저장 직전 필드 형식을 한 번 더 검증
    - DB 장애는 StoreError 로 감싸 내부 상세를 숨김
    """

    def insert(self, draft: JobPostingDraft) -> JobPosting:
        job_posting = JobPosting(**draft.to_columns())
        try:
            with transaction.atomic():
                job_posting.full_clean()
                job_posting.save(force_insert=True)
        except DjangoValidationError as e:
            raise _to_validation_error(e) from e
        except DatabaseError as e:
            logger.error(f"Failed to insert job posting: {str(e)}", exc_info=True)
            raise StoreError("Failed to create job posting") from e
        return job_posting

    def find_by_id(self, job_id: Any) -> Optional[JobPosting]:
        public_id = _parse_public_id(job_id)
        if public_id is None:
            return None
        try:
            return JobPosting.objects.get(public_id=public_id)
        except JobPosting.DoesNotExist:
            return None
        except DatabaseError as e:
            logger.error(f"Failed to fetch job posting {job_id}: {str(e)}", exc_info=True)
            raise StoreError("Failed to retrieve job posting") from e

    def find_all(self, limit: Optional[int] = None) -> list[JobPosting]:
        try:
            queryset = JobPosting.objects.order_by("posting_id")
            if isinstance(limit, int) and not isinstance(limit, bool) and limit > 0:
                queryset = queryset[: min(limit, MAX_QUERY_LIMIT)]
            return list(queryset)
        except DatabaseError as e:
            logger.error(f"Failed to list job postings: {str(e)}", exc_info=True)
            raise StoreError("Failed to retrieve job postings") from e

    def update_by_id(self, job_id: Any, fields: dict[str, Any]) -> JobPosting:
        public_id = _parse_public_id(job_id)
        if public_id is None:
            raise NotFoundError()
        try:
            with transaction.atomic():
                try:
                    job_posting = JobPosting.objects.select_for_update().get(
                        public_id=public_id
                    )
                except JobPosting.DoesNotExist:
                    raise NotFoundError() from None

                if fields:
                    for column, value in fields.items():
                        setattr(job_posting, column, value)
                    # 수정 대상 컬럼만 검증
                    exclude = [
                        field.name
                        for field in JobPosting._meta.fields
                        if field.name not in fields
                    ]
                    job_posting.full_clean(exclude=exclude, validate_unique=False)
                    job_posting.save(update_fields=[*fields, "updated_at"])
        except DjangoValidationError as e:
            raise _to_validation_error(e) from e
        except DatabaseError as e:
            logger.error(
                f"Failed to update job posting {job_id}: {str(e)}", exc_info=True
            )
            raise StoreError("Failed to update job posting") from e
        return job_posting

    def delete_by_id(self, job_id: Any) -> int:
        public_id = _parse_public_id(job_id)
        if public_id is None:
            raise NotFoundError()
        try:
            with transaction.atomic():
                deleted, _ = JobPosting.objects.filter(public_id=public_id).delete()
        except DatabaseError as e:
            logger.error(
                f"Failed to delete job posting {job_id}: {str(e)}", exc_info=True
            )
            raise StoreError("Failed to delete job posting") from e
        if deleted == 0:
            raise NotFoundError()
        return deleted

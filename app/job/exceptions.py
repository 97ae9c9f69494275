"""
Job Posting Errors

채용 공고 처리 중 발생하는 에러 계층.
뷰(라우팅 경계)에서 잡아 {"error": message} 응답으로 변환합니다.
"""

from __future__ import annotations

from typing import Iterable, Optional


class JobPostingError(Exception):
    code = "JOB_POSTING_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(JobPostingError):
    """필수 필드 누락/형식 오류. 저장되지 않습니다."""

    code = "VALIDATION_ERROR"

    def __init__(self, message: str, fields: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.fields = list(fields or [])


class NotFoundError(JobPostingError):
    code = "NOT_FOUND"

    def __init__(self, message: str = "Job not found"):
        super().__init__(message)


class StoreError(JobPostingError):
    """저장소(DB) 장애. 내부 상세는 로그로만 남깁니다."""

    code = "STORE_ERROR"

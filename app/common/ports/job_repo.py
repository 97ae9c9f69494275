from __future__ import annotations

from typing import Any, Optional, Protocol

from job.domain.job_posting import JobPostingDraft
from job.models import JobPosting


class JobPostingRepositoryPort(Protocol):
    def insert(self, draft: JobPostingDraft) -> JobPosting: ...

    def find_by_id(self, job_id: Any) -> Optional[JobPosting]: ...

    def find_all(self, limit: Optional[int] = None) -> list[JobPosting]: ...

    def update_by_id(self, job_id: Any, fields: dict[str, Any]) -> JobPosting: ...

    def delete_by_id(self, job_id: Any) -> int: ...

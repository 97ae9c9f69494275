from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DeleteJobPostingResultDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    acknowledged: bool = Field(default=True, description="삭제 요청 처리 여부")
    deleted_count: int = Field(alias="deletedCount", description="삭제된 공고 수")

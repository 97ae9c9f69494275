from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from job.exceptions import ValidationError

ALL_FIELDS_MESSAGE = "All fields must be filled"
ALL_COMPANY_FIELDS_MESSAGE = "All company fields must be filled"
UPDATE_DATA_REQUIRED_MESSAGE = "Job ID and update data are required"
JOB_ID_REQUIRED_MESSAGE = "Job ID is required"

# JSON 키 -> 저장 컬럼
JOB_FIELD_COLUMNS = {
    "title": "title",
    "type": "job_type",
    "location": "location",
    "description": "description",
    "salary": "salary",
}
COMPANY_FIELD_COLUMNS = {
    "name": "company_name",
    "description": "company_description",
    "contactEmail": "company_contact_email",
    "contactPhone": "company_contact_phone",
}

# 저장 컬럼 -> JSON 경로 (에러 메시지용)
COLUMN_FIELD_PATHS = {
    **{column: key for key, column in JOB_FIELD_COLUMNS.items()},
    **{column: f"company.{key}" for key, column in COMPANY_FIELD_COLUMNS.items()},
}


def clean_text(value: Any) -> Optional[str]:
    """
    텍스트 필드 값을 정규화합니다.

    숫자는 문자열로 저장하고, None/빈 문자열/공백/bool/list/dict 는 누락으로 봅니다.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value
    return None


@dataclass(frozen=True, slots=True)
class Company:
    name: str
    description: str
    contact_email: str
    contact_phone: str

    def to_columns(self) -> dict[str, str]:
        return {
            "company_name": self.name,
            "company_description": self.description,
            "company_contact_email": self.contact_email,
            "company_contact_phone": self.contact_phone,
        }


@dataclass(frozen=True, slots=True)
class JobPostingDraft:
    """필수 필드 검증을 통과한, 아직 저장되지 않은 채용 공고."""

    title: str
    type: str
    location: str
    description: str
    salary: str
    company: Company

    def to_columns(self) -> dict[str, str]:
        return {
            "title": self.title,
            "job_type": self.type,
            "location": self.location,
            "description": self.description,
            "salary": self.salary,
            **self.company.to_columns(),
        }


def validate_company(data: Any) -> Company:
    """회사 정보 4개 필드(name, description, contactEmail, contactPhone) 검증"""
    if not isinstance(data, Mapping):
        raise ValidationError(ALL_COMPANY_FIELDS_MESSAGE, fields=["company"])

    values = {key: clean_text(data.get(key)) for key in COMPANY_FIELD_COLUMNS}
    missing = [f"company.{key}" for key, value in values.items() if value is None]
    if missing:
        raise ValidationError(ALL_COMPANY_FIELDS_MESSAGE, fields=missing)

    return Company(
        name=values["name"],
        description=values["description"],
        contact_email=values["contactEmail"],
        contact_phone=values["contactPhone"],
    )


def validate_job_posting(data: Any) -> JobPostingDraft:
    """
    채용 공고 생성 payload 검증

    1) 상위 6개 필드(title, type, location, description, salary, company) 누락 시
       "All fields must be filled"
    2) company 하위 4개 필드 누락 시 "All company fields must be filled"

    Raises:
        ValidationError: 누락된 필드 경로 목록(fields)을 포함
    """
    if not isinstance(data, Mapping):
        raise ValidationError(
            ALL_FIELDS_MESSAGE, fields=[*JOB_FIELD_COLUMNS, "company"]
        )

    values = {key: clean_text(data.get(key)) for key in JOB_FIELD_COLUMNS}
    missing = [key for key, value in values.items() if value is None]
    company_data = data.get("company")
    if company_data is None or company_data == "":
        missing.append("company")
    if missing:
        raise ValidationError(ALL_FIELDS_MESSAGE, fields=missing)

    return JobPostingDraft(
        title=values["title"],
        type=values["type"],
        location=values["location"],
        description=values["description"],
        salary=values["salary"],
        company=validate_company(company_data),
    )


def build_job_posting_updates(data: Mapping) -> dict[str, Optional[str]]:
    """
    부분 수정 payload 를 저장 컬럼 dict 로 변환합니다.

    - 전달된 필드만 포함 (company 하위 필드도 개별 병합)
    - id 및 알 수 없는 키는 무시
    - 값 검증은 저장소에서 수정 대상 컬럼에 한해 수행
    """
    columns: dict[str, Optional[str]] = {}
    for key, column in JOB_FIELD_COLUMNS.items():
        if key in data:
            columns[column] = clean_text(data[key])

    if "company" in data:
        company_data = data["company"]
        if not isinstance(company_data, Mapping):
            raise ValidationError(ALL_COMPANY_FIELDS_MESSAGE, fields=["company"])
        for key, column in COMPANY_FIELD_COLUMNS.items():
            if key in company_data:
                columns[column] = clean_text(company_data[key])

    return columns

"""
Job Posting Views

채용 공고 API 엔드포인트 (Thin Controller)
"""

import logging
import re
from typing import Optional

from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from job.application.container import build_job_service
from job.exceptions import JobPostingError, NotFoundError, ValidationError
from job.models import JobPosting
from job.permissions import permission_for, requires_bearer_token
from job.serializers import (
    DeleteJobPostingResultSerializer,
    ErrorSerializer,
    JobPostingCreateResponseSerializer,
    JobPostingSerializer,
)
from job.services import JobService
from rest_framework import status
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

logger = logging.getLogger(__name__)

LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def parse_limit(raw: Optional[str]) -> Optional[int]:
    """
    `_limit` 쿼리 파라미터 해석

    없으면 None(서비스 기본값), 앞쪽 정수 부분만 사용 ("2abc" -> 2, "3.5" -> 3),
    정수로 시작하지 않으면 0(전체 조회)
    """
    if raw is None:
        return None
    match = LEADING_INTEGER.match(raw)
    if match is None:
        return 0
    return int(match.group(1))


def error_response(exc: JobPostingError, status_code: int) -> Response:
    body = {"error": exc.message}
    if isinstance(exc, ValidationError) and exc.fields:
        body["fields"] = exc.fields
    return Response(body, status=status_code)


class JobPostingViewSet(GenericViewSet):
    """
    채용 공고 ViewSet (Thin Controller)

    비즈니스 로직은 JobService에 위임하고,
    HTTP 요청/응답 처리만 담당합니다.
    권한은 job.permissions.JOB_ROUTE_POLICY 표를 따릅니다.
    """

    queryset = JobPosting.objects.all()
    serializer_class = JobPostingSerializer
    lookup_url_kwarg = "job_id"

    def get_permissions(self):
        return [permission_for(self.action)()]

    def perform_authentication(self, request):
        # 공개 action 은 토큰을 검증하지 않음 (잘못된 토큰이 조회를 막지 않도록)
        if not requires_bearer_token(self.action):
            return
        super().perform_authentication(request)

    @property
    def job_service(self) -> JobService:
        return build_job_service()

    @extend_schema(
        parameters=[
            OpenApiParameter(
                "_limit",
                OpenApiTypes.INT,
                description="최대 조회 개수 (기본 10, 0 이면 전체)",
            )
        ],
        responses={200: JobPostingSerializer(many=True), 400: ErrorSerializer},
        summary="List job postings",
    )
    def list(self, request, *args, **kwargs):
        """
        채용 공고 목록 조회

        GET /api/jobs?_limit=3
        """
        limit = parse_limit(request.query_params.get("_limit"))
        try:
            job_postings = self.job_service.list_job_postings(limit=limit)
        except JobPostingError as e:
            return error_response(e, status.HTTP_400_BAD_REQUEST)

        serializer = self.get_serializer(job_postings, many=True)
        return Response(serializer.data)

    @extend_schema(
        responses={200: JobPostingSerializer, 400: ErrorSerializer},
        summary="Retrieve a job posting",
    )
    def retrieve(self, request, job_id=None, *args, **kwargs):
        """
        채용 공고 상세 조회

        GET /api/jobs/<id>
        """
        try:
            job_posting = self.job_service.get_job_posting(job_id)
        except JobPostingError as e:
            return error_response(e, status.HTTP_400_BAD_REQUEST)

        serializer = self.get_serializer(job_posting)
        return Response(serializer.data)

    @extend_schema(
        request=JobPostingSerializer,
        responses={200: JobPostingCreateResponseSerializer, 400: ErrorSerializer},
        summary="Create a job posting",
    )
    def create(self, request, *args, **kwargs):
        """
        채용 공고 생성

        POST /api/jobs
        """
        try:
            job_posting = self.job_service.create_job_posting(request.data)
        except JobPostingError as e:
            logger.info(f"Rejected job posting from user {request.user.pk}: {e}")
            return error_response(e, status.HTTP_400_BAD_REQUEST)

        serializer = self.get_serializer(job_posting)
        return Response({"job": serializer.data}, status=status.HTTP_200_OK)

    @extend_schema(
        request=JobPostingSerializer,
        responses={
            200: JobPostingSerializer,
            400: ErrorSerializer,
            404: ErrorSerializer,
        },
        summary="Update a job posting (partial)",
    )
    def update(self, request, job_id=None, *args, **kwargs):
        """
        채용 공고 수정 (부분 병합)

        PUT /api/jobs/<id>
        """
        try:
            job_posting = self.job_service.edit_job_posting(job_id, request.data)
        except NotFoundError as e:
            return error_response(e, status.HTTP_404_NOT_FOUND)
        except JobPostingError as e:
            return error_response(e, status.HTTP_400_BAD_REQUEST)

        serializer = self.get_serializer(job_posting)
        return Response(serializer.data)

    @extend_schema(
        request=JobPostingSerializer,
        responses={
            200: JobPostingSerializer,
            400: ErrorSerializer,
            404: ErrorSerializer,
        },
        summary="Update a job posting (partial)",
    )
    def partial_update(self, request, job_id=None, *args, **kwargs):
        """
        PATCH /api/jobs/<id> (PUT 과 동일하게 부분 병합)
        """
        return self.update(request, job_id, *args, **kwargs)

    @extend_schema(
        responses={200: DeleteJobPostingResultSerializer, 400: ErrorSerializer},
        summary="Delete a job posting",
    )
    def destroy(self, request, job_id=None, *args, **kwargs):
        """
        채용 공고 삭제

        DELETE /api/jobs/<id>
        """
        try:
            result = self.job_service.delete_job_posting(job_id)
        except JobPostingError as e:
            return error_response(e, status.HTTP_400_BAD_REQUEST)

        return Response(result.model_dump(by_alias=True))

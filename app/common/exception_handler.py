"""
JSON Error Handling

모든 에러 응답을 {"error": "..."} 형태로 통일합니다.
"""

import logging

from django.http import JsonResponse
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def _first_message(data) -> str:
    if isinstance(data, dict):
        for value in data.values():
            return _first_message(value)
    elif isinstance(data, list):
        if data:
            return _first_message(data[0])
    elif data:
        return str(data)
    return "Invalid request"


def api_exception_handler(exc, context):
    """
    DRF 기본 exception handler 결과의 `detail` 을 `error` 로 바꿔 반환합니다.

    serializer 검증 에러처럼 필드별 메시지가 오는 경우
    첫 메시지를 `error` 로, 전체를 `fields` 로 내려줍니다.
    """
    response = exception_handler(exc, context)
    if response is None:
        return None

    data = response.data
    if isinstance(data, dict) and "detail" in data:
        response.data = {"error": str(data["detail"])}
    else:
        response.data = {"error": _first_message(data), "fields": data}
    return response


def unknown_endpoint(request, exception=None):
    """등록되지 않은 경로 (handler404)"""
    return JsonResponse({"error": "Unknown endpoint"}, status=404)


def server_error(request):
    """처리되지 않은 예외 (handler500)"""
    logger.error(f"Unhandled error on {request.method} {request.path}")
    return JsonResponse({"error": "Internal server error"}, status=500)

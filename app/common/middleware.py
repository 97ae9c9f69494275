from __future__ import annotations

import logging
import time
import uuid
from typing import Callable

from common.request_id import set_request_id
from django.http import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class RequestIdMiddleware:
    """
    - 요청마다 request_id를 생성/전파하고
    - response에 X-Request-ID 헤더를 포함하며
    - 요청 한 건당 access log 한 줄을 남깁니다. (METHOD path status ms)
    """

    header_name = "HTTP_X_REQUEST_ID"
    response_header = "X-Request-ID"

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        incoming = request.META.get(self.header_name)
        request_id = str(incoming).strip()[:64] if incoming else ""
        if not request_id:
            request_id = str(uuid.uuid4())

        # request 객체에도 달아두고(디버깅), contextvar에도 저장(로깅 필터에서 사용)
        request.request_id = request_id  # type: ignore[attr-defined]
        set_request_id(request_id)

        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = (time.monotonic() - started) * 1000

        logger.info(
            f"{request.method} {request.path} {response.status_code} {elapsed_ms:.1f}ms"
        )
        response[self.response_header] = request_id
        return response

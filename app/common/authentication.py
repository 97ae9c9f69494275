"""
Bearer Token Authentication

Authorization 헤더의 JWT(Bearer)를 검증해 호출자를 식별하는 래퍼.
"""

import logging

from common.masking import mask_secrets
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication

logger = logging.getLogger(__name__)


class BearerTokenAuthentication(JWTAuthentication):
    """
    1) 헤더가 없거나 Bearer 스킴이 아니면 None (익명 요청)
    2) 형식이 잘못됐거나 토큰 검증에 실패하면 AuthenticationFailed (401)
    3) 성공하면 (user, validated_token) 을 반환 → request.user / request.auth
    """

    def authenticate(self, request):
        try:
            return super().authenticate(request)
        except AuthenticationFailed:
            header = self.get_header(request) or b""
            logger.warning(
                "Rejected bearer credential: "
                f"{mask_secrets(header.decode('latin-1'))}"
            )
            raise

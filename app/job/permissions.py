from rest_framework.permissions import AllowAny, BasePermission, IsAuthenticated

# ViewSet action -> 권한 클래스
# 목록/상세 조회와 OPTIONS(metadata)는 공개, 생성/수정/삭제는 유효한 Bearer 토큰 필요
JOB_ROUTE_POLICY: dict[str, type[BasePermission]] = {
    "list": AllowAny,
    "retrieve": AllowAny,
    "metadata": AllowAny,
    "create": IsAuthenticated,
    "update": IsAuthenticated,
    "partial_update": IsAuthenticated,
    "destroy": IsAuthenticated,
}


def permission_for(action) -> type[BasePermission]:
    """정책 표에 없는 action 은 인증을 요구합니다."""
    return JOB_ROUTE_POLICY.get(action, IsAuthenticated)


def requires_bearer_token(action) -> bool:
    return permission_for(action) is not AllowAny

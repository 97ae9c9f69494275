from __future__ import annotations

import re

_SECRET_PATTERNS: list[re.Pattern[str]] = [
    # Authorization 헤더 값
    re.compile(r"(Bearer\s+)[A-Za-z0-9\-\._~\+/]+=*", re.IGNORECASE),
    # 로그인/회원가입 응답 및 refresh 요청 body
    re.compile(r"(\"?(?:token|refresh|access|password)\"?\s*[:=]\s*\"?)[^\s\",}]+"),
]

MAX_LOG_LENGTH = 200


def mask_secrets(text: str) -> str:
    """
    로그에 토큰/비밀번호가 그대로 남지 않도록 마스킹합니다.

    인증 스킴 이름(Bearer)과 키 이름은 남겨 디버깅에 쓸 수 있게 합니다.
    """
    if not text:
        return text
    masked = text
    for pat in _SECRET_PATTERNS:
        masked = pat.sub(r"\1[REDACTED]", masked)
    if len(masked) > MAX_LOG_LENGTH:
        masked = masked[:MAX_LOG_LENGTH] + "...[TRUNCATED]"
    return masked

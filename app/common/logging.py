from __future__ import annotations

import logging

from common.request_id import get_request_id

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # formatter에서 %(request_id)s 를 안전하게 쓰도록 보장
        record.request_id = get_request_id()  # type: ignore[attr-defined]
        return True


def build_logging_config(level: str = "INFO") -> dict:
    """
    Django LOGGING 설정(dictConfig)을 생성합니다.

    모든 핸들러에 RequestIdFilter를 달아 로그 라인마다 request_id가 찍히도록 합니다.
    """
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "request_id": {"()": "common.logging.RequestIdFilter"},
        },
        "formatters": {
            "default": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "filters": ["request_id"],
                "formatter": "default",
            },
        },
        "root": {"handlers": ["console"], "level": level},
        "loggers": {
            "django": {"handlers": ["console"], "level": "INFO", "propagate": False},
            "job": {"handlers": ["console"], "level": level, "propagate": False},
            "user": {"handlers": ["console"], "level": level, "propagate": False},
            "common": {"handlers": ["console"], "level": level, "propagate": False},
        },
    }

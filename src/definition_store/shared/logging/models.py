"""
목적: 로깅에 필요한 공통 모델을 정의한다.
설명: 로그 레벨, 요청 컨텍스트, 레코드 구조를 Pydantic으로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/definition_store/shared/logging/logger.py
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    """로그 레벨 열거형."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogContext(BaseModel):
    """로그 컨텍스트 모델이다.

    Args:
        request_id: 요청 식별자.
        principal: 요청을 보낸 주체 이름.
        table: 대상 테이블 이름.
        tags: 자유형 태그.
    """

    request_id: Optional[str] = None
    principal: Optional[str] = None
    table: Optional[str] = None
    tags: Dict[str, str] = Field(default_factory=dict)

    def merged(self, other: Optional["LogContext"]) -> "LogContext":
        """다른 컨텍스트 값을 우선해 합친 새 컨텍스트를 반환한다."""

        if other is None:
            return self
        return LogContext(
            request_id=other.request_id or self.request_id,
            principal=other.principal or self.principal,
            table=other.table or self.table,
            tags={**self.tags, **other.tags},
        )


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LogRecord(BaseModel):
    """로그 레코드 모델이다."""

    level: LogLevel
    message: str
    timestamp: datetime = Field(default_factory=_utc_now)
    logger_name: str
    context: Optional[LogContext] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

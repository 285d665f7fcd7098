"""
목적: 저장소 호출에 쓰이는 요청 모델을 정의한다.
설명: 요청 주체 컨텍스트, 검색 페이지 요청, 익명 접근 정책을 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/definition_store/core/definitions/repository.py
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from definition_store.integrations.db.base import PageRequest


class AnonymousAccessPolicy(str, Enum):
    """주체 없는 목록 조회를 처리하는 정책."""

    UNSCOPED = "UNSCOPED"
    REJECT = "REJECT"


class RequestContext(BaseModel):
    """호출자가 명시적으로 전달하는 요청 컨텍스트."""

    principal: Optional[str] = None
    request_id: Optional[str] = None

    @property
    def resolved_principal(self) -> Optional[str]:
        """공백을 제외한 주체 이름을 반환한다. 없으면 None."""

        if self.principal is None or not self.principal.strip():
            return None
        return self.principal


class SearchPageRequest(BaseModel):
    """검색어와 검색 컬럼이 더해진 페이지 요청."""

    pageable: PageRequest = Field(default_factory=PageRequest)
    search_query: Optional[str] = None
    columns: List[str] = Field(default_factory=list)

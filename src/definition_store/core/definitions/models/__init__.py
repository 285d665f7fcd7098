"""
목적: 태스크 정의 모델 모듈 공개 API를 제공한다.
설명: 도메인 엔티티와 요청 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/definition_store/core/definitions/models/entities.py, src/definition_store/core/definitions/models/requests.py
"""

from definition_store.core.definitions.models.entities import TaskDefinition
from definition_store.core.definitions.models.requests import (
    AnonymousAccessPolicy,
    RequestContext,
    SearchPageRequest,
)

__all__ = [
    "AnonymousAccessPolicy",
    "RequestContext",
    "SearchPageRequest",
    "TaskDefinition",
]

"""
목적: definition_store 패키지 공개 API를 제공한다.
설명: 태스크 정의 저장소와 요청 컨텍스트, 페이지 모델을 노출한다.
디자인 패턴: 퍼사드
참조: src/definition_store/core/definitions/repository.py
"""

from definition_store.core.definitions import (
    AnonymousAccessPolicy,
    DefinitionStoreSettings,
    RequestContext,
    SearchPageRequest,
    TaskDefinition,
    TaskDefinitionRepository,
    create_repository,
    load_settings,
)
from definition_store.integrations.db.base import Page, PageRequest, SortField, SortOrder

__all__ = [
    "AnonymousAccessPolicy",
    "DefinitionStoreSettings",
    "Page",
    "PageRequest",
    "RequestContext",
    "SearchPageRequest",
    "SortField",
    "SortOrder",
    "TaskDefinition",
    "TaskDefinitionRepository",
    "create_repository",
    "load_settings",
]

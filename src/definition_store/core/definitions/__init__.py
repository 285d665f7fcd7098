"""
목적: 태스크 정의 코어 공개 API를 제공한다.
설명: 엔티티, 요청 모델, 설정, 저장소, 팩토리를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/definition_store/core/definitions/repository.py, src/definition_store/core/definitions/factory.py
"""

from definition_store.core.definitions.factory import create_engine, create_repository
from definition_store.core.definitions.mapper import TaskDefinitionMapper
from definition_store.core.definitions.models import (
    AnonymousAccessPolicy,
    RequestContext,
    SearchPageRequest,
    TaskDefinition,
)
from definition_store.core.definitions.repository import TaskDefinitionRepository
from definition_store.core.definitions.schema import build_task_definition_schema
from definition_store.core.definitions.settings import (
    DefinitionStoreSettings,
    StorageEngine,
    load_settings,
)

__all__ = [
    "AnonymousAccessPolicy",
    "DefinitionStoreSettings",
    "RequestContext",
    "SearchPageRequest",
    "StorageEngine",
    "TaskDefinition",
    "TaskDefinitionMapper",
    "TaskDefinitionRepository",
    "build_task_definition_schema",
    "create_engine",
    "create_repository",
    "load_settings",
]

"""
목적: 태스크 정의 행 매핑 유틸을 제공한다.
설명: DB 행 딕셔너리와 TaskDefinition 엔티티 간 변환을 담당한다.
디자인 패턴: 매퍼 패턴
참조: src/definition_store/core/definitions/repository.py
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from definition_store.core.definitions.const import (
    BODY_COLUMN,
    CREATOR_COLUMN,
    NAME_COLUMN,
)
from definition_store.core.definitions.models import TaskDefinition


class TaskDefinitionMapper:
    """태스크 정의 행 매퍼."""

    def to_row(self, definition: TaskDefinition, creator: str) -> Dict[str, Any]:
        """엔티티와 생성 주체를 삽입용 행으로 변환한다."""

        return {
            NAME_COLUMN: definition.name,
            BODY_COLUMN: definition.dsl_text,
            CREATOR_COLUMN: creator,
        }

    def from_row(self, row: Mapping[str, Any]) -> TaskDefinition:
        """조회 행을 엔티티로 변환한다. CREATOR 값은 노출하지 않는다."""

        return TaskDefinition(
            name=str(row[NAME_COLUMN]),
            dsl_text=row.get(BODY_COLUMN) or "",
        )

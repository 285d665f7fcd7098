"""
목적: 태스크 정의 테이블 스키마를 제공한다.
설명: 접두사/접미사로 이름을 구성한 TableSchema 생성 책임을 분리한다.
디자인 패턴: 팩토리 함수 패턴
참조: src/definition_store/core/definitions/repository.py
"""

from __future__ import annotations

from definition_store.core.definitions.const import (
    BODY_COLUMN,
    CREATOR_COLUMN,
    DEFAULT_TABLE_PREFIX,
    DEFAULT_TABLE_SUFFIX,
    NAME_COLUMN,
)
from definition_store.integrations.db.base import ColumnSpec, TableSchema


def build_task_definition_schema(
    prefix: str = DEFAULT_TABLE_PREFIX,
    suffix: str = DEFAULT_TABLE_SUFFIX,
) -> TableSchema:
    """태스크 정의 테이블 스키마를 생성한다."""

    return TableSchema(
        name=f"{prefix}{suffix}",
        primary_key=NAME_COLUMN,
        columns=[
            ColumnSpec(name=NAME_COLUMN, data_type="TEXT", nullable=False, is_primary=True),
            ColumnSpec(name=BODY_COLUMN, data_type="TEXT"),
            ColumnSpec(name=CREATOR_COLUMN, data_type="TEXT"),
        ],
    )

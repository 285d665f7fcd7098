"""
목적: PostgreSQL 조건 빌더 모듈을 제공한다.
설명: 구조화 필터를 `%s` 자리표시자를 쓰는 PostgreSQL WHERE 절로 변환한다.
디자인 패턴: 빌더 패턴
참조: src/definition_store/integrations/db/engines/sql_common.py
"""

from __future__ import annotations

from definition_store.integrations.db.engines.sql_common import (
    SQLConditionBuilder,
    SQLIdentifierHelper,
)


class PostgresConditionBuilder(SQLConditionBuilder):
    """PostgreSQL 조건 빌더."""

    PLACEHOLDER = "%s"

    def __init__(self, identifier_helper: SQLIdentifierHelper) -> None:
        super().__init__(identifier_helper, self.PLACEHOLDER)

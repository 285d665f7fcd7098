"""
목적: 공통 DB 클라이언트를 제공한다.
설명: 엔진을 주입받아 테이블 단위 CRUD와 페이지 조회를 단순한 호출로 제공한다.
디자인 패턴: 파사드
참조: src/definition_store/integrations/db/base/engine.py, src/definition_store/integrations/db/query_builder/query_builder.py
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from definition_store.integrations.db.base.engine import BaseDBEngine
from definition_store.integrations.db.base.models import (
    FilterExpression,
    Page,
    PageRequest,
    Query,
    TableSchema,
)
from definition_store.integrations.db.query_builder.query_builder import QueryBuilder
from definition_store.shared.exceptions import InvalidArgumentError


class DBClient:
    """공통 DB 클라이언트."""

    def __init__(self, engine: BaseDBEngine) -> None:
        self._engine = engine
        self._schemas: Dict[str, TableSchema] = {}

    @property
    def engine(self) -> BaseDBEngine:
        """내부 엔진을 반환한다."""

        return self._engine

    def connect(self) -> None:
        """엔진 연결을 초기화한다."""

        self._engine.connect()

    def close(self) -> None:
        """엔진 연결을 종료한다."""

        self._engine.close()

    def register_schema(self, schema: TableSchema) -> None:
        """테이블 스키마를 등록한다."""

        self._schemas[schema.name] = schema

    def get_schema(self, table: str) -> TableSchema:
        """등록된 테이블 스키마를 조회한다."""

        schema = self._schemas.get(table)
        if schema is None:
            raise InvalidArgumentError(
                f"등록되지 않은 테이블입니다: {table}",
                argument="table",
                value=table,
            )
        return schema

    def create_table(self, schema: TableSchema) -> None:
        """스키마를 등록하고 테이블을 생성한다."""

        self.register_schema(schema)
        self._engine.create_table(schema)

    def drop_table(self, table: str) -> None:
        self._engine.drop_table(table)
        self._schemas.pop(table, None)

    def insert(self, table: str, row: Dict[str, Any]) -> None:
        """행을 삽입한다. 기본 키 중복은 UniqueConstraintError로 전파된다."""

        self._engine.insert(self.get_schema(table), row)

    def get(self, table: str, key: object) -> Optional[Dict[str, Any]]:
        return self._engine.get(self.get_schema(table), key)

    def exists(self, table: str, key: object) -> bool:
        return self._engine.exists(self.get_schema(table), key)

    def delete(self, table: str, key: object) -> int:
        return self._engine.delete(self.get_schema(table), key)

    def delete_all(self, table: str) -> int:
        return self._engine.delete_all(self.get_schema(table))

    def count(self, table: str, filter_expression: Optional[FilterExpression] = None) -> int:
        return self._engine.count(self.get_schema(table), filter_expression)

    def fetch(self, table: str, query: Optional[Query] = None) -> List[Dict[str, Any]]:
        """Query 기반으로 행을 조회한다."""

        if query is None:
            query = Query()
        schema = self.get_schema(table)
        schema.validate_query(query)
        return self._engine.query(schema, query)

    def fetch_page(
        self,
        table: str,
        page_request: PageRequest,
        filter_expression: Optional[FilterExpression] = None,
    ) -> Page[Dict[str, Any]]:
        """같은 필터로 건수 조회와 구간 조회를 수행해 페이지를 반환한다.

        Args:
            table: 테이블 이름.
            page_request: 페이지 번호/크기/정렬.
            filter_expression: 두 조회에 공통으로 적용할 필터.

        Returns:
            Page: 요청 구간의 행과 필터 전체 일치 건수.
        """

        schema = self.get_schema(table)
        query = QueryBuilder().filter(filter_expression).page(page_request).build()
        schema.validate_query(query)
        total = self._engine.count(schema, filter_expression)
        rows = self._engine.query(schema, query) if total else []
        return Page[Dict[str, Any]](
            items=rows,
            page_index=page_request.page_index,
            page_size=page_request.page_size,
            total_elements=total,
        )

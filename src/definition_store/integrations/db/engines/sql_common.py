"""
목적: SQL 계열 엔진에서 공통으로 사용하는 유틸리티를 제공한다.
설명: 식별자 검증/인용, 구조화 필터의 WHERE 절 렌더링, SELECT/COUNT/INSERT/DELETE 구문 조합을 통합한다.
디자인 패턴: 유틸리티 모듈, 빌더 패턴
참조: src/definition_store/integrations/db/base/models.py, src/definition_store/integrations/db/query_builder/filter_builder.py
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from definition_store.integrations.db.base.models import (
    FilterCondition,
    FilterExpression,
    FilterGroup,
    FilterLogic,
    FilterOperator,
    Query,
    RenderedSQL,
    SortField,
    SortOrder,
    TableSchema,
)
from definition_store.shared.exceptions import InvalidArgumentError


_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class SQLIdentifierHelper:
    """SQL 식별자 검증/인용 도우미."""

    def quote_identifier(self, name: str) -> str:
        """식별자를 검증하고 쌍따옴표로 감싸 반환한다."""

        return f'"{self.plain_identifier(name)}"'

    def quote_table(self, name: str) -> str:
        """테이블 식별자를 반환한다."""

        return self.quote_identifier(name)

    def plain_identifier(self, name: str) -> str:
        """인용 없는 식별자를 검증해 반환한다."""

        if not name:
            raise InvalidArgumentError("식별자 이름이 비어 있습니다.", argument="identifier")
        if not _IDENTIFIER_RE.match(name):
            raise InvalidArgumentError(
                f"허용되지 않는 식별자: {name}",
                argument="identifier",
                value=name,
            )
        return name


class SQLConditionBuilder:
    """구조화 필터를 WHERE 절과 순서가 맞는 바인딩 값 목록으로 변환한다.

    Args:
        identifier_helper: 식별자 인용 도우미.
        placeholder: 드라이버 바인딩 자리표시자(`?`, `%s`).
    """

    def __init__(self, identifier_helper: SQLIdentifierHelper, placeholder: str) -> None:
        self._identifier = identifier_helper
        self._placeholder = placeholder

    @property
    def placeholder(self) -> str:
        return self._placeholder

    def render(
        self,
        filter_expression: Optional[FilterExpression],
        schema: TableSchema,
    ) -> RenderedSQL:
        """필터를 `WHERE ...` 절로 렌더링한다. 조건이 없으면 빈 절을 반환한다."""

        if filter_expression is None or filter_expression.is_empty():
            return RenderedSQL()
        clauses: List[str] = []
        params: List[Any] = []
        for group in filter_expression.groups:
            if not group.conditions:
                continue
            clause, group_params = self._render_group(group, schema)
            clauses.append(clause)
            params.extend(group_params)
        return RenderedSQL(sql="WHERE " + " AND ".join(clauses), params=params)

    def build(
        self,
        condition: FilterCondition,
        schema: TableSchema,
    ) -> tuple[str, List[Any]]:
        """단일 조건을 SQL 조각으로 변환한다."""

        column = self._identifier.quote_identifier(schema.resolve_column(condition.field))
        operator = condition.operator
        value = condition.value
        if operator == FilterOperator.EQ:
            return f"{column} = {self._placeholder}", [value]
        if operator == FilterOperator.ILIKE:
            return f"lower({column}) LIKE lower({self._placeholder})", [value]
        if operator == FilterOperator.IN:
            if not isinstance(value, list) or not value:
                raise InvalidArgumentError("IN 조건에는 비어 있지 않은 리스트가 필요합니다.")
            placeholders = ", ".join([self._placeholder] * len(value))
            return f"{column} IN ({placeholders})", list(value)
        raise NotImplementedError("지원하지 않는 연산자입니다.")

    def _render_group(
        self,
        group: FilterGroup,
        schema: TableSchema,
    ) -> tuple[str, List[Any]]:
        parts: List[str] = []
        params: List[Any] = []
        for condition in group.conditions:
            part, part_params = self.build(condition, schema)
            parts.append(part)
            params.extend(part_params)
        if group.logic == FilterLogic.OR:
            return "(" + " OR ".join(parts) + ")", params
        return " AND ".join(parts), params


class SQLStatementComposer:
    """키/값 테이블용 SQL 구문을 조합한다."""

    def __init__(
        self,
        identifier_helper: SQLIdentifierHelper,
        condition_builder: SQLConditionBuilder,
    ) -> None:
        self._identifier = identifier_helper
        self._conditions = condition_builder
        self._placeholder = condition_builder.placeholder

    @property
    def condition_builder(self) -> SQLConditionBuilder:
        return self._conditions

    def create_table(self, schema: TableSchema, default_type: str = "TEXT") -> str:
        """`CREATE TABLE IF NOT EXISTS` 구문을 반환한다."""

        specs = {column.name: column for column in schema.columns}
        column_defs = []
        for name in schema.column_names():
            spec = specs.get(name)
            data_type = spec.data_type if spec and spec.data_type else default_type
            col_def = f"{self._identifier.quote_identifier(name)} {data_type}"
            if name == schema.primary_key:
                col_def += " PRIMARY KEY"
            elif spec is not None and not spec.nullable:
                col_def += " NOT NULL"
            column_defs.append(col_def)
        table = self._identifier.quote_table(schema.name)
        return f"CREATE TABLE IF NOT EXISTS {table} ({', '.join(column_defs)})"

    def drop_table(self, name: str) -> str:
        return f"DROP TABLE IF EXISTS {self._identifier.quote_table(name)}"

    def insert(self, schema: TableSchema, row: Dict[str, Any]) -> RenderedSQL:
        """행 삽입 구문을 반환한다."""

        if not row:
            raise InvalidArgumentError("삽입할 행이 비어 있습니다.", argument="row")
        columns = [schema.resolve_column(name) for name in row.keys()]
        column_sql = ", ".join(self._identifier.quote_identifier(name) for name in columns)
        placeholders = ", ".join([self._placeholder] * len(columns))
        table = self._identifier.quote_table(schema.name)
        return RenderedSQL(
            sql=f"INSERT INTO {table} ({column_sql}) VALUES ({placeholders})",
            params=list(row.values()),
        )

    def select_by_key(self, schema: TableSchema, key: object) -> RenderedSQL:
        return RenderedSQL(
            sql=f"SELECT {self._select_list(schema)} FROM {self._table(schema)} "
            f"WHERE {self._primary_key(schema)} = {self._placeholder}",
            params=[key],
        )

    def exists_by_key(self, schema: TableSchema, key: object) -> RenderedSQL:
        return RenderedSQL(
            sql=f"SELECT COUNT(*) AS total FROM {self._table(schema)} "
            f"WHERE {self._primary_key(schema)} = {self._placeholder}",
            params=[key],
        )

    def delete_by_key(self, schema: TableSchema, key: object) -> RenderedSQL:
        return RenderedSQL(
            sql=f"DELETE FROM {self._table(schema)} "
            f"WHERE {self._primary_key(schema)} = {self._placeholder}",
            params=[key],
        )

    def delete_all(self, schema: TableSchema) -> RenderedSQL:
        return RenderedSQL(sql=f"DELETE FROM {self._table(schema)}")

    def select(self, schema: TableSchema, query: Query) -> RenderedSQL:
        """필터/정렬/LIMIT-OFFSET이 반영된 데이터 조회 구문을 반환한다."""

        schema.validate_query(query)
        where = self._conditions.render(query.filter_expression, schema)
        sql = f"SELECT {self._select_list(schema)} FROM {self._table(schema)}"
        params: List[Any] = list(where.params)
        if where.sql:
            sql += f" {where.sql}"
        sql += f" ORDER BY {self.order_by(schema, query.sort)}"
        if query.pagination is not None:
            sql += f" LIMIT {self._placeholder} OFFSET {self._placeholder}"
            params.extend([query.pagination.limit, query.pagination.offset])
        return RenderedSQL(sql=sql, params=params)

    def count(
        self,
        schema: TableSchema,
        filter_expression: Optional[FilterExpression] = None,
    ) -> RenderedSQL:
        """같은 필터로 전체 일치 건수를 세는 구문을 반환한다."""

        where = self._conditions.render(filter_expression, schema)
        sql = f"SELECT COUNT(*) AS total FROM {self._table(schema)}"
        if where.sql:
            sql += f" {where.sql}"
        return RenderedSQL(sql=sql, params=list(where.params))

    def order_by(self, schema: TableSchema, sort: List[SortField]) -> str:
        """ORDER BY 절 본문을 반환한다. 정렬이 없으면 기본 키 오름차순을 쓴다."""

        if not sort:
            return f"{self._primary_key(schema)} {SortOrder.ASC.value}"
        parts = []
        for sort_field in sort:
            column = self._identifier.quote_identifier(schema.resolve_column(sort_field.field))
            parts.append(f"{column} {SortOrder(sort_field.order).value}")
        return ", ".join(parts)

    def _select_list(self, schema: TableSchema) -> str:
        return ", ".join(
            self._identifier.quote_identifier(name) for name in schema.column_names()
        )

    def _table(self, schema: TableSchema) -> str:
        return self._identifier.quote_table(schema.name)

    def _primary_key(self, schema: TableSchema) -> str:
        return self._identifier.quote_identifier(schema.primary_key)

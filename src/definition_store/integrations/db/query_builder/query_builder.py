"""
목적: 공통 DSL 기반 QueryBuilder를 제공한다.
설명: 체이닝 방식으로 필터/정렬/페이지 요청을 구성해 Query 모델을 생성한다.
디자인 패턴: 빌더 패턴
참조: src/definition_store/integrations/db/base/models.py
"""

from __future__ import annotations

from typing import List, Optional

from definition_store.integrations.db.base.models import (
    FilterExpression,
    PageRequest,
    Pagination,
    Query,
    SortField,
    SortOrder,
)


class QueryBuilder:
    """쿼리 DSL 빌더 클래스."""

    def __init__(self) -> None:
        self._filter: Optional[FilterExpression] = None
        self._sort_fields: List[SortField] = []
        self._pagination: Optional[Pagination] = None

    def filter(self, expression: Optional[FilterExpression]) -> "QueryBuilder":
        """필터 표현식을 지정한다."""

        self._filter = expression
        return self

    def order_by(self, field: str, order: SortOrder = SortOrder.ASC) -> "QueryBuilder":
        """정렬 필드를 추가한다."""

        self._sort_fields.append(SortField(field=field, order=order))
        return self

    def limit(self, value: int) -> "QueryBuilder":
        offset = self._pagination.offset if self._pagination else 0
        self._pagination = Pagination(limit=value, offset=offset)
        return self

    def offset(self, value: int) -> "QueryBuilder":
        limit = self._pagination.limit if self._pagination else Pagination().limit
        self._pagination = Pagination(limit=limit, offset=value)
        return self

    def page(self, request: PageRequest) -> "QueryBuilder":
        """페이지 요청의 정렬과 LIMIT/OFFSET을 반영한다."""

        self._sort_fields.extend(request.sort)
        self._pagination = request.to_pagination()
        return self

    def build(self) -> Query:
        """Query 모델을 생성한다."""

        return Query(
            filter_expression=self._filter,
            sort=list(self._sort_fields),
            pagination=self._pagination,
        )

"""
목적: 구조화 조건 빌더를 제공한다.
설명: 소유자 동등 조건과 다중 컬럼 대소문자 무시 검색 그룹을 SQL 문자열이 아닌 조건 모델 목록으로 구성한다.
디자인 패턴: 빌더 패턴
참조: src/definition_store/integrations/db/base/models.py, src/definition_store/integrations/db/engines/sql_common.py
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from definition_store.integrations.db.base.models import (
    FilterCondition,
    FilterExpression,
    FilterGroup,
    FilterLogic,
    FilterOperator,
)
from definition_store.shared.exceptions import InvalidArgumentError


class FilterBuilder:
    """조건 그룹을 추가된 순서대로 쌓는 빌더.

    그룹 사이는 AND로 결합되고, 검색 그룹 내부는 OR로 결합된다.
    렌더링은 엔진별 조건 빌더가 담당한다.
    """

    def __init__(self) -> None:
        self._groups: List[FilterGroup] = []

    @classmethod
    def scoped_search(
        cls,
        owner_column: str,
        owner: Optional[str],
        search_columns: Sequence[str] = (),
        search_text: Optional[str] = None,
    ) -> Optional[FilterExpression]:
        """소유자 조건을 먼저, 검색 그룹을 그 다음에 두는 필터를 생성한다."""

        return (
            cls()
            .owned_by(owner_column, owner)
            .search(search_columns, search_text)
            .build()
        )

    def where_eq(self, field: str, value: object) -> "FilterBuilder":
        """동등 조건 그룹을 추가한다."""

        self._groups.append(
            FilterGroup(
                conditions=[
                    FilterCondition(field=field, operator=FilterOperator.EQ, value=value)
                ]
            )
        )
        return self

    def owned_by(self, owner_column: str, owner: Optional[str]) -> "FilterBuilder":
        """소유자가 있을 때만 소유자 동등 조건을 추가한다."""

        if owner is None:
            return self
        return self.where_eq(owner_column, owner)

    def where_in(self, field: str, values: Sequence[object]) -> "FilterBuilder":
        """포함 조건 그룹을 추가한다."""

        if not values:
            raise InvalidArgumentError("IN 조건에는 하나 이상의 값이 필요합니다.", argument=field)
        self._groups.append(
            FilterGroup(
                conditions=[
                    FilterCondition(field=field, operator=FilterOperator.IN, value=list(values))
                ]
            )
        )
        return self

    def search(self, columns: Sequence[str], text: Optional[str]) -> "FilterBuilder":
        """컬럼별 대소문자 무시 부분 일치 조건을 OR 그룹으로 추가한다.

        검색어가 없거나 빈 문자열이면 전체 일치로 간주해 그룹을 만들지 않는다.
        컬럼마다 같은 패턴 값을 별도 바인딩으로 가진다.
        """

        if not columns or not text:
            return self
        pattern = f"%{text}%"
        self._groups.append(
            FilterGroup(
                logic=FilterLogic.OR,
                conditions=[
                    FilterCondition(field=column, operator=FilterOperator.ILIKE, value=pattern)
                    for column in columns
                ],
            )
        )
        return self

    def build(self) -> Optional[FilterExpression]:
        """조건이 있으면 FilterExpression을, 없으면 None을 반환한다."""

        if not self._groups:
            return None
        return FilterExpression(groups=list(self._groups))

"""
목적: DB 통합 인터페이스에서 공통으로 사용하는 모델을 정의한다.
설명: 테이블 스키마, 구조화 필터, 정렬, 페이지 요청/응답, 렌더링된 SQL 모델을 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/definition_store/integrations/db/base/engine.py, src/definition_store/integrations/db/engines/sql_common.py
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

from definition_store.shared.exceptions import InvalidArgumentError


class ColumnSpec(BaseModel):
    """컬럼 스펙을 표현한다."""

    name: str
    data_type: Optional[str] = None
    nullable: bool = True
    is_primary: bool = False


class TableSchema(BaseModel):
    """키/값 형태 테이블의 스키마 정보를 표현한다."""

    name: str
    primary_key: str
    columns: List[ColumnSpec] = Field(default_factory=list)

    def column_names(self) -> List[str]:
        """등록된 컬럼 이름 목록을 반환한다."""

        names = [column.name for column in self.columns]
        if self.primary_key not in names:
            names.insert(0, self.primary_key)
        return names

    def resolve_column(self, name: str) -> str:
        """대소문자 구분 없이 컬럼 이름을 스키마의 정식 이름으로 확정한다."""

        if not name or not name.strip():
            raise InvalidArgumentError("컬럼 이름은 비어 있을 수 없습니다.", argument="column")
        candidate = name.strip().lower()
        for column_name in self.column_names():
            if column_name.lower() == candidate:
                return column_name
        raise InvalidArgumentError(
            f"테이블 {self.name}에 존재하지 않는 컬럼입니다: {name}",
            argument="column",
            value=name,
        )

    def validate_query(self, query: "Query") -> None:
        """쿼리에 사용된 컬럼이 모두 스키마에 존재하는지 검증한다."""

        if query.filter_expression is not None:
            for group in query.filter_expression.groups:
                for condition in group.conditions:
                    self.resolve_column(condition.field)
        for sort_field in query.sort:
            self.resolve_column(sort_field.field)


class FilterOperator(str, Enum):
    """필터 연산자.

    ILIKE는 `lower(column) LIKE lower(value)` 형태의 대소문자 무시 패턴 비교이다.
    """

    EQ = "EQ"
    ILIKE = "ILIKE"
    IN = "IN"


class FilterLogic(str, Enum):
    """그룹 내부 조건 결합 논리."""

    AND = "AND"
    OR = "OR"


class FilterCondition(BaseModel):
    """단일 조건과 바인딩 값."""

    field: str
    operator: FilterOperator
    value: Any


class FilterGroup(BaseModel):
    """조건 그룹. 그룹끼리는 항상 AND로 결합된다."""

    conditions: List[FilterCondition] = Field(default_factory=list)
    logic: FilterLogic = FilterLogic.AND


class FilterExpression(BaseModel):
    """순서가 유지되는 조건 그룹 목록."""

    groups: List[FilterGroup] = Field(default_factory=list)

    def is_empty(self) -> bool:
        """렌더링할 조건이 없는지 반환한다."""

        return not any(group.conditions for group in self.groups)


class SortOrder(str, Enum):
    """정렬 순서."""

    ASC = "ASC"
    DESC = "DESC"


class SortField(BaseModel):
    """정렬 필드."""

    field: str
    order: SortOrder = SortOrder.ASC


class Pagination(BaseModel):
    """LIMIT/OFFSET 정보."""

    limit: int = Field(default=20, ge=1)
    offset: int = Field(default=0, ge=0)


class Query(BaseModel):
    """일반 조회 쿼리 모델."""

    filter_expression: Optional[FilterExpression] = None
    sort: List[SortField] = Field(default_factory=list)
    pagination: Optional[Pagination] = None


class PageRequest(BaseModel):
    """페이지 번호/크기/정렬로 구성된 페이지 요청."""

    page_index: int = Field(default=0, ge=0)
    page_size: int = Field(default=20, ge=1)
    sort: List[SortField] = Field(default_factory=list)

    @property
    def offset(self) -> int:
        """첫 행의 오프셋을 반환한다."""

        return self.page_index * self.page_size

    def to_pagination(self) -> Pagination:
        """LIMIT/OFFSET 모델로 변환한다."""

        return Pagination(limit=self.page_size, offset=self.offset)


ItemT = TypeVar("ItemT")


class Page(BaseModel, Generic[ItemT]):
    """요청한 구간의 항목과 전체 일치 건수를 담는 페이지 결과."""

    items: List[ItemT] = Field(default_factory=list)
    page_index: int = 0
    page_size: int = 20
    total_elements: int = 0

    @property
    def number_of_elements(self) -> int:
        return len(self.items)

    @property
    def total_pages(self) -> int:
        if self.total_elements == 0:
            return 0
        return math.ceil(self.total_elements / self.page_size)

    @property
    def is_first(self) -> bool:
        return self.page_index == 0

    @property
    def is_last(self) -> bool:
        return not self.has_next

    @property
    def has_next(self) -> bool:
        return self.page_index + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page_index > 0

    def to_dict(self) -> Dict[str, Any]:
        """페이지 메타데이터를 포함한 사전을 반환한다."""

        payload = self.model_dump()
        payload.update(
            {
                "number_of_elements": self.number_of_elements,
                "total_pages": self.total_pages,
                "is_first": self.is_first,
                "is_last": self.is_last,
            }
        )
        return payload


class RenderedSQL(BaseModel):
    """렌더링된 SQL 문자열과 순서가 맞춰진 바인딩 값."""

    sql: str = ""
    params: List[Any] = Field(default_factory=list)

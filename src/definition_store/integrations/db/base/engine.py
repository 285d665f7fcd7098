"""
목적: DB 엔진 추상 인터페이스를 정의한다.
설명: 테이블 관리, 키 기반 행 CRUD, 필터/정렬/페이지 조회와 건수 조회를 위한 표준 메서드를 제공한다.
디자인 패턴: 전략 패턴
참조: src/definition_store/integrations/db/base/models.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from definition_store.integrations.db.base.models import (
    FilterExpression,
    Query,
    TableSchema,
)


class BaseDBEngine(ABC):
    """DB 엔진 인터페이스.

    모든 구현체는 드라이버 예외를 StorageError로, 유일성 위반을
    UniqueConstraintError로 변환해 올려야 한다.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """엔진 이름을 반환한다."""

    @property
    @abstractmethod
    def placeholder(self) -> str:
        """바인딩 자리표시자 문자열을 반환한다."""

    @abstractmethod
    def connect(self) -> None:
        """DB 연결을 초기화한다."""

    @abstractmethod
    def close(self) -> None:
        """DB 연결을 종료한다."""

    @abstractmethod
    def create_table(self, schema: TableSchema) -> None:
        """테이블이 없으면 생성한다."""

    @abstractmethod
    def drop_table(self, name: str) -> None:
        """테이블을 삭제한다."""

    @abstractmethod
    def insert(self, schema: TableSchema, row: Dict[str, Any]) -> None:
        """행을 삽입한다. 기존 키를 덮어쓰지 않는다."""

    @abstractmethod
    def get(self, schema: TableSchema, key: object) -> Optional[Dict[str, Any]]:
        """기본 키로 행 하나를 조회한다."""

    @abstractmethod
    def exists(self, schema: TableSchema, key: object) -> bool:
        """기본 키에 해당하는 행이 있는지 반환한다."""

    @abstractmethod
    def delete(self, schema: TableSchema, key: object) -> int:
        """기본 키로 행을 삭제하고 삭제 건수를 반환한다."""

    @abstractmethod
    def delete_all(self, schema: TableSchema) -> int:
        """모든 행을 삭제하고 삭제 건수를 반환한다."""

    @abstractmethod
    def query(self, schema: TableSchema, query: Query) -> List[Dict[str, Any]]:
        """필터/정렬/페이지 조건으로 행 목록을 조회한다."""

    @abstractmethod
    def count(
        self,
        schema: TableSchema,
        filter_expression: Optional[FilterExpression] = None,
    ) -> int:
        """필터에 일치하는 전체 행 수를 반환한다."""

"""
목적: PostgreSQL 기반 DB 엔진을 제공한다.
설명: 테이블 스키마 기반 행 CRUD와 필터/정렬/페이지 조회, 건수 조회를 처리한다.
디자인 패턴: 어댑터 패턴
참조: src/definition_store/integrations/db/base/engine.py
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from definition_store.integrations.db.base.engine import BaseDBEngine
from definition_store.integrations.db.base.models import (
    FilterExpression,
    Query,
    RenderedSQL,
    TableSchema,
)
from definition_store.integrations.db.engines.postgres.condition_builder import (
    PostgresConditionBuilder,
)
from definition_store.integrations.db.engines.postgres.connection import (
    PostgresConnectionManager,
)
from definition_store.integrations.db.engines.sql_common import (
    SQLIdentifierHelper,
    SQLStatementComposer,
)
from definition_store.shared.exceptions import StorageError, UniqueConstraintError
from definition_store.shared.logging import Logger, create_default_logger

try:
    import psycopg2
    import psycopg2.extras
except ImportError:  # pragma: no cover - 환경 의존 로딩
    psycopg2 = None

_UNIQUE_VIOLATION = "23505"


class PostgresEngine(BaseDBEngine):
    """PostgreSQL 기반 엔진 구현체."""

    def __init__(
        self,
        dsn: Optional[str] = None,
        host: str = "127.0.0.1",
        port: int = 5432,
        user: str = "postgres",
        password: Optional[str] = None,
        database: str = "postgres",
        scheme: str = "postgresql",
        logger: Optional[Logger] = None,
    ) -> None:
        if not dsn:
            auth = f"{user}"
            if password:
                auth = f"{auth}:{password}"
            dsn = f"{scheme}://{auth}@{host}:{port}/{database}"
        self._logger = logger or create_default_logger("PostgresEngine")
        self._identifier = SQLIdentifierHelper()
        self._composer = SQLStatementComposer(
            self._identifier,
            PostgresConditionBuilder(self._identifier),
        )
        self._connection = PostgresConnectionManager(
            dsn=dsn,
            logger=self._logger,
            psycopg2_module=psycopg2,
        )

    @property
    def name(self) -> str:
        return "postgres"

    @property
    def placeholder(self) -> str:
        return PostgresConditionBuilder.PLACEHOLDER

    @property
    def composer(self) -> SQLStatementComposer:
        return self._composer

    def connect(self) -> None:
        try:
            self._connection.connect()
        except RuntimeError as error:
            raise StorageError(str(error), error) from error
        except psycopg2.Error as error:
            raise StorageError("PostgreSQL 연결에 실패했습니다.", error) from error

    def close(self) -> None:
        self._connection.close()

    def create_table(self, schema: TableSchema) -> None:
        self._write(RenderedSQL(sql=self._composer.create_table(schema, "TEXT")))

    def drop_table(self, name: str) -> None:
        self._write(RenderedSQL(sql=self._composer.drop_table(name)))

    def insert(self, schema: TableSchema, row: Dict[str, Any]) -> None:
        self._write(self._composer.insert(schema, row))

    def get(self, schema: TableSchema, key: object) -> Optional[Dict[str, Any]]:
        rows = self._read(self._composer.select_by_key(schema, key))
        if not rows:
            return None
        return rows[0]

    def exists(self, schema: TableSchema, key: object) -> bool:
        rows = self._read(self._composer.exists_by_key(schema, key))
        return bool(rows) and int(rows[0]["total"]) > 0

    def delete(self, schema: TableSchema, key: object) -> int:
        return self._write(self._composer.delete_by_key(schema, key))

    def delete_all(self, schema: TableSchema) -> int:
        return self._write(self._composer.delete_all(schema))

    def query(self, schema: TableSchema, query: Query) -> List[Dict[str, Any]]:
        return self._read(self._composer.select(schema, query))

    def count(
        self,
        schema: TableSchema,
        filter_expression: Optional[FilterExpression] = None,
    ) -> int:
        rows = self._read(self._composer.count(schema, filter_expression))
        return int(rows[0]["total"]) if rows else 0

    def _read(self, statement: RenderedSQL) -> List[Dict[str, Any]]:
        connection = self._ensure_connection()
        try:
            with self._connection.cursor() as cursor:
                cursor.execute(statement.sql, statement.params)
                rows = cursor.fetchall()
            connection.commit()
        except psycopg2.Error as error:
            connection.rollback()
            raise StorageError(
                "PostgreSQL 조회에 실패했습니다.", error, statement.sql
            ) from error
        return [dict(row) for row in rows]

    def _write(self, statement: RenderedSQL) -> int:
        connection = self._ensure_connection()
        try:
            with self._connection.cursor() as cursor:
                cursor.execute(statement.sql, statement.params)
                affected = cursor.rowcount
            connection.commit()
        except psycopg2.Error as error:
            connection.rollback()
            if getattr(error, "pgcode", None) == _UNIQUE_VIOLATION:
                raise UniqueConstraintError(
                    "PostgreSQL 유일성 제약을 위반했습니다.", error, statement.sql
                ) from error
            raise StorageError(
                "PostgreSQL 쓰기에 실패했습니다.", error, statement.sql
            ) from error
        return max(affected, 0)

    def _ensure_connection(self):
        try:
            return self._connection.ensure_connection()
        except RuntimeError as error:
            raise StorageError(str(error), error) from error

"""
목적: SQLite 기반 DB 엔진을 제공한다.
설명: 테이블 스키마 기반 행 CRUD와 필터/정렬/페이지 조회, 건수 조회를 처리한다.
디자인 패턴: 어댑터 패턴
참조: src/definition_store/integrations/db/base/engine.py
"""

from __future__ import annotations

import sqlite3
from typing import Any, Dict, List, Optional

from definition_store.integrations.db.base.engine import BaseDBEngine
from definition_store.integrations.db.base.models import (
    FilterExpression,
    Query,
    RenderedSQL,
    TableSchema,
)
from definition_store.integrations.db.engines.sql_common import (
    SQLIdentifierHelper,
    SQLStatementComposer,
)
from definition_store.integrations.db.engines.sqlite.condition_builder import (
    SqliteConditionBuilder,
)
from definition_store.integrations.db.engines.sqlite.connection import (
    SqliteConnectionManager,
)
from definition_store.shared.exceptions import StorageError, UniqueConstraintError
from definition_store.shared.logging import Logger, create_default_logger


class SQLiteEngine(BaseDBEngine):
    """표준 라이브러리 sqlite3 기반 엔진 구현체."""

    def __init__(
        self,
        database_path: str = "data/db/definitions.sqlite",
        logger: Optional[Logger] = None,
    ) -> None:
        self._logger = logger or create_default_logger("SQLiteEngine")
        self._identifier = SQLIdentifierHelper()
        self._composer = SQLStatementComposer(
            self._identifier,
            SqliteConditionBuilder(self._identifier),
        )
        self._connection = SqliteConnectionManager(
            database_path=database_path,
            logger=self._logger,
        )

    @property
    def name(self) -> str:
        return "sqlite"

    @property
    def placeholder(self) -> str:
        return SqliteConditionBuilder.PLACEHOLDER

    @property
    def composer(self) -> SQLStatementComposer:
        return self._composer

    def connect(self) -> None:
        try:
            self._connection.connect()
        except sqlite3.Error as error:
            raise StorageError("SQLite 연결에 실패했습니다.", error) from error

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
            rows = connection.execute(statement.sql, statement.params).fetchall()
        except sqlite3.Error as error:
            raise StorageError("SQLite 조회에 실패했습니다.", error, statement.sql) from error
        return [dict(row) for row in rows]

    def _write(self, statement: RenderedSQL) -> int:
        connection = self._ensure_connection()
        try:
            cursor = connection.execute(statement.sql, statement.params)
            connection.commit()
        except sqlite3.IntegrityError as error:
            connection.rollback()
            if _is_unique_violation(error):
                raise UniqueConstraintError(
                    "SQLite 유일성 제약을 위반했습니다.", error, statement.sql
                ) from error
            raise StorageError("SQLite 쓰기에 실패했습니다.", error, statement.sql) from error
        except sqlite3.Error as error:
            connection.rollback()
            raise StorageError("SQLite 쓰기에 실패했습니다.", error, statement.sql) from error
        return max(cursor.rowcount, 0)

    def _ensure_connection(self) -> sqlite3.Connection:
        try:
            return self._connection.ensure_connection()
        except RuntimeError as error:
            raise StorageError(str(error), error) from error


def _is_unique_violation(error: sqlite3.IntegrityError) -> bool:
    message = str(error).upper()
    return "UNIQUE CONSTRAINT FAILED" in message or "PRIMARY KEY" in message

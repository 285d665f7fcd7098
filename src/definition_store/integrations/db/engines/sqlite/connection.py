"""
목적: SQLite 연결 관리 모듈을 제공한다.
설명: 연결 초기화/종료, 유니코드 lower() 함수 등록, 동시성 친화 PRAGMA 적용을 담당한다.
디자인 패턴: 매니저 패턴
참조: src/definition_store/integrations/db/engines/sqlite/engine.py
"""

from __future__ import annotations

import os
import sqlite3
from pathlib import Path
from typing import Optional

from definition_store.shared.logging import Logger

_MEMORY_DATABASE = ":memory:"


class SqliteConnectionManager:
    """SQLite 연결 관리자."""

    def __init__(self, database_path: str, logger: Logger) -> None:
        self._database_path = database_path
        self._logger = logger
        self._connection: Optional[sqlite3.Connection] = None
        self._busy_timeout_ms = self._read_busy_timeout_ms()

    @property
    def database_path(self) -> str:
        return self._database_path

    @property
    def is_connected(self) -> bool:
        return self._connection is not None

    def connect(self) -> None:
        """SQLite 연결을 초기화한다."""

        if self._connection is not None:
            return
        if self._database_path != _MEMORY_DATABASE:
            Path(self._database_path).parent.mkdir(parents=True, exist_ok=True)
        self._connection = sqlite3.connect(
            self._database_path,
            timeout=self._busy_timeout_ms / 1000.0,
            check_same_thread=False,
        )
        self._connection.row_factory = sqlite3.Row
        self._register_functions()
        self._apply_pragmas()
        self._logger.info(f"SQLite 연결이 초기화되었습니다: {self._database_path}")

    def close(self) -> None:
        """SQLite 연결을 종료한다."""

        if self._connection is None:
            return
        self._connection.close()
        self._connection = None
        self._logger.info("SQLite 연결이 종료되었습니다.")

    def ensure_connection(self) -> sqlite3.Connection:
        """초기화된 SQLite 연결 객체를 반환한다."""

        if self._connection is None:
            raise RuntimeError("SQLite 연결이 초기화되지 않았습니다.")
        return self._connection

    def _register_functions(self) -> None:
        # lower()는 유니코드 대소문자 변환으로 대체된다
        connection = self.ensure_connection()
        connection.create_function("lower", 1, _unicode_lower, deterministic=True)

    def _apply_pragmas(self) -> None:
        connection = self.ensure_connection()
        connection.execute(f"PRAGMA busy_timeout={self._busy_timeout_ms}")
        try:
            connection.execute("PRAGMA journal_mode=WAL")
            connection.execute("PRAGMA synchronous=NORMAL")
        except sqlite3.DatabaseError as error:
            self._logger.warning(f"SQLite PRAGMA 적용 경고: {error}")

    def _read_busy_timeout_ms(self) -> int:
        raw = os.getenv("SQLITE_BUSY_TIMEOUT_MS", "5000")
        try:
            value = int(raw)
        except ValueError:
            return 5000
        return max(0, value)


def _unicode_lower(value: object) -> object:
    if isinstance(value, str):
        return value.lower()
    return value

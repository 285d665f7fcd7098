"""
목적: SQLite 엔진의 기본 CRUD와 페이지 조회 동작을 검증한다.
설명: 테이블 생성, 삽입/조회/삭제, 유일성 위반 변환, 건수/구간 조회 흐름을 확인한다.
디자인 패턴: 테스트 케이스
참조: src/definition_store/integrations/db/engines/sqlite/engine.py, src/definition_store/integrations/db/client.py
"""

from __future__ import annotations

import logging

import pytest

from definition_store.integrations.db import DBClient, SQLiteEngine
from definition_store.integrations.db.base import ColumnSpec, PageRequest, TableSchema
from definition_store.integrations.db.query_builder import FilterBuilder
from definition_store.shared.exceptions import (
    InvalidArgumentError,
    StorageError,
    UniqueConstraintError,
)


_LOGGER = logging.getLogger("tests.crud")


def _log_step(action: str, **context) -> None:
    """CRUD 단계별 동작을 로깅한다."""

    if context:
        payload = ", ".join(f"{key}={value}" for key, value in context.items())
        _LOGGER.info("%s | %s", action, payload)
        return
    _LOGGER.info("%s", action)


def _items_schema() -> TableSchema:
    return TableSchema(
        name="items",
        primary_key="id",
        columns=[
            ColumnSpec(name="id", data_type="TEXT", nullable=False, is_primary=True),
            ColumnSpec(name="owner", data_type="TEXT"),
            ColumnSpec(name="body", data_type="TEXT"),
        ],
    )


def test_sqlite_engine_basic_crud(tmp_path, test_logger) -> None:
    """SQLite CRUD 기본 동작을 검증한다."""

    db_path = tmp_path / "nested" / "test.sqlite"
    _log_step("엔진 생성", db_path=db_path)
    client = DBClient(SQLiteEngine(str(db_path), logger=test_logger))
    _log_step("연결 시작")
    client.connect()
    _log_step("테이블 생성", name="items")
    client.create_table(_items_schema())

    _log_step("행 저장", id="doc-1")
    client.insert("items", {"id": "doc-1", "owner": "alice", "body": "hello"})
    _log_step("행 조회", id="doc-1")
    loaded = client.get("items", "doc-1")
    assert loaded == {"id": "doc-1", "owner": "alice", "body": "hello"}
    assert client.exists("items", "doc-1") is True
    assert client.exists("items", "doc-2") is False

    _log_step("중복 저장", id="doc-1")
    with pytest.raises(UniqueConstraintError) as error_info:
        client.insert("items", {"id": "doc-1", "owner": "bob", "body": "again"})
    assert error_info.value.original is not None

    _log_step("행 삭제", id="doc-1")
    assert client.delete("items", "doc-1") == 1
    assert client.delete("items", "doc-1") == 0
    assert client.get("items", "doc-1") is None
    _log_step("연결 종료")
    client.close()
    assert db_path.exists()


def test_sqlite_fetch_page_counts_independently(sqlite_client) -> None:
    """전체 건수가 페이지 크기와 무관하게 필터 기준으로 계산되는지 확인한다."""

    sqlite_client.create_table(_items_schema())
    for index in range(7):
        owner = "alice" if index % 2 == 0 else "bob"
        sqlite_client.insert(
            "items", {"id": f"item-{index}", "owner": owner, "body": f"body {index}"}
        )
    expression = FilterBuilder.scoped_search("owner", "alice")

    first = sqlite_client.fetch_page("items", PageRequest(page_index=0, page_size=3), expression)
    second = sqlite_client.fetch_page("items", PageRequest(page_index=1, page_size=3), expression)
    wide = sqlite_client.fetch_page("items", PageRequest(page_index=0, page_size=50), expression)

    assert [row["id"] for row in first.items] == ["item-0", "item-2", "item-4"]
    assert [row["id"] for row in second.items] == ["item-6"]
    assert first.total_elements == second.total_elements == wide.total_elements == 4
    assert first.total_pages == 2
    assert first.has_next is True and second.is_last is True
    assert sqlite_client.count("items") == 7


def test_sqlite_search_is_case_insensitive(sqlite_client) -> None:
    """검색 그룹이 대소문자를 무시하고 일치하는지 확인한다."""

    sqlite_client.create_table(_items_schema())
    sqlite_client.insert("items", {"id": "FooJob", "owner": "alice", "body": "x"})
    sqlite_client.insert("items", {"id": "bar", "owner": "alice", "body": "calls FOO"})
    sqlite_client.insert("items", {"id": "baz", "owner": "alice", "body": "none"})

    expression = FilterBuilder.scoped_search("owner", None, ["id", "body"], "foo")
    page = sqlite_client.fetch_page("items", PageRequest(page_size=10), expression)

    assert sorted(row["id"] for row in page.items) == ["FooJob", "bar"]
    assert page.total_elements == 2


def test_sqlite_delete_all_and_drop(sqlite_client) -> None:
    """전체 삭제와 테이블 삭제 후 스키마 등록 해제를 확인한다."""

    sqlite_client.create_table(_items_schema())
    sqlite_client.insert("items", {"id": "a", "owner": "o", "body": ""})
    sqlite_client.insert("items", {"id": "b", "owner": "o", "body": ""})

    assert sqlite_client.delete_all("items") == 2
    sqlite_client.drop_table("items")
    with pytest.raises(InvalidArgumentError):
        sqlite_client.get_schema("items")


def test_sqlite_requires_connection(tmp_path, test_logger) -> None:
    """연결 전 호출은 StorageError로 변환되는지 확인한다."""

    engine = SQLiteEngine(str(tmp_path / "idle.sqlite"), logger=test_logger)

    with pytest.raises(StorageError):
        engine.get(_items_schema(), "x")


def test_sqlite_statement_error_is_wrapped(sqlite_client) -> None:
    """드라이버 예외가 StorageError로 감싸지는지 확인한다."""

    schema = _items_schema()

    with pytest.raises(StorageError) as error_info:
        sqlite_client.engine.get(schema, "missing-table")
    assert error_info.value.code == "STORAGE_ERROR"
    assert "SELECT" in error_info.value.detail.metadata["statement"]

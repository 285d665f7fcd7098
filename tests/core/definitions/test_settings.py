"""
목적: 저장소 설정 로딩과 팩토리 생성을 검증한다.
설명: 환경 변수/JSON 병합, 검증 실패 변환, 엔진 선택과 저장소 생성을 확인한다.
디자인 패턴: 테스트 케이스
참조: src/definition_store/core/definitions/settings.py, src/definition_store/core/definitions/factory.py
"""

from __future__ import annotations

import json

import pytest

from definition_store.core.definitions import (
    AnonymousAccessPolicy,
    DefinitionStoreSettings,
    RequestContext,
    StorageEngine,
    TaskDefinition,
    create_engine,
    create_repository,
    load_settings,
)
from definition_store.integrations.db import PostgresEngine, SQLiteEngine
from definition_store.shared.exceptions import InvalidArgumentError


def test_defaults() -> None:
    """기본 설정값을 확인한다."""

    settings = DefinitionStoreSettings()

    assert settings.engine == StorageEngine.SQLITE
    assert settings.table_name == "TASK_DEFINITIONS"
    assert settings.anonymous_access == AnonymousAccessPolicy.UNSCOPED
    assert (settings.default_page_size, settings.max_page_size) == (20, 200)


def test_load_settings_merges_sources(tmp_path, monkeypatch) -> None:
    """JSON, 환경 변수, 오버라이드 순서로 병합되는지 확인한다."""

    json_path = tmp_path / "store.json"
    json_path.write_text(
        json.dumps({"table_prefix": "JSON_", "max_page_size": 50}),
        encoding="utf-8",
    )
    monkeypatch.setenv("DEFINITION_STORE_ANONYMOUS_ACCESS", "REJECT")
    monkeypatch.setenv("DEFINITION_STORE_MAX_PAGE_SIZE", "80")

    settings = load_settings(
        overrides={"table_suffix": "JOBS"},
        json_path=str(json_path),
    )

    assert settings.table_name == "JSON_JOBS"
    assert settings.max_page_size == 80
    assert settings.anonymous_access == AnonymousAccessPolicy.REJECT


def test_load_settings_reads_env_file(tmp_path) -> None:
    """.env 파일의 접두사 키를 읽는지 확인한다."""

    env_path = tmp_path / ".env"
    env_path.write_text("DEFINITION_STORE_TABLE_SUFFIX=FROM_ENV_FILE\n", encoding="utf-8")

    settings = load_settings(env_file=str(env_path))

    assert settings.table_suffix == "FROM_ENV_FILE"


def test_invalid_settings_are_reported() -> None:
    """검증에 실패한 설정은 InvalidArgumentError로 보고되는지 확인한다."""

    with pytest.raises(InvalidArgumentError):
        load_settings(overrides={"engine": "oracle"})
    with pytest.raises(InvalidArgumentError):
        load_settings(overrides={"default_page_size": 300, "max_page_size": 200})


def test_create_engine_selects_implementation(test_logger) -> None:
    """설정의 엔진 종류에 맞는 구현체를 생성하는지 확인한다."""

    sqlite_engine = create_engine(DefinitionStoreSettings(), test_logger)
    postgres_engine = create_engine(
        DefinitionStoreSettings(engine="postgres", postgres_dsn="postgresql://u@h/db"),
        test_logger,
    )

    assert isinstance(sqlite_engine, SQLiteEngine)
    assert isinstance(postgres_engine, PostgresEngine)
    assert postgres_engine.placeholder == "%s"
    with pytest.raises(InvalidArgumentError):
        create_engine(DefinitionStoreSettings(engine="postgres"), test_logger)


def test_create_repository_round_trip(tmp_path, test_logger) -> None:
    """팩토리로 만든 저장소가 설정 경로의 SQLite에 저장하는지 확인한다."""

    db_path = tmp_path / "factory" / "store.sqlite"
    repository = create_repository(
        DefinitionStoreSettings(database_path=str(db_path)),
        logger=test_logger,
    )
    try:
        repository.save(
            TaskDefinition(name="made", dsl_text="x"),
            RequestContext(principal="alice"),
        )
        assert repository.get("made") is not None
    finally:
        repository.close()
    assert db_path.exists()

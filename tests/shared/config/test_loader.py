"""
목적: 설정 로더의 소스 병합 동작을 검증한다.
설명: JSON 파일, .env 파일, 접두사 환경 변수, 오버라이드의 우선순위와 값 변환을 확인한다.
디자인 패턴: 빌더 패턴
참조: src/definition_store/shared/config/loader.py
"""

from __future__ import annotations

import json
import os

import pytest

from definition_store.shared.config import ConfigLoader


def test_env_values_are_parsed_and_nested(monkeypatch) -> None:
    """접두사 환경 변수가 중첩 키와 타입으로 변환되는지 확인한다."""

    monkeypatch.setenv("APP_TEST_MAX_PAGE_SIZE", "50")
    monkeypatch.setenv("APP_TEST_DB__ECHO", "true")
    monkeypatch.setenv("APP_TEST_POSTGRES_DSN", "null")
    monkeypatch.setenv("OTHER_KEY", "ignored")

    data = ConfigLoader(prefix="APP_TEST_").add_env().build()

    assert data == {"max_page_size": 50, "db": {"echo": True}, "postgres_dsn": None}


def test_later_sources_override_earlier(tmp_path, monkeypatch) -> None:
    """뒤에 추가된 소스와 오버라이드가 앞의 값을 덮어쓰는지 확인한다."""

    json_path = tmp_path / "settings.json"
    json_path.write_text(
        json.dumps({"table_prefix": "JSON_", "engine": "sqlite"}),
        encoding="utf-8",
    )
    env_path = tmp_path / ".env"
    env_path.write_text("APP_TEST_TABLE_PREFIX=ENVFILE_\nUNRELATED=1\n", encoding="utf-8")
    monkeypatch.setenv("APP_TEST_ENGINE", "postgres")

    data = (
        ConfigLoader(prefix="APP_TEST_")
        .add_json_file(str(json_path))
        .add_env_file(str(env_path))
        .add_env()
        .build({"table_suffix": "OVERRIDE"})
    )

    assert data["table_prefix"] == "ENVFILE_"
    assert data["engine"] == "postgres"
    assert data["table_suffix"] == "OVERRIDE"
    assert "unrelated" not in data
    assert "APP_TEST_TABLE_PREFIX" not in os.environ


def test_missing_files(tmp_path) -> None:
    """없는 파일은 건너뛰고, 필수 파일이면 예외가 발생하는지 확인한다."""

    missing = str(tmp_path / "missing.json")
    loader = ConfigLoader(prefix="APP_TEST_")

    assert loader.add_json_file(missing).build() == {}
    with pytest.raises(FileNotFoundError):
        loader.add_json_file(missing, required=True)
    with pytest.raises(FileNotFoundError):
        loader.add_env_file(str(tmp_path / ".env"), required=True)


def test_json_file_must_be_object(tmp_path) -> None:
    """JSON 최상위가 객체가 아니면 예외가 발생하는지 확인한다."""

    json_path = tmp_path / "list.json"
    json_path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ValueError):
        ConfigLoader().add_json_file(str(json_path))

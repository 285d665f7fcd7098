"""
목적: pytest 공통 로깅 훅과 공유 픽스처를 제공한다.
설명: 테스트 시작/종료와 결과를 로깅하고, 임시 SQLite 기반 저장소와 요청 컨텍스트를 준비한다.
디자인 패턴: 테스트 훅
참조: pyproject.toml
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from definition_store.core.definitions import (
    DefinitionStoreSettings,
    RequestContext,
    TaskDefinitionRepository,
)
from definition_store.integrations.db import DBClient, SQLiteEngine
from definition_store.shared.logging import InMemoryLogger


_LOGGER = logging.getLogger("tests")


def _load_env_files() -> None:
    """프로젝트 루트의 .env 파일이 있으면 로딩한다."""

    root = Path(__file__).resolve().parents[1]
    env_path = root / ".env"
    if env_path.exists():
        load_dotenv(env_path, override=False)


def _set_if_missing(key: str, value: str | None) -> None:
    """환경 변수가 없을 때만 값을 설정한다."""

    if not value:
        return
    if not os.getenv(key):
        os.environ[key] = value


def _build_postgres_dsn() -> str | None:
    """PostgreSQL DSN을 조합한다."""

    user = os.getenv("POSTGRES_USER")
    password = os.getenv("POSTGRES_PW")
    host = os.getenv("POSTGRES_HOST", "127.0.0.1")
    port = os.getenv("POSTGRES_PORT", "5432")
    database = os.getenv("POSTGRES_DATABASE")
    if not all([user, password, host, port, database]):
        return None
    return f"postgresql://{user}:{password}@{host}:{port}/{database}"


_load_env_files()
_set_if_missing("POSTGRES_DSN", _build_postgres_dsn())


@pytest.fixture
def test_logger() -> InMemoryLogger:
    """표준 출력 없이 기록만 남기는 로거를 반환한다."""

    return InMemoryLogger(name="tests", emit_stdout=False)


@pytest.fixture
def sqlite_client(tmp_path, test_logger):
    """임시 경로의 SQLite 엔진에 연결된 DBClient를 반환한다."""

    engine = SQLiteEngine(str(tmp_path / "definitions.sqlite"), logger=test_logger)
    client = DBClient(engine)
    client.connect()
    yield client
    client.close()


@pytest.fixture
def repository(sqlite_client, test_logger):
    """임시 SQLite 기반 태스크 정의 저장소를 반환한다."""

    repo = TaskDefinitionRepository(
        db_client=sqlite_client,
        settings=DefinitionStoreSettings(),
        logger=test_logger,
    )
    yield repo
    repo.close()


@pytest.fixture
def alice() -> RequestContext:
    return RequestContext(principal="alice", request_id="req-alice")


@pytest.fixture
def bob() -> RequestContext:
    return RequestContext(principal="bob", request_id="req-bob")


def pytest_sessionstart(session) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 시작을 로깅한다."""

    _LOGGER.info("테스트 세션 시작")


def pytest_sessionfinish(session, exitstatus: int) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 종료를 로깅한다."""

    _LOGGER.info("테스트 세션 종료 (exitstatus=%s)", exitstatus)


def pytest_runtest_logstart(nodeid: str, location) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """각 테스트 시작을 로깅한다."""

    _LOGGER.info("테스트 시작: %s", nodeid)


def pytest_runtest_logreport(report) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 결과를 로깅한다."""

    if report.when != "call":
        return
    if report.passed:
        _LOGGER.info("테스트 완료: %s", report.nodeid)
        return
    if report.skipped:
        _LOGGER.warning("테스트 스킵: %s", report.nodeid)
        return
    _LOGGER.error("테스트 실패: %s", report.nodeid)

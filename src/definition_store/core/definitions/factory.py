"""
목적: 태스크 정의 저장소 생성 팩토리를 제공한다.
설명: 설정의 엔진 종류에 따라 엔진과 DB 클라이언트를 구성하고 저장소를 생성한다.
디자인 패턴: 팩토리 함수 패턴
참조: src/definition_store/core/definitions/settings.py, src/definition_store/core/definitions/repository.py
"""

from __future__ import annotations

from typing import Optional

from definition_store.core.definitions.repository import TaskDefinitionRepository
from definition_store.core.definitions.settings import (
    DefinitionStoreSettings,
    StorageEngine,
    load_settings,
)
from definition_store.integrations.db import DBClient
from definition_store.integrations.db.base import BaseDBEngine
from definition_store.integrations.db.engines.postgres import PostgresEngine
from definition_store.integrations.db.engines.sqlite import SQLiteEngine
from definition_store.shared.exceptions import InvalidArgumentError
from definition_store.shared.logging import Logger, create_default_logger


def create_engine(settings: DefinitionStoreSettings, logger: Logger) -> BaseDBEngine:
    """설정에 맞는 DB 엔진을 생성한다."""

    if settings.engine == StorageEngine.POSTGRES:
        if not settings.postgres_dsn:
            raise InvalidArgumentError(
                "PostgreSQL 엔진에는 postgres_dsn 설정이 필요합니다.",
                argument="postgres_dsn",
            )
        return PostgresEngine(dsn=settings.postgres_dsn, logger=logger)
    return SQLiteEngine(database_path=settings.database_path, logger=logger)


def create_repository(
    settings: Optional[DefinitionStoreSettings] = None,
    logger: Optional[Logger] = None,
) -> TaskDefinitionRepository:
    """설정 기반으로 연결된 태스크 정의 저장소를 생성한다.

    settings가 없으면 load_settings()로 환경 변수 설정을 읽는다.
    생성된 저장소는 DB 클라이언트를 소유하며 close()로 연결을 종료한다.
    """

    resolved = settings or load_settings()
    resolved_logger = logger or create_default_logger("TaskDefinitionRepository")
    client = DBClient(create_engine(resolved, resolved_logger))
    return TaskDefinitionRepository(
        db_client=client,
        settings=resolved,
        logger=resolved_logger,
        owns_client=True,
    )

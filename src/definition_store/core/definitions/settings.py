"""
목적: 태스크 정의 저장소 설정 모델과 로더를 제공한다.
설명: JSON 파일, .env 파일, 접두사 환경 변수, 명시 오버라이드를 병합해 검증된 설정 객체를 만든다.
디자인 패턴: 설정 객체 패턴
참조: src/definition_store/shared/config/loader.py, src/definition_store/core/definitions/factory.py
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, model_validator

from definition_store.core.definitions.const import (
    DEFAULT_DB_PATH,
    DEFAULT_PAGE_SIZE,
    DEFAULT_TABLE_PREFIX,
    DEFAULT_TABLE_SUFFIX,
    MAX_PAGE_SIZE,
)
from definition_store.core.definitions.models import AnonymousAccessPolicy
from definition_store.shared.config import ConfigLoader
from definition_store.shared.exceptions import InvalidArgumentError
from definition_store.shared.logging import Logger


class StorageEngine(str, Enum):
    """지원하는 저장소 엔진."""

    SQLITE = "sqlite"
    POSTGRES = "postgres"


class DefinitionStoreSettings(BaseModel):
    """태스크 정의 저장소 설정.

    Args:
        engine: 사용할 저장소 엔진.
        database_path: SQLite 파일 경로.
        postgres_dsn: PostgreSQL 접속 DSN.
        table_prefix: 테이블 이름 접두사.
        table_suffix: 테이블 이름 접미사.
        anonymous_access: 주체 없는 목록 조회 정책.
        default_page_size: 기본 페이지 크기.
        max_page_size: 허용하는 최대 페이지 크기.
    """

    engine: StorageEngine = StorageEngine.SQLITE
    database_path: str = DEFAULT_DB_PATH
    postgres_dsn: Optional[str] = None
    table_prefix: str = DEFAULT_TABLE_PREFIX
    table_suffix: str = DEFAULT_TABLE_SUFFIX
    anonymous_access: AnonymousAccessPolicy = AnonymousAccessPolicy.UNSCOPED
    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    max_page_size: int = Field(default=MAX_PAGE_SIZE, ge=1)

    @model_validator(mode="after")
    def _check_page_sizes(self) -> "DefinitionStoreSettings":
        if self.default_page_size > self.max_page_size:
            raise ValueError("default_page_size는 max_page_size보다 클 수 없습니다.")
        return self

    @property
    def table_name(self) -> str:
        return f"{self.table_prefix}{self.table_suffix}"


def load_settings(
    overrides: Optional[Mapping[str, Any]] = None,
    env_file: Optional[str] = None,
    json_path: Optional[str] = None,
    logger: Optional[Logger] = None,
) -> DefinitionStoreSettings:
    """설정 소스를 병합해 DefinitionStoreSettings를 생성한다.

    병합 순서는 JSON 파일, .env 파일, 환경 변수, overrides이며 뒤의 값이 우선한다.

    Raises:
        InvalidArgumentError: 병합된 값이 설정 모델 검증에 실패한 경우.
    """

    loader = ConfigLoader(logger=logger)
    if json_path:
        loader.add_json_file(json_path)
    if env_file:
        loader.add_env_file(env_file)
    loader.add_env()
    data = loader.build(overrides)
    try:
        return DefinitionStoreSettings.model_validate(data)
    except ValidationError as error:
        raise InvalidArgumentError(
            f"저장소 설정 검증에 실패했습니다: {error.error_count()}건",
            argument="settings",
        ) from error

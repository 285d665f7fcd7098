"""
목적: 태스크 정의 상수 모듈 공개 API를 제공한다.
설명: 테이블/컬럼 이름과 페이지네이션 기본값을 노출한다.
디자인 패턴: 퍼사드
참조: src/definition_store/core/definitions/const/settings.py
"""

from definition_store.core.definitions.const.settings import (
    BODY_COLUMN,
    CREATOR_COLUMN,
    DEFAULT_DB_PATH,
    DEFAULT_PAGE_SIZE,
    DEFAULT_TABLE_PREFIX,
    DEFAULT_TABLE_SUFFIX,
    MAX_PAGE_SIZE,
    NAME_COLUMN,
    SEARCHABLE_COLUMNS,
)

__all__ = [
    "BODY_COLUMN",
    "CREATOR_COLUMN",
    "DEFAULT_DB_PATH",
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_TABLE_PREFIX",
    "DEFAULT_TABLE_SUFFIX",
    "MAX_PAGE_SIZE",
    "NAME_COLUMN",
    "SEARCHABLE_COLUMNS",
]

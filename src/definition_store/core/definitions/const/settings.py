"""
목적: 태스크 정의 저장소의 설정 상수를 정의한다.
설명: 기본 DB 경로, 테이블 이름 구성 요소, 컬럼 이름, 기본 페이지네이션 값을 제공한다.
디자인 패턴: 상수 객체 패턴
참조: src/definition_store/core/definitions/repository.py, src/definition_store/core/definitions/schema.py
"""

from __future__ import annotations

DEFAULT_DB_PATH = "data/db/definitions.sqlite"

# 테이블 이름은 접두사 + 접미사로 구성된다 (기본값 TASK_DEFINITIONS)
DEFAULT_TABLE_PREFIX = "TASK_"
DEFAULT_TABLE_SUFFIX = "DEFINITIONS"

# 정의 이름(기본 키), 정의 본문, 생성 주체 컬럼
NAME_COLUMN = "DEFINITION_NAME"
BODY_COLUMN = "DEFINITION"
CREATOR_COLUMN = "CREATOR"

# 검색에 사용할 수 있는 공개 컬럼 (CREATOR는 제외)
SEARCHABLE_COLUMNS = (NAME_COLUMN, BODY_COLUMN)

# 목록 조회의 기본 페이지 크기
DEFAULT_PAGE_SIZE = 20
# 목록 조회에서 허용하는 최대 페이지 크기
MAX_PAGE_SIZE = 200

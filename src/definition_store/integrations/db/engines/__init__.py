"""
목적: DB 엔진 구현 패키지를 정의한다.
설명: SQLite/PostgreSQL 엔진 구현체를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/definition_store/integrations/db/engines/sqlite/engine.py, src/definition_store/integrations/db/engines/postgres/engine.py
"""

from definition_store.integrations.db.engines.postgres import PostgresEngine
from definition_store.integrations.db.engines.sqlite import SQLiteEngine

__all__ = ["PostgresEngine", "SQLiteEngine"]

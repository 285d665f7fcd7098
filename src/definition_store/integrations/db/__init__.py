"""
목적: DB 통합 패키지 공개 API를 제공한다.
설명: DB 클라이언트와 엔진 구현체를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/definition_store/integrations/db/client.py
"""

from definition_store.integrations.db.client import DBClient
from definition_store.integrations.db.engines import PostgresEngine, SQLiteEngine

__all__ = ["DBClient", "PostgresEngine", "SQLiteEngine"]

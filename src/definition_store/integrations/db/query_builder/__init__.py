"""
목적: DB 쿼리 빌더 모듈 공개 API를 제공한다.
설명: 구조화 조건 빌더와 쿼리 빌더를 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/definition_store/integrations/db/query_builder/filter_builder.py
"""

from definition_store.integrations.db.query_builder.filter_builder import FilterBuilder
from definition_store.integrations.db.query_builder.query_builder import QueryBuilder

__all__ = ["FilterBuilder", "QueryBuilder"]

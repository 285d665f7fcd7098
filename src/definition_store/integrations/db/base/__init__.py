"""
목적: DB 베이스 모듈 공개 API를 제공한다.
설명: 공통 모델과 엔진 인터페이스를 노출한다.
디자인 패턴: 퍼사드
참조: src/definition_store/integrations/db/base/models.py, src/definition_store/integrations/db/base/engine.py
"""

from definition_store.integrations.db.base.engine import BaseDBEngine
from definition_store.integrations.db.base.models import (
    ColumnSpec,
    FilterCondition,
    FilterExpression,
    FilterGroup,
    FilterLogic,
    FilterOperator,
    Page,
    PageRequest,
    Pagination,
    Query,
    RenderedSQL,
    SortField,
    SortOrder,
    TableSchema,
)

__all__ = [
    "BaseDBEngine",
    "ColumnSpec",
    "FilterCondition",
    "FilterExpression",
    "FilterGroup",
    "FilterLogic",
    "FilterOperator",
    "Page",
    "PageRequest",
    "Pagination",
    "Query",
    "RenderedSQL",
    "SortField",
    "SortOrder",
    "TableSchema",
]

"""
목적: 태스크 정의 저장소를 제공한다.
설명: DBClient 기반으로 정의 저장, 조회, 삭제, 소유자 범위 검색/페이지 조회를 수행하며, db_client 미주입 시 SQLite를 기본으로 사용한다.
디자인 패턴: 저장소 패턴
참조: src/definition_store/integrations/db/client.py, src/definition_store/integrations/db/query_builder/filter_builder.py
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from definition_store.core.definitions.const import CREATOR_COLUMN, SEARCHABLE_COLUMNS
from definition_store.core.definitions.mapper import TaskDefinitionMapper
from definition_store.core.definitions.models import (
    AnonymousAccessPolicy,
    RequestContext,
    SearchPageRequest,
    TaskDefinition,
)
from definition_store.core.definitions.schema import build_task_definition_schema
from definition_store.core.definitions.settings import DefinitionStoreSettings
from definition_store.integrations.db import DBClient
from definition_store.integrations.db.base import (
    FilterExpression,
    Page,
    PageRequest,
    Query,
    SortField,
)
from definition_store.integrations.db.engines.sqlite import SQLiteEngine
from definition_store.integrations.db.query_builder import FilterBuilder
from definition_store.shared.exceptions import (
    DuplicateKeyError,
    InvalidArgumentError,
    PrincipalRequiredError,
    UniqueConstraintError,
)
from definition_store.shared.logging import LogContext, Logger, create_default_logger


class TaskDefinitionRepository:
    """태스크 정의 저장소 구현체.

    소유 주체는 저장 시 CREATOR 컬럼에 기록되고, 목록 조회는 요청 컨텍스트의
    주체로 범위가 제한된다. 기본 키 단건 조회/존재 확인/삭제는 범위 제한 없이 동작한다.

    Args:
        db_client: 주입할 DB 클라이언트. 없으면 settings.database_path의 SQLite를 사용한다.
        settings: 저장소 설정.
        logger: 주입 가능한 로거.
        owns_client: True면 close()에서 클라이언트 연결을 함께 종료한다.
    """

    def __init__(
        self,
        db_client: Optional[DBClient] = None,
        settings: Optional[DefinitionStoreSettings] = None,
        logger: Optional[Logger] = None,
        owns_client: bool = False,
    ) -> None:
        self._settings = settings or DefinitionStoreSettings()
        self._logger = logger or create_default_logger("TaskDefinitionRepository")
        self._mapper = TaskDefinitionMapper()
        self._schema = build_task_definition_schema(
            self._settings.table_prefix,
            self._settings.table_suffix,
        )
        self._table = self._schema.name

        self._owns_client = db_client is None or owns_client
        if db_client is not None:
            self._client = db_client
        else:
            engine = SQLiteEngine(
                database_path=self._settings.database_path,
                logger=self._logger,
            )
            self._client = DBClient(engine)
        self._initialize()

    @property
    def table_name(self) -> str:
        return self._table

    @property
    def settings(self) -> DefinitionStoreSettings:
        return self._settings

    def close(self) -> None:
        """내부 DB 연결을 종료한다."""

        if not self._owns_client:
            return
        self._client.close()

    def page_request(
        self,
        page_index: int = 0,
        page_size: Optional[int] = None,
        sort: Optional[List[SortField]] = None,
    ) -> PageRequest:
        """설정의 기본 페이지 크기를 반영한 페이지 요청을 생성한다."""

        return PageRequest(
            page_index=page_index,
            page_size=page_size or self._settings.default_page_size,
            sort=list(sort or []),
        )

    def save(
        self,
        definition: TaskDefinition,
        context: Optional[RequestContext] = None,
    ) -> TaskDefinition:
        """정의를 생성 주체와 함께 저장한다.

        Raises:
            InvalidArgumentError: definition이 없는 경우.
            PrincipalRequiredError: 컨텍스트에 주체가 없는 경우.
            DuplicateKeyError: 같은 이름이 이미 존재하는 경우.
        """

        if definition is None:
            raise InvalidArgumentError("저장할 정의가 필요합니다.", argument="definition")
        principal = self._principal_of(context)
        if principal is None:
            raise PrincipalRequiredError("save")
        if self._client.exists(self._table, definition.name):
            raise DuplicateKeyError(definition.name)
        try:
            self._client.insert(self._table, self._mapper.to_row(definition, principal))
        except UniqueConstraintError as error:
            raise DuplicateKeyError(definition.name, error) from error
        self._logger.info(
            f"태스크 정의를 저장했습니다: {definition.name}",
            self._log_context(context),
        )
        return definition

    def save_all(
        self,
        definitions: Sequence[TaskDefinition],
        context: Optional[RequestContext] = None,
    ) -> List[TaskDefinition]:
        """정의 목록을 순서대로 저장한다. 실패 시 앞서 저장된 정의는 유지된다."""

        if definitions is None:
            raise InvalidArgumentError("저장할 정의 목록이 필요합니다.", argument="definitions")
        return [self.save(definition, context) for definition in definitions]

    def get(self, name: str) -> Optional[TaskDefinition]:
        """이름으로 정의 1건을 조회한다."""

        self._require_name(name)
        row = self._client.get(self._table, name)
        if row is None:
            return None
        return self._mapper.from_row(row)

    def exists(self, name: str) -> bool:
        """이름의 정의가 존재하는지 확인한다."""

        self._require_name(name)
        return self._client.exists(self._table, name)

    def find_all_by_names(self, names: Sequence[str]) -> List[TaskDefinition]:
        """이름 목록에 포함된 정의를 기본 키 순으로 조회한다."""

        if names is None:
            raise InvalidArgumentError("조회할 이름 목록이 필요합니다.", argument="names")
        if not names:
            return []
        query = Query(
            filter_expression=FilterBuilder()
            .where_in(self._schema.primary_key, list(names))
            .build()
        )
        rows = self._client.fetch(self._table, query)
        return [self._mapper.from_row(row) for row in rows]

    def count(self, context: Optional[RequestContext] = None) -> int:
        """요청 주체 범위의 정의 건수를 반환한다."""

        owner = self._owner_filter(context, "count")
        filter_expression = FilterBuilder().owned_by(CREATOR_COLUMN, owner).build()
        total = self._client.count(self._table, filter_expression)
        self._logger.debug(f"태스크 정의 건수 조회: {total}", self._log_context(context))
        return total

    def delete(
        self,
        definition: TaskDefinition,
        context: Optional[RequestContext] = None,
    ) -> None:
        """정의를 삭제한다. 존재하지 않는 이름은 무시한다."""

        if definition is None:
            raise InvalidArgumentError("삭제할 정의가 필요합니다.", argument="definition")
        self.delete_by_name(definition.name, context)

    def delete_by_name(self, name: str, context: Optional[RequestContext] = None) -> None:
        """이름으로 정의를 삭제한다. 존재하지 않는 이름은 무시한다."""

        self._require_name(name)
        deleted = self._client.delete(self._table, name)
        self._logger.info(
            f"태스크 정의 삭제: {name}",
            self._log_context(context),
            {"deleted": deleted},
        )

    def delete_all(self, context: Optional[RequestContext] = None) -> None:
        """모든 정의를 삭제한다."""

        deleted = self._client.delete_all(self._table)
        self._logger.info(
            "태스크 정의 전체 삭제",
            self._log_context(context),
            {"deleted": deleted},
        )

    def search(
        self,
        request: SearchPageRequest,
        context: Optional[RequestContext] = None,
    ) -> Page[TaskDefinition]:
        """소유자 범위에서 지정 컬럼 부분 일치 검색을 페이지 단위로 수행한다.

        검색 컬럼이 없거나 검색어가 비어 있으면 find_all과 같은 결과를 반환한다.
        전체 건수는 같은 조건의 별도 건수 조회로 계산한다.
        """

        if request is None:
            raise InvalidArgumentError("검색 요청이 필요합니다.", argument="request")
        columns = [self._resolve_search_column(column) for column in request.columns]
        owner = self._owner_filter(context, "search")
        filter_expression = FilterBuilder.scoped_search(
            CREATOR_COLUMN,
            owner,
            columns,
            request.search_query,
        )
        return self._fetch_page(request.pageable, filter_expression, context)

    def find_all(
        self,
        pageable: PageRequest,
        context: Optional[RequestContext] = None,
    ) -> Page[TaskDefinition]:
        """소유자 범위의 정의를 페이지 단위로 조회한다."""

        if pageable is None:
            raise InvalidArgumentError("페이지 요청이 필요합니다.", argument="pageable")
        owner = self._owner_filter(context, "find_all")
        filter_expression = FilterBuilder().owned_by(CREATOR_COLUMN, owner).build()
        return self._fetch_page(pageable, filter_expression, context)

    def _fetch_page(
        self,
        pageable: PageRequest,
        filter_expression: Optional[FilterExpression],
        context: Optional[RequestContext],
    ) -> Page[TaskDefinition]:
        if pageable.page_size > self._settings.max_page_size:
            raise InvalidArgumentError(
                f"페이지 크기는 {self._settings.max_page_size} 이하여야 합니다.",
                argument="page_size",
                value=pageable.page_size,
            )
        page = self._client.fetch_page(self._table, pageable, filter_expression)
        self._logger.debug(
            "태스크 정의 페이지 조회",
            self._log_context(context),
            {
                "page_index": page.page_index,
                "page_size": page.page_size,
                "total_elements": page.total_elements,
            },
        )
        return Page[TaskDefinition](
            items=[self._mapper.from_row(row) for row in page.items],
            page_index=page.page_index,
            page_size=page.page_size,
            total_elements=page.total_elements,
        )

    def _owner_filter(
        self,
        context: Optional[RequestContext],
        operation: str,
    ) -> Optional[str]:
        principal = self._principal_of(context)
        if principal is not None:
            return principal
        if self._settings.anonymous_access == AnonymousAccessPolicy.REJECT:
            raise PrincipalRequiredError(operation)
        return None

    def _resolve_search_column(self, name: str) -> str:
        column = self._schema.resolve_column(name)
        if column not in SEARCHABLE_COLUMNS:
            raise InvalidArgumentError(
                f"검색할 수 없는 컬럼입니다: {name}",
                argument="columns",
                value=name,
            )
        return column

    def _principal_of(self, context: Optional[RequestContext]) -> Optional[str]:
        if context is None:
            return None
        return context.resolved_principal

    def _require_name(self, name: str) -> None:
        if not name:
            raise InvalidArgumentError("정의 이름이 필요합니다.", argument="name")

    def _log_context(self, context: Optional[RequestContext]) -> LogContext:
        if context is None:
            return LogContext(table=self._table)
        return LogContext(
            request_id=context.request_id,
            principal=context.principal,
            table=self._table,
        )

    def _initialize(self) -> None:
        self._client.connect()
        self._client.create_table(self._schema)

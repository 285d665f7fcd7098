"""
목적: 저장소 계층에서 사용하는 이름 있는 예외 종류를 정의한다.
설명: 인자 누락, 키 중복, 주체 누락, 스토리지 실패를 BaseAppException 하위 타입으로 구분한다.
디자인 패턴: 도메인 예외 객체
참조: src/definition_store/shared/exceptions/base.py, src/definition_store/core/definitions/repository.py
"""

from __future__ import annotations

from typing import Any, Optional

from definition_store.shared.exceptions.base import BaseAppException
from definition_store.shared.exceptions.models import ExceptionDetail


class InvalidArgumentError(BaseAppException):
    """필수 인자가 없거나 허용되지 않는 값일 때 발생한다."""

    CODE = "INVALID_ARGUMENT"

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        value: Any = None,
    ) -> None:
        detail = ExceptionDetail.for_argument(
            self.CODE,
            message,
            argument=argument,
            value=value,
            hint="호출 인자를 확인하세요.",
        )
        super().__init__(message, detail)
        self.argument = argument


class DuplicateKeyError(BaseAppException):
    """같은 이름의 정의가 이미 존재할 때 발생한다."""

    CODE = "DUPLICATE_KEY"

    def __init__(self, key: str, original: Optional[Exception] = None) -> None:
        message = (
            f"Cannot register task {key} because another one has already "
            "been registered with the same name"
        )
        detail = ExceptionDetail(
            code=self.CODE,
            cause="이미 같은 이름으로 등록된 정의가 있습니다.",
            hint="다른 이름을 사용하거나 기존 정의를 삭제하세요.",
            metadata={"key": key},
        )
        super().__init__(message, detail, original)
        self.key = key


class PrincipalRequiredError(BaseAppException):
    """소유 주체를 확인할 수 없는 요청에서 발생한다."""

    CODE = "PRINCIPAL_REQUIRED"

    def __init__(self, operation: str) -> None:
        message = f"{operation} 작업에는 인증된 주체가 필요합니다."
        detail = ExceptionDetail(
            code=self.CODE,
            cause="RequestContext.principal 값이 비어 있습니다.",
            metadata={"operation": operation},
        )
        super().__init__(message, detail)
        self.operation = operation


class StorageError(BaseAppException):
    """DB 연결 또는 구문 실행 실패를 감싼다."""

    CODE = "STORAGE_ERROR"

    def __init__(
        self,
        message: str,
        original: Optional[Exception] = None,
        statement: Optional[str] = None,
    ) -> None:
        metadata = {"statement": statement} if statement else {}
        detail = ExceptionDetail(
            code=self.CODE,
            cause=str(original) if original else message,
            metadata=metadata,
        )
        super().__init__(message, detail, original)


class UniqueConstraintError(StorageError):
    """스토리지 계층의 유일성 제약 위반을 표현한다."""

    CODE = "UNIQUE_CONSTRAINT"

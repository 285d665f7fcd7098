"""
목적: 예외 모듈 공개 API를 제공한다.
설명: 예외 상세 모델, 베이스 클래스, 저장소 오류 종류를 노출한다.
디자인 패턴: 퍼사드
참조: src/definition_store/shared/exceptions/base.py, src/definition_store/shared/exceptions/errors.py
"""

from definition_store.shared.exceptions.base import BaseAppException
from definition_store.shared.exceptions.errors import (
    DuplicateKeyError,
    InvalidArgumentError,
    PrincipalRequiredError,
    StorageError,
    UniqueConstraintError,
)
from definition_store.shared.exceptions.models import ExceptionDetail

__all__ = [
    "BaseAppException",
    "ExceptionDetail",
    "InvalidArgumentError",
    "DuplicateKeyError",
    "PrincipalRequiredError",
    "StorageError",
    "UniqueConstraintError",
]

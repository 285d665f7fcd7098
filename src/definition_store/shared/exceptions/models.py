"""
목적: 공통 예외 상세 모델을 정의한다.
설명: 저장소 예외가 공유하는 코드/원인/힌트/메타데이터를 불변 Pydantic 모델로 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/definition_store/shared/exceptions/base.py, src/definition_store/shared/exceptions/errors.py
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExceptionDetail(BaseModel):
    """예외 상세 정보.

    Args:
        code: INVALID_ARGUMENT, DUPLICATE_KEY 같은 예외 종류 코드.
        cause: 직접 원인. 드라이버 예외면 그 메시지를 담는다.
        hint: 호출자가 취할 수 있는 조치.
        metadata: 인자 이름, 정의 이름, 실행 구문 등.
    """

    model_config = ConfigDict(frozen=True)

    code: str
    cause: Optional[str] = None
    hint: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def for_argument(
        cls,
        code: str,
        cause: str,
        argument: Optional[str] = None,
        value: Any = None,
        hint: Optional[str] = None,
    ) -> "ExceptionDetail":
        """인자 이름과 값의 repr을 메타데이터로 담은 상세 모델을 생성한다."""

        metadata: Dict[str, Any] = {}
        if argument is not None:
            metadata["argument"] = argument
        if value is not None:
            metadata["value"] = repr(value)
        return cls(code=code, cause=cause, hint=hint, metadata=metadata)

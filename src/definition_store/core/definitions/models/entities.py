"""
목적: 태스크 정의 도메인 엔티티를 정의한다.
설명: 이름과 DSL 본문으로 구성된 불변 엔티티를 Pydantic 기반으로 제공한다.
디자인 패턴: 엔티티 패턴
참조: src/definition_store/core/definitions/mapper.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TaskDefinition(BaseModel):
    """이름 있는 태스크 정의 엔티티.

    소유 주체는 엔티티에 포함되지 않고 저장 시 CREATOR 컬럼에만 기록된다.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    dsl_text: str = ""

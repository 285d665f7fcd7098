"""
목적: 저장소 설정 로더를 제공한다.
설명: dict/JSON 파일/.env 파일/접두사 환경 변수를 순서대로 병합해 설정 사전을 만든다.
디자인 패턴: 빌더 패턴
참조: src/definition_store/shared/const/__init__.py, src/definition_store/core/definitions/settings.py
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Mapping, Optional

from dotenv import dotenv_values

from definition_store.shared.const import SharedConst
from definition_store.shared.logging import Logger, create_default_logger


class ConfigLoader:
    """설정 로더 구현체이다.

    소스는 추가된 순서대로 병합되며 뒤에 추가된 값이 앞의 값을 덮어쓴다.

    Args:
        prefix: 환경 변수/.env 키에서 읽어 들일 접두사.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        prefix: str = SharedConst.ENV_PREFIX,
        logger: Optional[Logger] = None,
    ) -> None:
        self._prefix = prefix
        self._delimiter = SharedConst.ENV_NESTED_DELIMITER
        self._logger = logger or create_default_logger("ConfigLoader")
        self._sources: list[Dict[str, Any]] = []

    def add_dict(self, data: Optional[Mapping[str, Any]]) -> "ConfigLoader":
        """딕셔너리 설정을 추가한다."""

        if not data:
            return self
        self._sources.append(dict(data))
        return self

    def add_json_file(self, path: str, required: bool = False) -> "ConfigLoader":
        """JSON 파일 설정을 추가한다."""

        if not path:
            raise ValueError("path는 비어 있을 수 없습니다.")
        if not os.path.exists(path):
            if required:
                raise FileNotFoundError(path)
            self._logger.warning(f"설정 파일이 없어 건너뜁니다: {path}")
            return self
        with open(path, "r", encoding=SharedConst.DEFAULT_ENCODING) as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError("JSON 설정 파일 파싱에 실패했습니다.") from exc
        if not isinstance(payload, dict):
            raise ValueError("JSON 설정 파일은 최상위가 객체여야 합니다.")
        self._sources.append(payload)
        return self

    def add_env_file(self, path: str, required: bool = False) -> "ConfigLoader":
        """`.env` 파일에서 접두사가 붙은 키만 읽어 추가한다.

        프로세스 환경 변수는 변경하지 않는다.
        """

        if not os.path.exists(path):
            if required:
                raise FileNotFoundError(path)
            self._logger.warning(f".env 파일이 없어 건너뜁니다: {path}")
            return self
        values = {
            key: value
            for key, value in dotenv_values(path).items()
            if value is not None
        }
        env_data = self._collect(values)
        if env_data:
            self._sources.append(env_data)
        return self

    def add_env(self) -> "ConfigLoader":
        """프로세스 환경 변수 설정을 추가한다."""

        env_data = self._collect(os.environ)
        if env_data:
            self._sources.append(env_data)
        return self

    def build(self, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """수집된 설정을 병합해 반환한다."""

        merged: Dict[str, Any] = {}
        for source in self._sources:
            merged = self._merge(merged, source)
        if overrides:
            merged = self._merge(merged, dict(overrides))
        return merged

    def _collect(self, environ: Mapping[str, str]) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for key, value in environ.items():
            if self._prefix and not key.startswith(self._prefix):
                continue
            trimmed = key[len(self._prefix) :]
            parts = [part.lower() for part in trimmed.split(self._delimiter) if part]
            if not parts:
                continue
            self._assign_nested(data, parts, self._parse_value(value))
        return data

    def _assign_nested(self, root: Dict[str, Any], keys: list[str], value: Any) -> None:
        current = root
        for part in keys[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[keys[-1]] = value

    def _merge(self, base: Dict[str, Any], incoming: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(base)
        for key, value in incoming.items():
            if isinstance(merged.get(key), dict) and isinstance(value, dict):
                merged[key] = self._merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _parse_value(self, raw: str) -> Any:
        lowered = raw.strip().lower()
        if lowered in {"true", "false"}:
            return lowered == "true"
        if lowered in {"null", "none"}:
            return None
        try:
            return int(raw)
        except ValueError:
            pass
        if (raw.startswith("{") and raw.endswith("}")) or (
            raw.startswith("[") and raw.endswith("]")
        ):
            try:
                return json.loads(raw)
            except json.JSONDecodeError:
                return raw
        return raw

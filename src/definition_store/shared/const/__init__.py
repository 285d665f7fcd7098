"""
목적: 공통 상수 집합을 제공한다.
설명: 설정 로더와 로거가 공유하는 기본 상수 값을 정의한다.
디자인 패턴: 상수 객체
참조: src/definition_store/shared/config/loader.py
"""


class SharedConst:
    """공통 상수 집합이다.

    Attributes:
        DEFAULT_ENCODING: 기본 파일 인코딩.
        ENV_PREFIX: 저장소 설정용 환경 변수 접두사.
        ENV_NESTED_DELIMITER: 환경 변수 키를 중첩 경로로 해석하는 구분자.
        LOG_STDOUT_ENV: 로그 표준 출력 여부를 지정하는 환경 변수 이름.
    """

    DEFAULT_ENCODING = "utf-8"
    ENV_PREFIX = "DEFINITION_STORE_"
    ENV_NESTED_DELIMITER = "__"
    LOG_STDOUT_ENV = "LOG_STDOUT"


__all__ = ["SharedConst"]

"""
목적: 공통 모듈 패키지를 정의한다.
설명: 예외, 로깅, 설정, 상수 모듈을 하위 패키지로 제공한다.
디자인 패턴: 패키지 퍼사드
참조: src/definition_store/shared/exceptions, src/definition_store/shared/logging
"""

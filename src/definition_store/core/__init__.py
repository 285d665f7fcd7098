"""도메인 코어 패키지."""

"""외부 저장소 연동 패키지."""

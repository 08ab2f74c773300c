"""cli - Click 기반 명령줄 인터페이스"""

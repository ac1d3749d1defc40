"""서비스 패키지 — 인증 비즈니스 로직 계층.

Service package — Authentication business logic.
Services call repositories for DB operations; routes own the commit.
"""

"""레포지토리 패키지 — 사용자/세션 쿼리 계층.

Repository package — User and session queries.
Each repository extends BaseRepository and adds its own lookups.
"""

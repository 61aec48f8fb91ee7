"""
데이터베이스 어댑터

SQLite 기반 키-값 저장소.
"""

from adapters.db.sqlite_adapter import (
    SQLiteDataStore,
    resolve_db_path,
    create_connection,
    init_schema,
)

__all__ = [
    "SQLiteDataStore",
    "resolve_db_path",
    "create_connection",
    "init_schema",
]

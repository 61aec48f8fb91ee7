"""
메모리 어댑터

프로세스 내 키-값 저장소 (SQLite 대체 백엔드).
"""

from adapters.memory.store import MemoryDataStore

__all__ = [
    "MemoryDataStore",
]

"""
어댑터 레이어

키-값 저장소 백엔드(SQLite, 메모리)와의 연동을 담당.
Protocol 기반 인터페이스로 백엔드 교체 가능.
"""

from adapters.interfaces import IDataStore
from adapters.factory import (
    create_data_store,
    available_backends,
)

__all__ = [
    # Interfaces
    "IDataStore",
    # Factory
    "create_data_store",
    "available_backends",
]

"""
저장소 팩토리

DATA_STORE 값으로 백엔드를 선택하여 생성.
선택된 백엔드 모듈만 임포트하므로
메모리 백엔드 사용 시 aiosqlite 등은 로드되지 않음.
"""

import importlib
import logging

from adapters.interfaces import IDataStore
from core.config.loader import StorageSettings
from core.exceptions import DataStoreConfigError
from core.types import DataStoreKind

logger = logging.getLogger(__name__)


# 백엔드 식별자 → "모듈 경로:클래스 이름"
BACKEND_REGISTRY: dict[str, str] = {
    DataStoreKind.SQLITE.value: "adapters.db.sqlite_adapter:SQLiteDataStore",
    DataStoreKind.MEMORY.value: "adapters.memory.store:MemoryDataStore",
}


def available_backends() -> list[str]:
    """등록된 백엔드 식별자 목록"""
    return sorted(BACKEND_REGISTRY)


def create_data_store(settings: StorageSettings) -> IDataStore:
    """설정에 맞는 저장소 생성 (초기화는 하지 않음)

    Args:
        settings: 저장소 설정

    Returns:
        선택된 백엔드 인스턴스 (DORMANT 상태)

    Raises:
        DataStoreConfigError: 등록되지 않은 DATA_STORE 값
    """
    target = BACKEND_REGISTRY.get(settings.data_store)
    if target is None:
        raise DataStoreConfigError(
            f"알 수 없는 DATA_STORE: {settings.data_store!r} "
            f"(사용 가능: {available_backends()})"
        )

    module_path, class_name = target.split(":")

    # 선택된 백엔드 모듈만 임포트
    module = importlib.import_module(module_path)
    store_class = getattr(module, class_name)

    logger.info(f"Data store selected: {settings.data_store} ({class_name})")

    return store_class(settings)

"""
메모리 저장소

프로세스 내 dict 기반 키-값 저장소.
IDataStore Protocol 준수하여 SQLite 저장소와 교체 가능.
값은 JSON 인코딩 후 다시 디코딩한 네이티브 구조로 보관 (SQLite 저장소와 같은 값 규칙).
"""

import copy
import logging
from typing import Any

from core.config.loader import StorageSettings, load_settings
from core.exceptions import StoreNotInitializedError
from core.types import DataStoreKind, InitResult, StoreState
from core.utils import decode_value, encode_value, validate_key

logger = logging.getLogger(__name__)


class MemoryDataStore:
    """메모리 키-값 저장소

    IDataStore Protocol 구현.
    DATA_STORE=memory 일 때만 READY 전환.
    저장 시 JSON 왕복, 조회 시 deepcopy하여 호출 측이 저장된 값을 변경할 수 없음.

    사용 예시:
    ```python
    store = MemoryDataStore(StorageSettings(data_store="memory"))
    await store.initialize()

    await store.set("a", [1, 2])
    assert await store.get("a") == [1, 2]
    ```
    """

    name: str = DataStoreKind.MEMORY.value

    def __init__(self, settings: StorageSettings | None = None):
        self._settings = settings
        self._data: dict[str, Any] | None = None

    @property
    def state(self) -> StoreState:
        """현재 상태"""
        return StoreState.READY if self._data is not None else StoreState.DORMANT

    @property
    def is_ready(self) -> bool:
        """READY 상태 여부"""
        return self._data is not None

    def __len__(self) -> int:
        return len(self._data) if self._data is not None else 0

    async def initialize(self) -> InitResult:
        """저장소 초기화 (DATA_STORE=memory 일 때만)"""
        if self._data is not None:
            return InitResult(StoreState.READY)

        try:
            settings = self._settings or load_settings()
        except Exception as e:
            logger.exception("Failed to load settings for memory data store")
            return InitResult(StoreState.DORMANT, error=e)

        if settings.data_store != self.name:
            logger.info(f"메모리 저장소 비활성 (DATA_STORE={settings.data_store!r})")
            return InitResult(StoreState.DORMANT)

        self._data = {}
        logger.info("Memory data store initialized")

        return InitResult(StoreState.READY)

    async def close(self) -> None:
        """저장소 해제 (보관 중인 값 폐기)"""
        if self._data is not None:
            self._data = None
            logger.info("메모리 저장소 종료")

    def _require_data(self, key: Any) -> dict[str, Any]:
        if self._data is None:
            raise StoreNotInitializedError("Memory")
        validate_key(key)
        return self._data

    async def get(self, key: str) -> Any | None:
        """값 조회 (없으면 None)"""
        data = self._require_data(key)
        if key not in data:
            return None
        return copy.deepcopy(data[key])

    async def set(self, key: str, value: Any) -> None:
        """값 저장 (덮어쓰기)

        Raises:
            ValueSerializationError: JSON으로 표현할 수 없는 값
        """
        data = self._require_data(key)
        # tuple → list 등 SQLite 저장소와 동일하게 정규화
        data[key] = decode_value(encode_value(value))

    async def delete(self, key: str) -> None:
        """값 삭제 (없는 키는 무시)"""
        data = self._require_data(key)
        data.pop(key, None)

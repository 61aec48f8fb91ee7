"""
의존성 주입

FastAPI의 Depends를 사용한 의존성 관리.
"""

from adapters.interfaces import IDataStore
from core.exceptions import StoreNotInitializedError


# =========================================================================
# 활성 저장소 (lifespan에서 설정)
# =========================================================================

# 앱 시작 시 선택/초기화된 저장소 인스턴스
_data_store: IDataStore | None = None

# 설정된 DATA_STORE 값 (설정 로드 실패 시 None)
_selector: str | None = None


def set_data_store(store: IDataStore | None, selector: str | None = None) -> None:
    """활성 저장소 설정

    lifespan 시작 시 호출하여 전역 인스턴스 설정.
    종료 시 None으로 해제.

    Args:
        store: IDataStore 구현체 또는 None (선택/설정 실패)
        selector: 설정된 DATA_STORE 값
    """
    global _data_store, _selector
    _data_store = store
    _selector = selector


def get_data_store() -> IDataStore:
    """활성 저장소 반환

    Raises:
        StoreNotInitializedError: 저장소가 등록되지 않은 경우
    """
    if _data_store is None:
        raise StoreNotInitializedError("Active")
    return _data_store


def get_selector() -> str | None:
    """설정된 DATA_STORE 값"""
    return _selector


def is_store_ready() -> bool:
    """저장소 사용 가능 여부"""
    return _data_store is not None and _data_store.is_ready

"""
저장소 예외 정의

데이터 연산 중 발생하는 예외 계층.
초기화 실패는 예외가 아닌 InitResult로 전달됨 (core.types 참고).
"""


class StorageError(Exception):
    """저장소 예외 기본 클래스"""

    pass


class StoreNotInitializedError(StorageError):
    """초기화되지 않은 저장소에 접근한 경우"""

    def __init__(self, store_name: str):
        self.store_name = store_name
        super().__init__(f"{store_name} data store not initialized")


class ValueSerializationError(StorageError):
    """값 직렬화/역직렬화 실패"""

    pass


class InvalidKeyError(StorageError, ValueError):
    """키가 비어 있거나 문자열이 아닌 경우"""

    pass


class DataStoreConfigError(StorageError):
    """알 수 없는 백엔드가 선택된 경우"""

    pass

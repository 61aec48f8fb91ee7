"""
어댑터 인터페이스 정의

Protocol 기반으로 정의하여 의존성 주입 및 백엔드 교체 가능.
모든 저장소 백엔드는 이 Protocol을 준수해야 함.
호출 측은 어떤 백엔드가 활성화되어 있는지 알 필요 없음.
"""

from typing import Any, Protocol, runtime_checkable

from core.types import InitResult


@runtime_checkable
class IDataStore(Protocol):
    """키-값 저장소 인터페이스

    키는 빈 문자열이 아닌 str, 값은 JSON 직렬화 가능한 임의의 구조.
    initialize() 전이거나 설정에서 선택되지 않은 경우
    데이터 연산은 StoreNotInitializedError 발생.
    """

    @property
    def name(self) -> str:
        """백엔드 식별자 (DATA_STORE 값과 비교)"""
        ...

    @property
    def is_ready(self) -> bool:
        """READY 상태 여부"""
        ...

    # -------------------------------------------------------------------------
    # 생명주기
    # -------------------------------------------------------------------------

    async def initialize(self) -> InitResult:
        """리소스 초기화

        설정에서 선택된 경우에만 리소스를 연다.
        실패는 예외 대신 InitResult로 반환.

        Returns:
            초기화 결과
        """
        ...

    async def close(self) -> None:
        """리소스 해제 (여러 번 호출해도 안전)"""
        ...

    # -------------------------------------------------------------------------
    # 데이터 연산
    # -------------------------------------------------------------------------

    async def get(self, key: str) -> Any | None:
        """값 조회

        Args:
            key: 조회할 키

        Returns:
            저장된 값 또는 None (키 없음)

        Raises:
            StoreNotInitializedError: 초기화되지 않은 경우
        """
        ...

    async def set(self, key: str, value: Any) -> None:
        """값 저장 (UPSERT)

        Args:
            key: 저장할 키
            value: 저장할 값

        Raises:
            StoreNotInitializedError: 초기화되지 않은 경우
            ValueSerializationError: 직렬화 불가능한 값
        """
        ...

    async def delete(self, key: str) -> None:
        """값 삭제 (없는 키도 성공)

        Args:
            key: 삭제할 키

        Raises:
            StoreNotInitializedError: 초기화되지 않은 경우
        """
        ...

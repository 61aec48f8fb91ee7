"""
타입 정의 모듈

Enum, Dataclass 등 핵심 타입 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class DataStoreKind(str, Enum):
    """데이터 저장소 백엔드 식별자 (DATA_STORE 값)"""

    SQLITE = "sqlite"
    MEMORY = "memory"


class StoreState(str, Enum):
    """저장소 상태

    DORMANT: 리소스 없음 (모든 연산 실패)
    READY: 리소스 열림, 스키마 생성 완료
    """

    DORMANT = "DORMANT"
    READY = "READY"


@dataclass(frozen=True)
class InitResult:
    """저장소 초기화 결과

    initialize()는 예외를 던지지 않고 이 값을 반환.
    호출 측은 state로 성공 여부를 판단하고 error로 원인을 확인.
    """

    state: StoreState
    db_path: Path | None = None
    error: BaseException | None = None

    @property
    def is_ready(self) -> bool:
        """READY 상태 여부"""
        return self.state == StoreState.READY

    @property
    def skipped(self) -> bool:
        """설정에 의해 선택되지 않아 건너뛴 경우"""
        return self.state == StoreState.DORMANT and self.error is None

"""
하드코딩 상수 - 변경될 일이 거의 없는 고정값

중요: 경로는 반드시 pathlib.Path 사용 (Windows/Linux 크로스 플랫폼)
"""

from pathlib import Path


# 프로젝트 루트 (이 파일 기준 2단계 상위: core/constants.py → remote-storage/)
PROJECT_ROOT: Path = Path(__file__).resolve().parent.parent


class EnvVars:
    """환경 변수 이름"""

    DATA_STORE: str = "DATA_STORE"
    DATABASE_PATH: str = "DATABASE_PATH"
    LOG_LEVEL: str = "LOG_LEVEL"
    CONFIG_FILE: str = "STORAGE_CONFIG"


class Defaults:
    """기본값 상수"""

    DATA_STORE: str = "memory"

    WEB_HOST: str = "127.0.0.1"
    WEB_PORT: int = 8000

    LOG_LEVEL: str = "INFO"

    # SQLite 잠금 대기 시간 (밀리초)
    BUSY_TIMEOUT_MS: int = 30000


class Paths:
    """프로젝트 경로 상수 (pathlib 사용 - OS 독립적)"""

    # 디렉토리
    CONFIG_DIR: Path = PROJECT_ROOT / "config"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # 설정 파일
    SETTINGS_FILE: Path = CONFIG_DIR / "settings.yaml"

    # DB 파일 (작업 디렉토리 기준 상대 경로)
    DEFAULT_DB: Path = Path("data") / "database.sqlite"


class KvSchema:
    """kv 테이블 스키마"""

    TABLE: str = "kv"
    INDEX: str = "key_index"

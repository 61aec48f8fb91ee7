"""
pytest 공통 fixture 정의

설정 싱글턴 초기화, 환경 변수 격리, 임시 설정 파일
"""

from pathlib import Path

import pytest

from core.config.loader import Settings, StorageSettings
from core.constants import EnvVars


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """테스트마다 설정 싱글턴과 저장소 관련 환경 변수 초기화"""
    for name in (
        EnvVars.DATA_STORE,
        EnvVars.DATABASE_PATH,
        EnvVars.LOG_LEVEL,
    ):
        monkeypatch.delenv(name, raising=False)

    # 실제 config/settings.yaml의 영향을 받지 않도록 없는 파일을 지정
    monkeypatch.setenv(EnvVars.CONFIG_FILE, str(tmp_path / "absent-settings.yaml"))

    Settings.reset()
    yield
    Settings.reset()


@pytest.fixture
def sqlite_settings(tmp_path: Path) -> StorageSettings:
    """sqlite 선택 설정 (존재하지 않는 하위 디렉토리 경로)"""
    return StorageSettings(
        data_store="sqlite",
        database_path=tmp_path / "tmp" / "test.db",
    )


@pytest.fixture
def memory_settings() -> StorageSettings:
    """memory 선택 설정"""
    return StorageSettings(data_store="memory")


@pytest.fixture
def temp_settings_file(tmp_path: Path) -> Path:
    """테스트용 settings.yaml 파일 생성"""
    settings_content = """# 테스트용 settings.yaml
data_store: sqlite
database_path: "./data/from-yaml.sqlite"
log_level: debug
"""
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text(settings_content, encoding="utf-8")
    return settings_path


@pytest.fixture
def temp_settings_file_invalid(tmp_path: Path) -> Path:
    """형식이 잘못된 settings.yaml 파일 생성"""
    settings_path = tmp_path / "settings_invalid.yaml"
    settings_path.write_text("data_store: [sqlite, memory\n", encoding="utf-8")
    return settings_path

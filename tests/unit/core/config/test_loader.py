"""
core/config/loader.py 테스트

환경 변수 / settings.yaml 로드 및 우선순위 테스트
"""

from pathlib import Path

import pytest

from core.config.loader import (
    Settings,
    SettingsLoadError,
    StorageSettings,
    get_settings,
    load_settings,
    load_settings_file,
)
from core.constants import Defaults, EnvVars


class TestStorageSettings:
    """StorageSettings 데이터클래스 테스트"""

    def test_defaults(self) -> None:
        """기본 생성"""
        settings = StorageSettings(data_store="sqlite")

        assert settings.database_path is None
        assert settings.log_level == "INFO"

    def test_frozen(self) -> None:
        """불변성 확인"""
        settings = StorageSettings(data_store="sqlite")

        with pytest.raises(AttributeError):
            settings.data_store = "memory"  # type: ignore


class TestLoadSettingsFile:
    """load_settings_file 테스트"""

    def test_missing_file(self, tmp_path: Path) -> None:
        """없는 파일 → 빈 dict"""
        assert load_settings_file(tmp_path / "nope.yaml") == {}

    def test_valid_file(self, temp_settings_file: Path) -> None:
        """정상 파일"""
        data = load_settings_file(temp_settings_file)

        assert data["data_store"] == "sqlite"

    def test_empty_file(self, tmp_path: Path) -> None:
        """빈 파일 → 빈 dict"""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_settings_file(path) == {}

    def test_invalid_yaml(self, temp_settings_file_invalid: Path) -> None:
        """파싱 실패"""
        with pytest.raises(SettingsLoadError, match="파싱 실패"):
            load_settings_file(temp_settings_file_invalid)

    def test_not_mapping(self, tmp_path: Path) -> None:
        """최상위가 리스트"""
        path = tmp_path / "list.yaml"
        path.write_text("- sqlite\n- memory\n", encoding="utf-8")

        with pytest.raises(SettingsLoadError):
            load_settings_file(path)


class TestLoadSettings:
    """load_settings 테스트"""

    def test_defaults(self, tmp_path: Path) -> None:
        """환경 변수/파일 없음 → 기본값"""
        settings = load_settings(tmp_path / "nope.yaml", environ={})

        assert settings.data_store == Defaults.DATA_STORE
        assert settings.database_path is None
        assert settings.log_level == "INFO"

    def test_environment(self, tmp_path: Path) -> None:
        """환경 변수 로드"""
        settings = load_settings(
            tmp_path / "nope.yaml",
            environ={
                EnvVars.DATA_STORE: "sqlite",
                EnvVars.DATABASE_PATH: "./tmp/test.db",
                EnvVars.LOG_LEVEL: "debug",
            },
        )

        assert settings.data_store == "sqlite"
        assert settings.database_path == Path("./tmp/test.db")
        assert settings.log_level == "DEBUG"

    def test_selector_kept_verbatim(self, tmp_path: Path) -> None:
        """DATA_STORE 값은 정규화하지 않음 (대소문자/공백 유지)"""
        settings = load_settings(
            tmp_path / "nope.yaml",
            environ={EnvVars.DATA_STORE: "SQLite "},
        )

        assert settings.data_store == "SQLite "

    def test_file(self, temp_settings_file: Path) -> None:
        """settings.yaml 로드"""
        settings = load_settings(temp_settings_file, environ={})

        assert settings.data_store == "sqlite"
        assert settings.database_path == Path("./data/from-yaml.sqlite")
        assert settings.log_level == "DEBUG"

    def test_environment_overrides_file(self, temp_settings_file: Path) -> None:
        """환경 변수가 파일보다 우선"""
        settings = load_settings(
            temp_settings_file,
            environ={EnvVars.DATA_STORE: "memory"},
        )

        assert settings.data_store == "memory"
        assert settings.database_path == Path("./data/from-yaml.sqlite")

    def test_config_file_from_environment(self, temp_settings_file: Path) -> None:
        """STORAGE_CONFIG로 파일 위치 지정"""
        settings = load_settings(
            environ={EnvVars.CONFIG_FILE: str(temp_settings_file)},
        )

        assert settings.data_store == "sqlite"

    def test_empty_environment_value_ignored(self, tmp_path: Path) -> None:
        """빈 환경 변수 → 기본값"""
        settings = load_settings(
            tmp_path / "nope.yaml",
            environ={EnvVars.DATA_STORE: "", EnvVars.DATABASE_PATH: ""},
        )

        assert settings.data_store == Defaults.DATA_STORE
        assert settings.database_path is None


class TestSettings:
    """Settings 싱글턴 테스트"""

    def test_singleton(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """같은 인스턴스 반환"""
        monkeypatch.setenv(EnvVars.DATA_STORE, "sqlite")

        first = get_settings()
        second = get_settings()

        assert first is second
        assert first.data_store == "sqlite"
        assert first.storage.data_store == "sqlite"

    def test_reset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """reset 후 다시 로드"""
        monkeypatch.setenv(EnvVars.DATA_STORE, "sqlite")
        assert get_settings().data_store == "sqlite"

        monkeypatch.setenv(EnvVars.DATA_STORE, "memory")
        Settings.reset()

        assert get_settings().data_store == "memory"

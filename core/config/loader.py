"""
설정 로더

환경 변수 + settings.yaml(선택) 로드 및 저장소 설정 생성
우선순위: 환경 변수 > settings.yaml > 기본값
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

import yaml

from core.constants import Defaults, EnvVars, Paths


@dataclass(frozen=True)
class StorageSettings:
    """저장소 설정

    불변 데이터 구조로 설정 변경 방지

    data_store: 백엔드 선택값 (sqlite / memory)
    database_path: SQLite 파일 경로 오버라이드 (None이면 기본 경로)
    """

    data_store: str
    database_path: Path | None = None
    log_level: str = Defaults.LOG_LEVEL


class SettingsLoadError(Exception):
    """설정 파일 로드 실패 예외"""

    pass


def load_settings_file(path: Path | None = None) -> dict:
    """settings.yaml 파일 로드

    Args:
        path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        설정 dict (파일이 없으면 빈 dict)

    Raises:
        SettingsLoadError: 형식이 잘못된 경우
    """
    if path is None:
        path = Paths.SETTINGS_FILE

    # 설정 파일은 선택 사항
    if not path.exists():
        return {}

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SettingsLoadError(f"settings.yaml 파싱 실패: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SettingsLoadError(
            f"settings.yaml 최상위는 mapping이어야 합니다: {type(data).__name__}"
        )

    return data


def load_settings(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> StorageSettings:
    """저장소 설정 로드

    Args:
        path: settings.yaml 경로 (None이면 STORAGE_CONFIG 또는 기본 경로)
        environ: 환경 변수 (None이면 os.environ)

    Returns:
        StorageSettings 인스턴스

    Raises:
        SettingsLoadError: settings.yaml 형식이 잘못된 경우
    """
    if environ is None:
        environ = os.environ

    if path is None and environ.get(EnvVars.CONFIG_FILE):
        path = Path(environ[EnvVars.CONFIG_FILE])

    data = load_settings_file(path)

    data_store = environ.get(EnvVars.DATA_STORE) or data.get("data_store")
    if not data_store:
        data_store = Defaults.DATA_STORE

    database_path = environ.get(EnvVars.DATABASE_PATH) or data.get("database_path")

    log_level = (
        environ.get(EnvVars.LOG_LEVEL)
        or data.get("log_level")
        or Defaults.LOG_LEVEL
    )

    return StorageSettings(
        data_store=str(data_store),
        database_path=Path(database_path) if database_path else None,
        log_level=str(log_level).upper(),
    )


class Settings:
    """애플리케이션 설정 (싱글턴 패턴)

    환경 변수와 settings.yaml을 로드하고 관련 설정을 제공
    """

    _instance: "Settings | None" = None
    _settings: StorageSettings | None = None

    def __new__(cls, settings_path: Path | None = None) -> "Settings":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings_path: Path | None = None) -> None:
        if self._settings is None:
            self._settings = load_settings(settings_path)

    @property
    def storage(self) -> StorageSettings:
        """저장소 설정 원본"""
        assert self._settings is not None
        return self._settings

    @property
    def data_store(self) -> str:
        """백엔드 선택값"""
        assert self._settings is not None
        return self._settings.data_store

    @property
    def database_path(self) -> Path | None:
        """SQLite 경로 오버라이드"""
        assert self._settings is not None
        return self._settings.database_path

    @property
    def log_level(self) -> str:
        """콘솔 로그 레벨"""
        assert self._settings is not None
        return self._settings.log_level

    @classmethod
    def reset(cls) -> None:
        """싱글턴 인스턴스 초기화 (테스트용)"""
        cls._instance = None
        cls._settings = None


def get_settings(settings_path: Path | None = None) -> Settings:
    """Settings 인스턴스 반환

    Args:
        settings_path: settings.yaml 경로 (None이면 기본 경로 사용)

    Returns:
        Settings 싱글턴 인스턴스
    """
    return Settings(settings_path)

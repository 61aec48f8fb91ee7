"""
SQLite 어댑터

단일 kv 테이블 기반 키-값 저장소.
DATA_STORE=sqlite 일 때만 DB 파일을 열고 스키마를 생성.

주의: 값은 JSON 텍스트로 저장 (core.utils.json_codec)
"""

import logging
from pathlib import Path
from typing import Any

import aiosqlite

from core.config.loader import StorageSettings, load_settings
from core.constants import Defaults, KvSchema, Paths
from core.exceptions import StoreNotInitializedError
from core.types import DataStoreKind, InitResult, StoreState
from core.utils import decode_value, encode_value, validate_key

logger = logging.getLogger(__name__)


def resolve_db_path(override: Path | str | None = None) -> Path:
    """DB 경로 반환

    Args:
        override: DATABASE_PATH 오버라이드 (None이면 기본 경로)

    Returns:
        DB 파일 경로 (Path 타입)
    """
    if override:
        return Path(override)
    return Paths.DEFAULT_DB


async def create_connection(db_path: Path | str) -> aiosqlite.Connection:
    """SQLite 연결 생성 (WAL 모드)

    부모 디렉토리가 없으면 생성 후 연결.
    DB 파일이 없으면 SQLite가 새로 생성.

    Args:
        db_path: DB 파일 경로

    Returns:
        aiosqlite 연결 객체
    """
    db_path = Path(db_path)

    # 디렉토리가 없으면 생성
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(str(db_path))

    try:
        # WAL 모드 설정
        await conn.execute("PRAGMA journal_mode=WAL")

        # 동시 접근 설정
        await conn.execute(f"PRAGMA busy_timeout={Defaults.BUSY_TIMEOUT_MS}")
    except Exception:
        await conn.close()
        raise

    logger.debug(f"SQLite 연결 생성: {db_path}")

    return conn


async def init_schema(conn: aiosqlite.Connection) -> None:
    """스키마 초기화 (kv 테이블 + 인덱스)

    IF NOT EXISTS로 여러 번 실행해도 기존 데이터 유지.
    key_index는 PRIMARY KEY와 중복이지만 기존 DB 파일과의 호환을 위해 유지.

    Args:
        conn: 연결된 aiosqlite Connection
    """
    await conn.execute(
        f"CREATE TABLE IF NOT EXISTS {KvSchema.TABLE} (key TEXT PRIMARY KEY, value TEXT)"
    )
    await conn.execute(
        f"CREATE INDEX IF NOT EXISTS {KvSchema.INDEX} ON {KvSchema.TABLE} (key)"
    )
    await conn.commit()


class SQLiteDataStore:
    """SQLite 키-값 저장소

    IDataStore Protocol 구현.
    initialize() 전에는 DORMANT 상태이며 모든 데이터 연산이 실패.
    초기화 실패는 로그만 남기고 DORMANT 유지 (프로세스는 계속 실행).

    Args:
        settings: 저장소 설정 (None이면 initialize() 시점에 환경에서 로드)

    사용 예시:
    ```python
    store = SQLiteDataStore(StorageSettings(data_store="sqlite"))
    result = await store.initialize()

    if result.is_ready:
        await store.set("a", {"n": 1})
        value = await store.get("a")  # {"n": 1}

    await store.close()
    ```
    """

    name: str = DataStoreKind.SQLITE.value

    def __init__(self, settings: StorageSettings | None = None):
        self._settings = settings
        self._conn: aiosqlite.Connection | None = None
        self._db_path: Path | None = None

    @property
    def state(self) -> StoreState:
        """현재 상태"""
        return StoreState.READY if self._conn is not None else StoreState.DORMANT

    @property
    def is_ready(self) -> bool:
        """READY 상태 여부"""
        return self._conn is not None

    @property
    def db_path(self) -> Path | None:
        """열린 DB 파일 경로 (DORMANT면 None)"""
        return self._db_path

    # -------------------------------------------------------------------------
    # 생명주기
    # -------------------------------------------------------------------------

    async def initialize(self) -> InitResult:
        """DB 파일 열기 및 스키마 생성

        DATA_STORE가 sqlite가 아니면 아무것도 하지 않고 DORMANT 반환.
        디렉토리 생성, 파일 열기, 스키마 생성 중 예외는 삼키고
        InitResult.error로 전달.

        Returns:
            초기화 결과
        """
        if self._conn is not None:
            return InitResult(StoreState.READY, self._db_path)

        try:
            settings = self._settings or load_settings()
        except Exception as e:
            logger.exception("Failed to load settings for sqlite data store")
            return InitResult(StoreState.DORMANT, error=e)

        # sqlite로 명시적으로 설정된 경우에만 초기화
        if settings.data_store != self.name:
            logger.info(f"SQLite 저장소 비활성 (DATA_STORE={settings.data_store!r})")
            return InitResult(StoreState.DORMANT)

        db_path = resolve_db_path(settings.database_path)
        conn: aiosqlite.Connection | None = None

        try:
            conn = await create_connection(db_path)
            await init_schema(conn)
        except Exception as e:
            logger.exception(f"Failed to initialize sqlite database at {db_path}")
            if conn is not None:
                await self._close_quietly(conn)
            return InitResult(StoreState.DORMANT, db_path, e)

        self._conn = conn
        self._db_path = db_path

        logger.info(f"Sqlite database initialized at {db_path}")

        return InitResult(StoreState.READY, db_path)

    async def close(self) -> None:
        """연결 종료"""
        if self._conn is not None:
            await self._conn.close()
            self._conn = None
            logger.info("SQLite 연결 종료")

    @staticmethod
    async def _close_quietly(conn: aiosqlite.Connection) -> None:
        try:
            await conn.close()
        except Exception as e:
            logger.warning(f"초기화 실패 후 연결 종료 실패: {e}")

    def _require_conn(self, key: Any) -> aiosqlite.Connection:
        """READY 상태 및 키 검증 후 연결 반환"""
        if self._conn is None:
            raise StoreNotInitializedError("Sqlite")
        validate_key(key)
        return self._conn

    # -------------------------------------------------------------------------
    # 데이터 연산
    # -------------------------------------------------------------------------

    async def get(self, key: str) -> Any | None:
        """값 조회 (없으면 None)"""
        conn = self._require_conn(key)

        async with conn.execute(
            f"SELECT value FROM {KvSchema.TABLE} WHERE key = ?",
            (key,),
        ) as cursor:
            row = await cursor.fetchone()

        if row is None:
            return None

        return decode_value(row[0])

    async def set(self, key: str, value: Any) -> None:
        """값 저장 (UPSERT)

        직렬화 실패 시 SQL 실행 전에 예외 발생.
        """
        conn = self._require_conn(key)
        value_json = encode_value(value)

        await conn.execute(
            f"""
            INSERT INTO {KvSchema.TABLE} (key, value) VALUES (?, ?)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value
            """,
            (key, value_json),
        )
        await conn.commit()

    async def delete(self, key: str) -> None:
        """값 삭제 (없는 키는 무시)"""
        conn = self._require_conn(key)

        await conn.execute(
            f"DELETE FROM {KvSchema.TABLE} WHERE key = ?",
            (key,),
        )
        await conn.commit()

    # -------------------------------------------------------------------------
    # 컨텍스트 매니저
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> "SQLiteDataStore":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

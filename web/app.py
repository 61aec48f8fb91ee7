"""
FastAPI 애플리케이션

라우터 등록 및 앱 설정.
시작 시 DATA_STORE로 선택된 저장소만 생성/초기화.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from adapters.factory import create_data_store
from adapters.interfaces import IDataStore
from core.config.loader import Settings, SettingsLoadError, get_settings
from core.constants import Defaults
from core.exceptions import (
    DataStoreConfigError,
    InvalidKeyError,
    StoreNotInitializedError,
)
from core.logging import setup_logging
from core.types import InitResult
from web.dependencies import set_data_store
from web.routes import data, health

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기 관리

    설정 오류나 저장소 초기화 실패는 로그만 남기고 서버는 계속 실행.
    이 경우 저장소를 등록하지 않거나 DORMANT로 두어 데이터 API는 503 응답.
    """
    settings: Settings | None = None
    settings_error: SettingsLoadError | None = None

    try:
        settings = get_settings()
    except SettingsLoadError as e:
        settings_error = e

    # 로깅 설정 (콘솔 + 파일)
    setup_logging(
        "server",
        console_level=settings.log_level if settings else Defaults.LOG_LEVEL,
    )

    store: IDataStore | None = None
    result: InitResult | None = None

    if settings_error is not None:
        logger.error(f"설정 로드 실패, 저장소 비활성화: {settings_error}")
    else:
        try:
            store = create_data_store(settings.storage)
        except DataStoreConfigError as e:
            logger.error(f"저장소 선택 실패, 저장소 비활성화: {e}")

    # 시작 시 - 선택된 저장소 초기화 (실패해도 서버는 계속 실행)
    if store is not None:
        result = await store.initialize()

        if result.is_ready:
            logger.info(f"Data store ready: {store.name}")
        else:
            logger.warning(
                f"Data store {store.name} not ready, data API will respond 503"
            )

    app.state.init_result = result
    set_data_store(store, selector=settings.data_store if settings else None)

    yield

    # 종료 시 - 리소스 정리
    set_data_store(None)
    if store is not None:
        await store.close()


app = FastAPI(
    title="Remote Storage API",
    description="키-값 원격 저장소 API (SQLite / Memory)",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS 설정 (개발용)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =========================================================================
# 예외 핸들러
# =========================================================================

@app.exception_handler(StoreNotInitializedError)
async def store_not_initialized_handler(
    request: Request,
    exc: StoreNotInitializedError,
) -> JSONResponse:
    """초기화되지 않은 저장소 접근 → 503"""
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.exception_handler(InvalidKeyError)
async def invalid_key_handler(
    request: Request,
    exc: InvalidKeyError,
) -> JSONResponse:
    """잘못된 키 → 400"""
    return JSONResponse(status_code=400, content={"detail": str(exc)})


# =========================================================================
# API 라우터 등록
# =========================================================================

app.include_router(health.router)
app.include_router(data.router)

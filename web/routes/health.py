"""
헬스 체크 엔드포인트

GET /health - 서버 및 저장소 상태 확인
"""

from fastapi import APIRouter, Depends

from web.dependencies import get_selector, is_store_ready
from web.models.responses import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    selector: str | None = Depends(get_selector),
) -> HealthResponse:
    """서버 상태 확인

    저장소가 DORMANT이거나 등록되지 않아도 서버는 ok로 응답 (ready=False).

    Returns:
        HealthResponse: status, data_store, ready 정보
    """
    return HealthResponse(
        status="ok",
        data_store=selector,
        ready=is_store_ready(),
    )

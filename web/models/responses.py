"""
응답 스키마 (Pydantic)

Web API 응답 데이터 직렬화
"""

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """헬스 체크 응답"""

    status: str = Field(default="ok", description="서비스 상태")
    data_store: str | None = Field(
        default=None, description="설정된 DATA_STORE 값 (설정 로드 실패 시 None)"
    )
    ready: bool = Field(..., description="저장소 READY 여부")


class DataResponse(BaseModel):
    """값 조회 응답"""

    key: str = Field(..., description="키")
    value: Any = Field(..., description="저장된 값")

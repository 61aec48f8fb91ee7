"""
Web 모델 패키지

Pydantic 스키마 정의
"""

from web.models.requests import DataSetRequest
from web.models.responses import DataResponse, HealthResponse

__all__ = [
    # Requests
    "DataSetRequest",
    # Responses
    "DataResponse",
    "HealthResponse",
]

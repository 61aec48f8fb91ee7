"""
요청 스키마 (Pydantic)

Web API 요청 데이터 검증
"""

from typing import Any

from pydantic import BaseModel, Field


class DataSetRequest(BaseModel):
    """값 저장 요청

    value는 JSON으로 표현 가능한 임의의 값.
    """

    value: Any = Field(..., description="저장할 값")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"value": {"n": 1}},
                {"value": [1, 2, 3]},
                {"value": "text"},
            ]
        }
    }

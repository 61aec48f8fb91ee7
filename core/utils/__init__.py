"""
유틸리티 패키지

값 직렬화, 키 검증 등 공통 유틸리티
"""

from core.utils.json_codec import (
    encode_value,
    decode_value,
)
from core.utils.keys import validate_key

__all__ = [
    "encode_value",
    "decode_value",
    "validate_key",
]

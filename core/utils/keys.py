"""
키 검증 유틸리티
"""

from typing import Any

from core.exceptions import InvalidKeyError


def validate_key(key: Any) -> str:
    """저장소 키 검증

    Args:
        key: 검증할 키

    Returns:
        검증된 키 (그대로 반환)

    Raises:
        InvalidKeyError: 문자열이 아니거나 빈 문자열인 경우
    """
    if not isinstance(key, str):
        raise InvalidKeyError(f"키는 문자열이어야 합니다: {type(key).__name__}")
    if not key:
        raise InvalidKeyError("키가 비어 있습니다")
    return key

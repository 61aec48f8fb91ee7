"""
JSON 값 코덱

저장소 값 <-> JSON 텍스트 변환.
텍스트 컬럼에 값을 저장하는 백엔드(SQLite)만 사용하며,
네이티브 구조로 저장하는 백엔드는 이 경계를 거치지 않음.
"""

import json
from typing import Any

from core.exceptions import ValueSerializationError


def encode_value(value: Any) -> str:
    """값을 JSON 텍스트로 직렬화

    Args:
        value: JSON 직렬화 가능한 값 (dict, list, str, 숫자, bool, None)

    Returns:
        JSON 문자열

    Raises:
        ValueSerializationError: 직렬화 불가능한 값 (NaN/Infinity 포함)
    """
    try:
        return json.dumps(value, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise ValueSerializationError(
            f"값을 JSON으로 직렬화할 수 없습니다: {type(value).__name__}"
        ) from e


def decode_value(text: str) -> Any:
    """JSON 텍스트를 값으로 역직렬화

    Args:
        text: JSON 문자열

    Returns:
        역직렬화된 값 (형태 검증 없음)

    Raises:
        ValueSerializationError: 잘못된 JSON
    """
    try:
        return json.loads(text)
    except (TypeError, ValueError) as e:
        raise ValueSerializationError(f"저장된 값을 해석할 수 없습니다: {e}") from e

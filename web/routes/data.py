"""
Data 라우트

키-값 조회/저장/삭제 API
활성 백엔드와 무관하게 IDataStore 인터페이스만 사용.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, Response

from adapters.interfaces import IDataStore
from core.exceptions import ValueSerializationError
from web.dependencies import get_data_store
from web.models.requests import DataSetRequest
from web.models.responses import DataResponse

router = APIRouter(prefix="/api", tags=["Data"])


@router.get("/data/{key}", response_model=DataResponse)
async def get_data(
    key: str = Path(..., description="키"),
    store: IDataStore = Depends(get_data_store),
) -> DataResponse:
    """값 조회"""
    value = await store.get(key)

    if value is None:
        raise HTTPException(
            status_code=404,
            detail=f"Key not found: {key}"
        )

    return DataResponse(key=key, value=value)


@router.put("/data/{key}", status_code=204)
async def set_data(
    request: DataSetRequest,
    key: str = Path(..., description="키"),
    store: IDataStore = Depends(get_data_store),
) -> Response:
    """값 저장 (UPSERT)"""
    try:
        await store.set(key, request.value)
    except ValueSerializationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return Response(status_code=204)


@router.delete("/data/{key}", status_code=204)
async def delete_data(
    key: str = Path(..., description="키"),
    store: IDataStore = Depends(get_data_store),
) -> Response:
    """값 삭제 (없는 키도 204)"""
    await store.delete(key)

    return Response(status_code=204)

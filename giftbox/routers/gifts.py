from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query, Request, Response

from giftbox.schemas.gift import GiftIn, GiftOut
from giftbox.services.gift_service import GiftStore

router = APIRouter(prefix="/gifts", tags=["gifts"])
TOTAL_COUNT_HEADER = "X-Total-Count"


def _get_gift_store(request: Request) -> GiftStore:
    store = getattr(getattr(request.app, "state", None), "gift_store", None)
    if not store:
        raise RuntimeError("GiftStore not configured")
    return store


@router.get("", response_model=List[GiftOut])
def list_gifts(
    request: Request,
    response: Response,
    query: Optional[str] = None,
    query_type: Optional[str] = Query(None, alias="queryType"),
    position: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=0),
):
    store = _get_gift_store(request)
    if size is None:
        size = request.app.state.settings.default_page_size
    response.headers[TOTAL_COUNT_HEADER] = str(store.count())
    return store.list(query_type, query, position, size)


@router.post("", response_model=GiftOut, status_code=201)
def create_gift(payload: GiftIn, request: Request):
    return _get_gift_store(request).create(payload.to_gift())


@router.get("/{gift_id}", response_model=GiftOut)
def read_gift(gift_id: str, request: Request):
    return _get_gift_store(request).read(gift_id)


@router.put("/{gift_id}", response_model=GiftOut)
def update_gift(gift_id: str, payload: GiftIn, request: Request):
    return _get_gift_store(request).update(gift_id, payload.to_gift())


@router.delete("/{gift_id}", status_code=204)
def delete_gift(gift_id: str, request: Request):
    _get_gift_store(request).delete(gift_id)
    return Response(status_code=204)

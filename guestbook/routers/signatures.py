from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse

from guestbook.domain.signatures import LookupResult, NotFound
from guestbook.repositories.signature_store import SignatureStore

router = APIRouter(prefix="/signatures", tags=["signatures"])

NOT_FOUND_BODY = "not found"


def get_signature_store(request: Request) -> SignatureStore:
    store = getattr(getattr(request.app, "state", None), "signature_store", None)
    if not store:
        raise RuntimeError("SignatureStore not configured")
    return store


def _lookup_response(result: LookupResult) -> JSONResponse:
    if isinstance(result, NotFound):
        return JSONResponse(NOT_FOUND_BODY, status_code=status.HTTP_404_NOT_FOUND)
    return JSONResponse(result.signature.to_dict(), status_code=status.HTTP_200_OK)


@router.get("")
def list_signatures(store: SignatureStore = Depends(get_signature_store)):
    signatures = store.get_all()
    return JSONResponse([signature.to_dict() for signature in signatures])


@router.post("")
def create_signature(payload: Any = Body(None), store: SignatureStore = Depends(get_signature_store)):
    # request bodies are handed to the store as parsed, without validation
    created = store.create(payload)
    return JSONResponse(created.to_dict(), status_code=status.HTTP_201_CREATED)


@router.get("/{signature_id}")
def get_signature(signature_id: str, store: SignatureStore = Depends(get_signature_store)):
    return _lookup_response(store.get_by_id(signature_id))


@router.patch("/{signature_id}")
def update_signature(
    signature_id: str,
    payload: Any = Body(None),
    store: SignatureStore = Depends(get_signature_store),
):
    return _lookup_response(store.update_by_id(signature_id, payload))


@router.delete("/{signature_id}")
def delete_signature(signature_id: str, store: SignatureStore = Depends(get_signature_store)):
    return _lookup_response(store.delete_by_id(signature_id))

"""Artwork upload and kanban board endpoints — thin HTTP layer.

Business logic lives in :mod:`swagsuite.services.artwork`. Upload checks
(type, emptiness, size) are HTTP concerns and stay here.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.config import settings
from swagsuite.core.deps import get_current_user_id, get_upload_dir
from swagsuite.core.exceptions import BadRequestError, PayloadTooLargeError
from swagsuite.core.response import DataResponse, ItemsResponse
from swagsuite.db.base import get_db
from swagsuite.schemas.artwork import (
    ArtworkCardCreate,
    ArtworkCardMove,
    ArtworkCardOut,
    ArtworkCardUpdate,
    ArtworkColumnCreate,
    ArtworkColumnOut,
    ArtworkFileOut,
)
from swagsuite.services.artwork import ArtworkBoardService, ArtworkFileService


router = APIRouter(prefix="/api/artwork", tags=["Artwork"])

_ALLOWED_CONTENT_TYPES = {
    "image/jpeg",
    "image/png",
    "image/gif",
    "application/pdf",
    "application/postscript",
    "image/svg+xml",
}
# Illustrator/EPS files often arrive as application/octet-stream
_ALLOWED_EXTENSIONS = (".ai", ".eps")


# ---------------------------------------------------------------------------
# Shared file validation (HTTP concern — stays in the router)
# ---------------------------------------------------------------------------

def _check_file_type(file: UploadFile) -> None:
    """Accept if either the content type or the extension is allowed."""
    if (file.content_type or "") in _ALLOWED_CONTENT_TYPES:
        return
    if (file.filename or "").lower().endswith(_ALLOWED_EXTENSIONS):
        return
    raise BadRequestError(
        "Invalid file type. Only images, PDFs, and design files are allowed."
    )


async def _validate_and_read_file(file: UploadFile) -> bytes:
    _check_file_type(file)

    contents = await file.read()

    if len(contents) == 0:
        raise BadRequestError("Uploaded file is empty.")

    if len(contents) > settings.max_upload_size_bytes:
        raise PayloadTooLargeError(
            f"File size exceeds the {settings.max_upload_size_mb}MB limit."
        )

    return contents


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

@router.post("/upload", response_model=DataResponse[ArtworkFileOut], status_code=status.HTTP_201_CREATED)
async def upload_artwork(
    file: UploadFile = File(...),
    order_id: Optional[str] = Form(default=None, alias="orderId"),
    company_id: Optional[str] = Form(default=None, alias="companyId"),
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
    upload_dir: str = Depends(get_upload_dir),
):
    """Upload an artwork file (image, PDF, PostScript, SVG, AI or EPS)."""
    contents = await _validate_and_read_file(file)
    artwork = await ArtworkFileService(session, upload_dir, user_id).store(
        contents,
        original_name=file.filename or "upload",
        mime_type=file.content_type,
        order_id=order_id,
        company_id=company_id,
    )
    return {"data": ArtworkFileOut.model_validate(artwork)}


@router.get("", response_model=ItemsResponse[ArtworkFileOut])
async def list_artwork(
    order_id: Optional[str] = Query(default=None, alias="orderId"),
    company_id: Optional[str] = Query(default=None, alias="companyId"),
    session: AsyncSession = Depends(get_db),
    upload_dir: str = Depends(get_upload_dir),
):
    files = await ArtworkFileService(session, upload_dir).list_files(order_id, company_id)
    return {"data": [ArtworkFileOut.model_validate(f) for f in files]}


# ---------------------------------------------------------------------------
# Board columns
# ---------------------------------------------------------------------------

@router.get("/columns", response_model=ItemsResponse[ArtworkColumnOut])
async def list_columns(session: AsyncSession = Depends(get_db)):
    columns = await ArtworkBoardService(session).list_columns()
    return {"data": [ArtworkColumnOut.model_validate(c) for c in columns]}


@router.post("/columns", response_model=DataResponse[ArtworkColumnOut], status_code=status.HTTP_201_CREATED)
async def create_column(body: ArtworkColumnCreate, session: AsyncSession = Depends(get_db)):
    column = await ArtworkBoardService(session).create_column(body)
    return {"data": ArtworkColumnOut.model_validate(column)}


@router.post("/columns/initialize", response_model=ItemsResponse[ArtworkColumnOut])
async def initialize_columns(session: AsyncSession = Depends(get_db)):
    """Create the default workflow columns if the board is empty."""
    columns = await ArtworkBoardService(session).initialize_columns()
    return {"data": [ArtworkColumnOut.model_validate(c) for c in columns]}


# ---------------------------------------------------------------------------
# Board cards
# ---------------------------------------------------------------------------

@router.get("/cards", response_model=ItemsResponse[ArtworkCardOut])
async def list_cards(
    column_id: Optional[str] = Query(default=None, alias="columnId"),
    session: AsyncSession = Depends(get_db),
):
    cards = await ArtworkBoardService(session).list_cards(column_id)
    return {"data": [ArtworkCardOut.model_validate(c) for c in cards]}


@router.post("/cards", response_model=DataResponse[ArtworkCardOut], status_code=status.HTTP_201_CREATED)
async def create_card(body: ArtworkCardCreate, session: AsyncSession = Depends(get_db)):
    card = await ArtworkBoardService(session).create_card(body)
    return {"data": ArtworkCardOut.model_validate(card)}


@router.patch("/cards/{card_id}", response_model=DataResponse[ArtworkCardOut])
async def update_card(
    card_id: str,
    body: ArtworkCardUpdate,
    session: AsyncSession = Depends(get_db),
):
    card = await ArtworkBoardService(session).update_card(card_id, body)
    return {"data": ArtworkCardOut.model_validate(card)}


@router.patch("/cards/{card_id}/move", response_model=DataResponse[ArtworkCardOut])
async def move_card(
    card_id: str,
    body: ArtworkCardMove,
    session: AsyncSession = Depends(get_db),
):
    """Move a card to ``columnId`` at ``position``; both columns are renumbered."""
    card = await ArtworkBoardService(session).move_card(card_id, body)
    return {"data": ArtworkCardOut.model_validate(card)}


@router.delete("/cards/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_card(card_id: str, session: AsyncSession = Depends(get_db)):
    await ArtworkBoardService(session).delete_card(card_id)

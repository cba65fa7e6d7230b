"""Artwork file storage and the artwork kanban board.

Card positions are 1-based and kept contiguous within each column: every
create, move and delete renumbers the affected columns.
"""


import asyncio
import logging
import uuid
from pathlib import Path

from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.exceptions import NotFoundError
from swagsuite.domain.artwork import ArtworkCard, ArtworkColumn, ArtworkFile
from swagsuite.repositories.artwork import (
    ArtworkCardRepository,
    ArtworkColumnRepository,
    ArtworkFileRepository,
)
from swagsuite.schemas.artwork import (
    ArtworkCardCreate,
    ArtworkCardMove,
    ArtworkCardUpdate,
    ArtworkColumnCreate,
)

logger = logging.getLogger(__name__)

# (name, color) in board order
DEFAULT_COLUMNS: tuple[tuple[str, str], ...] = (
    ("Pending", "#6B7280"),
    ("In Progress", "#3B82F6"),
    ("Proof Sent", "#F59E0B"),
    ("Changes Requested", "#EF4444"),
    ("Approved", "#10B981"),
)


class ArtworkFileService:
    def __init__(self, session: AsyncSession, upload_dir: str | Path, user_id: str | None = None):
        self._repo = ArtworkFileRepository(session)
        self._upload_dir = Path(upload_dir)
        self._user_id = user_id

    async def store(
        self,
        contents: bytes,
        original_name: str,
        mime_type: str | None,
        order_id: str | None = None,
        company_id: str | None = None,
    ) -> ArtworkFile:
        """Write the upload to disk under a random name and record it."""
        file_name = uuid.uuid4().hex
        path = self._upload_dir / file_name
        await asyncio.to_thread(self._write, path, contents)
        try:
            artwork = await self._repo.create(
                order_id=order_id or None,
                company_id=company_id or None,
                file_name=file_name,
                original_name=original_name,
                file_size=len(contents),
                mime_type=mime_type,
                file_path=str(path),
                uploaded_by=self._user_id,
            )
        except Exception:
            # No row, no file
            await asyncio.to_thread(path.unlink, missing_ok=True)
            raise
        logger.info("Stored artwork %r as %s (%d bytes)", original_name, path, len(contents))
        return artwork

    @staticmethod
    def _write(path: Path, contents: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(contents)

    async def list_files(
        self, order_id: str | None = None, company_id: str | None = None
    ) -> list[ArtworkFile]:
        return await self._repo.list_all(
            filters={"order_id": order_id, "company_id": company_id},
            order_by=(ArtworkFile.created_at.desc(),),
        )


class ArtworkBoardService:
    def __init__(self, session: AsyncSession):
        self._session = session
        self._columns = ArtworkColumnRepository(session)
        self._cards = ArtworkCardRepository(session)

    # ------------------------------------------------------------------
    # Columns
    # ------------------------------------------------------------------

    async def list_columns(self) -> list[ArtworkColumn]:
        return await self._columns.ordered()

    async def create_column(self, data: ArtworkColumnCreate) -> ArtworkColumn:
        position = data.position or await self._columns.max_position() + 1
        return await self._columns.create(name=data.name, color=data.color, position=position)

    async def initialize_columns(self) -> list[ArtworkColumn]:
        """Create the default workflow columns on an empty board."""
        existing = await self._columns.ordered()
        if existing:
            return existing
        for position, (name, color) in enumerate(DEFAULT_COLUMNS, start=1):
            await self._columns.create(name=name, color=color, position=position, is_default=True)
        logger.info("Initialized artwork board with %d columns", len(DEFAULT_COLUMNS))
        return await self._columns.ordered()

    async def _require_column(self, column_id: str) -> ArtworkColumn:
        column = await self._columns.get_by_id(column_id)
        if not column:
            raise NotFoundError("Artwork column", column_id)
        return column

    # ------------------------------------------------------------------
    # Cards
    # ------------------------------------------------------------------

    async def list_cards(self, column_id: str | None = None) -> list[ArtworkCard]:
        return await self._cards.ordered(column_id)

    async def get_card(self, card_id: str) -> ArtworkCard:
        card = await self._cards.get_by_id(card_id)
        if not card:
            raise NotFoundError("Artwork card", card_id)
        return card

    async def create_card(self, data: ArtworkCardCreate) -> ArtworkCard:
        await self._require_column(data.column_id)
        position = await self._cards.max_position(data.column_id) + 1
        return await self._cards.create(**data.model_dump(exclude_none=True), position=position)

    async def update_card(self, card_id: str, data: ArtworkCardUpdate) -> ArtworkCard:
        _ = await self.get_card(card_id)
        updated = await self._cards.update(
            card_id, **data.model_dump(exclude_none=True, exclude_unset=True)
        )
        return updated  # type: ignore[return-value]

    async def move_card(self, card_id: str, data: ArtworkCardMove) -> ArtworkCard:
        """Place a card at ``data.position`` in ``data.column_id``.

        Positions past the end of the column are clamped to the end.
        """
        card = await self.get_card(card_id)
        await self._require_column(data.column_id)
        source_column_id = card.column_id

        target = [c for c in await self._cards.in_column(data.column_id) if c.id != card.id]
        index = min(data.position, len(target) + 1) - 1
        target.insert(index, card)
        card.column_id = data.column_id
        self._renumber(target)

        if source_column_id != data.column_id:
            remaining = [c for c in await self._cards.in_column(source_column_id) if c.id != card.id]
            self._renumber(remaining)

        await self._session.flush()
        await self._session.refresh(card)
        return card

    async def delete_card(self, card_id: str) -> None:
        card = await self.get_card(card_id)
        column_id = card.column_id
        await self._cards.delete(card_id)
        self._renumber(await self._cards.in_column(column_id))
        await self._session.flush()

    @staticmethod
    def _renumber(cards: list[ArtworkCard]) -> None:
        for position, card in enumerate(cards, start=1):
            if card.position != position:
                card.position = position

import logging
from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from roster_service.db import models
from roster_service.schemas import player as player_schema
from .store import commit_unique, parse_id

logger = logging.getLogger(__name__)

# --- CRUD for Player ---
async def get_player(db: AsyncSession, player_id) -> Optional[models.Player]:
    parsed_id = parse_id(player_id)
    if parsed_id is None:
        return None
    stmt = select(models.Player).filter(models.Player.id == parsed_id)
    result = await db.execute(stmt)
    return result.scalars().first()

async def get_players(db: AsyncSession) -> List[models.Player]:
    stmt = select(models.Player).order_by(models.Player.created_at)
    result = await db.execute(stmt)
    return list(result.scalars().all())

async def create_player(db: AsyncSession, player: player_schema.PlayerCreate) -> models.Player:
    db_player = models.Player(**player.model_dump())
    db.add(db_player)
    await commit_unique(db, "player", "email", player.email)
    await db.refresh(db_player)
    logger.info(f"Created player {db_player.id} ({db_player.email})")
    return db_player

async def update_player(
    db: AsyncSession, player_id, changes: player_schema.PlayerUpdate
) -> Optional[models.Player]:
    """Apply the fields present in `changes`; returns None when the player does not exist."""
    db_player = await get_player(db, player_id)
    if db_player is None:
        return None
    for field, value in changes.model_dump(exclude_unset=True).items():
        if value is None:
            # name and email are required columns; an explicit null leaves them as they are
            continue
        setattr(db_player, field, value)
    await commit_unique(db, "player", "email", db_player.email)
    await db.refresh(db_player)
    logger.info(f"Updated player {db_player.id}")
    return db_player

async def delete_player(db: AsyncSession, player_id) -> Optional[models.Player]:
    """Delete one player and return it, or None if there was nothing to delete."""
    db_player = await get_player(db, player_id)
    if db_player is None:
        return None
    await db.delete(db_player)
    await db.commit()
    logger.info(f"Deleted player {db_player.id}")
    return db_player

async def remove_players(db: AsyncSession, **filters) -> int:
    """Delete every player matching `filters` (column=value); no filters removes all."""
    stmt = delete(models.Player)
    for column, value in filters.items():
        stmt = stmt.where(getattr(models.Player, column) == value)
    result = await db.execute(stmt)
    await db.commit()
    logger.info(f"Removed {result.rowcount} player(s)")
    return result.rowcount

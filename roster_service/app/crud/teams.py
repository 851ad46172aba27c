import logging
import uuid
from typing import List, Optional

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from roster_service.db import models
from roster_service.schemas import team as team_schema
from roster_service.app.errors import HierarchyCycleError, MissingReferenceError, RosterError
from .store import commit_unique, parse_id

logger = logging.getLogger(__name__)

# --- CRUD for Team ---
async def get_team(db: AsyncSession, team_id) -> Optional[models.Team]:
    parsed_id = parse_id(team_id)
    if parsed_id is None:
        return None
    stmt = select(models.Team).filter(models.Team.id == parsed_id)
    result = await db.execute(stmt)
    return result.scalars().first()

async def get_teams(db: AsyncSession) -> List[models.Team]:
    stmt = select(models.Team).order_by(models.Team.created_at)
    result = await db.execute(stmt)
    return list(result.scalars().all())

async def get_children(db: AsyncSession, team_id) -> List[models.Team]:
    """Teams whose parent is `team_id`. The relation is resolved here, at query time."""
    parsed_id = parse_id(team_id)
    if parsed_id is None:
        return []
    stmt = select(models.Team).filter(models.Team.parent == parsed_id).order_by(models.Team.created_at)
    result = await db.execute(stmt)
    return list(result.scalars().all())

async def get_ancestors(db: AsyncSession, team_id) -> List[models.Team]:
    """Walk parent links upward from `team_id`; nearest parent first, root last.

    Stops early if the stored links already loop, so it always terminates.
    """
    ancestors: List[models.Team] = []
    team = await get_team(db, team_id)
    seen = {team.id} if team else set()
    while team is not None and team.parent is not None and team.parent not in seen:
        team = await get_team(db, team.parent)
        if team is None:
            break
        seen.add(team.id)
        ancestors.append(team)
    return ancestors

async def _check_parent(db: AsyncSession, team_id: Optional[uuid.UUID], parent_id: Optional[uuid.UUID]) -> None:
    if parent_id is None:
        return
    if team_id is not None and parent_id == team_id:
        raise HierarchyCycleError(team_id)
    parent = await get_team(db, parent_id)
    if parent is None:
        raise MissingReferenceError("TEAM", parent_id)
    if team_id is None:
        return
    # A parent that descends from this team would close a loop
    for ancestor in await get_ancestors(db, parent_id):
        if ancestor.id == team_id:
            raise HierarchyCycleError(team_id)

async def create_team(db: AsyncSession, team: team_schema.TeamCreate) -> models.Team:
    await _check_parent(db, None, team.parent)
    db_team = models.Team(**team.model_dump())
    db.add(db_team)
    await commit_unique(db, "team", "name", team.name, reference=("TEAM", team.parent))
    await db.refresh(db_team)
    logger.info(f"Created team {db_team.id} ({db_team.name!r}), parent={db_team.parent}")
    return db_team

async def save_team(db: AsyncSession, db_team: models.Team) -> models.Team:
    """Persist changes made to a loaded (or newly built) Team instance.

    A rejected parent rolls the session back, which expires `db_team`;
    refresh it before reading it again.
    """
    try:
        await _check_parent(db, db_team.id, db_team.parent)
    except RosterError:
        await db.rollback()
        raise
    db.add(db_team)
    await commit_unique(db, "team", "name", db_team.name, reference=("TEAM", db_team.parent))
    await db.refresh(db_team)
    return db_team

async def update_team(
    db: AsyncSession, team_id, changes: team_schema.TeamUpdate
) -> Optional[models.Team]:
    """Rename a team or move it under a new parent; None when the team does not exist.

    The cycle check reads the hierarchy before writing, so two concurrent
    moves (A under B, B under A) can each pass it and store a loop.
    get_ancestors stops on such loops rather than hanging.
    """
    db_team = await get_team(db, team_id)
    if db_team is None:
        return None
    updates = changes.model_dump(exclude_unset=True)
    if "parent" in updates:
        await _check_parent(db, db_team.id, updates["parent"])
        # an explicit null detaches the team and makes it a root
        db_team.parent = updates["parent"]
    if updates.get("name") is not None:
        db_team.name = updates["name"]
    await commit_unique(db, "team", "name", db_team.name, reference=("TEAM", db_team.parent))
    await db.refresh(db_team)
    logger.info(f"Updated team {db_team.id}")
    return db_team

async def delete_team(db: AsyncSession, team_id) -> Optional[models.Team]:
    """Delete one team; its children stay, with their parent cleared."""
    db_team = await get_team(db, team_id)
    if db_team is None:
        return None
    # Not every store enforces ON DELETE SET NULL (SQLite without foreign_keys pragma)
    for child in await get_children(db, db_team.id):
        child.parent = None
    await db.delete(db_team)
    await db.commit()
    logger.info(f"Deleted team {db_team.id}")
    return db_team

async def remove_teams(db: AsyncSession, **filters) -> int:
    """Delete every team matching `filters` (column=value); no filters removes all."""
    stmt = delete(models.Team)
    for column, value in filters.items():
        stmt = stmt.where(getattr(models.Team, column) == value)
    result = await db.execute(stmt)
    await db.commit()
    logger.info(f"Removed {result.rowcount} team(s)")
    return result.rowcount

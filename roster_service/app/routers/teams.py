from fastapi import APIRouter, Depends
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from roster_service.schemas import team as team_schema
from roster_service.schemas import error as error_schema
from ..dependencies import get_db
from ..errors import NotFoundError
from .. import crud

router = APIRouter(
    prefix="/api/teams",
    tags=["Teams"],
    responses={
        404: {"model": error_schema.ErrorMessage, "description": "Parent team not found"},
        409: {"model": error_schema.ErrorMessage, "description": "Name in use, or parent would create a cycle"},
    },
)

@router.get("", response_model=List[team_schema.Team])
async def read_teams_endpoint(db: AsyncSession = Depends(get_db)):
    return await crud.get_teams(db)

@router.post("", response_model=team_schema.Team)
async def create_team_endpoint(
    team: team_schema.TeamCreate,
    db: AsyncSession = Depends(get_db)
):
    return await crud.create_team(db=db, team=team)

@router.get("/{team_id}", response_model=team_schema.Team)
async def read_team_endpoint(team_id: str, db: AsyncSession = Depends(get_db)):
    db_team = await crud.get_team(db, team_id=team_id)
    if db_team is None:
        raise NotFoundError("TEAM", team_id)
    return db_team

@router.get("/{team_id}/children", response_model=List[team_schema.Team])
async def read_team_children_endpoint(team_id: str, db: AsyncSession = Depends(get_db)):
    """Direct sub-teams of a team; an empty list for leaves and unknown ids."""
    return await crud.get_children(db, team_id=team_id)

@router.put("/{team_id}", response_model=team_schema.Team)
async def update_team_endpoint(
    team_id: str,
    changes: team_schema.TeamUpdate,
    db: AsyncSession = Depends(get_db)
):
    """
    Rename a team or move it in the hierarchy.
    - **parent**: new parent id, or `null` to make the team a root.
    """
    db_team = await crud.update_team(db, team_id=team_id, changes=changes)
    if db_team is None:
        raise NotFoundError("TEAM", team_id)
    return db_team

@router.delete("/{team_id}", response_model=team_schema.Team)
async def delete_team_endpoint(team_id: str, db: AsyncSession = Depends(get_db)):
    db_team = await crud.delete_team(db, team_id=team_id)
    if db_team is None:
        raise NotFoundError("TEAM", team_id)
    return db_team

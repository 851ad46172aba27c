from fastapi import APIRouter, Depends
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession

from roster_service.schemas import player as player_schema
from roster_service.schemas import error as error_schema
from ..dependencies import get_db
from ..errors import NotFoundError
from .. import crud

router = APIRouter(
    prefix="/api/players",
    tags=["Players"],
    responses={409: {"model": error_schema.ErrorMessage, "description": "Email already in use"}},
)

# Absent players are reported in the body with status 200, not with a 404.
# The id is kept as a plain string so malformed ids get the same answer.


@router.get("", response_model=List[player_schema.Player])
async def read_players_endpoint(db: AsyncSession = Depends(get_db)):
    return await crud.get_players(db)

@router.post("", response_model=player_schema.Player)
async def create_player_endpoint(
    player: player_schema.PlayerCreate,
    db: AsyncSession = Depends(get_db)
):
    return await crud.create_player(db=db, player=player)

@router.get("/{player_id}", response_model=player_schema.Player)
async def read_player_endpoint(player_id: str, db: AsyncSession = Depends(get_db)):
    db_player = await crud.get_player(db, player_id=player_id)
    if db_player is None:
        raise NotFoundError("PLAYER", player_id)
    return db_player

@router.put("/{player_id}", response_model=player_schema.Player)
async def update_player_endpoint(
    player_id: str,
    changes: player_schema.PlayerUpdate,
    db: AsyncSession = Depends(get_db)
):
    db_player = await crud.update_player(db, player_id=player_id, changes=changes)
    if db_player is None:
        raise NotFoundError("PLAYER", player_id)
    return db_player

@router.delete("/{player_id}", response_model=player_schema.Player)
async def delete_player_endpoint(player_id: str, db: AsyncSession = Depends(get_db)):
    db_player = await crud.delete_player(db, player_id=player_id)
    if db_player is None:
        raise NotFoundError("PLAYER", player_id)
    return db_player

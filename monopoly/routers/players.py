from fastapi import APIRouter, Depends
from typing import List
import logging

from monopoly.database import Database, get_db
from monopoly.responses import data_or_404
from monopoly.schemas import Player, PlayerId, PlayerInput

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("", response_model=List[Player])
async def read_players(db: Database = Depends(get_db)):
    # Always a list, never None, so no 404 case here
    return await db.many_or_none("SELECT * FROM Player")

@router.get("/{player_id}", response_model=Player, responses={404: {"description": "Player not found"}})
async def read_player(player_id: int, db: Database = Depends(get_db)):
    logger.info("Fetching player with ID: %s", player_id)
    player = await db.one_or_none("SELECT * FROM Player WHERE id=:id", {"id": player_id})
    if player is None:
        logger.warning("Player %s not found.", player_id)
    return data_or_404(player)

@router.put("/{player_id}", response_model=PlayerId, responses={404: {"description": "Player not found"}})
async def update_player(player_id: int, player: PlayerInput, db: Database = Depends(get_db)):
    """Update a player's email and name, returning its id (404 if it doesn't exist)."""
    data = await db.one_or_none(
        "UPDATE Player SET email=:email, name=:name WHERE id=:id RETURNING id",
        {"id": player_id, "email": player.email, "name": player.name},
    )
    return data_or_404(data)

@router.post("", response_model=PlayerId)
async def create_player(player: PlayerInput, db: Database = Depends(get_db)):
    """Create a player and return the id the database assigned to it."""
    data = await db.one(
        "INSERT INTO Player(email, name) VALUES (:email, :name) RETURNING id",
        {"email": player.email, "name": player.name},
    )
    logger.info("Created player %s", data["id"])
    return data

@router.delete("/{player_id}", response_model=PlayerId, responses={404: {"description": "Player not found"}})
async def delete_player(player_id: int, db: Database = Depends(get_db)):
    """Delete a player.

    The player's PlayerGame rows go first, in the same transaction, so a failed
    player delete leaves them untouched.
    """
    async with db.transaction() as tx:
        await tx.none("DELETE FROM PlayerGame WHERE playerID=:id", {"id": player_id})
        data = await tx.one_or_none("DELETE FROM Player WHERE id=:id RETURNING id", {"id": player_id})

    if data is None:
        logger.warning("Player %s not found.", player_id)
    else:
        logger.info("Deleted player %s", player_id)
    return data_or_404(data)

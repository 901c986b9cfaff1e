from fastapi import APIRouter, Depends
from typing import List
import logging

from monopoly.database import Database, get_db
from monopoly.responses import data_or_404
from monopoly.schemas import Game, GameId, GamePlayerScore

router = APIRouter()
logger = logging.getLogger(__name__)

GAME_PLAYERS_SQL = """
    SELECT p.id, p.name, pg.score
    FROM PlayerGame pg
    JOIN Player p ON pg.playerID = p.id
    WHERE pg.gameID = :id
    ORDER BY p.id
"""


@router.get("", response_model=List[Game])
async def read_games(db: Database = Depends(get_db)):
    return await db.many_or_none("SELECT * FROM Game ORDER BY id")

@router.get("/{game_id}", response_model=List[GamePlayerScore])
async def read_game_players(game_id: int, db: Database = Depends(get_db)):
    """Players and scores for one game, by player id.

    Returns [] both for a game nobody played and for an id with no game at all;
    the game row itself is not looked up.
    """
    return await db.many_or_none(GAME_PLAYERS_SQL, {"id": game_id})

@router.delete("/{game_id}", response_model=GameId, responses={404: {"description": "Game not found"}})
async def delete_game(game_id: int, db: Database = Depends(get_db)):
    async with db.transaction() as tx:
        await tx.none("DELETE FROM PlayerGame WHERE gameID=:id", {"id": game_id})
        data = await tx.one_or_none("DELETE FROM Game WHERE id=:id RETURNING id", {"id": game_id})

    if data is None:
        logger.warning("Game %s not found.", game_id)
    return data_or_404(data)

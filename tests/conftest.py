from datetime import datetime

import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import text
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from monopoly.config import Settings
from monopoly.database import Database
from monopoly.main import create_app
from monopoly.models import Base, Game, Player, PlayerGame


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'monopoly.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db(engine):
    return Database(engine)


@pytest_asyncio.fixture
async def client(db):
    app = create_app(settings=Settings(), database=db)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def seeded(engine):
    """Three players and three games: game 1 has two players, game 2 has one, game 3 has none."""
    async with async_sessionmaker(engine, expire_on_commit=False)() as session:
        alice = Player(email="alice@calvin.edu", name="Alice")
        bob = Player(email="bob@calvin.edu", name=None)
        carol = Player(email="carol@calvin.edu", name="Carol")
        games = [
            Game(time=datetime(2006, 6, 27, 8, 0)),
            Game(time=datetime(2006, 6, 28, 13, 20)),
            Game(time=datetime(2006, 6, 29, 18, 41)),
        ]
        session.add_all([alice, bob, carol] + games)
        await session.flush()
        session.add_all([
            PlayerGame(gameid=games[0].id, playerid=bob.id, score=500),
            PlayerGame(gameid=games[0].id, playerid=alice.id, score=2350),
            PlayerGame(gameid=games[1].id, playerid=alice.id, score=1000),
        ])
        await session.commit()
        return {
            "alice": alice.id,
            "bob": bob.id,
            "carol": carol.id,
            "games": [g.id for g in games],
        }


@pytest_asyncio.fixture
async def count_rows(engine):
    async def count(table, where="", params=None):
        async with engine.connect() as conn:
            result = await conn.execute(text(f"SELECT COUNT(*) FROM {table} {where}"), params or {})
            return result.scalar_one()
    return count

import asyncio
from datetime import datetime
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker
from monopoly.config import Settings
from monopoly.database import Database
from monopoly.models import Base, Player, Game, PlayerGame

DEMO_PLAYERS = [
    ("me@calvin.edu", None),
    ("king@gmail.edu", "The King"),
    ("dog@gmail.edu", "Dogbreath"),
]

DEMO_GAMES = [
    datetime(2006, 6, 27, 8, 0),
    datetime(2006, 6, 28, 13, 20),
    datetime(2006, 6, 29, 18, 41),
]

# (game, player, score), 1-based positions in the lists above
DEMO_SCORES = [
    (1, 1, 0), (1, 2, 0), (1, 3, 2350),
    (2, 1, 1000), (2, 2, 0), (2, 3, 500),
    (3, 2, 0), (3, 3, 5500),
]


async def drop_and_recreate_all_tables(engine: AsyncEngine):
    async with engine.begin() as conn:
        print("⚠️ Dropping all tables...")
        await conn.run_sync(Base.metadata.drop_all)
        print("🔁 Recreating all tables...")
        await conn.run_sync(Base.metadata.create_all)
        print("✅ Tables recreated.")


async def insert_demo_data(engine: AsyncEngine):
    async with async_sessionmaker(engine, expire_on_commit=False)() as session:
        print("👤 Adding demo players and games...")
        players = [Player(email=email, name=name) for email, name in DEMO_PLAYERS]
        games = [Game(time=time) for time in DEMO_GAMES]
        session.add_all(players + games)
        await session.flush()  # Ensure ids are available

        for game, player, score in DEMO_SCORES:
            session.add(PlayerGame(gameid=games[game - 1].id, playerid=players[player - 1].id, score=score))
        await session.commit()
        print("✅ Demo data inserted.")


async def main():
    db = Database.from_settings(Settings.from_env())
    try:
        await drop_and_recreate_all_tables(db.engine)
        await insert_demo_data(db.engine)
    finally:
        await db.dispose()


if __name__ == "__main__":
    asyncio.run(main())

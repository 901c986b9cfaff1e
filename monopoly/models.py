from sqlalchemy import Column, Integer, String, ForeignKey, DateTime
from sqlalchemy.orm import declarative_base

# Table definitions for local setup and tests; the service itself only issues raw SQL.
Base = declarative_base()

class Player(Base):
    __tablename__ = "player"

    id = Column(Integer, primary_key=True)
    email = Column(String(50), nullable=False)
    name = Column(String(50), nullable=True)

class Game(Base):
    __tablename__ = "game"

    id = Column(Integer, primary_key=True)
    time = Column(DateTime)

class PlayerGame(Base):
    __tablename__ = "playergame"

    # No ON DELETE CASCADE: the delete endpoints remove these rows themselves
    gameid = Column(Integer, ForeignKey("game.id"), primary_key=True)
    playerid = Column(Integer, ForeignKey("player.id"), primary_key=True)
    score = Column(Integer)

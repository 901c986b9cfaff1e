from typing import Optional
from pydantic import BaseModel, field_validator
from datetime import datetime, timezone


class PlayerInput(BaseModel):
    email: str
    name: Optional[str] = None

class Player(BaseModel):
    id: int
    email: str
    name: Optional[str] = None

class PlayerId(BaseModel):
    id: int

class Game(BaseModel):
    id: int
    time: datetime

    # Game times are stored without a zone and mean UTC, so they serialize with a trailing Z
    @field_validator("time")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

class GameId(BaseModel):
    id: int

class GamePlayerScore(BaseModel):
    id: int
    name: Optional[str] = None
    score: int

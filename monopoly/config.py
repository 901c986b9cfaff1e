from typing import Optional
import os

from dotenv import load_dotenv
from pydantic import BaseModel
from sqlalchemy.engine import URL


class Settings(BaseModel):
    """Process configuration, read from the environment (or a local .env file)."""

    db_server: str = "localhost"
    db_port: int = 5432
    db_database: Optional[str] = None
    db_user: Optional[str] = None
    db_password: Optional[str] = None
    db_echo: bool = False
    port: int = 3000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()  # Optional if you're also running locally with a .env file

        env = {
            "db_server": os.getenv("DB_SERVER"),
            "db_port": os.getenv("DB_PORT"),
            "db_database": os.getenv("DB_DATABASE"),
            "db_user": os.getenv("DB_USER"),
            "db_password": os.getenv("DB_PASSWORD"),
            "db_echo": os.getenv("DB_ECHO"),
            "port": os.getenv("PORT"),
            "log_level": os.getenv("LOG_LEVEL"),
        }
        # Unset and empty variables fall back to the field defaults
        return cls(**{key: value for key, value in env.items() if value})

    @property
    def database_url(self) -> URL:
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_server,
            port=self.db_port,
            database=self.db_database,
        )

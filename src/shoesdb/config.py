import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load the appropriate .env file on module import
env = os.environ.get("SHOESDB_ENV", "development").lower()
env_file = f".env.{env}"
if os.path.exists(env_file):
    load_dotenv(env_file)
else:
    # Fall back to the default .env file
    load_dotenv()


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def parse_log_level(name: str) -> int:
    """Map a level name such as "info" to its logging constant."""
    level = name.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(
            f"SHOESDB_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {name!r}"
        )
    return getattr(logging, level)


@dataclass
class Config:
    environment: str
    database_url: str | None
    user: str
    dbname: str
    sslmode: str
    host: str | None = None
    port: int | None = None
    password: str | None = None
    log_file: Path | None = None
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls) -> "Config":
        port = os.environ.get("SHOESDB_PORT")
        log_file = os.environ.get("SHOESDB_LOG_FILE")
        return cls(
            environment=env,
            database_url=os.environ.get("DATABASE_URL") or None,
            user=os.environ.get("SHOESDB_USER", "shoes"),
            dbname=os.environ.get("SHOESDB_DBNAME", "shoes"),
            sslmode=os.environ.get("SHOESDB_SSLMODE", "verify-full"),
            host=os.environ.get("SHOESDB_HOST") or None,
            port=int(port) if port else None,
            password=os.environ.get("SHOESDB_PASSWORD") or None,
            log_file=Path(log_file) if log_file else None,
            log_level=parse_log_level(os.environ.get("SHOESDB_LOG_LEVEL", "INFO")),
        )


config = Config.from_env()

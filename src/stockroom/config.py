import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load the appropriate .env file on module import
env = os.environ.get("STOCKROOM_ENV", "development").lower()
env_file = f".env.{env}"
if os.path.exists(env_file):
    load_dotenv(env_file)
else:
    # Fall back to the default .env file
    load_dotenv()


@dataclass
class Config:
    environment: str
    database_url: str
    log_level: str
    default_per_page: int

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            environment=env,
            database_url=os.environ.get(
                "DATABASE_URL", "postgresql://localhost:5432/stockroom"
            ),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            default_per_page=int(os.environ.get("DEFAULT_PER_PAGE", "10")),
        )


config = Config.from_env()


def configure_logging() -> None:
    """Set up root logging at the configured level."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

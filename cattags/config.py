"""Application configuration"""

from dataclasses import dataclass, field
from os import getenv
from pathlib import Path


@dataclass
class Config:
    app_name: str = "cattags"
    app_version: str = "0.1.0"

    # base address of the cat image service, without trailing slash
    cataas_url: str = field(default=getenv("CATTAGS_CATAAS_URL", "https://cataas.com"))
    # seconds to wait for the cat image service
    cataas_timeout: float = field(
        default=float(getenv("CATTAGS_CATAAS_TIMEOUT", "10"))
    )

    # Optional database URL for Postgres or other databases
    database_url_env: str | None = field(default=getenv("CATTAGS_DATABASE_URL", None))

    @property
    def database_path(self) -> Path:
        return Path("./data/") / Path(f"{self.app_name}.db")

    @property
    def database_url(self) -> str:
        # Use provided DATABASE_URL if available, else fall back to SQLite file
        if self.database_url_env:
            return self.database_url_env
        return f"sqlite:///{self.database_path}"


def get_config():
    return Config()

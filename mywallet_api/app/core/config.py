"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first (via ``python-dotenv``) so local deployments can keep
the connection string out of the shell environment.  Defaults are
provided for all fields.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "MyWallet API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path or connection string for the SQLite database.  If a relative
    # path is provided, it will be resolved relative to the project root
    # by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "mywallet.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # Comma‑separated list of allowed CORS origins; ``*`` allows any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()

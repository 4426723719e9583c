"""Centralized configuration for the Stock API.

Values come from the environment, optionally seeded from a ``.env`` file
in the working directory. CLI options override whatever is loaded here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_DATA_FILE = Path("datasource") / "data.json"


@dataclass(frozen=True)
class Settings:
    data_file: Path = DEFAULT_DATA_FILE
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False
    log_level: str = "INFO"
    page_size: int = 10


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        data_file=Path(os.getenv("STOCK_API_DATA_FILE", str(DEFAULT_DATA_FILE))),
        host=os.getenv("STOCK_API_HOST", "0.0.0.0"),
        port=int(os.getenv("STOCK_API_PORT", "3000")),
        debug=_env_flag("STOCK_API_DEBUG", "false"),
        log_level=os.getenv("STOCK_API_LOG_LEVEL", "INFO").upper(),
        page_size=int(os.getenv("STOCK_API_PAGE_SIZE", "10")),
    )

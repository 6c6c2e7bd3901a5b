from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv


load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings:
    """Application settings loaded from environment variables.

    Keep all service config centralized here.
    """

    app_env: str = os.getenv("APP_ENV", "development")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    catalog_path: Path = Path(
        os.getenv("CATALOG_PATH", str(PROJECT_ROOT / "app" / "data" / "products.json"))
    )
    static_dir: Path = Path(
        os.getenv("STATIC_DIR", str(PROJECT_ROOT / "app" / "static"))
    )
    history_limit: int = int(os.getenv("HISTORY_LIMIT", "5"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

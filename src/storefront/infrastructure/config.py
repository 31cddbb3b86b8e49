"""Runtime settings, read once from the environment."""

from __future__ import annotations

import os
from pathlib import Path


class Settings:
    # --- Storage ---
    DATA_DIR: Path = Path(os.getenv("STOREFRONT_DATA_DIR", "data"))

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("STOREFRONT_LOG_LEVEL", "WARNING").upper()

    # --- Catalog ---
    FEATURED_LIMIT: int = int(os.getenv("STOREFRONT_FEATURED_LIMIT", "4"))


settings = Settings()

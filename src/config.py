"""Application configuration loaded from environment variables and .env file."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Dungeon item settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    LOG_LEVEL: str = "INFO"

    # Map geometry used when the host does not supply one
    MAP_WIDTH: int = 80
    MAP_HEIGHT: int = 40

    # Item catalog
    ITEM_DATA_PATH: str = str(Path(__file__).resolve().parent / "data" / "items.json")
    ITEM_SEED: Optional[int] = None  # None = nondeterministic placement

    # Equipment slot array sizes
    RING_SLOTS: int = 2
    TALISMAN_SLOTS: int = 2


settings = Settings()

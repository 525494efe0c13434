"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from src.api.game import router as game_router
from src.api.health import router as health_router
from src.api.items import router as items_router
from src.config import settings
from src.core.event_bus import EventBus
from src.core.item.catalog import ItemCatalog
from src.core.logging import get_logger, setup_logging
from src.services.item_service import DungeonItemService

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


def build_item_service() -> DungeonItemService:
    """Load the catalog and wire the service."""
    catalog = ItemCatalog()
    count = catalog.load_from_json(settings.ITEM_DATA_PATH)
    logger.info("Item catalog ready (%d items)", count)
    return DungeonItemService(catalog, EventBus(), settings=settings)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Initializing DungeonItemService...")
    app.state.item_service = build_item_service()
    app.state.player = None
    logger.info("DungeonItemService initialized.")

    yield

    logger.info("Shutting down...")
    app.state.item_service = None
    app.state.player = None


app = FastAPI(title="Dungeon Terrain Items", lifespan=lifespan)

app.include_router(health_router)
app.include_router(items_router)
app.include_router(game_router)

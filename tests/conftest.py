"""Shared test fixtures."""

import random
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from src.core.item.catalog import ItemCatalog
from src.main import app

ITEMS_PATH = Path(__file__).resolve().parents[1] / "src" / "data" / "items.json"


@pytest.fixture()
def catalog() -> ItemCatalog:
    """Catalog loaded from the shipped items.json."""
    cat = ItemCatalog()
    cat.load_from_json(ITEMS_PATH)
    return cat


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def client() -> Iterator[TestClient]:
    """FastAPI TestClient with the lifespan (catalog + service) running."""
    with TestClient(app) as test_client:
        yield test_client

"""Item catalog endpoints."""

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from src.api.schemas import ErrorResponse, ItemInfo
from src.core.item.models import Item
from src.services.item_service import DungeonItemService

router = APIRouter(prefix="/items", tags=["items"])

_BASE_FIELDS = {
    "item_id",
    "name",
    "description",
    "value",
    "weight",
    "rarity",
    "quantity",
}


def get_item_service(request: Request) -> DungeonItemService:
    """DungeonItemService instance (dependency injection)"""
    service: DungeonItemService = request.app.state.item_service
    return service


def build_item_info(item: Item) -> ItemInfo:
    """Item dataclass -> ItemInfo; kind-specific fields go to details."""
    details = {k: v for k, v in asdict(item).items() if k not in _BASE_FIELDS}
    return ItemInfo(
        item_id=item.item_id,
        kind=item.kind.value,
        name=item.name,
        description=item.description,
        value=item.value,
        weight=item.weight,
        rarity=item.rarity.value,
        quantity=item.quantity,
        details=details,
    )


@router.get("", response_model=list[ItemInfo])
def list_items(
    item_type: Optional[str] = Query(None, alias="type"),
    service: DungeonItemService = Depends(get_item_service),
) -> list[ItemInfo]:
    """
    List catalog items

    With ?type=weapon|armor|ring|talisman (any case) only that kind is
    returned; an unknown type yields an empty list.
    """
    if item_type is None:
        items = service.catalog.get_all()
    else:
        items = service.catalog.get_items_by_type(item_type)
    return [build_item_info(i) for i in items]


@router.get(
    "/{item_id}",
    response_model=ItemInfo,
    responses={404: {"model": ErrorResponse}},
)
def get_item(
    item_id: str,
    service: DungeonItemService = Depends(get_item_service),
) -> ItemInfo:
    item = service.catalog.find_item_by_id(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"Item not found: {item_id}")
    return build_item_info(item)

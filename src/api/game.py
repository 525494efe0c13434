"""Game session endpoints: level start, pickup, equip, inventory."""

from fastapi import APIRouter, Depends, HTTPException, Request

from src.api.items import build_item_info, get_item_service
from src.api.schemas import (
    EquipRequest,
    EquipResponse,
    ErrorResponse,
    InventoryResponse,
    LevelRequest,
    LevelResponse,
    PickupRequest,
    PickupResponse,
)
from src.core.item.inventory import calculate_total_weight
from src.core.logging import get_logger
from src.core.player import Player
from src.core.tile_map import TileMap
from src.services.item_service import DungeonItemService

logger = get_logger(__name__)

router = APIRouter(prefix="/game", tags=["game"])


def get_player(request: Request) -> Player:
    """The session player; created on level start."""
    player = getattr(request.app.state, "player", None)
    if player is None:
        raise HTTPException(status_code=400, detail="No level started")
    return player


@router.post(
    "/level",
    response_model=LevelResponse,
    responses={400: {"model": ErrorResponse}},
)
def start_level(
    request: LevelRequest,
    http_request: Request,
    service: DungeonItemService = Depends(get_item_service),
) -> LevelResponse:
    """
    Start a level

    Replaces any previous level, distributes items over the floor tiles
    and returns the map with item symbols drawn.
    """
    if request.rows is None:
        tile_map = service.blank_map()
    else:
        tile_map = TileMap.from_rows(request.rows)
    if not tile_map.is_valid():
        raise HTTPException(status_code=400, detail="Map has no tiles")
    if not tile_map.in_bounds(request.player_x, request.player_y):
        raise HTTPException(status_code=400, detail="Player start is outside the map")

    report = service.start_level(tile_map)
    http_request.app.state.player = service.new_player(
        request.player_x, request.player_y
    )
    logger.info("Level started (%dx%d)", tile_map.width, tile_map.height)

    return LevelResponse(
        success=True,
        placed=len(service.placed_items()),
        skipped=len(report.skipped),
        symbol_counts=report.symbol_counts,
        rows=tile_map.rows(),
    )


@router.post(
    "/pickup",
    response_model=PickupResponse,
    responses={400: {"model": ErrorResponse}},
)
def pickup(
    request: PickupRequest,
    player: Player = Depends(get_player),
    service: DungeonItemService = Depends(get_item_service),
) -> PickupResponse:
    """
    Pick up an item

    Moves the player to (x, y) and takes whatever lies there.
    A position outside the map is rejected and the player stays put.
    """
    tile_map = service.tile_map
    if tile_map is None or not tile_map.in_bounds(request.x, request.y):
        raise HTTPException(
            status_code=400,
            detail=f"Position outside the map: ({request.x}, {request.y})",
        )

    player.x = request.x
    player.y = request.y
    result = service.pickup(player)

    return PickupResponse(
        success=result.success,
        outcome=result.outcome.value,
        item=build_item_info(result.item) if result.item is not None else None,
        inventory=service.render_inventory(player),
        rows=tile_map.rows(),
    )


@router.post(
    "/equip",
    response_model=EquipResponse,
    responses={400: {"model": ErrorResponse}},
)
def equip(
    request: EquipRequest,
    player: Player = Depends(get_player),
    service: DungeonItemService = Depends(get_item_service),
) -> EquipResponse:
    """Auto-equip an inventory entry into its first free slot."""
    if request.inventory_index >= len(player.inventory):
        raise HTTPException(
            status_code=400,
            detail=f"Inventory index out of range: {request.inventory_index}",
        )

    item = player.inventory[request.inventory_index]
    result = service.equip(player, item)
    return EquipResponse(
        success=result.success,
        outcome=result.outcome.value,
        slot=result.slot,
        equipment=player.equipment.to_dict(),
    )


@router.get(
    "/inventory",
    response_model=InventoryResponse,
    responses={400: {"model": ErrorResponse}},
)
def inventory(
    player: Player = Depends(get_player),
    service: DungeonItemService = Depends(get_item_service),
) -> InventoryResponse:
    return InventoryResponse(
        text=service.render_inventory(player),
        items=[build_item_info(i) for i in player.inventory],
        total_weight=calculate_total_weight(player.inventory),
        equipment=player.equipment.to_dict(),
    )

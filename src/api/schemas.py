"""API request/response schemas."""

from typing import Any, Optional

from pydantic import BaseModel, Field


# === Request Schemas ===


class LevelRequest(BaseModel):
    """Start a level from text rows"""

    rows: Optional[list[str]] = Field(
        None, min_length=1, description="Map rows, '.' is floor; omitted for a blank map"
    )
    player_x: int = Field(0, ge=0, description="Player start x")
    player_y: int = Field(0, ge=0, description="Player start y")


class PickupRequest(BaseModel):
    """Pick up at a position (the player moves there first)"""

    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)


class EquipRequest(BaseModel):
    """Auto-equip an inventory entry"""

    inventory_index: int = Field(..., ge=0, description="Index into the inventory")


# === Response Schemas ===


class ItemInfo(BaseModel):
    """Catalog item"""

    item_id: str
    kind: str
    name: str
    description: str
    value: int
    weight: float
    rarity: str
    quantity: int = 1
    details: dict[str, Any] = {}


class LevelResponse(BaseModel):
    """Level start result"""

    success: bool
    placed: int
    skipped: int = 0
    symbol_counts: dict[str, int] = {}
    rows: list[str] = []


class PickupResponse(BaseModel):
    """Pickup result"""

    success: bool
    outcome: str
    item: Optional[ItemInfo] = None
    inventory: str
    rows: list[str] = []


class EquipResponse(BaseModel):
    """Equip result"""

    success: bool
    outcome: str
    slot: Optional[str] = None
    equipment: dict[str, Any] = {}


class InventoryResponse(BaseModel):
    """Inventory listing"""

    text: str
    items: list[ItemInfo] = []
    total_weight: float = 0.0
    equipment: dict[str, Any] = {}


class ErrorResponse(BaseModel):
    """Error response"""

    success: bool = False
    error: str
    detail: Optional[str] = None

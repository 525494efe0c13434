"""
Tile Map
========
Fixed-size one-dimensional tile array addressed as index = y * width + x.

Tile alphabet: "." is floor; "\\", "&" and "$" mark weapon, armor and
ring/talisman pickups. Any other character is obstructed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from src.core.logging import get_logger

logger = get_logger(__name__)

FLOOR = "."
WEAPON_SYMBOL = "\\"
ARMOR_SYMBOL = "&"
TRINKET_SYMBOL = "$"  # rings and talismans share one glyph

ITEM_SYMBOLS: frozenset[str] = frozenset({WEAPON_SYMBOL, ARMOR_SYMBOL, TRINKET_SYMBOL})


@dataclass
class TileMap:
    """Mutable tile grid. len(tiles) is expected to equal width * height."""

    width: int
    height: int
    tiles: list[str] = field(default_factory=list)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "TileMap":
        """Build from text rows; short rows are padded with a wall tile."""
        rows = list(rows)
        width = max((len(r) for r in rows), default=0)
        tiles: list[str] = []
        for row in rows:
            tiles.extend(row.ljust(width, "#"))
        return cls(width=width, height=len(rows), tiles=tiles)

    @classmethod
    def filled(cls, width: int, height: int, tile: str = FLOOR) -> "TileMap":
        return cls(width=width, height=height, tiles=[tile] * (width * height))

    def __len__(self) -> int:
        return len(self.tiles)

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    def is_valid(self) -> bool:
        """Non-empty and consistent with its declared geometry."""
        return (
            self.width > 0
            and self.height > 0
            and len(self.tiles) == self.total_cells
        )

    def index_of(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[str]:
        if not self.in_bounds(x, y):
            return None
        index = self.index_of(x, y)
        if index >= len(self.tiles):
            return None
        return self.tiles[index]

    def set(self, x: int, y: int, tile: str) -> None:
        self.tiles[self.index_of(x, y)] = tile

    def is_floor(self, x: int, y: int) -> bool:
        return self.get(x, y) == FLOOR

    def count(self, tile: str) -> int:
        return sum(1 for t in self.tiles if t == tile)

    def clear_item_symbols(self) -> int:
        """Reset every item glyph to floor. Returns the number cleared."""
        cleared = 0
        for i, tile in enumerate(self.tiles):
            if tile in ITEM_SYMBOLS:
                self.tiles[i] = FLOOR
                cleared += 1
        return cleared

    def rows(self) -> list[str]:
        return [
            "".join(self.tiles[y * self.width : (y + 1) * self.width])
            for y in range(self.height)
        ]

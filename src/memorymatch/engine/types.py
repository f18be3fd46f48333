from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Literal

# Symbols are opaque but must be hashable; the engine only counts and compares them.
Symbol = Hashable

TileTag = Literal["matched", "selected_pending", "selected_mismatched", "hidden"]


@dataclass(frozen=True)
class Tile:
    id: int
    symbol: Symbol


@dataclass(frozen=True)
class Win:
    type: Literal["win"]


@dataclass(frozen=True)
class Loss:
    type: Literal["loss"]


@dataclass(frozen=True)
class InProgress:
    type: Literal["in_progress"]
    flips_remaining: int


GameStatus = Win | Loss | InProgress


@dataclass(frozen=True)
class TileView:
    """What the view layer needs to draw one tile."""

    tile_id: int
    symbol: Symbol
    revealed: bool
    tag: TileTag

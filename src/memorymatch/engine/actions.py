from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectTileAction:
    tile_id: int


@dataclass(frozen=True)
class NewGameAction:
    pass


Action = SelectTileAction | NewGameAction

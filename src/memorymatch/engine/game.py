from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from .actions import Action
from .types import Tile

Event = dict[str, object]


@dataclass(frozen=True)
class GameConfig:
    flip_budget: int = 24
    flip_delay: float = 0.5  # seconds before a mismatched pair is re-hidden

    def __post_init__(self) -> None:
        if self.flip_budget < 2:
            raise ValueError("flip_budget must allow at least one pair (>= 2).")
        if self.flip_delay < 0:
            raise ValueError("flip_delay must be non-negative.")


@dataclass
class GameState:
    tiles: tuple[Tile, ...]
    flips_remaining: int
    generation: int = 0
    selected: list[Tile] = field(default_factory=list)
    matched_ids: set[int] = field(default_factory=set)
    terminal: bool = False
    action_log: list[Action] = field(default_factory=list)
    event_log: list[Event] = field(default_factory=list)

    def tile(self, tile_id: int) -> Tile | None:
        for t in self.tiles:
            if t.id == tile_id:
                return t
        return None

    def is_selected(self, tile_id: int) -> bool:
        return any(t.id == tile_id for t in self.selected)

    def all_matched(self) -> bool:
        return len(self.matched_ids) == len(self.tiles)


def new_game(tiles: Sequence[Tile], config: GameConfig, generation: int = 0) -> GameState:
    """Fresh session over an already shuffled deck."""
    state = GameState(tiles=tuple(tiles), flips_remaining=config.flip_budget, generation=generation)
    state.event_log.append(
        {"type": "GAME_STARTED", "generation": generation, "tiles": len(state.tiles), "budget": config.flip_budget}
    )
    return state

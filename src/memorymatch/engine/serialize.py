from __future__ import annotations


from .actions import Action, NewGameAction, SelectTileAction
from .game import GameState
from .status import status
from .types import Tile


def action_to_dict(a: Action) -> dict[str, object]:
    if isinstance(a, SelectTileAction):
        return {"type": "select", "tile_id": a.tile_id}
    if isinstance(a, NewGameAction):
        return {"type": "new_game"}
    # should be unreachable
    return {"type": "unknown"}


def _tile_to_dict(t: Tile) -> dict[str, object]:
    return {"id": t.id, "symbol": str(t.symbol)}


def snapshot(state: GameState) -> dict[str, object]:
    """Return a JSON-serializable canonical snapshot of the current game state."""
    st = status(state)
    return {
        "generation": state.generation,
        "tiles": [_tile_to_dict(t) for t in state.tiles],
        "selected": [t.id for t in state.selected],
        "matched_ids": sorted(state.matched_ids),
        "flips_remaining": state.flips_remaining,
        "terminal": state.terminal,
        "status": st.type,
        "action_log": [action_to_dict(a) for a in state.action_log],
    }

from __future__ import annotations

from .game import GameState
from .types import GameStatus, InProgress, Loss, TileTag, TileView, Win


def status(state: GameState) -> GameStatus:
    """Derive win/loss/in-progress from the state. Pure; safe to call every frame."""
    if state.terminal:
        if state.all_matched():
            return Win(type="win")
        return Loss(type="loss")
    return InProgress(type="in_progress", flips_remaining=state.flips_remaining)


def _is_mismatched_pair(state: GameState) -> bool:
    return len(state.selected) == 2 and state.selected[0].symbol != state.selected[1].symbol


def tile_views(state: GameState) -> list[TileView]:
    mismatched = _is_mismatched_pair(state)
    views: list[TileView] = []
    for t in state.tiles:
        tag: TileTag
        if t.id in state.matched_ids:
            tag = "matched"
        elif state.is_selected(t.id):
            tag = "selected_mismatched" if mismatched else "selected_pending"
        else:
            tag = "hidden"
        revealed = tag != "hidden" or state.terminal
        views.append(TileView(tile_id=t.id, symbol=t.symbol, revealed=revealed, tag=tag))
    return views

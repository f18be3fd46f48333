from __future__ import annotations

from memorymatch.engine.deck import build_catalog
from memorymatch.engine.game import GameConfig, new_game
from memorymatch.engine.status import status, tile_views
from memorymatch.engine.types import InProgress, Loss, Win


def _state(symbols: list[str], budget: int = 6):
    return new_game(build_catalog(symbols), GameConfig(flip_budget=budget))


def test_status_in_progress_reports_flips_left() -> None:
    state = _state(["🍉", "🍌"], budget=6)
    assert status(state) == InProgress(type="in_progress", flips_remaining=6)


def test_status_is_idempotent() -> None:
    state = _state(["🍉", "🍌"])
    state.matched_ids.update({1, 2})
    first = status(state)
    assert status(state) == first
    assert status(state) == first
    assert state.matched_ids == {1, 2}


def test_status_terminal_win_and_loss() -> None:
    state = _state(["🍉"])
    state.matched_ids.update({1, 2})
    state.terminal = True
    assert status(state) == Win(type="win")

    state = _state(["🍉", "🍌"])
    state.matched_ids.update({1, 2})
    state.terminal = True
    assert status(state) == Loss(type="loss")


def test_all_matched_but_not_terminal_is_still_in_progress() -> None:
    state = _state(["🍉"], budget=4)
    state.matched_ids.update({1, 2})
    assert status(state).type == "in_progress"


def test_tile_views_tags() -> None:
    state = _state(["🍉", "🍌", "🍇"])
    tiles = {t.id: t for t in state.tiles}
    state.matched_ids.update({1, 2})
    state.selected.extend([tiles[3], tiles[5]])

    views = {v.tile_id: v for v in tile_views(state)}
    assert views[1].tag == "matched" and views[1].revealed
    assert views[3].tag == "selected_mismatched" and views[3].revealed
    assert views[5].tag == "selected_mismatched"
    assert views[4].tag == "hidden" and not views[4].revealed
    assert views[6].symbol == "🍇"


def test_tile_views_single_selection_is_pending() -> None:
    state = _state(["🍉", "🍌"])
    state.selected.append(state.tile(3))
    views = {v.tile_id: v for v in tile_views(state)}
    assert views[3].tag == "selected_pending"
    assert views[3].revealed


def test_tile_views_reveal_everything_once_terminal() -> None:
    state = _state(["🍉", "🍌"])
    state.terminal = True
    views = tile_views(state)
    assert all(v.revealed for v in views)
    assert {v.tag for v in views} == {"hidden"}
    assert [v.tile_id for v in views] == [t.id for t in state.tiles]

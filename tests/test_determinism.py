from __future__ import annotations

import json

from memorymatch.engine.actions import NewGameAction, SelectTileAction
from memorymatch.engine.controller import SelectionController
from memorymatch.engine.deck import build_catalog
from memorymatch.engine.game import GameConfig
from memorymatch.engine.serialize import snapshot
from memorymatch.engine.timers import ManualScheduler

FRUIT = ["🍉", "🍌", "🍇", "🍓", "🍒", "🍑"]


def _play_left_to_right(ctl: SelectionController, scheduler: ManualScheduler) -> None:
    """Flip display-order neighbours pairwise; a naive but deterministic player."""
    ids = [t.id for t in ctl.state.tiles]
    for a, b in zip(ids[0::2], ids[1::2]):
        if ctl.state.terminal:
            break
        ctl.step(SelectTileAction(tile_id=a))
        ctl.step(SelectTileAction(tile_id=b))
        scheduler.advance(ctl.config.flip_delay)


def _session(seed: int) -> dict[str, object]:
    scheduler = ManualScheduler()
    ctl = SelectionController(
        deck=build_catalog(FRUIT),
        scheduler=scheduler,
        config=GameConfig(flip_budget=10),
        seed=seed,
    )
    _play_left_to_right(ctl, scheduler)
    ctl.step(NewGameAction())
    _play_left_to_right(ctl, scheduler)
    return snapshot(ctl.state)


def test_seeded_sessions_replay_identically() -> None:
    assert _session(424242) == _session(424242)


def test_different_seeds_deal_different_boards() -> None:
    assert _session(1)["tiles"] != _session(2)["tiles"]


def test_snapshot_is_json_serializable() -> None:
    snap = _session(7)
    assert json.loads(json.dumps(snap, ensure_ascii=False)) == snap
    assert snap["generation"] == 1
    assert snap["status"] in ("win", "loss", "in_progress")

from __future__ import annotations

import random
from collections.abc import Sequence
from dataclasses import dataclass
from functools import partial
from typing import Callable, Mapping, Protocol

from .actions import Action, NewGameAction, SelectTileAction
from .deck import shuffle, validate_deck
from .game import Event, GameConfig, GameState, new_game
from .timers import Scheduler, TimerHandle
from .types import Tile

Listener = Callable[[GameState], None]


class EventSink(Protocol):
    def log(self, event_type: str, payload: Mapping[str, object]) -> None: ...


@dataclass
class StepResult:
    ok: bool
    events: list[Event]
    error: str | None = None


def _rejected(reason: str) -> StepResult:
    return StepResult(ok=False, events=[], error=reason)


class SelectionController:
    """Owns the current GameState and is the only thing allowed to mutate it.

    Mutations come from three places: `select_tile`, `reset_game` and the
    re-hide callback scheduled after a mismatch. All of them are expected to
    run on one thread of control (the frame loop or an event loop).
    """

    def __init__(
        self,
        deck: Sequence[Tile],
        scheduler: Scheduler,
        config: GameConfig | None = None,
        seed: int | None = None,
        telemetry: EventSink | None = None,
    ) -> None:
        validate_deck(deck)
        self._deck = tuple(deck)
        self._scheduler = scheduler
        self.config = config or GameConfig()
        self.seed = seed
        self._rng = random.Random(seed)
        self._telemetry = telemetry
        self._listeners: list[Listener] = []
        self._timer: TimerHandle | None = None
        self._generation = 0
        self._state = self._fresh_state()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def deck(self) -> tuple[Tile, ...]:
        return self._deck

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)

    def _fresh_state(self) -> GameState:
        state = new_game(shuffle(self._deck, self._rng), self.config, generation=self._generation)
        if self._telemetry is not None:
            self._telemetry.log(
                "game_started",
                {"generation": state.generation, "tiles": len(state.tiles), "budget": state.flips_remaining},
            )
        return state

    def _end_game(self, state: GameState, result: str) -> None:
        state.terminal = True
        state.event_log.append({"type": "GAME_ENDED", "result": result, "flips_remaining": state.flips_remaining})
        if self._telemetry is not None:
            self._telemetry.log(
                "game_ended",
                {
                    "generation": state.generation,
                    "result": result,
                    "matched": len(state.matched_ids),
                    "flips_remaining": state.flips_remaining,
                },
            )

    def _rejection(self, tile_id: int) -> str | None:
        state = self._state
        if state.terminal:
            return "Game is over."
        if state.flips_remaining <= 0:
            return "No flips left."
        if tile_id in state.matched_ids:
            return "Tile already matched."
        if state.is_selected(tile_id):
            return "Tile already selected."
        if len(state.selected) >= 2:
            return "A pair is still resolving."
        if state.tile(tile_id) is None:
            return "Unknown tile."
        return None

    def select_tile(self, tile_id: int) -> StepResult:
        reason = self._rejection(tile_id)
        if reason is not None:
            return _rejected(reason)

        state = self._state
        tile = state.tile(tile_id)
        assert tile is not None
        before = len(state.event_log)

        state.selected.append(tile)
        state.flips_remaining -= 1
        state.event_log.append(
            {"type": "TILE_SELECTED", "tile_id": tile.id, "flips_remaining": state.flips_remaining}
        )

        if len(state.selected) == 1:
            # An odd budget can run dry on the first flip of a pair.
            if state.flips_remaining == 0:
                self._end_game(state, "loss")
        else:
            self._resolve_pair(state)

        self._notify()
        return StepResult(ok=True, events=state.event_log[before:])

    def _resolve_pair(self, state: GameState) -> None:
        first, second = state.selected
        if first.symbol == second.symbol:
            state.matched_ids.update((first.id, second.id))
            state.selected.clear()
            state.event_log.append({"type": "PAIR_MATCHED", "tile_ids": [first.id, second.id]})
        else:
            state.event_log.append({"type": "PAIR_MISMATCHED", "tile_ids": [first.id, second.id]})

        # Win is checked first so a final flip that completes the board never counts as a loss.
        if state.all_matched():
            self._end_game(state, "win")
        elif state.flips_remaining <= 0:
            self._end_game(state, "loss")
        elif state.selected:
            self._timer = self._scheduler.call_later(
                self.config.flip_delay, partial(self._on_flip_delay_elapsed, state, state.generation)
            )

    def _on_flip_delay_elapsed(self, state: GameState, generation: int) -> None:
        if state is not self._state or generation != self._generation:
            return  # scheduled for a game that has since been replaced
        self._timer = None
        if not state.selected:
            return
        state.event_log.append({"type": "SELECTION_CLEARED", "tile_ids": [t.id for t in state.selected]})
        state.selected.clear()
        self._notify()

    def reset_game(self) -> StepResult:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._generation += 1
        self._state = self._fresh_state()
        self._notify()
        return StepResult(ok=True, events=list(self._state.event_log))

    def step(self, action: Action) -> StepResult:
        """Apply one input event. Attempts are logged on the state they were aimed at."""
        self._state.action_log.append(action)
        if isinstance(action, SelectTileAction):
            return self.select_tile(action.tile_id)
        if isinstance(action, NewGameAction):
            return self.reset_game()
        return _rejected("Unknown action.")

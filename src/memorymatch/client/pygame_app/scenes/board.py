from __future__ import annotations

import pygame  # type: ignore[import-not-found]

from memorymatch.engine.actions import NewGameAction, SelectTileAction
from memorymatch.engine.controller import SelectionController
from memorymatch.engine.game import GameState
from memorymatch.engine.status import status, tile_views
from memorymatch.engine.types import TileView

from ..app import GameContext, SceneTransition
from ..ui import Button, TileButton, draw_text

COLUMNS = 4
TILE_W, TILE_H = 128, 150
GAP = 16


class BoardScene:
    """Renders the current game and forwards clicks to the controller. Holds no rules."""

    def __init__(self, ctx: GameContext, controller: SelectionController) -> None:
        self.ctx = ctx
        self.controller = controller
        self._views: list[TileView] = []
        self._tiles: list[TileButton] = []

        self.btn_new = Button(
            rect=pygame.Rect(0, 0, 180, 48),
            text="New Game",
            on_click=lambda: self.controller.step(NewGameAction()),
        )
        controller.subscribe(self._on_state_changed)
        self._on_state_changed(controller.state)

    def _on_state_changed(self, state: GameState) -> None:
        self._views = tile_views(state)
        if len(self._tiles) != len(self._views):
            self._layout(len(self._views))
        # Display order changes on every new game; rebind cells to ids.
        for button, view in zip(self._tiles, self._views):
            button.tile_id = view.tile_id

    def _layout(self, n: int) -> None:
        w, h = self.ctx.screen.get_size()
        rows = (n + COLUMNS - 1) // COLUMNS
        grid_w = COLUMNS * TILE_W + (COLUMNS - 1) * GAP
        grid_h = rows * TILE_H + (rows - 1) * GAP
        x0 = (w - grid_w) // 2
        y0 = max(80, (h - grid_h) // 2 - 20)
        self._tiles = []
        for i in range(n):
            r, c = divmod(i, COLUMNS)
            rect = pygame.Rect(x0 + c * (TILE_W + GAP), y0 + r * (TILE_H + GAP), TILE_W, TILE_H)
            self._tiles.append(TileButton(rect=rect, tile_id=0, on_click=self._on_tile_click))
        self.btn_new.rect.midtop = (w // 2, y0 + grid_h + 24)

    def _on_tile_click(self, tile_id: int) -> None:
        # Rejected flips need no feedback; the tile simply stays as drawn.
        self.controller.step(SelectTileAction(tile_id=tile_id))

    def handle_event(self, event: pygame.event.Event) -> None:
        if self.btn_new.handle_event(event):
            return
        for t in self._tiles:
            if t.handle_event(event):
                return

    def update(self, dt: float) -> SceneTransition | None:
        return None

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((14, 16, 24))
        fonts = self.ctx.assets.fonts
        w = screen.get_width()
        title = fonts.big.render("Matching game", True, (240, 240, 240))
        screen.blit(title, title.get_rect(midtop=(w // 2, 20)).topleft)

        for button, view in zip(self._tiles, self._views):
            button.draw(screen, fonts.symbol, view)

        st = status(self.controller.state)
        if st.type == "win":
            draw_text(screen, fonts.ui, "You win!", (20, 24), color=(120, 220, 140))
        elif st.type == "loss":
            draw_text(screen, fonts.ui, "Out of flips. You lose.", (20, 24), color=(240, 110, 110))
        else:
            draw_text(screen, fonts.ui, f"Flips left: {st.flips_remaining}", (20, 24))

        self.btn_new.draw(screen, fonts.ui)

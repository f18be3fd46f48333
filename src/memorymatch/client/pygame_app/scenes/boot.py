from __future__ import annotations

import traceback

import pygame  # type: ignore[import-not-found]

from memorymatch.engine.controller import SelectionController
from memorymatch.engine.game import GameConfig
from memorymatch.services.content import ContentError
from ..app import GameContext, SceneTransition
from ..ui import Button, draw_text
from .board import BoardScene


class BootScene:
    def __init__(self, ctx: GameContext) -> None:
        self.ctx = ctx
        self._did_boot = False
        self._error: str | None = None
        self._quit_button: Button | None = None

    def handle_event(self, event: pygame.event.Event) -> None:
        if self._quit_button is not None:
            self._quit_button.handle_event(event)

    def _apply_overrides(self, base: GameConfig) -> GameConfig:
        opts = self.ctx.options
        budget = opts.flip_budget if opts.flip_budget is not None else base.flip_budget
        delay = opts.flip_delay_ms / 1000.0 if opts.flip_delay_ms is not None else base.flip_delay
        return GameConfig(flip_budget=budget, flip_delay=delay)

    def update(self, dt: float) -> SceneTransition | None:
        if self._did_boot:
            return None
        self._did_boot = True
        try:
            content = self.ctx.content.load_content()
            catalog = content.catalog
            config = self._apply_overrides(content.config)
            self.ctx.controller = SelectionController(
                deck=catalog.build_deck(),
                scheduler=self.ctx.scheduler,
                config=config,
                seed=self.ctx.options.seed,
                telemetry=self.ctx.telemetry,
            )
            self.ctx.telemetry.log("boot", {"ok": True, "symbols": len(catalog.symbols)})
            return SceneTransition(BoardScene(self.ctx, self.ctx.controller))
        except (ContentError, ValueError) as e:
            tb = traceback.format_exc(limit=8)
            self._error = f"{e}\n\n{tb}"
            self.ctx.telemetry.log("boot", {"ok": False, "error": str(e)})
            self._quit_button = Button(
                rect=pygame.Rect(20, 700, 140, 44),
                text="Quit",
                on_click=lambda: pygame.event.post(pygame.event.Event(pygame.QUIT)),
            )
            return None

    def render(self, screen: pygame.Surface) -> None:
        screen.fill((10, 10, 10))
        font = self.ctx.assets.fonts.big
        draw_text(screen, font, "Matching game", (20, 20))

        font2 = self.ctx.assets.fonts.ui
        if self._error is None:
            draw_text(screen, font2, "Loading symbol catalog...", (20, 80))
        else:
            draw_text(screen, font2, "BOOT ERROR", (20, 80), color=(240, 80, 80))
            y = 120
            for line in self._error.splitlines()[:22]:
                draw_text(screen, self.ctx.assets.fonts.small, line[:120], (20, y), color=(230, 230, 230))
                y += 18
            if self._quit_button is not None:
                self._quit_button.draw(screen, font2)

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

import pygame  # type: ignore[import-not-found]

from memorymatch.engine.controller import SelectionController
from memorymatch.engine.timers import ManualScheduler
from memorymatch.paths import Paths
from memorymatch.services.content import ContentService
from memorymatch.services.telemetry import TelemetryService

from .asset_manager import AssetManager


@dataclass
class SceneTransition:
    next_scene: "Scene"


class Scene(Protocol):
    def handle_event(self, event: pygame.event.Event) -> None: ...
    def update(self, dt: float) -> SceneTransition | None: ...
    def render(self, screen: pygame.Surface) -> None: ...


@dataclass
class LaunchOptions:
    seed: Optional[int] = None
    flip_budget: Optional[int] = None
    flip_delay_ms: Optional[int] = None


@dataclass
class GameContext:
    screen: pygame.Surface
    clock: pygame.time.Clock
    paths: Paths
    assets: AssetManager
    content: ContentService
    telemetry: TelemetryService
    options: LaunchOptions
    scheduler: ManualScheduler

    # Built at boot
    controller: Optional[SelectionController] = None


class App:
    def __init__(self, ctx: GameContext, initial_scene: Scene) -> None:
        self.ctx = ctx
        self.scene: Scene = initial_scene
        self.running = True

    def run(self) -> int:
        while self.running:
            dt = self.ctx.clock.tick(60) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                    break
                self.scene.handle_event(event)

            # Timers fire between input handling and rendering, on the same thread.
            self.ctx.scheduler.advance(dt)

            tr = self.scene.update(dt)
            if tr is not None:
                self.scene = tr.next_scene

            self.scene.render(self.ctx.screen)
            pygame.display.flip()

        return 0

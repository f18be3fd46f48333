from __future__ import annotations

import argparse

import pygame  # type: ignore[import-not-found]

from memorymatch.engine.timers import ManualScheduler
from memorymatch.paths import get_paths
from memorymatch.services.content import ContentService
from memorymatch.services.telemetry import TelemetryService

from .app import App, GameContext, LaunchOptions
from .asset_manager import AssetManager
from .scenes.boot import BootScene


def main() -> int:
    parser = argparse.ArgumentParser(prog="memorymatch")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=720)
    parser.add_argument("--seed", type=int, default=None, help="fixed shuffle seed (reproducible decks)")
    parser.add_argument("--budget", type=int, default=None, help="override the flip budget")
    parser.add_argument("--delay-ms", type=int, default=None, help="override the mismatch re-hide delay")
    args = parser.parse_args()

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Matching game")

    clock = pygame.time.Clock()
    paths = get_paths()

    ctx = GameContext(
        screen=screen,
        clock=clock,
        paths=paths,
        assets=AssetManager(),
        content=ContentService(data_dir=paths.data_dir, schema_dir=paths.schema_dir),
        telemetry=TelemetryService(paths.userdata_dir / "telemetry.jsonl"),
        options=LaunchOptions(seed=args.seed, flip_budget=args.budget, flip_delay_ms=args.delay_ms),
        scheduler=ManualScheduler(),
    )

    app = App(ctx, BootScene(ctx))
    try:
        return app.run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())

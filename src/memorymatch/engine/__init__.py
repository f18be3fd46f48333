"""Headless rules engine for the memory matching game.

IMPORTANT: This package must never import pygame.
"""

from .actions import NewGameAction, SelectTileAction
from .controller import SelectionController, StepResult
from .deck import CatalogError, build_catalog, shuffle, validate_deck
from .game import GameConfig, GameState, new_game
from .status import status, tile_views
from .timers import ManualScheduler, Scheduler
from .types import GameStatus, InProgress, Loss, Tile, TileView, Win

__all__ = [
    "CatalogError",
    "GameConfig",
    "GameState",
    "GameStatus",
    "InProgress",
    "Loss",
    "ManualScheduler",
    "NewGameAction",
    "Scheduler",
    "SelectTileAction",
    "SelectionController",
    "StepResult",
    "Tile",
    "TileView",
    "Win",
    "build_catalog",
    "new_game",
    "shuffle",
    "status",
    "tile_views",
    "validate_deck",
]

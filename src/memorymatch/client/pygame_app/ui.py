from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

import pygame  # type: ignore[import-not-found]

from memorymatch.engine.types import TileTag, TileView


Color = tuple[int, int, int]

HIDDEN_FACE = "?"

TAG_COLORS: dict[TileTag, Color] = {
    "matched": (70, 150, 90),
    "selected_mismatched": (170, 70, 70),
    "selected_pending": (190, 170, 60),
    "hidden": (60, 90, 160),
}


def draw_text(
    screen: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    pos: tuple[int, int],
    color: Color = (240, 240, 240),
) -> None:
    img = font.render(text, True, color)
    screen.blit(img, pos)


def _is_left_click(event: pygame.event.Event) -> bool:
    return event.type == pygame.MOUSEBUTTONDOWN and event.button == 1


@dataclass
class Button:
    rect: pygame.Rect
    text: str
    on_click: Callable[[], None]
    enabled: bool = True

    def handle_event(self, event: pygame.event.Event) -> bool:
        if not self.enabled:
            return False
        if _is_left_click(event) and self.rect.collidepoint(event.pos):
            self.on_click()
            return True
        return False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        bg = (60, 60, 60) if self.enabled else (30, 30, 30)
        pygame.draw.rect(screen, bg, self.rect, border_radius=8)
        pygame.draw.rect(screen, (0, 0, 0), self.rect, width=2, border_radius=8)
        img = font.render(self.text, True, (240, 240, 240))
        r = img.get_rect(center=self.rect.center)
        screen.blit(img, r.topleft)


@dataclass
class TileButton:
    """Maps a click on one grid cell to its tile id; draws whatever view it is handed."""

    rect: pygame.Rect
    tile_id: int
    on_click: Callable[[int], None]

    def handle_event(self, event: pygame.event.Event) -> bool:
        if _is_left_click(event) and self.rect.collidepoint(event.pos):
            self.on_click(self.tile_id)
            return True
        return False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font, view: TileView) -> None:
        pygame.draw.rect(screen, TAG_COLORS[view.tag], self.rect, border_radius=10)
        pygame.draw.rect(screen, (0, 0, 0), self.rect, width=2, border_radius=10)
        face = str(view.symbol) if view.revealed else HIDDEN_FACE
        img = font.render(face, True, (250, 250, 250))
        r = img.get_rect(center=self.rect.center)
        screen.blit(img, r.topleft)

from __future__ import annotations

from dataclasses import dataclass

import pygame  # type: ignore[import-not-found]

# Tried in order by SysFont; the first one installed wins.
EMOJI_FONTS = "notocoloremoji,segoeuiemoji,applecoloremoji,symbola"


@dataclass
class Fonts:
    ui: pygame.font.Font
    small: pygame.font.Font
    big: pygame.font.Font
    symbol: pygame.font.Font


class AssetManager:
    def __init__(self) -> None:
        pygame.font.init()
        self.fonts = Fonts(
            ui=pygame.font.SysFont(None, 24),
            small=pygame.font.SysFont(None, 18),
            big=pygame.font.SysFont(None, 34),
            symbol=self._load_symbol_font(56),
        )

    def _load_symbol_font(self, size: int) -> pygame.font.Font:
        try:
            return pygame.font.SysFont(EMOJI_FONTS, size)
        except (OSError, pygame.error):
            # No emoji font on this machine; symbols will draw as boxes but the game stays playable.
            return pygame.font.SysFont(None, size)

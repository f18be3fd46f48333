from __future__ import annotations

import random
from collections import Counter
from collections.abc import Iterable, Sequence

from .types import Symbol, Tile


class CatalogError(ValueError):
    pass


def _count_symbols(symbols: Iterable[Symbol]) -> Counter[Symbol]:
    try:
        return Counter(symbols)
    except TypeError as e:
        raise CatalogError(f"Symbols must be hashable: {e}") from e


def build_catalog(pair_symbols: Sequence[Symbol]) -> list[Tile]:
    """Build the canonical deck: every symbol twice, ids 1..2P in catalog order."""
    if not pair_symbols:
        raise CatalogError("Catalog must contain at least one symbol.")
    counts = _count_symbols(pair_symbols)
    repeated = [s for s, n in counts.items() if n > 1]
    if repeated:
        raise CatalogError(f"Catalog symbols must be distinct, repeated: {repeated!r}")

    tiles: list[Tile] = []
    for symbol in pair_symbols:
        tiles.append(Tile(id=len(tiles) + 1, symbol=symbol))
        tiles.append(Tile(id=len(tiles) + 1, symbol=symbol))
    return tiles


def validate_deck(tiles: Sequence[Tile]) -> None:
    if not tiles:
        raise CatalogError("Deck is empty.")
    if len(tiles) % 2 != 0:
        raise CatalogError(f"Deck must have an even tile count, got {len(tiles)}.")
    ids = [t.id for t in tiles]
    if len(set(ids)) != len(ids):
        raise CatalogError("Tile ids must be unique.")
    if any(i <= 0 for i in ids):
        raise CatalogError("Tile ids must be positive.")
    for symbol, n in _count_symbols(t.symbol for t in tiles).items():
        if n != 2:
            raise CatalogError(f"Symbol {symbol!r} occurs {n} times, expected 2.")


def shuffle(tiles: Sequence[Tile], rng: random.Random | None = None) -> list[Tile]:
    """Return a uniformly shuffled copy of `tiles` (Fisher-Yates).

    The input is never mutated: the canonical deck is the shuffle source for
    every new game.
    """
    r = rng or random.Random()
    out = list(tiles)
    for i in range(len(out) - 1, 0, -1):
        j = r.randint(0, i)
        out[i], out[j] = out[j], out[i]
    return out

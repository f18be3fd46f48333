from __future__ import annotations

import itertools
import random
from collections import Counter

import pytest

from memorymatch.engine.deck import CatalogError, build_catalog, shuffle, validate_deck
from memorymatch.engine.types import Tile

FRUIT = ["🍉", "🍌", "🍇", "🍓", "🍒", "🍑"]


def test_build_catalog_pairs_every_symbol() -> None:
    tiles = build_catalog(FRUIT)
    assert len(tiles) == 2 * len(FRUIT)
    assert [t.id for t in tiles] == list(range(1, 13))
    counts = Counter(t.symbol for t in tiles)
    assert set(counts) == set(FRUIT)
    assert all(n == 2 for n in counts.values())
    validate_deck(tiles)


def test_build_catalog_keeps_catalog_order() -> None:
    tiles = build_catalog(["a", "b"])
    assert tiles == [Tile(1, "a"), Tile(2, "a"), Tile(3, "b"), Tile(4, "b")]


def test_build_catalog_rejects_empty_and_repeated_symbols() -> None:
    with pytest.raises(CatalogError):
        build_catalog([])
    with pytest.raises(CatalogError):
        build_catalog(["🍉", "🍌", "🍉"])


def test_validate_deck_rejects_bad_decks() -> None:
    with pytest.raises(CatalogError):
        validate_deck([Tile(1, "a"), Tile(2, "a"), Tile(3, "b")])  # odd count
    with pytest.raises(CatalogError):
        validate_deck([Tile(1, "a"), Tile(2, "a"), Tile(3, "a"), Tile(4, "a")])  # symbol x4
    with pytest.raises(CatalogError):
        validate_deck([Tile(1, "a"), Tile(1, "a")])  # duplicate id
    with pytest.raises(CatalogError):
        validate_deck([Tile(0, "a"), Tile(2, "a")])  # non-positive id


def test_shuffle_is_a_permutation_and_leaves_input_alone() -> None:
    tiles = build_catalog(FRUIT)
    before = list(tiles)
    out = shuffle(tiles, random.Random(7))
    assert out is not tiles
    assert tiles == before
    assert len(out) == len(tiles)
    assert sorted(t.id for t in out) == sorted(t.id for t in tiles)


def test_shuffle_is_deterministic_for_a_seeded_rng() -> None:
    tiles = build_catalog(FRUIT)
    assert shuffle(tiles, random.Random(99)) == shuffle(tiles, random.Random(99))


def test_shuffle_reaches_every_ordering_evenly() -> None:
    tiles = [Tile(1, "a"), Tile(2, "a"), Tile(3, "b")]
    rng = random.Random(2024)
    trials = 6000
    counts = Counter(tuple(t.id for t in shuffle(tiles, rng)) for _ in range(trials))
    assert set(counts) == set(itertools.permutations([1, 2, 3]))
    expected = trials / 6
    for n in counts.values():
        assert abs(n - expected) < 0.2 * expected


def test_unhashable_symbols_are_a_catalog_error() -> None:
    with pytest.raises(CatalogError, match="hashable"):
        build_catalog([["a"], ["b"]])
    with pytest.raises(CatalogError, match="hashable"):
        validate_deck([Tile(1, ["a"]), Tile(2, ["a"])])

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from jsonschema import Draft202012Validator

from memorymatch.engine.deck import CatalogError, build_catalog
from memorymatch.engine.game import GameConfig
from memorymatch.engine.types import Tile


class ContentError(RuntimeError):
    pass


def _load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Missing content file: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"Invalid JSON in {path}: {e}") from e


def validate_json(instance: object, schema: object, *, context: str) -> None:
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(instance), key=lambda e: [str(p) for p in e.path])
    if errors:
        lines = [f"Schema validation failed for {context}:"]
        for err in errors[:10]:
            loc = "/".join(str(p) for p in err.absolute_path)
            lines.append(f"- {loc}: {err.message}")
        raise ContentError("\n".join(lines))


@dataclass(frozen=True)
class SymbolCatalog:
    symbols: tuple[str, ...]

    def build_deck(self) -> list[Tile]:
        return build_catalog(self.symbols)


@dataclass(frozen=True)
class GameContent:
    catalog: SymbolCatalog
    config: GameConfig


class ContentService:
    def __init__(self, data_dir: Path, schema_dir: Path, catalog_name: str = "catalog.json") -> None:
        self._data_dir = data_dir
        self._schema_dir = schema_dir
        self._catalog_name = catalog_name

    def _load_validated(self) -> dict[str, object]:
        path = self._data_dir / self._catalog_name
        schema = _load_json(self._schema_dir / "catalog.schema.json")
        raw = _load_json(path)
        validate_json(raw, schema, context=str(path))
        if not isinstance(raw, dict):
            raise ContentError(f"{self._catalog_name} must be an object")
        return raw

    def _parse_catalog(self, raw: dict[str, object]) -> SymbolCatalog:
        symbols = raw.get("symbols")
        if not isinstance(symbols, list):
            raise ContentError("catalog.symbols must be a list")
        catalog = SymbolCatalog(symbols=tuple(str(s) for s in symbols))
        # The deck guard runs once here, when the catalog is defined.
        try:
            catalog.build_deck()
        except CatalogError as e:
            raise ContentError(f"Invalid catalog {self._catalog_name}: {e}") from e
        return catalog

    def _parse_game_config(self, raw: dict[str, object]) -> GameConfig:
        budget = raw.get("flip_budget")
        delay_ms = raw.get("flip_delay_ms")
        if not isinstance(budget, int) or not isinstance(delay_ms, int):
            raise ContentError("flip_budget and flip_delay_ms must be integers")
        try:
            return GameConfig(flip_budget=budget, flip_delay=delay_ms / 1000.0)
        except ValueError as e:
            raise ContentError(str(e)) from e

    def load_catalog(self) -> SymbolCatalog:
        return self._parse_catalog(self._load_validated())

    def load_game_config(self) -> GameConfig:
        return self._parse_game_config(self._load_validated())

    def load_content(self) -> GameContent:
        """Catalog and config from a single read and schema pass."""
        raw = self._load_validated()
        return GameContent(catalog=self._parse_catalog(raw), config=self._parse_game_config(raw))

    def validate_all(self) -> None:
        # Load is validation (schema + parse)
        _ = self.load_content()

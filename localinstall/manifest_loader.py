"""Manifest loader — read, parse and validate Cargo.toml metadata."""

from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import ValidationError

from contracts.errors import IoError, ParseError, PathError, SchemaError
from contracts.manifest import CargoManifest, ManifestFile


def load_manifest(path: str | Path) -> ManifestFile:
    """Load a Cargo.toml file and return its local-install metadata."""
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IoError(f"unable to read {p}: {exc}", path=p) from exc

    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        raise ParseError(f"unable to parse {p}: {exc}", path=p) from exc

    try:
        manifest = CargoManifest.model_validate(data)
    except ValidationError as exc:
        raise SchemaError(
            f"unable to deserialize {p} into a Cargo.toml: {exc}", path=p
        ) from exc

    directory = p.parent
    if directory == p:
        raise PathError(f"unable to determine containing directory for {p}", path=p)

    return ManifestFile(path=p, directory=directory, manifest=manifest)

"""Cargo.toml metadata schema — Pydantic models.

Only ``[workspace.metadata.local-install]`` and
``[package.metadata.local-install]`` are modelled; every other key in the
manifest is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any, Literal, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Discriminator,
    Field,
)

MANIFEST_FILENAME = "Cargo.toml"


# ── Dependency descriptors ──────────────────────────────────────────


class SimpleDependency(BaseModel):
    """``name = "1.2"``"""

    kind: Literal["simple"] = "simple"
    version: str


class DetailedDependency(BaseModel):
    """``name = { version = "1.2", features = ["x"] }``"""

    model_config = ConfigDict(strict=True)

    kind: Literal["detailed"] = "detailed"
    package: str | None = None
    version: str | None = None
    registry: str | None = None
    path: str | None = None
    git: str | None = None
    rev: str | None = None
    tag: str | None = None
    branch: str | None = None
    default_features: bool = Field(
        True, validation_alias=AliasChoices("default-features", "default_features")
    )
    features: list[str] = []


class OtherDependency(BaseModel):
    """Any shape we don't install from, e.g. ``name = { workspace = true }``."""

    kind: Literal["other"] = "other"
    raw: Any = None


def _tag_dependency(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value
    if isinstance(value, str):
        return {"kind": "simple", "version": value}
    if isinstance(value, dict) and "workspace" not in value:
        return {**value, "kind": "detailed"}
    return {"kind": "other", "raw": value}


DependencySpec = Annotated[
    Union[SimpleDependency, DetailedDependency, OtherDependency],
    Discriminator("kind"),
    BeforeValidator(_tag_dependency),
]


# ── Metadata tables ─────────────────────────────────────────────────


class LocalInstallMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    local_install: dict[str, DependencySpec] = Field(
        default_factory=dict, alias="local-install"
    )


class MetadataSection(BaseModel):
    """A ``[workspace]`` or ``[package]`` table."""

    metadata: LocalInstallMetadata = LocalInstallMetadata()

    def dependencies(self) -> list[tuple[str, DependencySpec]]:
        """Local-install entries in ascending name order."""
        return sorted(self.metadata.local_install.items(), key=lambda item: item[0])


class CargoManifest(BaseModel):
    workspace: MetadataSection | None = None
    package: MetadataSection | None = None

    def sections(self) -> list[MetadataSection]:
        """Present sections, workspace first."""
        return [s for s in (self.workspace, self.package) if s is not None]


# ── Loaded file ─────────────────────────────────────────────────────


@dataclass
class ManifestFile:
    """A parsed manifest together with where it was found."""

    path: Path
    directory: Path
    manifest: CargoManifest

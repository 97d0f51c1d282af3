"""Shared contracts — manifest schema, install plan models and errors."""

from contracts.errors import (
    EnvError,
    IoError,
    LocalInstallError,
    ParseError,
    PathError,
    SchemaError,
)
from contracts.install import Install, InstallFlag, InstallSet
from contracts.manifest import (
    CargoManifest,
    DependencySpec,
    DetailedDependency,
    ManifestFile,
    OtherDependency,
    SimpleDependency,
)

__all__ = [
    # errors
    "LocalInstallError",
    "EnvError",
    "IoError",
    "ParseError",
    "SchemaError",
    "PathError",
    # install plan
    "Install",
    "InstallFlag",
    "InstallSet",
    # manifest
    "CargoManifest",
    "DependencySpec",
    "DetailedDependency",
    "ManifestFile",
    "OtherDependency",
    "SimpleDependency",
]

"""Dependency translator — turn local-install entries into install flags.

Flags are emitted in a fixed order (version, registry, path, git, rev, tag,
branch, no-default-features, features) so consumers can rely on position.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from contracts.install import Install, InstallFlag
from contracts.manifest import (
    DependencySpec,
    DetailedDependency,
    OtherDependency,
    SimpleDependency,
)

logger = logging.getLogger(__name__)


def fix_version(version: str) -> str:
    """Make a bare version like ``1.2`` a caret requirement; leave the rest."""
    if version[:1].isascii() and version[:1].isdigit():
        return f"^{version}"
    return version


def translate(name: str, spec: DependencySpec, directory: Path) -> Install | None:
    """Translate one entry; unsupported shapes are logged and yield ``None``.

    *directory* is the owning manifest's directory, used to resolve ``path``.
    """
    if isinstance(spec, SimpleDependency):
        return Install(
            name=name,
            flags=[InstallFlag(flag="--version", values=[fix_version(spec.version)])],
        )
    if isinstance(spec, DetailedDependency):
        return Install(name=spec.package or name, flags=_detailed_flags(spec, directory))

    raw = spec.raw if isinstance(spec, OtherDependency) else spec
    logger.warning("unsupported dependency type for %s: %r", name, raw)
    return None


def _detailed_flags(spec: DetailedDependency, directory: Path) -> list[InstallFlag]:
    flags: list[InstallFlag] = []

    if spec.version is not None:
        flags.append(InstallFlag(flag="--version", values=[fix_version(spec.version)]))
    if spec.registry is not None:
        flags.append(InstallFlag(flag="--registry", values=[spec.registry]))
    if spec.path is not None:
        resolved = os.path.normpath(os.path.join(directory, spec.path))
        flags.append(InstallFlag(flag="--path", values=[resolved]))

    if spec.git is not None:
        flags.append(InstallFlag(flag="--git", values=[spec.git]))
    if spec.rev is not None:
        flags.append(InstallFlag(flag="--rev", values=[spec.rev]))
    if spec.tag is not None:
        flags.append(InstallFlag(flag="--tag", values=[spec.tag]))
    if spec.branch is not None:
        flags.append(InstallFlag(flag="--branch", values=[spec.branch]))

    if not spec.default_features:
        flags.append(InstallFlag(flag="--no-default-features"))
    if spec.features:
        flags.append(InstallFlag(flag="--features", values=list(spec.features)))

    return flags

"""Directory walker — find the nearest Cargo.toml and assemble its install set.

The walk stops at the first ancestor holding a manifest, even when that
manifest has no local-install entries; a farther manifest is never read.
"""

from __future__ import annotations

import logging
from pathlib import Path

from contracts.errors import EnvError
from contracts.install import Install, InstallSet
from contracts.manifest import MANIFEST_FILENAME, ManifestFile
from localinstall.manifest_loader import load_manifest
from localinstall.translator import translate

logger = logging.getLogger(__name__)


def find_installs(
    dst_bin: str | Path | None = None,
    start_dir: str | Path | None = None,
) -> list[InstallSet]:
    """Return the install sets for the manifest governing *start_dir*.

    *start_dir* defaults to the current working directory. The result holds
    at most one set; it is empty when no manifest is found or the manifest
    yields no installs.
    """
    directory = _starting_directory(start_dir)

    while True:
        candidate = directory / MANIFEST_FILENAME
        if _manifest_exists(candidate):
            logger.debug("found manifest %s", candidate)
            file = load_manifest(candidate)
            installs = collect_installs(file)
            if not installs:
                logger.debug("no local-install entries in %s", candidate)
                return []
            bin_dir = Path(dst_bin) if dst_bin is not None else file.directory / "bin"
            return [InstallSet(bin=bin_dir, src=candidate, installs=installs)]

        parent = directory.parent
        if parent == directory:
            logger.debug("no %s found above %s", MANIFEST_FILENAME, start_dir or "cwd")
            return []
        directory = parent


def collect_installs(file: ManifestFile) -> list[Install]:
    """Translate workspace entries, then package entries, skipping unsupported ones."""
    installs: list[Install] = []
    for section in file.manifest.sections():
        for name, spec in section.dependencies():
            install = translate(name, spec, file.directory)
            if install is not None:
                installs.append(install)
    return installs


def _manifest_exists(candidate: Path) -> bool:
    # An unreadable directory counts as having no manifest.
    try:
        return candidate.exists()
    except OSError as exc:
        logger.debug("cannot stat %s: %s", candidate, exc)
        return False


def _starting_directory(start_dir: str | Path | None) -> Path:
    try:
        if start_dir is not None:
            return Path(start_dir).resolve()
        return Path.cwd()
    except OSError as exc:
        raise EnvError(f"unable to determine cwd: {exc}") from exc

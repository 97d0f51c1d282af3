"""Find the nearest Cargo.toml and plan its local installs."""

from localinstall.manifest_loader import load_manifest
from localinstall.translator import fix_version, translate
from localinstall.walker import collect_installs, find_installs

__all__ = [
    "collect_installs",
    "find_installs",
    "fix_version",
    "load_manifest",
    "translate",
]

"""Error taxonomy for manifest discovery and loading.

Every failure that aborts a walk derives from ``LocalInstallError``; the CLI
maps these to a one-line message and a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path


class LocalInstallError(Exception):
    """Base class for fatal local-install errors."""

    code: str = "UNKNOWN"

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class EnvError(LocalInstallError):
    """The current working directory could not be determined."""

    code = "ENV_ERROR"


class IoError(LocalInstallError):
    """A located manifest could not be read."""

    code = "IO_ERROR"


class ParseError(LocalInstallError):
    """Manifest text is not well-formed TOML."""

    code = "PARSE_ERROR"


class SchemaError(LocalInstallError):
    """Manifest data does not match the expected metadata shape."""

    code = "SCHEMA_ERROR"


class PathError(LocalInstallError):
    """A path manipulation invariant was violated."""

    code = "PATH_ERROR"

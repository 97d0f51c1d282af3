"""Install plan contracts.

Value objects handed to the installer step: one ``InstallSet`` per
discovered manifest, one ``Install`` per package, flags in a fixed order.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class InstallFlag(BaseModel):
    """A single command-line option, e.g. ``--version ^1.2``."""

    model_config = ConfigDict(frozen=True)

    flag: str
    values: tuple[str, ...] = ()

    def to_args(self) -> list[str]:
        """Render as argv; multi-value flags repeat the flag per value."""
        if not self.values:
            return [self.flag]
        args: list[str] = []
        for value in self.values:
            args.extend((self.flag, value))
        return args


class Install(BaseModel):
    """One package to install plus its ordered flags."""

    model_config = ConfigDict(frozen=True)

    name: str
    flags: tuple[InstallFlag, ...] = ()

    def to_args(self) -> list[str]:
        args = [self.name]
        for flag in self.flags:
            args.extend(flag.to_args())
        return args


class InstallSet(BaseModel):
    """Installs sharing one destination bin directory."""

    model_config = ConfigDict(frozen=True)

    bin: Path
    src: Path | None = None  # manifest the set came from; None for synthetic sets
    installs: tuple[Install, ...] = ()

    def commands(self, program: str = "cargo") -> list[list[str]]:
        """Return one ``<program> install ...`` argv per install."""
        return [[program, "install", *install.to_args()] for install in self.installs]

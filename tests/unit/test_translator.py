"""Unit tests for the dependency translator."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from contracts.install import InstallFlag
from contracts.manifest import DetailedDependency, OtherDependency, SimpleDependency
from localinstall.translator import fix_version, translate

REPO_PKG = Path("/repo/pkg")


def _flags(install) -> list[tuple[str, list[str]]]:
    return [(f.flag, list(f.values)) for f in install.flags]


# ── fix_version ─────────────────────────────────────────────────────


class TestFixVersion:
    @pytest.mark.parametrize("version", ["1.2.3", "0.1", "1"])
    def test_bare_version_gets_caret(self, version: str) -> None:
        assert fix_version(version) == f"^{version}"

    @pytest.mark.parametrize("version", ["*", ">=1.0", "=1.2.3", "~1.2", "^1.0", "v1.0"])
    def test_operator_passes_through(self, version: str) -> None:
        assert fix_version(version) == version

    def test_empty_passes_through(self) -> None:
        assert fix_version("") == ""

    def test_non_ascii_digit_passes_through(self) -> None:
        assert fix_version("١.0") == "١.0"


# ── simple entries ──────────────────────────────────────────────────


class TestSimple:
    def test_single_version_flag(self) -> None:
        install = translate("just", SimpleDependency(version="1.2.3"), REPO_PKG)
        assert install.name == "just"
        assert install.flags == (InstallFlag(flag="--version", values=("^1.2.3",)),)

    def test_wildcard(self) -> None:
        install = translate("just", SimpleDependency(version="*"), REPO_PKG)
        assert _flags(install) == [("--version", ["*"])]


# ── detailed entries ────────────────────────────────────────────────


class TestDetailed:
    def test_package_override(self) -> None:
        spec = DetailedDependency(package="wasm-bindgen-cli", version="0.2")
        install = translate("bindgen", spec, REPO_PKG)
        assert install.name == "wasm-bindgen-cli"

    def test_no_fields_no_flags(self) -> None:
        install = translate("tool", DetailedDependency(), REPO_PKG)
        assert install.name == "tool"
        assert install.flags == ()

    def test_relative_path_is_joined(self) -> None:
        install = translate("foo", DetailedDependency(path="../foo"), REPO_PKG)
        assert _flags(install) == [("--path", [str(Path("/repo/foo"))])]

    def test_absolute_path_wins(self) -> None:
        install = translate("foo", DetailedDependency(path="/opt/foo"), REPO_PKG)
        assert _flags(install) == [("--path", ["/opt/foo"])]

    def test_features_after_no_default_features(self) -> None:
        spec = DetailedDependency(default_features=False, features=["x", "y"])
        install = translate("tool", spec, REPO_PKG)
        assert _flags(install) == [
            ("--no-default-features", []),
            ("--features", ["x", "y"]),
        ]

    def test_default_features_true_adds_nothing(self) -> None:
        install = translate("tool", DetailedDependency(default_features=True), REPO_PKG)
        assert install.flags == ()

    def test_full_precedence_order(self) -> None:
        spec = DetailedDependency(
            features=["f"],
            default_features=False,
            branch="main",
            tag="v1",
            rev="abc123",
            git="https://example.com/tool.git",
            path="tools/tool",
            registry="internal",
            version="2.0",
        )
        install = translate("tool", spec, REPO_PKG)
        assert [f.flag for f in install.flags] == [
            "--version",
            "--registry",
            "--path",
            "--git",
            "--rev",
            "--tag",
            "--branch",
            "--no-default-features",
            "--features",
        ]
        assert install.flags[0].values == ("^2.0",)
        assert install.flags[2].values == (str(Path("/repo/pkg/tools/tool")),)

    def test_detailed_version_passes_operator(self) -> None:
        install = translate("tool", DetailedDependency(version=">=1.0"), REPO_PKG)
        assert _flags(install) == [("--version", [">=1.0"])]


# ── unsupported entries ─────────────────────────────────────────────


class TestOther:
    def test_returns_none_and_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        spec = OtherDependency(raw={"workspace": True})
        with caplog.at_level(logging.WARNING, logger="localinstall.translator"):
            assert translate("mdbook", spec, REPO_PKG) is None
        assert "unsupported dependency type for mdbook" in caplog.text

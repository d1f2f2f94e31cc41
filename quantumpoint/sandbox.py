"""Path confinement and validation for build output."""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import Union

_PROFILES = ("dev", "release")


class SandboxError(Exception):
    """Base error for sandbox violations."""


class PathTraversalError(SandboxError):
    def __init__(self, path: str) -> None:
        super().__init__(f"path traversal blocked: {path}")
        self.path = path


class BuildDirOutsideProjectError(SandboxError):
    def __init__(self) -> None:
        super().__init__("build directory must stay under project root")


class InvalidProfileError(SandboxError):
    def __init__(self, profile: str) -> None:
        super().__init__(f"invalid profile: {profile}")
        self.profile = profile


def _to_absolute(path: Union[str, Path]) -> Path:
    path = Path(path)
    return path if path.is_absolute() else Path(os.getcwd()) / path


def validate_build_dir(
    project_root: Union[str, Path], build_dir: Union[str, Path]
) -> Path:
    """Check that ``build_dir`` lies under ``project_root/.nocode/build``.

    Creates and returns the project's Rust build directory.
    """
    project_abs = _to_absolute(project_root)
    build_abs = _to_absolute(build_dir)

    allowed = project_abs / ".nocode" / "build"
    expected_rust = allowed / "rust"

    under_project = build_abs.is_relative_to(project_abs)
    under_build = build_abs.is_relative_to(allowed) or build_abs.is_relative_to(
        expected_rust
    )
    if not under_project or not under_build:
        raise BuildDirOutsideProjectError()

    expected_rust.mkdir(parents=True, exist_ok=True)
    return expected_rust


def validate_profile(profile: str) -> None:
    """Accept only the ``dev`` and ``release`` profiles."""
    if profile not in _PROFILES:
        raise InvalidProfileError(profile)


def validate_relative_path(rel: str) -> None:
    """Reject relative paths containing a parent-directory component."""
    if ".." in PurePath(rel).parts:
        raise PathTraversalError(rel)
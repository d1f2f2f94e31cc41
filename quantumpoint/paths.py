"""Project folder layout, naming and path resolution helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from quantumpoint.domain import GraphLayer
from quantumpoint.target import BuildTarget, resolve_build_dir

QP_VERSION = "0.0.0.2"
GRAPH_FILE_EXTENSION = "qp"
GRAPHS_DIR = "graphs"
DEFAULT_ENTRY = f"{GRAPHS_DIR}/main.{GRAPH_FILE_EXTENSION}"
MANIFEST_FILE = "quantum-point.qp"
DEFAULT_BUILD_OUT = ".nocode/build/rust"
DEFAULT_FOLDER_NAME = "loyiha"

_INVALID_FOLDER_CHARS = frozenset('<>:"/\\|?*\0')

PathLike = Union[str, Path]


def _current_dir() -> Path:
    try:
        return Path(os.getcwd())
    except OSError:
        return Path(".")


def _to_absolute(path: PathLike) -> Path:
    path = Path(path)
    return path if path.is_absolute() else _current_dir() / path


def _ascii_lower(text: str) -> str:
    return "".join(c.lower() if c.isascii() else c for c in text)


def user_documents_dir() -> Path:
    """The user's ``Documents`` folder, or the current directory when absent."""
    profile = os.environ.get("USERPROFILE")
    if profile is None:
        profile = os.environ.get("HOME")
    if profile is not None:
        docs = Path(profile) / "Documents"
        if docs.is_dir():
            return docs
    return _current_dir()


def folder_name_from_project(name: str) -> str:
    """Folder name for a project, with characters invalid in paths removed."""
    trimmed = name.strip()
    if not trimmed:
        return DEFAULT_FOLDER_NAME
    cleaned = "".join(c for c in trimmed if c not in _INVALID_FOLDER_CHARS)
    cleaned = cleaned.strip().rstrip(".")
    return cleaned or DEFAULT_FOLDER_NAME


def default_projects_folder(workspace: PathLike, name: str) -> Path:
    """``Documents`` joined with the project's folder name."""
    return user_documents_dir() / folder_name_from_project(name)


def resolve_project_directory(parent_or_root: PathLike, project_name: str) -> Path:
    """Project folder for a chosen path: the path itself or a named child of it."""
    parent_or_root = Path(parent_or_root)
    folder_name = folder_name_from_project(project_name)
    if is_project_root(parent_or_root):
        return parent_or_root
    if parent_or_root.name and _ascii_lower(parent_or_root.name) == _ascii_lower(
        folder_name
    ):
        return parent_or_root
    return parent_or_root / folder_name


def slugify(name: str) -> str:
    """Lower-case ASCII slug with single dashes between words."""
    out: list[str] = []
    last_dash = False
    for c in name:
        if c.isascii() and c.isalnum():
            out.append(c.lower())
            last_dash = False
        elif c in " -_":
            if not last_dash and out:
                out.append("-")
                last_dash = True
    return "".join(out).strip("-")


def graphs_directory(folder: PathLike) -> Path:
    return Path(folder) / GRAPHS_DIR


def build_rust_directory(folder: PathLike) -> Path:
    return Path(folder) / ".nocode" / "build" / "rust"


def manifest_path(folder: PathLike) -> Path:
    return Path(folder) / MANIFEST_FILE


def ensure_project_directories(folder: PathLike) -> None:
    """Create the graphs and Rust build directories of a project."""
    graphs_directory(folder).mkdir(parents=True, exist_ok=True)
    build_rust_directory(folder).mkdir(parents=True, exist_ok=True)


def is_project_root(folder: PathLike) -> bool:
    """True when the folder holds a manifest or a main graph file."""
    main_graph = graphs_directory(folder) / f"main.{GRAPH_FILE_EXTENSION}"
    return manifest_path(folder).is_file() or main_graph.is_file()


def project_root_for_qp(qp_path: PathLike) -> Path:
    """Project root of a graph file: skips a ``graphs`` parent directory."""
    parent = Path(qp_path).parent
    if parent.name == GRAPHS_DIR:
        return parent.parent
    return parent


def resolve_build_out(qp_path: PathLike, out: PathLike, layer: GraphLayer) -> Path:
    """Absolute build output directory for a graph file and a requested ``out``."""
    root = project_root_for_qp(qp_path)
    target = BuildTarget.default_for_layer(layer)
    under_project = resolve_build_dir(root, target)
    out = Path(out)
    norm = str(out).replace("\\", "/")
    if norm == DEFAULT_BUILD_OUT or norm.endswith("/" + DEFAULT_BUILD_OUT):
        return _to_absolute(under_project)
    if out.is_absolute():
        return out
    return _to_absolute(root / out)
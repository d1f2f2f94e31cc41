"""Build targets: the artifact kind produced at Build time."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Tuple, Union

from quantumpoint.domain import Domain, GraphLayer


class BuildTarget(Enum):
    """Target language or artifact kind; only used at Build, never at Run."""

    RUST = "rust"
    WASM = "wasm"
    VIEW_SPEC = "view"
    BRIDGE_ROUTES = "bridge"

    def id(self) -> str:
        return self.value

    def label(self) -> str:
        return _LABELS[self]

    def required_domain(self) -> Domain:
        return _REQUIRED_DOMAIN[self]

    @classmethod
    def default_for_layer(cls, layer: GraphLayer) -> "BuildTarget":
        return {
            GraphLayer.CORE: cls.RUST,
            GraphLayer.VIEW: cls.VIEW_SPEC,
            GraphLayer.BRIDGE: cls.BRIDGE_ROUTES,
        }[layer]

    @classmethod
    def available_for_layer(cls, layer: GraphLayer) -> Tuple["BuildTarget", ...]:
        return {
            GraphLayer.CORE: (cls.RUST, cls.WASM),
            GraphLayer.VIEW: (cls.VIEW_SPEC,),
            GraphLayer.BRIDGE: (cls.BRIDGE_ROUTES,),
        }[layer]

    def build_subdir(self) -> str:
        return self.value

    def matches_layer(self, layer: GraphLayer) -> bool:
        return Domain.from_layer(layer) == self.required_domain()

    def __str__(self) -> str:
        return self.label()


_LABELS = {
    BuildTarget.RUST: "Rust (cargo)",
    BuildTarget.WASM: "WASM (wasm32)",
    BuildTarget.VIEW_SPEC: "View spec",
    BuildTarget.BRIDGE_ROUTES: "Bridge routes",
}

_REQUIRED_DOMAIN = {
    BuildTarget.RUST: Domain.CORE,
    BuildTarget.WASM: Domain.CORE,
    BuildTarget.VIEW_SPEC: Domain.VIEW,
    BuildTarget.BRIDGE_ROUTES: Domain.BRIDGE,
}


def project_build_dir_for(folder: Union[str, Path], target: BuildTarget) -> Path:
    """Build directory of ``target`` inside a project folder."""
    return Path(folder) / ".nocode" / "build" / target.build_subdir()


def resolve_build_dir(project_root: Union[str, Path], target: BuildTarget) -> Path:
    """Resolve the build output directory from project root and target."""
    return project_build_dir_for(project_root, target)
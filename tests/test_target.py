from pathlib import Path

import pytest

from quantumpoint.domain import Domain, GraphLayer
from quantumpoint.target import BuildTarget, project_build_dir_for, resolve_build_dir


@pytest.mark.parametrize(
    "target, ident, label",
    [
        (BuildTarget.RUST, "rust", "Rust (cargo)"),
        (BuildTarget.WASM, "wasm", "WASM (wasm32)"),
        (BuildTarget.VIEW_SPEC, "view", "View spec"),
        (BuildTarget.BRIDGE_ROUTES, "bridge", "Bridge routes"),
    ],
)
def test_ids_and_labels(target, ident, label):
    assert target.id() == ident
    assert target.build_subdir() == ident
    assert target.label() == label
    assert str(target) == label


def test_iteration_order():
    targets = list(BuildTarget)
    assert targets[0].id() == "rust"
    assert targets[1].id() == "wasm"
    assert targets[2].id() == "view"
    assert targets[3].id() == "bridge"
    assert tuple(targets[:2]) == BuildTarget.available_for_layer(GraphLayer.CORE)


def test_required_domains():
    assert BuildTarget.RUST.required_domain() is Domain.CORE
    assert BuildTarget.WASM.required_domain() is Domain.CORE
    assert BuildTarget.VIEW_SPEC.required_domain() is Domain.VIEW
    assert BuildTarget.BRIDGE_ROUTES.required_domain() is Domain.BRIDGE


def test_default_for_layer():
    assert BuildTarget.default_for_layer(GraphLayer.CORE) is BuildTarget.RUST
    assert BuildTarget.default_for_layer(GraphLayer.VIEW) is BuildTarget.VIEW_SPEC
    assert BuildTarget.default_for_layer(GraphLayer.BRIDGE) is BuildTarget.BRIDGE_ROUTES


def test_available_for_layer():
    assert BuildTarget.available_for_layer(GraphLayer.CORE) == (
        BuildTarget.RUST,
        BuildTarget.WASM,
    )
    assert BuildTarget.available_for_layer(GraphLayer.VIEW) == (BuildTarget.VIEW_SPEC,)


@pytest.mark.parametrize("layer", list(GraphLayer))
def test_available_targets_match_layer(layer):
    available = BuildTarget.available_for_layer(layer)
    assert BuildTarget.default_for_layer(layer) in available
    for target in BuildTarget:
        assert target.matches_layer(layer) == (target in available)


def test_build_dirs(tmp_path):
    expected = tmp_path / ".nocode" / "build" / "wasm"
    assert project_build_dir_for(tmp_path, BuildTarget.WASM) == expected
    assert resolve_build_dir(str(tmp_path), BuildTarget.WASM) == expected
    assert project_build_dir_for("proj", BuildTarget.RUST) == Path(
        "proj/.nocode/build/rust"
    )
import pytest

from quantumpoint.ports import (
    PORTS_DEFAULT,
    PORTS_IF,
    PORTS_LOOP,
    PORTS_RETURN,
    PORTS_START,
    PORTS_SWITCH,
    PORTS_TRY,
    PortDirection,
    PortKind,
    PortSpec,
)


def _flow_ports(*outs):
    return (PortSpec.exec_in("exec"), *(PortSpec.exec_out(name) for name in outs))


@pytest.mark.parametrize(
    "factory, direction, kind",
    [
        (PortSpec.exec_in, PortDirection.IN, PortKind.EXEC),
        (PortSpec.exec_out, PortDirection.OUT, PortKind.EXEC),
        (PortSpec.data_in, PortDirection.IN, PortKind.DATA),
        (PortSpec.data_out, PortDirection.OUT, PortKind.DATA),
    ],
)
def test_factories(factory, direction, kind):
    port = factory("value")
    assert port == PortSpec("value", direction, kind)


def test_start_has_only_exec_out():
    assert PORTS_START == (PortSpec.exec_out("exec"),)


def test_return_has_only_exec_in():
    assert PORTS_RETURN == (PortSpec.exec_in("exec"),)


@pytest.mark.parametrize(
    "ports", [PORTS_IF, PORTS_DEFAULT, PORTS_LOOP, PORTS_SWITCH, PORTS_TRY]
)
def test_flow_ports_start_with_exec_in(ports):
    assert ports[0] == PortSpec.exec_in("exec")
    assert all(p.kind is PortKind.EXEC for p in ports)
    assert all(p.direction is PortDirection.OUT for p in ports[1:])


def test_switch_ports_names():
    assert PORTS_SWITCH == _flow_ports(
        "case1", "case2", "case3", "case4", "case5", "case6", "default", "done"
    )


def test_if_and_try_ports_names():
    assert PORTS_IF == _flow_ports("true", "false", "done")
    assert PORTS_TRY == _flow_ports("try", "catch", "done")
    assert PORTS_LOOP == _flow_ports("body", "done")
    assert PORTS_DEFAULT == _flow_ports("exec")
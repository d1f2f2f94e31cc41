"""Exec and data ports exposed by graph nodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PortDirection(Enum):
    IN = "in"
    OUT = "out"


class PortKind(Enum):
    EXEC = "exec"
    DATA = "data"


@dataclass(frozen=True)
class PortSpec:
    name: str
    direction: PortDirection
    kind: PortKind

    @classmethod
    def exec_in(cls, name: str) -> "PortSpec":
        return cls(name, PortDirection.IN, PortKind.EXEC)

    @classmethod
    def exec_out(cls, name: str) -> "PortSpec":
        return cls(name, PortDirection.OUT, PortKind.EXEC)

    @classmethod
    def data_in(cls, name: str) -> "PortSpec":
        return cls(name, PortDirection.IN, PortKind.DATA)

    @classmethod
    def data_out(cls, name: str) -> "PortSpec":
        return cls(name, PortDirection.OUT, PortKind.DATA)


PORTS_START = (PortSpec.exec_out("exec"),)

PORTS_IF = (
    PortSpec.exec_in("exec"),
    PortSpec.exec_out("true"),
    PortSpec.exec_out("false"),
    PortSpec.exec_out("done"),
)

PORTS_DEFAULT = (PortSpec.exec_in("exec"), PortSpec.exec_out("exec"))

PORTS_LOOP = (
    PortSpec.exec_in("exec"),
    PortSpec.exec_out("body"),
    PortSpec.exec_out("done"),
)

PORTS_SWITCH = (
    PortSpec.exec_in("exec"),
    *(PortSpec.exec_out(f"case{n}") for n in range(1, 7)),
    PortSpec.exec_out("default"),
    PortSpec.exec_out("done"),
)

PORTS_TRY = (
    PortSpec.exec_in("exec"),
    PortSpec.exec_out("try"),
    PortSpec.exec_out("catch"),
    PortSpec.exec_out("done"),
)

PORTS_RETURN = (PortSpec.exec_in("exec"),)
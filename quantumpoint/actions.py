"""Language-agnostic domain actions and the typed values they operate on."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class CmpOp(Enum):
    EQ = "eq"
    NE = "ne"
    LT = "lt"
    LE = "le"
    GT = "gt"
    GE = "ge"


class LogicOp(Enum):
    AND = "and"
    OR = "or"


class ArithOp(Enum):
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"


@dataclass(frozen=True)
class Ident:
    """Reference to a named variable."""

    name: str


@dataclass(frozen=True)
class Cmp:
    op: CmpOp
    left: "ActionValue"
    right: "ActionValue"


@dataclass(frozen=True)
class BinOp:
    op: ArithOp
    left: "ActionValue"
    right: "ActionValue"


@dataclass(frozen=True)
class Logic:
    op: LogicOp
    left: "ActionValue"
    right: "ActionValue"


@dataclass(frozen=True)
class Not:
    value: "ActionValue"


# Literals are plain bool, int, float and str values.
ActionValue = Union[bool, int, float, str, Ident, Cmp, BinOp, Logic, Not]


class DomainAction:
    """Base class of every domain action."""

    __slots__ = ()


@dataclass
class SwitchArm:
    label: str
    body: List[DomainAction] = field(default_factory=list)


@dataclass
class Print(DomainAction):
    message: str


@dataclass
class DataStore(DomainAction):
    name: str
    value: ActionValue


@dataclass
class Const(DomainAction):
    name: str
    value: ActionValue


@dataclass
class ListStore(DomainAction):
    name: str
    items: List[ActionValue] = field(default_factory=list)


@dataclass
class Branch(DomainAction):
    condition: ActionValue
    then_body: List[DomainAction] = field(default_factory=list)
    else_body: List[DomainAction] = field(default_factory=list)


@dataclass
class While(DomainAction):
    condition: ActionValue
    body: List[DomainAction] = field(default_factory=list)


@dataclass
class For(DomainAction):
    """Inclusive integer loop from ``start`` to ``end``."""

    var: str
    start: int
    end: int
    body: List[DomainAction] = field(default_factory=list)


@dataclass
class ForEach(DomainAction):
    item_var: str
    collection: str
    body: List[DomainAction] = field(default_factory=list)


@dataclass
class Return(DomainAction):
    value: Optional[ActionValue] = None


@dataclass
class Switch(DomainAction):
    discriminant: ActionValue
    arms: List[SwitchArm] = field(default_factory=list)
    default_body: List[DomainAction] = field(default_factory=list)


@dataclass
class Break(DomainAction):
    pass


@dataclass
class Continue(DomainAction):
    pass


@dataclass
class Try(DomainAction):
    try_body: List[DomainAction] = field(default_factory=list)
    catch_body: List[DomainAction] = field(default_factory=list)


@dataclass
class Throw(DomainAction):
    message: str


@dataclass
class Expr(DomainAction):
    name: str
    value: ActionValue


@dataclass
class Async(DomainAction):
    body: List[DomainAction] = field(default_factory=list)


@dataclass
class Await(DomainAction):
    binding: Optional[str] = None


@dataclass
class Call(DomainAction):
    name: str
    args: List[ActionValue] = field(default_factory=list)
    into: Optional[str] = None


@dataclass
class DbRead(DomainAction):
    table: str
    into_var: str


@dataclass
class Module(DomainAction):
    name: str
    actions: List[DomainAction] = field(default_factory=list)
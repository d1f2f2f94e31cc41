"""Universal intermediate representation of a lowered program."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Union


class CmpOp(Enum):
    EQ = "eq"
    NE = "ne"
    LT = "lt"
    LE = "le"
    GT = "gt"
    GE = "ge"


class BinOp(Enum):
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    AND = "and"
    OR = "or"


@dataclass(frozen=True)
class Ident:
    """Reference to a named variable."""

    name: str


@dataclass(frozen=True)
class Cmp:
    op: CmpOp
    left: "ValueExpr"
    right: "ValueExpr"


@dataclass(frozen=True)
class Binary:
    op: BinOp
    left: "ValueExpr"
    right: "ValueExpr"


@dataclass(frozen=True)
class Not:
    value: "ValueExpr"


# Literals are plain bool, int, float and str values.
ValueExpr = Union[bool, int, float, str, Ident, Cmp, Binary, Not]


class Action:
    """Base class of every IR action."""

    __slots__ = ()


@dataclass
class SwitchArm:
    label: str
    body: List[Action] = field(default_factory=list)


@dataclass
class Print(Action):
    message: str


@dataclass
class DataStore(Action):
    name: str
    value: ValueExpr


@dataclass
class Const(Action):
    name: str
    value: ValueExpr


@dataclass
class ListStore(Action):
    name: str
    items: List[ValueExpr] = field(default_factory=list)


@dataclass
class Branch(Action):
    condition: ValueExpr
    then_body: List[Action] = field(default_factory=list)
    else_body: List[Action] = field(default_factory=list)


@dataclass
class While(Action):
    condition: ValueExpr
    body: List[Action] = field(default_factory=list)


@dataclass
class For(Action):
    """Inclusive integer loop from ``start`` to ``end``."""

    var: str
    start: int
    end: int
    body: List[Action] = field(default_factory=list)


@dataclass
class ForEach(Action):
    item_var: str
    collection: str
    body: List[Action] = field(default_factory=list)


@dataclass
class Return(Action):
    value: Optional[ValueExpr] = None


@dataclass
class Switch(Action):
    discriminant: ValueExpr
    arms: List[SwitchArm] = field(default_factory=list)
    default_body: List[Action] = field(default_factory=list)


@dataclass
class Break(Action):
    pass


@dataclass
class Continue(Action):
    pass


@dataclass
class Try(Action):
    try_body: List[Action] = field(default_factory=list)
    catch_body: List[Action] = field(default_factory=list)


@dataclass
class Throw(Action):
    message: str


@dataclass
class Expr(Action):
    name: str
    value: ValueExpr


@dataclass
class Async(Action):
    body: List[Action] = field(default_factory=list)


@dataclass
class Await(Action):
    binding: Optional[str] = None


@dataclass
class Call(Action):
    name: str
    args: List[ValueExpr] = field(default_factory=list)
    into: Optional[str] = None


@dataclass
class DbRead(Action):
    table: str
    into_var: str


@dataclass
class Module(Action):
    name: str
    actions: List[Action] = field(default_factory=list)


@dataclass
class FunctionDef:
    name: str
    params: List[str] = field(default_factory=list)
    body: List[Action] = field(default_factory=list)


@dataclass
class Program:
    name: str = ""
    actions: List[Action] = field(default_factory=list)
    functions: List[FunctionDef] = field(default_factory=list)
    structs: List[Any] = field(default_factory=list)
    enums: List[Any] = field(default_factory=list)
    needs_async_runtime: bool = False


_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def _quote(text: str) -> str:
    """Double-quoted, escaped form of a string."""
    parts = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            parts.append(f"\\u{{{ord(ch):x}}}")
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


def _float_debug(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = repr(number)
    if "e" in text:
        mantissa, exponent = text.split("e")
        return f"{mantissa}e{int(exponent)}"
    return text


def _variant(op: Enum) -> str:
    return op.name.capitalize()


def format_value(value: ValueExpr) -> str:
    """Structural debug rendering of a value expression."""
    match value:
        case bool():
            return f"Bool({'true' if value else 'false'})"
        case int():
            return f"I64({value})"
        case float():
            return f"F64({_float_debug(value)})"
        case str():
            return f"Str({_quote(value)})"
        case Ident(name):
            return f"Ident({_quote(name)})"
        case Not(inner):
            return f"Not({format_value(inner)})"
        case Cmp(op, left, right):
            return (
                f"Cmp {{ op: {_variant(op)}, left: {format_value(left)}, "
                f"right: {format_value(right)} }}"
            )
        case Binary(op, left, right):
            return (
                f"BinOp {{ op: {_variant(op)}, left: {format_value(left)}, "
                f"right: {format_value(right)} }}"
            )
    raise TypeError(f"not a value expression: {value!r}")
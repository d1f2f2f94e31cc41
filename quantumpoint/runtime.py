"""Safe in-process interpreter for IR programs (Run preview)."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Dict, List, Mapping, Optional, Union

from quantumpoint.ir import (
    Action,
    Async,
    Await,
    Binary,
    BinOp,
    Branch,
    Break,
    Call,
    Cmp,
    CmpOp,
    Const,
    Continue,
    DataStore,
    DbRead,
    Expr,
    For,
    ForEach,
    FunctionDef,
    Ident,
    ListStore,
    Module,
    Not,
    Print,
    Program,
    Return,
    Switch,
    Throw,
    Try,
    ValueExpr,
    While,
    _quote,
)

RuntimeValue = Union[bool, int, float, str, list]


class InterpreterError(Exception):
    """Base error raised while interpreting a program."""


class UnknownVariable(InterpreterError):
    def __init__(self, name: str) -> None:
        super().__init__(f"unknown variable '{name}'")
        self.name = name


class UnknownFunction(InterpreterError):
    def __init__(self, name: str) -> None:
        super().__init__(f"unknown function '{name}'")
        self.name = name


class BreakOutsideLoop(InterpreterError):
    def __init__(self) -> None:
        super().__init__("break outside loop")


class ContinueOutsideLoop(InterpreterError):
    def __init__(self) -> None:
        super().__init__("continue outside loop")


class ThrownError(InterpreterError):
    def __init__(self, message: str) -> None:
        super().__init__(f"runtime: {message}")
        self.message = message


@dataclass
class RunPreview:
    lines: List[str] = field(default_factory=list)


class _Signal(Enum):
    NEXT = "next"
    BREAK = "break"
    CONTINUE = "continue"


@dataclass(frozen=True)
class _Return:
    value: Optional[RuntimeValue] = None


_Flow = Union[_Signal, _Return]


def mock_collection(table: str) -> List[RuntimeValue]:
    """Stand-in rows for a table or collection name."""
    if table == "users":
        return ["user:1:Ada", "user:2:Bob"]
    if table == "orders":
        return ["order:100", "order:101"]
    return [f"row-from-{table}"]


def as_bool(value: RuntimeValue) -> bool:
    """Truthiness of a runtime value."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, str, list)):
        return bool(value)
    raise TypeError(f"not a runtime value: {value!r}")


def _float_display(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_runtime_value(value: RuntimeValue) -> str:
    """Debug rendering of a runtime value as shown in preview lines."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float_display(value)
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, list):
        return "[[" + ", ".join(format_runtime_value(v) for v in value) + "]]"
    raise TypeError(f"not a runtime value: {value!r}")


def switch_key(value: RuntimeValue) -> str:
    """Key compared against switch arm labels."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return _float_display(value)
    if isinstance(value, list):
        return "list"
    raise TypeError(f"not a runtime value: {value!r}")


def _compare(op: CmpOp, left: RuntimeValue, right: RuntimeValue) -> bool:
    kind = type(left)
    if kind is not type(right):
        return False
    if kind is int:
        return {
            CmpOp.EQ: left == right,
            CmpOp.NE: left != right,
            CmpOp.LT: left < right,
            CmpOp.LE: left <= right,
            CmpOp.GT: left > right,
            CmpOp.GE: left >= right,
        }[op]
    if kind in (str, bool):
        if op is CmpOp.EQ:
            return left == right
        if op is CmpOp.NE:
            return left != right
    return False


def _binary(op: BinOp, left: RuntimeValue, right: RuntimeValue) -> RuntimeValue:
    if op is BinOp.AND:
        return as_bool(left) and as_bool(right)
    if op is BinOp.OR:
        return as_bool(left) or as_bool(right)
    if type(left) is not int or type(right) is not int:
        raise ThrownError("arithmetic only on i64 in preview")
    if op is BinOp.ADD:
        return left + right
    if op is BinOp.SUB:
        return left - right
    if op is BinOp.MUL:
        return left * right
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def eval_value(expr: ValueExpr, env: Mapping[str, RuntimeValue]) -> RuntimeValue:
    """Evaluate a value expression against a variable environment."""
    match expr:
        case bool() | int() | float() | str():
            return expr
        case Ident(name):
            try:
                return env[name]
            except KeyError:
                raise UnknownVariable(name) from None
        case Not(inner):
            return not as_bool(eval_value(inner, env))
        case Cmp(op, left, right):
            return _compare(op, eval_value(left, env), eval_value(right, env))
        case Binary(op, left, right):
            return _binary(op, eval_value(left, env), eval_value(right, env))
    raise TypeError(f"not a value expression: {expr!r}")


@dataclass
class _Executor:
    functions: Dict[str, FunctionDef]

    def run_block(
        self,
        actions: List[Action],
        env: Dict[str, RuntimeValue],
        lines: List[str],
        in_loop: bool,
    ) -> _Flow:
        for action in actions:
            flow = self.run_action(action, env, lines, in_loop)
            if flow is not _Signal.NEXT:
                return flow
        return _Signal.NEXT

    def run_loop_body(
        self, body: List[Action], env: Dict[str, RuntimeValue], lines: List[str]
    ) -> _Flow:
        return self.run_block(body, env, lines, True)

    def run_action(
        self,
        action: Action,
        env: Dict[str, RuntimeValue],
        lines: List[str],
        in_loop: bool,
    ) -> _Flow:
        match action:
            case Print(message):
                lines.append(message)
            case DataStore(name, value) | Expr(name, value):
                env[name] = eval_value(value, env)
            case Const(name, value):
                env[name] = eval_value(value, env)
                lines.append(f"const {name} = Some({format_runtime_value(env[name])})")
            case ListStore(name, items):
                env[name] = [eval_value(item, env) for item in items]
            case Throw(message):
                raise ThrownError(message)
            case Await(binding):
                lines.append("await")
                if binding is not None:
                    env[binding] = "()"
            case Call(name, args, into):
                self._call(name, args, into, env, lines)
            case Branch(condition, then_body, else_body):
                body = then_body if as_bool(eval_value(condition, env)) else else_body
                return self.run_block(body, env, lines, in_loop)
            case While(condition, body):
                while as_bool(eval_value(condition, env)):
                    flow = self.run_loop_body(body, env, lines)
                    if flow is _Signal.BREAK:
                        break
                    if isinstance(flow, _Return):
                        return flow
            case ForEach(item_var, collection, body):
                for row in mock_collection(collection):
                    env[item_var] = row
                    flow = self.run_loop_body(body, env, lines)
                    if flow is _Signal.BREAK:
                        break
                    if isinstance(flow, _Return):
                        return flow
            case For(var, start, end, body):
                step = 1 if start <= end else -1
                for i in range(start, end + step, step):
                    env[var] = i
                    flow = self.run_loop_body(body, env, lines)
                    if flow is _Signal.BREAK:
                        break
                    if isinstance(flow, _Return):
                        return flow
            case Return(value):
                result = None if value is None else eval_value(value, env)
                if result is None:
                    lines.append("return")
                else:
                    lines.append(f"return {format_runtime_value(result)}")
                return _Return(result)
            case Switch(discriminant, arms, default_body):
                key = switch_key(eval_value(discriminant, env))
                for arm in arms:
                    if arm.label == key:
                        return self.run_block(arm.body, env, lines, in_loop)
                return self.run_block(default_body, env, lines, in_loop)
            case Break():
                if not in_loop:
                    raise BreakOutsideLoop()
                return _Signal.BREAK
            case Continue():
                if not in_loop:
                    raise ContinueOutsideLoop()
                return _Signal.CONTINUE
            case Try(try_body, catch_body):
                lines.append("try {")
                try:
                    flow = self.run_block(try_body, env, lines, in_loop)
                except (ThrownError, UnknownVariable):
                    lines.append("} catch {")
                    return self.run_block(catch_body, env, lines, in_loop)
                except InterpreterError:
                    lines.append("} // try ok")
                    raise
                lines.append("} // try ok")
                return flow
            case Async(body):
                lines.append("async { ... }")
                return self.run_block(body, env, lines, in_loop)
            case DbRead(table, into_var):
                rows = mock_collection(table)
                row = rows[0] if rows else "empty"
                env[into_var] = row
                lines.append(f"db.read {table} -> {format_runtime_value(row)}")
            case Module(name, actions):
                lines.append(f"— module {name} —")
                return self.run_block(actions, env, lines, in_loop)
            case _:
                raise TypeError(f"not an IR action: {action!r}")
        return _Signal.NEXT

    def _call(
        self,
        name: str,
        args: List[ValueExpr],
        into: Optional[str],
        env: Dict[str, RuntimeValue],
        lines: List[str],
    ) -> None:
        func = self.functions.get(name)
        if func is None:
            raise UnknownFunction(name)
        local = dict(env)
        for param, arg in zip(func.params, args):
            local[param] = eval_value(arg, local)
        sub_lines: List[str] = []
        flow = self.run_block(func.body, local, sub_lines, False)
        lines.extend(f"  {line}" for line in sub_lines)
        if into is not None:
            if isinstance(flow, _Return) and flow.value is not None:
                env[into] = flow.value
            else:
                env[into] = 0
        lines.append(f"call {name}")


def interpret(program: Program) -> RunPreview:
    """Execute a program's actions and collect the preview lines."""
    executor = _Executor({f.name: f for f in program.functions})
    env: Dict[str, RuntimeValue] = {}
    lines: List[str] = []
    flow = executor.run_block(program.actions, env, lines, False)
    if flow is _Signal.BREAK:
        raise BreakOutsideLoop()
    if flow is _Signal.CONTINUE:
        raise ContinueOutsideLoop()
    return RunPreview(lines)
"""Human-readable summary of a lowered IR program."""

from __future__ import annotations

from typing import Optional

from quantumpoint.ir import (
    Action,
    Async,
    Await,
    Branch,
    Break,
    Call,
    Const,
    Continue,
    DataStore,
    DbRead,
    Expr,
    For,
    ForEach,
    ListStore,
    Module,
    Print,
    Program,
    Return,
    Switch,
    Throw,
    Try,
    While,
    _quote,
    format_value,
)


def _optional_value(value) -> str:
    return "None" if value is None else f"Some({format_value(value)})"


def _optional_name(name: Optional[str]) -> str:
    return "None" if name is None else f"Some({_quote(name)})"


def action_summary(action: Action) -> str:
    """One-line description of an action."""
    match action:
        case Print(message):
            return f"print {_quote(message)}"
        case DataStore(name, value):
            return f"let {name} = {format_value(value)}"
        case Branch(condition, then_body, else_body):
            return (
                f"if {format_value(condition)} then {len(then_body)} "
                f"else {len(else_body)}"
            )
        case DbRead(table, into_var):
            return f"db.read {table} → {into_var}"
        case While(condition, body):
            return f"while {format_value(condition)} body {len(body)} actions"
        case For(var, start, end, body):
            return f"for {var} in {start}..={end} body {len(body)} actions"
        case ForEach(item_var, collection, body):
            return f"foreach {item_var} in {collection} body {len(body)} actions"
        case Return(value):
            return f"return {_optional_value(value)}"
        case Switch(discriminant, arms, default_body):
            return (
                f"switch {format_value(discriminant)} {len(arms)} arms, "
                f"default {len(default_body)} actions"
            )
        case Break():
            return "break"
        case Continue():
            return "continue"
        case Try(try_body, catch_body):
            return f"try {len(try_body)} / catch {len(catch_body)} actions"
        case Expr(name, value):
            return f"expr {name} = {format_value(value)}"
        case Async(body):
            return f"async block {len(body)} actions"
        case Module(name, actions):
            return f"module {name} ({len(actions)} actions)"
        case Const(name, value):
            return f"const {name} = {format_value(value)}"
        case ListStore(name, items):
            return f"list {name} [{len(items)} items]"
        case Throw(message):
            return f"throw {_quote(message)}"
        case Await(binding):
            return f"await {_optional_name(binding)}"
        case Call(name, args, into):
            return f"call {name}({len(args)} args) -> {_optional_name(into)}"
    raise TypeError(f"not an IR action: {action!r}")


def format_program_summary(program: Program) -> str:
    """Multi-line summary of a program's top-level actions."""
    lines = [
        "✓ Core domain → universal IR (tilsiz)",
        f"• dastur: {program.name}",
        f"• amallar: {len(program.actions)}",
    ]
    lines.extend(
        f"  [{i}] {action_summary(action)}" for i, action in enumerate(program.actions)
    )
    lines.append("Build → Rust (yoki boshqa emit) + cargo.")
    return "\n".join(lines)
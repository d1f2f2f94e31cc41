import pytest

from quantumpoint.ir import (
    Binary,
    BinOp,
    Cmp,
    CmpOp,
    FunctionDef,
    Ident,
    Not,
    Print,
    Program,
    Return,
    format_value,
)


def test_bool_literal_is_not_rendered_as_int():
    assert format_value(True) == "Bool(true)"
    assert format_value(1) != format_value(True)
    assert format_value(1).startswith("I64(")


def test_string_is_quoted_and_escaped():
    result = format_value('say "hi"\n')
    assert result.count('\\"') == 2
    assert "\\n" in result
    assert "\n" not in result


def test_comparison_contains_both_sides():
    text = format_value(Cmp(CmpOp.EQ, Ident("a"), 2))
    assert format_value(Ident("a")) in text
    assert format_value(2) in text


def test_not_wraps_inner_value():
    assert format_value(Not(True)).endswith(format_value(True) + ")")


def test_each_binary_operator_renders_differently():
    rendered = {format_value(Binary(op, 1, 2)) for op in BinOp}
    assert len(rendered) == len(BinOp)


def test_large_float_uses_plain_exponent():
    text = format_value(1e16)
    assert "e" in text
    assert "+" not in text


def test_unsupported_value_raises():
    with pytest.raises(TypeError):
        format_value(object())


def test_program_defaults_are_empty():
    program = Program(name="p")
    assert program.actions == []
    assert program.functions == []
    assert program.needs_async_runtime is False


def test_actions_compare_by_value():
    assert Print("a") == Print("a")
    assert Return() == Return(None)
    assert FunctionDef("f", ["x"]).body == []
import dataclasses

import pytest

from quantumpoint.actions import (
    ArithOp,
    Async,
    Await,
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
    DomainAction,
    Expr,
    For,
    ForEach,
    Ident,
    ListStore,
    Logic,
    LogicOp,
    Module,
    Not,
    Print,
    Return,
    Switch,
    SwitchArm,
    Throw,
    Try,
    While,
)


def test_nested_values_compare_structurally():
    left = Cmp(CmpOp.LT, Ident("i"), BinOp(ArithOp.ADD, 1, 2))
    right = Cmp(CmpOp.LT, Ident("i"), BinOp(ArithOp.ADD, 1, 2))
    assert left == right
    assert hash(left) == hash(right)
    assert not (left == Cmp(CmpOp.GT, Ident("i"), BinOp(ArithOp.ADD, 1, 2)))


def test_values_are_immutable():
    value = Not(Logic(LogicOp.AND, True, Ident("x")))
    with pytest.raises(dataclasses.FrozenInstanceError):
        value.value = False
    assert value == Not(Logic(LogicOp.AND, True, Ident("x")))
    assert not (value == Not(Logic(LogicOp.OR, True, Ident("x"))))


def test_default_bodies_are_empty_and_independent():
    a = Branch(condition=True)
    b = Branch(condition=True)
    a.then_body.append(Print("hi"))
    assert b.then_body == []
    assert b.else_body == []
    assert a.then_body == [Print("hi")]


def test_optional_fields_default_to_none():
    assert Return().value is None
    assert Await().binding is None
    call = Call("f")
    assert call.into is None
    assert call.args == []


def test_actions_of_different_kinds_are_not_equal():
    assert Break() == Break()
    assert Continue() == Continue()
    assert not (Break() == Continue())
    assert not (DataStore("x", 1) == Expr("x", 1))
    assert not (DataStore("x", 1) == Const("x", 1))


@pytest.mark.parametrize(
    "action",
    [
        Print("hi"),
        DataStore("x", 1),
        Const("y", 2.5),
        ListStore("l", [1, 2]),
        Branch(True),
        While(Ident("go")),
        For("i", 0, 3),
        ForEach("u", "users"),
        Return(1),
        Switch(Ident("k"), [SwitchArm("1", [Print("one")])]),
        Break(),
        Continue(),
        Try([Throw("boom")], [Print("caught")]),
        Throw("boom"),
        Expr("e", Ident("x")),
        Async([Print("a")]),
        Await("r"),
        Call("f", [1], "out"),
        DbRead("users", "row"),
        Module("m", [Print("inside")]),
    ],
)
def test_every_action_is_a_domain_action(action):
    assert isinstance(action, DomainAction)
    assert action == dataclasses.replace(action)


def test_module_holds_nested_actions():
    inner = [For("i", 1, 2, [Print("x")]), Break()]
    module = Module("m", inner)
    assert module.actions[0].body == [Print("x")]
    assert module.actions[0].start == 1
    assert module.actions[0].end == 2
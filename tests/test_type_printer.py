from diagsynth.types import (
    DefaultTypePrinter,
    TypeApp,
    TypeArrow,
    TypeCon,
    TypeRecord,
    TypeTuple,
    TypeVar,
)

PRINTER = DefaultTypePrinter()

a = TypeVar("a")
b = TypeVar("b")
c = TypeVar("c")
maybe_a = TypeApp(TypeCon("Maybe"), (a,))


def test_atoms_are_never_parenthesized() -> None:
    assert PRINTER.render(a, needs_parens=True) == "a"
    assert PRINTER.render(TypeCon("Int"), needs_parens=True) == "Int"
    assert PRINTER.render(TypeApp(TypeCon("Int"), ()), needs_parens=True) == "Int"


def test_application_parenthesized_only_in_argument_position() -> None:
    assert PRINTER.render(maybe_a, needs_parens=False) == "Maybe a"
    assert PRINTER.render(maybe_a, needs_parens=True) == "(Maybe a)"
    nested = TypeApp(TypeCon("List"), (maybe_a,))
    assert PRINTER.render(nested, needs_parens=False) == "List (Maybe a)"


def test_arrows_associate_right() -> None:
    assert PRINTER.render(TypeArrow(a, TypeArrow(b, c)), needs_parens=False) == "a -> b -> c"
    assert PRINTER.render(TypeArrow(TypeArrow(a, b), c), needs_parens=False) == "(a -> b) -> c"
    assert PRINTER.render(TypeArrow(a, b), needs_parens=True) == "(a -> b)"
    assert PRINTER.render(TypeArrow(maybe_a, b), needs_parens=False) == "Maybe a -> b"


def test_tuples() -> None:
    assert PRINTER.render(TypeTuple(()), needs_parens=True) == "()"
    assert PRINTER.render(TypeTuple((a, maybe_a)), needs_parens=True) == "( a, Maybe a )"


def test_records() -> None:
    assert PRINTER.render(TypeRecord(()), needs_parens=False) == "{}"
    assert PRINTER.render(TypeRecord((), extension="r"), needs_parens=False) == "{ r }"
    point = TypeRecord((("x", TypeCon("Float")), ("f", TypeArrow(a, b))))
    assert PRINTER.render(point, needs_parens=True) == "{ x : Float, f : a -> b }"
    extended = TypeRecord((("x", a),), extension="r")
    assert PRINTER.render(extended, needs_parens=False) == "{ r | x : a }"

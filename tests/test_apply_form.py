import io

import pytest

from schemelet.builtins import is_same
from schemelet.interpreter import Interpreter
from schemelet.types.null import Null


# -----------------------------
# List primitives
# -----------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(car (cons 1 (list 2 3)))", "1"),
        ("(cdr (cons 1 (list 2 3)))", "(2 3)"),
        ("(null? (cdr (list)))", "#t"),
        ("(null? (cdr (list 1)))", "#t"),
        ("(null? (list))", "#t"),
        ("(null? (list 1))", "#f"),
        ("(null? 0)", "#f"),
        ("(car (list))", "()"),
        ("(cdr (list))", "()"),
        ("(car)", "()"),
        ("(cons 1 (list))", "(1)"),
        ("(cons (list 1) (list 2))", "((1) 2)"),
        ("(list 1 \"a\" #t)", "(1 a #t)"),
        ("(list? (list 1))", "#t"),
        ("(list? (list))", "#t"),
        ("(list? 1)", "#f"),
    ]
)
def test_list_primitives(interp, source, expected):
    assert interp.run(source) == expected


def test_cdr_returns_a_copy(interp):
    interp.run("(define xs (list 1 2 3))")
    interp.run("(define ys (cdr xs))")
    assert interp.run("xs") == "(1 2 3)"
    assert interp.run("ys") == "(2 3)"


def test_cons_requires_a_list_tail(interp, capsys):
    assert interp.run("(cons 1 2)") == "()"
    assert capsys.readouterr().err.strip() == "Error: Second argument to cons must be a list, got 2"


def test_car_of_non_list_is_a_type_error(interp, capsys):
    interp.run("(car 5)")
    assert capsys.readouterr().err.strip() == "Error: car expects a list, got 5"


# -----------------------------
# Predicates and equality
# -----------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(number? 1)", "#t"),
        ('(number? "1")', "#f"),
        ("(number? #t)", "#f"),
        ("(procedure? car)", "#t"),
        ("(procedure? (lambda (x) x))", "#t"),
        ("(procedure? 1)", "#f"),
        ("(equal? 1 1)", "#t"),
        ('(equal? "a" "a")', "#t"),
        ("(equal? 1 2)", "#f"),
        ("(equal? (list 1) (list 1))", "#f"),
        ("(equal? (list) (list))", "#t"),
        ("(not #f)", "#t"),
        ("(not #t)", "#f"),
        ("(not 0)", "#f"),
        ("(not (list))", "#f"),
    ]
)
def test_predicates(interp, source, expected):
    assert interp.run(source) == expected


def test_equal_is_identity_for_lists(interp):
    interp.run("(define xs (list 1 2))")
    assert interp.run("(equal? xs xs)") == "#t"


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (1.0, 1.0, True),
        (1.0, True, False),
        (True, True, True),
        ("x", "x", True),
        (Null, Null, True),
        ([1.0], [1.0], False),
        (float("nan"), float("nan"), False),
    ]
)
def test_is_same(a, b, expected):
    assert is_same(a, b) is expected


# -----------------------------
# Strings
# -----------------------------

def test_string_primitives(interp):
    interp.run('(define str "hello world")')
    assert interp.run("(string-length str)") == "11"
    assert interp.run('(string-append str " here")') == "hello world here"
    assert interp.run('(string-append "a" "b" "c")') == "abc"
    assert interp.run("(string-length)") == "0"


def test_string_append_requires_an_argument(interp, capsys):
    assert interp.run("(string-append)") == "()"
    assert capsys.readouterr().err.strip() == "Error: string-append requires at least 1 argument"


# -----------------------------
# begin / apply / display
# -----------------------------

def test_begin_returns_last_argument(interp):
    assert interp.run("(begin 1 2 3)") == "3"
    assert interp.run("(begin)") is None


def test_begin_with_define(interp):
    assert interp.run("(begin (define r 10) (* r r))") == "100"
    assert interp.run("r") == "10"


def test_apply_with_builtin_and_closure(interp):
    assert interp.run("(apply + (list 1 2 3))") == "6"
    assert interp.run("(apply (lambda (a b) (- a b)) (list 10 4))") == "6"
    assert interp.run("(apply list (list))") == "()"


def test_apply_non_procedure(interp, capsys):
    assert interp.run("(apply 5 (list 1))") == "()"
    assert capsys.readouterr().err.strip() == "Error: Cannot call 5"


def test_display_prints_rendering_and_returns_undefined(interp, capsys):
    assert interp.run("(display (list 1 2.5 #t \"s\"))") is None
    assert capsys.readouterr().out == "(1 2.5 #t s)\n"


def test_display_to_custom_stream():
    out = io.StringIO()
    interp = Interpreter(prelude=None, output=out)
    interp.run("(display 42)")
    assert out.getvalue() == "42\n"

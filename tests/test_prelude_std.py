import sys

from schemelet.config import get_prelude_files, get_recursion_limit
from schemelet.interpreter import Interpreter


def test_explicit_prelude_source():
    interp = Interpreter(prelude="(define twice (lambda (x) (* 2 x)))")
    assert interp.run("(twice 21)") == "42"


def test_auto_prelude_loads_files_from_environment(tmp_path, monkeypatch):
    first = tmp_path / "std.scm"
    first.write_text("(define inc (lambda (n) (+ n 1)))", encoding="utf-8")
    second = tmp_path / "more.scm"
    second.write_text("(define two (inc 1))", encoding="utf-8")
    missing = tmp_path / "missing.scm"
    sep = ";" if sys.platform == "win32" else ":"
    monkeypatch.setenv("SCHEMELET_PRELUDE_PATH", sep.join(str(p) for p in (first, missing, second)))

    interp = Interpreter()
    assert interp.run("two") == "2"


def test_no_prelude_files_by_default():
    assert get_prelude_files() == []


def test_recursion_limit_from_environment(monkeypatch):
    monkeypatch.setenv("SCHEMELET_RECURSION_LIMIT", "20000")
    assert get_recursion_limit() == 20000
    monkeypatch.setenv("SCHEMELET_RECURSION_LIMIT", "not a number")
    assert get_recursion_limit() == 10_000
    monkeypatch.setenv("SCHEMELET_RECURSION_LIMIT", "5")
    assert get_recursion_limit() == 100


def test_interpreter_raises_recursion_limit(monkeypatch):
    monkeypatch.setattr(sys, "getrecursionlimit", lambda: 50)
    calls = []
    monkeypatch.setattr(sys, "setrecursionlimit", calls.append)
    monkeypatch.setenv("SCHEMELET_RECURSION_LIMIT", "12345")
    Interpreter(prelude=None)
    assert calls == [12345]

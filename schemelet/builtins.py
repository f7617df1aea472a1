from __future__ import annotations

import math
import sys
from typing import Any, Callable, TYPE_CHECKING

from schemelet.errors import SchemeArityError, SchemeTypeError
from schemelet.printer import stringify
from schemelet.types.environment import Environment
from schemelet.types.null import Null, NullType
from schemelet.types.procedure import PrimitiveProcedure, Procedure

if TYPE_CHECKING:
    from schemelet.evaluation.evaluator import Evaluator


def _arg(args: list[Any], i: int) -> Any:
    """Positional argument or None when the caller passed fewer."""
    return args[i] if i < len(args) else None


def _is_number(x: Any) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _numbers(name: str, args: list[Any]) -> list[float]:
    for x in args:
        if not _is_number(x):
            raise SchemeTypeError(f"All arguments to {name} must be numbers, got {stringify(x)}")
    return args


def _is_sequence(x: Any) -> bool:
    return isinstance(x, (list, NullType))


# -------------------------------
# Equality and basic predicates
# -------------------------------
def is_same(a: Any, b: Any) -> bool:
    """Value equality for atoms, identity for lists and procedures."""
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, (list, NullType, Procedure, PrimitiveProcedure)):
        return a is b
    if isinstance(b, (list, NullType, Procedure, PrimitiveProcedure)):
        return False
    return a == b


def _pairwise(name: str, test: Callable[[Any, Any], bool]) -> Callable[["Evaluator", list[Any]], bool]:
    def compare(_: Evaluator, args: list[Any]) -> bool:
        try:
            return all(test(a, b) for a, b in zip(args, args[1:]))
        except TypeError:
            raise SchemeTypeError(f"Cannot compare arguments to {name}")
    compare.__name__ = name
    return compare


equals = _pairwise("=", is_same)
lte = _pairwise("<=", lambda a, b: a <= b)
gte = _pairwise(">=", lambda a, b: a >= b)


def equal_p(_: Evaluator, args: list[Any]) -> bool:
    return is_same(_arg(args, 0), _arg(args, 1))


def null_p(_: Evaluator, args: list[Any]) -> bool:
    return _arg(args, 0) is Null


def list_p(_: Evaluator, args: list[Any]) -> bool:
    return _is_sequence(_arg(args, 0))


def number_p(_: Evaluator, args: list[Any]) -> bool:
    return _is_number(_arg(args, 0))


def procedure_p(_: Evaluator, args: list[Any]) -> bool:
    return isinstance(_arg(args, 0), (Procedure, PrimitiveProcedure))


def logical_not(_: Evaluator, args: list[Any]) -> bool:
    return _arg(args, 0) is False


# -------------------------------
# Arithmetic
# -------------------------------
def _divide(a: float, b: float) -> float:
    # IEEE semantics instead of ZeroDivisionError
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def add(_: Evaluator, args: list[Any]) -> float:
    result = 0.0
    for x in _numbers("+", args):
        result += x
    return result


def mul(_: Evaluator, args: list[Any]) -> float:
    result = 1.0
    for x in _numbers("*", args):
        result *= x
    return result


def sub(_: Evaluator, args: list[Any]) -> float:
    if not args:
        raise SchemeArityError("- requires at least 1 argument")
    result, *rest = _numbers("-", args)
    for x in rest:
        result -= x
    return result


def div(_: Evaluator, args: list[Any]) -> float:
    if not args:
        raise SchemeArityError("/ requires at least 1 argument")
    result, *rest = _numbers("/", args)
    for x in rest:
        result = _divide(result, x)
    return result


def remainder(_: Evaluator, args: list[Any]) -> float:
    a, b = _numbers("remainder", [_arg(args, 0), _arg(args, 1)])
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def round_builtin(_: Evaluator, args: list[Any]) -> float:
    (x,) = _numbers("round", [_arg(args, 0)])
    if not math.isfinite(x):
        return x
    # halves round toward +infinity
    return float(math.floor(x + 0.5))


def abs_builtin(_: Evaluator, args: list[Any]) -> float:
    (x,) = _numbers("abs", [_arg(args, 0)])
    return abs(x)


# -------------------------------
# Strings
# -------------------------------
def string_length(_: Evaluator, args: list[Any]) -> float:
    s = _arg(args, 0)
    if s is None:
        return 0.0
    if not isinstance(s, str):
        raise SchemeTypeError(f"string-length expects a string, got {stringify(s)}")
    return float(len(s))


def string_append(_: Evaluator, args: list[Any]) -> str:
    if not args:
        raise SchemeArityError("string-append requires at least 1 argument")
    for s in args:
        if not isinstance(s, str):
            raise SchemeTypeError(f"All arguments to string-append must be strings, got {stringify(s)}")
    return "".join(args)


# -------------------------------
# List operations
# -------------------------------
def list_builtin(_: Evaluator, args: list[Any]) -> Any:
    return list(args) or Null


def cons(_: Evaluator, args: list[Any]) -> list[Any]:
    if len(args) < 2:
        raise SchemeArityError("cons requires 2 arguments")
    head, tail = args[0], args[1]
    if not _is_sequence(tail):
        raise SchemeTypeError(f"Second argument to cons must be a list, got {stringify(tail)}")
    return [head, *tail]


def car(_: Evaluator, args: list[Any]) -> Any:
    seq = _arg(args, 0)
    if seq is None or seq is Null:
        return Null
    if not isinstance(seq, list):
        raise SchemeTypeError(f"car expects a list, got {stringify(seq)}")
    return seq[0]


def cdr(_: Evaluator, args: list[Any]) -> Any:
    seq = _arg(args, 0)
    if seq is None or seq is Null:
        return Null
    if not isinstance(seq, list):
        raise SchemeTypeError(f"cdr expects a list, got {stringify(seq)}")
    if len(seq) > 1:
        return seq[1:]
    return Null


# -------------------------------
# Control
# -------------------------------
def quote(_: Evaluator, args: list[Any]) -> Any:
    return _arg(args, 0)


def begin(_: Evaluator, args: list[Any]) -> Any:
    return args[-1] if args else None


def display(evaluator: Evaluator, args: list[Any]) -> None:
    print(stringify(_arg(args, 0)), file=evaluator.output or sys.stdout)


def apply(evaluator: Evaluator, args: list[Any]) -> Any:
    if len(args) < 2:
        raise SchemeArityError("apply requires 2 arguments: a procedure and a list of arguments")
    proc, argv = args[0], args[1]
    if not _is_sequence(argv):
        raise SchemeTypeError(f"Second argument to apply must be a list, got {stringify(argv)}")
    return evaluator.call_procedure(proc, list(argv))


# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: dict[str, Callable[["Evaluator", list[Any]], Any]] = {
    '*': mul,
    '+': add,
    '-': sub,
    '/': div,
    '=': equals,
    '<=': lte,
    '>=': gte,
    'string-length': string_length,
    'string-append': string_append,
    'list': list_builtin,
    'null?': null_p,
    'list?': list_p,
    'number?': number_p,
    'procedure?': procedure_p,
    'car': car,
    'cdr': cdr,
    'cons': cons,
    'remainder': remainder,
    'quote': quote,
    'begin': begin,
    'equal?': equal_p,
    'not': logical_not,
    'round': round_builtin,
    'abs': abs_builtin,
    'display': display,
    'apply': apply,
}


def register(env: Environment) -> None:
    for name, fn in PRIMITIVES.items():
        env.define(name, PrimitiveProcedure(fn, name))

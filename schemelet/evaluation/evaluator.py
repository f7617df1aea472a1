"""Core evaluator and trampoline for the schemelet interpreter.

`interpret` walks one expression with a `while True` loop over a mutable
(expr, env) pair. Tail positions (the last body expression of a procedure
call or `let`, and the branches of `if`) rebind the pair and continue the
loop instead of recursing, so self tail calls run in constant stack space.
Only argument/condition evaluation and primitive calls nest on the Python
stack.
"""

from __future__ import annotations

import sys
from typing import TextIO

from schemelet import SchemeValue
from schemelet.builtins import register
from schemelet.errors import SchemeRuntimeError
from schemelet.printer import stringify
from schemelet.types.environment import Environment
from schemelet.types.null import Null
from schemelet.types.procedure import PrimitiveProcedure, Procedure
from schemelet.types.expressions import (
    CallExpr,
    DefineExpr,
    Expr,
    IfExpr,
    LambdaExpr,
    LetExpr,
    ListExpr,
    LiteralExpr,
    QuoteExpr,
    SetExpr,
    SymbolExpr,
)


class Evaluator:
    """Evaluates expressions against one persistent global environment."""

    def __init__(self, output: TextIO | None = None, errors: TextIO | None = None):
        # None means "resolve sys.stdout / sys.stderr when writing"
        self.output = output
        self.errors = errors
        self.env = Environment()
        register(self.env)

    def interpret_all(self, expressions: list[Expr]) -> SchemeValue:
        """Evaluate top-level expressions in order and return the last value.

        A runtime error abandons the remaining expressions, is reported on the
        error stream, and makes the whole batch evaluate to Null.
        """
        try:
            result: SchemeValue = None
            for expr in expressions:
                result = self.interpret(expr, self.env)
            return result
        except SchemeRuntimeError as e:
            print(str(e), file=self.errors or sys.stderr)
            return Null
        except RecursionError:
            print(str(SchemeRuntimeError("maximum recursion depth exceeded")), file=self.errors or sys.stderr)
            return Null

    def interpret(self, expr: Expr | None, env: Environment) -> SchemeValue:
        while True:
            match expr:
                case CallExpr(callee=callee_expr, args=arg_exprs):
                    callee = self.interpret(callee_expr, env)
                    args = [self.interpret(arg, env) for arg in arg_exprs]
                    if isinstance(callee, Procedure):
                        # Tail call: continue the loop with the body in the new frame
                        call_env = callee.bind(args)
                        body = callee.declaration.body
                        if not body:
                            return None
                        for body_expr in body[:-1]:
                            self.interpret(body_expr, call_env)
                        expr, env = body[-1], call_env
                        continue
                    if isinstance(callee, PrimitiveProcedure):
                        return callee.call(self, args)
                    raise SchemeRuntimeError(f"Cannot call {stringify(callee)}")

                case LiteralExpr(value=value):
                    return value

                case SymbolExpr(token=token):
                    return env.get(token.lexeme)

                case LambdaExpr():
                    return Procedure(expr, env)

                case DefineExpr(name=name, value=value_expr):
                    env.define(name.lexeme, self.interpret(value_expr, env))
                    return None

                case IfExpr(condition=condition, then_branch=then_branch, else_branch=else_branch):
                    # Only #f is false; 0, "" and () are all true
                    if self.interpret(condition, env) is not False:
                        expr = then_branch
                    else:
                        expr = else_branch
                    continue

                case SetExpr(name=name, value=value_expr):
                    env.set(name.lexeme, self.interpret(value_expr, env))
                    return None

                case LetExpr(bindings=bindings, body=body):
                    # Simultaneous binding: every value sees only the outer env
                    names = [binding.name for binding in bindings]
                    values = [self.interpret(binding.value, env) for binding in bindings]
                    let_env = Environment(names, values, env)
                    if not body:
                        return None
                    for body_expr in body[:-1]:
                        self.interpret(body_expr, let_env)
                    expr, env = body[-1], let_env
                    continue

                case QuoteExpr(value=quoted):
                    return self.quoted(quoted, env)

                case ListExpr(items=items):
                    return [self.quoted(item, env) for item in items] or Null

                case None:
                    # `if` without an else branch whose condition was false
                    return None

                case _:
                    raise TypeError(f"Cannot interpret: {type(expr).__name__}")

    def quoted(self, expr: Expr, env: Environment) -> SchemeValue:
        """Evaluate an item of a quoted list; nested forms become lists, never calls."""
        match expr:
            case CallExpr(callee=callee, args=args):
                return [self.quoted(callee, env), *(self.quoted(arg, env) for arg in args)]
            case ListExpr(items=items):
                return [self.quoted(item, env) for item in items] or Null
            case _:
                return self.interpret(expr, env)

    def call_procedure(self, proc: SchemeValue, args: list[SchemeValue]) -> SchemeValue:
        """Invoke a procedure value with already-evaluated arguments (used by `apply`)."""
        if isinstance(proc, (Procedure, PrimitiveProcedure)):
            return proc.call(self, args)
        raise SchemeRuntimeError(f"Cannot call {stringify(proc)}")

"""Procedure values: user closures and host-level primitives."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from schemelet import SchemeValue, PrimitiveFn
from schemelet.types.environment import Environment
from schemelet.types.null import Null

if TYPE_CHECKING:
    from schemelet.evaluation.evaluator import Evaluator
    from schemelet.types.expressions import LambdaExpr


class PrimitiveProcedure:
    """A procedure implemented in Python, called with the evaluator and the evaluated args."""

    __slots__ = ("declaration", "name")

    def __init__(self, declaration: PrimitiveFn, name: str | None = None):
        self.declaration = declaration
        self.name = name or getattr(declaration, "__name__", "primitive")

    def call(self, evaluator: Evaluator, args: list[SchemeValue]) -> SchemeValue:
        return self.declaration(evaluator, args)

    def __repr__(self) -> str:
        return f"<PrimitiveProcedure {self.name}>"


class Procedure:
    """A first-class lambda: its declaration plus the environment it closed over."""

    __slots__ = ("declaration", "closure")

    def __init__(self, declaration: LambdaExpr, closure: Environment):
        self.declaration = declaration
        self.closure = closure

    def bind(self, args: list[SchemeValue]) -> Environment:
        """Return a new frame binding the parameters to `args` over the closure."""
        if self.declaration.is_variadic:
            return Environment(self.declaration.params, list(args) or Null, self.closure)
        return Environment(self.declaration.params, args, self.closure)

    def call(self, evaluator: Evaluator, args: list[SchemeValue]) -> SchemeValue:
        """Run the body to completion; the last body expression still trampolines."""
        env = self.bind(args)
        result: SchemeValue = None
        for expr in self.declaration.body:
            result = evaluator.interpret(expr, env)
        return result

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Procedure (lambda ")
            params = self.declaration.params
            if self.declaration.is_variadic:
                buffer.write(params.lexeme)
            else:
                buffer.write("(")
                buffer.write(" ".join(p.lexeme for p in params))
                buffer.write(")")
            buffer.write(" ...)>")
            return buffer.getvalue()

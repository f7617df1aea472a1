"""Expression nodes produced by the parser and walked by the evaluator.

Each node is a frozen dataclass carrying only what evaluation needs; child
sequences are tuples so a parsed tree cannot be mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from schemelet import SchemeValue

if TYPE_CHECKING:
    from schemelet.reader.scanner import Token


@dataclass(frozen=True)
class CallExpr:
    callee: Expr
    args: tuple[Expr, ...]


@dataclass(frozen=True)
class SymbolExpr:
    token: Token

    @property
    def name(self) -> str:
        return self.token.lexeme


@dataclass(frozen=True)
class LiteralExpr:
    value: SchemeValue


@dataclass(frozen=True)
class LambdaExpr:
    # A tuple of symbol tokens, or one token that collects every argument
    params: Union[tuple[Token, ...], Token]
    body: tuple[Expr, ...]

    @property
    def is_variadic(self) -> bool:
        return not isinstance(self.params, tuple)


@dataclass(frozen=True)
class SetExpr:
    name: Token
    value: Expr


@dataclass(frozen=True)
class DefineExpr:
    name: Token
    value: Expr


@dataclass(frozen=True)
class IfExpr:
    condition: Expr
    then_branch: Expr
    else_branch: Optional[Expr] = None


@dataclass(frozen=True)
class LetBinding:
    name: Token
    value: Expr


@dataclass(frozen=True)
class LetExpr:
    bindings: tuple[LetBinding, ...]
    body: tuple[Expr, ...]


@dataclass(frozen=True)
class QuoteExpr:
    value: Expr


@dataclass(frozen=True)
class ListExpr:
    items: tuple[Expr, ...]


Expr = Union[
    CallExpr,
    SymbolExpr,
    LiteralExpr,
    LambdaExpr,
    SetExpr,
    DefineExpr,
    IfExpr,
    LetExpr,
    QuoteExpr,
    ListExpr,
]

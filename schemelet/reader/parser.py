"""
  Scheme Parser

Recursive descent over the scanner's tokens with one token of lookahead.

    program     => expression*
    expression  => lambda | define | if | set! | let | quote
                 | "(" expression* ")" | "(" ")" | "'" quoted | atom
    lambda      => "(" "lambda" ( SYMBOL | "(" SYMBOL* ")" ) expression* ")"
    define      => "(" "define" SYMBOL expression ")"
    if          => "(" "if" expression expression expression? ")"
    set!        => "(" "set!" SYMBOL expression ")"
    let         => "(" "let" "(" let-binding* ")" expression* ")"
    let-binding => "(" SYMBOL expression ")"
    quote       => "(" "quote" quoted ")"
    quoted      => "(" expression* ")" | expression
    atom        => SYMBOL | NUMBER | STRING | BOOLEAN
"""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from schemelet.errors import SchemeSyntaxError
from schemelet.reader.scanner import Token, TokenType
from schemelet.types.null import Null
from schemelet.types.expressions import (
    CallExpr,
    DefineExpr,
    Expr,
    IfExpr,
    LambdaExpr,
    LetBinding,
    LetExpr,
    ListExpr,
    LiteralExpr,
    QuoteExpr,
    SetExpr,
    SymbolExpr,
)


class Parser:
    def __init__(self, tokens: list[Token], errors: TextIO | None = None):
        if not tokens or tokens[-1].token_type is not TokenType.Eof:
            last_line = tokens[-1].line if tokens else 0
            tokens = [*tokens, Token(TokenType.Eof, 0, '', None, last_line)]
        self.tokens = tokens
        self.current = 0
        self.errors = errors
        self.special_forms: dict[str, Callable[[], Expr]] = {
            "lambda": self.lambda_,
            "define": self.define,
            "if": self.if_,
            "set!": self.set,
            "let": self.let,
            "quote": self.quote,
        }

    def parse(self) -> list[Expr]:
        """Parse every top-level expression; on a syntax error report it and return []."""
        try:
            expressions: list[Expr] = []
            while not self.is_at_end():
                expressions.append(self.expression())
            return expressions
        except SchemeSyntaxError as e:
            print(str(e), file=self.errors or sys.stderr)
            return []
        except RecursionError:
            error = SchemeSyntaxError(self.peek().line, "Nesting too deep")
            print(str(error), file=self.errors or sys.stderr)
            return []

    # ------------------------
    # Grammar rules
    # ------------------------
    def expression(self) -> Expr:
        if self.match(TokenType.LeftBracket):
            if self.match(TokenType.RightBracket):
                return LiteralExpr(Null)
            token = self.peek()
            if token.token_type is TokenType.Symbol and token.lexeme in self.special_forms:
                return self.special_forms[token.lexeme]()
            return self.call()
        return self.atom()

    def call(self) -> Expr:
        callee = self.expression()
        args = self.expressions_until_close()
        return CallExpr(callee, args)

    def lambda_(self) -> Expr:
        self.advance()
        params: tuple[Token, ...] | Token
        if self.match(TokenType.Symbol):
            params = self.previous()
        else:
            self.consume(TokenType.LeftBracket)
            names = []
            while not self.match(TokenType.RightBracket):
                names.append(self.consume(TokenType.Symbol))
            params = tuple(names)
        body = self.expressions_until_close()
        return LambdaExpr(params, body)

    def define(self) -> Expr:
        self.advance()
        name = self.consume(TokenType.Symbol)
        value = self.expression()
        self.consume(TokenType.RightBracket)
        return DefineExpr(name, value)

    def if_(self) -> Expr:
        self.advance()
        condition = self.expression()
        then_branch = self.expression()
        else_branch = None
        if not self.check(TokenType.RightBracket):
            else_branch = self.expression()
        self.consume(TokenType.RightBracket)
        return IfExpr(condition, then_branch, else_branch)

    def set(self) -> Expr:
        self.advance()
        name = self.consume(TokenType.Symbol)
        value = self.expression()
        self.consume(TokenType.RightBracket)
        return SetExpr(name, value)

    def let(self) -> Expr:
        self.advance()
        self.consume(TokenType.LeftBracket)
        bindings = []
        while not self.match(TokenType.RightBracket):
            bindings.append(self.let_binding())
        body = self.expressions_until_close()
        return LetExpr(tuple(bindings), body)

    def let_binding(self) -> LetBinding:
        self.consume(TokenType.LeftBracket)
        name = self.consume(TokenType.Symbol)
        value = self.expression()
        self.consume(TokenType.RightBracket)
        return LetBinding(name, value)

    def quote(self) -> Expr:
        self.advance()
        value = self.quote_value()
        self.consume(TokenType.RightBracket)
        return QuoteExpr(value)

    def quote_value(self) -> Expr:
        if self.match(TokenType.LeftBracket):
            return ListExpr(self.expressions_until_close())
        return self.expression()

    def atom(self) -> Expr:
        if self.match(TokenType.Symbol):
            return SymbolExpr(self.previous())
        if self.match(TokenType.Number, TokenType.String, TokenType.Boolean):
            return LiteralExpr(self.previous().literal)
        if self.match(TokenType.Quote):
            return self.quote_value()
        token = self.peek()
        raise SchemeSyntaxError(token.line, f"Unexpected token: {token.token_type}")

    def expressions_until_close(self) -> tuple[Expr, ...]:
        items = []
        while not self.match(TokenType.RightBracket):
            if self.is_at_end():
                raise SchemeSyntaxError(self.peek().line, "Unexpected token: Eof, expected RightBracket")
            items.append(self.expression())
        return tuple(items)

    # ------------------------
    # Token stream helpers
    # ------------------------
    def consume(self, token_type: TokenType) -> Token:
        if self.check(token_type):
            return self.advance()
        # Reported against the last consumed token
        previous = self.previous()
        raise SchemeSyntaxError(
            previous.line, f"Unexpected token {previous.token_type}, expected {token_type}"
        )

    def advance(self) -> Token:
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def match(self, *token_types: TokenType) -> bool:
        if any(self.check(t) for t in token_types):
            self.current += 1
            return True
        return False

    def check(self, token_type: TokenType) -> bool:
        return self.peek().token_type is token_type

    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[self.current - 1]

    def is_at_end(self) -> bool:
        return self.peek().token_type is TokenType.Eof


def parse(tokens: list[Token], errors: TextIO | None = None) -> list[Expr]:
    return Parser(tokens, errors).parse()

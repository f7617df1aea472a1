"""
  Scheme Scanner

- Single left-to-right pass, one token per iteration
- Emits a flat list of Token objects terminated by an Eof token:

    - ( )          -> LeftBracket / RightBracket
    - #t #f        -> Boolean (literal True / False)
    - "..."        -> String (no escape processing)
    - 42 3.14      -> Number (literal float)
    - ' ` , ,@     -> Quote / Quasiquote / Unquote / UnquoteSplicing
    - foo set! <=  -> Symbol
    - ; ...        -> comment, discarded

Lines are counted from 0 and attached to every token for error messages.
"""

from __future__ import annotations

import re
import string
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TextIO

from schemelet.errors import SchemeSyntaxError


class TokenType(Enum):
    LeftBracket = 'LeftBracket'
    RightBracket = 'RightBracket'
    Symbol = 'Symbol'
    Number = 'Number'
    Boolean = 'Boolean'
    String = 'String'
    Quasiquote = 'Quasiquote'
    Quote = 'Quote'
    Unquote = 'Unquote'
    UnquoteSplicing = 'UnquoteSplicing'
    Eof = 'Eof'

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    token_type: TokenType
    start: int
    lexeme: str
    literal: Any
    line: int


@dataclass
class ScanResult:
    tokens: list[Token] = field(default_factory=list)
    had_error: bool = False


DIGITS = frozenset(string.digits)
DIGITS_OR_DOT = DIGITS | {'.'}
IDENTIFIER_CHARS = DIGITS_OR_DOT | frozenset(string.ascii_letters) | frozenset('+-.*/<=>!?:$%_&~^')

# Longest leading decimal prefix of a digit/dot run ("1.2.3" reads as 1.2)
NUMBER_PREFIX_RE = re.compile(r"\d+(?:\.\d*)?")


class Scanner:
    def __init__(self, source: str, errors: TextIO | None = None):
        self.source = source
        self.start = 0
        self.current = 0
        self.line = 0
        self.tokens: list[Token] = []
        self.errors = errors

    def scan(self) -> ScanResult:
        """Scan the whole source; on a syntax error report it and return the partial tokens."""
        try:
            while not self.is_at_end():
                self.start = self.current
                self.scan_token()
        except SchemeSyntaxError as e:
            print(str(e), file=self.errors or sys.stderr)
            return ScanResult(self.tokens, True)
        self.tokens.append(Token(TokenType.Eof, 0, '', None, self.line))
        return ScanResult(self.tokens, False)

    def scan_token(self) -> None:
        char = self.advance()
        match char:
            case '(':
                self.add_token(TokenType.LeftBracket)
            case ')':
                self.add_token(TokenType.RightBracket)
            case ' ' | '\r' | '\t':
                pass
            case '\n':
                self.line += 1
            case '#':
                if self.peek() == 't':
                    self.advance()
                    self.add_token(TokenType.Boolean, True)
                elif self.peek() == 'f':
                    self.advance()
                    self.add_token(TokenType.Boolean, False)
                else:
                    # not a boolean: the rest reads like a string body
                    self.string()
            case '"':
                self.string()
            case ';':
                while self.peek() != '\n' and not self.is_at_end():
                    self.advance()
            case '`':
                self.add_token(TokenType.Quasiquote)
            case "'":
                self.add_token(TokenType.Quote)
            case ',':
                if self.peek() == '@':
                    self.advance()
                    self.add_token(TokenType.UnquoteSplicing)
                else:
                    self.add_token(TokenType.Unquote)
            case _ if char in DIGITS:
                self.number()
            case _ if char in IDENTIFIER_CHARS:
                while self.peek() in IDENTIFIER_CHARS:
                    self.advance()
                self.add_token(TokenType.Symbol)
            case _:
                raise SchemeSyntaxError(self.line, f"Unknown token {char}")

    def string(self) -> None:
        # An unterminated string runs to the end of input.
        while self.peek() != '"' and not self.is_at_end():
            self.advance()
        literal = self.source[self.start + 1:self.current]
        if not self.is_at_end():
            self.advance()  # closing quote
        self.add_token(TokenType.String, literal)

    def number(self) -> None:
        while self.peek() in DIGITS_OR_DOT:
            self.advance()
        text = self.source[self.start:self.current]
        literal = float(NUMBER_PREFIX_RE.match(text).group(0))
        self.add_token(TokenType.Number, literal)

    def add_token(self, token_type: TokenType, literal: Any = None) -> None:
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, self.start, lexeme, literal, self.line))

    def advance(self) -> str:
        char = self.peek()
        self.current += 1
        return char

    def peek(self) -> str:
        # '' past the end; never a member of the character classes above
        if self.current >= len(self.source):
            return ''
        return self.source[self.current]

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)


def scan(source: str, errors: TextIO | None = None) -> ScanResult:
    return Scanner(source, errors).scan()

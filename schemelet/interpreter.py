from __future__ import annotations

import sys
from pathlib import Path
from typing import Literal, TextIO

from schemelet import SchemeValue
from schemelet.config import get_prelude_files, get_recursion_limit
from schemelet.evaluation.evaluator import Evaluator
from schemelet.printer import stringify
from schemelet.reader.parser import parse
from schemelet.reader.scanner import scan
from schemelet.types.environment import Environment


class Interpreter:
    """
    Orchestrates scanning, parsing and evaluating schemelet source.
    Keeps one global Environment across calls, so definitions persist
    from one `run` to the next.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = 'auto',
        *,
        output: TextIO | None = None,
        errors: TextIO | None = None,
    ):
        # Non-tail recursion nests Python frames; make sure there is room for it
        limit = get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

        self.errors = errors
        self.evaluator = Evaluator(output=output, errors=errors)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            for path in get_prelude_files():
                # Be permissive: missing prelude files are skipped
                if path.is_file():
                    self.eval_prelude(path.read_text(encoding='utf-8'))
        elif prelude:
            self.eval_prelude(prelude)

    @property
    def env(self) -> Environment:
        return self.evaluator.env

    def eval(self, source: str) -> SchemeValue:
        """Evaluate source and return the raw value of the last expression.

        Returns None when the source fails to scan.
        """
        result = scan(source, self.errors)
        if result.had_error:
            return None
        expressions = parse(result.tokens, self.errors)
        return self.evaluator.interpret_all(expressions)

    def eval_prelude(self, code: str) -> None:
        self.eval(code)

    def run(self, source: str) -> str | None:
        """Evaluate source and return the printed form of the last value, or None if absent."""
        value = self.eval(source)
        if value is None:
            return None
        return stringify(value)

    def run_file(self, path: str | Path) -> str | None:
        return self.run(Path(path).read_text(encoding='utf-8'))


_default: Interpreter | None = None


def get_interpreter() -> Interpreter:
    global _default
    if _default is None:
        _default = Interpreter()
    return _default


def run(source: str) -> str | None:
    """Run source in the shared module-level interpreter."""
    return get_interpreter().run(source)

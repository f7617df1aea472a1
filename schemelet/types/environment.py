"""Runtime environment for schemelet.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `enclosing` link. A new frame is created for every
procedure call and every `let`; closures keep their defining frame alive.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Optional, Sequence, Union

from schemelet import SchemeValue
from schemelet.errors import SchemeUnboundSymbol

if TYPE_CHECKING:
    from schemelet.reader.scanner import Token


class Environment:
    """Hierarchical mapping from names to values."""

    __slots__ = ("values", "enclosing")

    def __init__(
        self,
        names: Union[Sequence[Token], Token] = (),
        values: SchemeValue = None,
        enclosing: Optional[Environment] = None,
    ):
        self.values: dict[str, SchemeValue] = {}
        self.enclosing: Environment | None = enclosing
        if isinstance(names, (list, tuple)):
            # Arity is not checked: missing arguments bind to None, extras are dropped
            args = list(values) if values is not None else []
            for i, param in enumerate(names):
                self.values[param.lexeme] = args[i] if i < len(args) else None
        else:
            self.values[names.lexeme] = values

    def define(self, name: str, value: SchemeValue) -> None:
        """Bind `name` to `value` in this frame, replacing any existing binding."""
        self.values[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.values:
                return env
            env = env.enclosing
        return None

    def set(self, name: str, value: SchemeValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises SchemeUnboundSymbol if no frame defines it.
        """
        env = self.find(name)
        if env is None:
            raise SchemeUnboundSymbol(f"Unknown identifier: {name}")
        env.values[name] = value

    def get(self, name: str) -> SchemeValue:
        """Look up the value bound to `name`, searching outward.

        Raises SchemeUnboundSymbol if no frame defines it.
        """
        env = self.find(name)
        if env is None:
            raise SchemeUnboundSymbol(f"Unknown identifier: {name}")
        return env.values[name]

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_values(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.values.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_values(buffer)
            if self.enclosing is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_values(env_buf)
                chain.append(env_buf.getvalue())
            env = env.enclosing
        return f"<Environment chain: {' -> '.join(chain)}>"

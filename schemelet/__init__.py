# Core type aliases for schemelet's data model.
# Runtime values are plain Python objects (bool, float, str, list) plus the
# Null sentinel and the procedure wrappers in schemelet.types.procedure.
#
# Naming guidance:
# - SchemeValue: use in evaluator/runtime code to denote evaluated values.
# - Expression nodes live in schemelet.types.expressions (see `Expr`).

from typing import Any, Callable

# Runtime value alias
SchemeValue = Any

# Host-level primitive: receives the running evaluator and the evaluated args
PrimitiveFn = Callable[..., SchemeValue]

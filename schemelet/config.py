from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Defaults
_DEFAULT_RECURSION_LIMIT = 10_000
_DEFAULT_PRELUDE_FILES: List[Path] = []


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_files() -> List[Path]:
    return paths_from_env('SCHEMELET_PRELUDE_PATH', _DEFAULT_PRELUDE_FILES)


def get_recursion_limit() -> int:
    raw = os.environ.get('SCHEMELET_RECURSION_LIMIT', '').strip()
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        return max(int(raw), 100)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT

import pytest

from schemelet.interpreter import Interpreter


# Tests must not pick up prelude files from the developer's shell; individual
# tests opt back in by setting SCHEMELET_PRELUDE_PATH through monkeypatch.
@pytest.fixture(autouse=True)
def _isolate_prelude(monkeypatch):
    monkeypatch.delenv("SCHEMELET_PRELUDE_PATH", raising=False)


@pytest.fixture
def interp():
    """Fresh interpreter with only the primitive table installed."""
    return Interpreter(prelude=None)

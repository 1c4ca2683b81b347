"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Shared engine factory and fixture loading.
- Console isolation so log output never leaks between tests.
"""

import sys
from pathlib import Path
from typing import Callable

import pytest
from rich.console import Console

# Add src to path so we can import 'js_codemods' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from js_codemods.config import RuntimeConfig  # noqa: E402
from js_codemods.core.engine import CodemodEngine  # noqa: E402
from js_codemods.utils.console import reset_console, set_console  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def rewrite() -> Callable[..., str]:
  """
  Returns a helper running a transform over a source string.

  Usage:
      assert rewrite("array-includes", "a.indexOf(b) >= 0;") == "a.includes(b);"
  """

  def _rewrite(transform: str, code: str, **settings) -> str:
    engine = CodemodEngine(transform, config=RuntimeConfig(**settings))
    return engine.rewrite(code, path="test.js")

  return _rewrite


@pytest.fixture
def load_fixture() -> Callable[[str], str]:
  def _load(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")

  return _load


@pytest.fixture
def captured_console():
  """
  Redirects rich logging into a recording console for the test duration.
  """
  recorder = Console(record=True, width=200, force_terminal=False)
  set_console(recorder)
  yield recorder
  reset_console()

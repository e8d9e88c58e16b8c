"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so captured output does not leak between tests.
- Small builders for engines and Java sources.
"""

import sys
import pytest
from pathlib import Path
from typing import Callable, List

# Add src to path so we can import 'import_order' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from import_order.config import ImportOrderConfig
from import_order.core.engine import ImportOrderEngine
from import_order.utils.console import reset_console


@pytest.fixture(autouse=True)
def isolate_console():
  """Ensures the global console is a fresh stdout console for every test."""
  reset_console()
  yield
  reset_console()


@pytest.fixture
def make_engine() -> Callable[..., ImportOrderEngine]:
  """Factory: `make_engine(groups=[...], separated=True, ...)` returns a started engine."""

  def _factory(**settings) -> ImportOrderEngine:
    engine = ImportOrderEngine(ImportOrderConfig(**settings))
    engine.begin_file()
    return engine

  return _factory


def java_source(*imports: str, package: str = "com.example") -> str:
  """
  Builds a compilation unit from raw import lines.

  An empty string in `imports` produces a blank line. The package declaration
  is on line 1 and the first import line is line 3.
  """
  lines: List[str] = [f"package {package};", ""]
  lines.extend(imports)
  lines.extend(["", "public class Sample {", "}", ""])
  return "\n".join(lines)


@pytest.fixture
def java() -> Callable[..., str]:
  return java_source

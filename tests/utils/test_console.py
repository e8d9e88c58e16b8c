"""
Tests for Centralized Logging Utility and Injection Mechanics.

Verifies:
1. Singleton Proxy correctness.
2. Injection capabilities (`set_console`).
3. Standard logging wrappers.
4. Diagnostic rendering.
"""

from rich.console import Console

from import_order.core.records import Diagnostic
from import_order.utils.console import (
  console,
  get_console,
  log_error,
  log_info,
  log_success,
  print_diagnostic,
  reset_console,
  set_console,
)


def test_console_singleton_proxy():
  assert callable(console.print)
  assert hasattr(console, "export_text")
  assert isinstance(get_console(), Console)


def test_custom_console_injection():
  """
  Verify we can inject a capturing console and retrieve logs.
  This simulates how an editor integration would capture output.
  """
  capture_console = Console(record=True, file=None)
  set_console(capture_console)

  log_info("Captured Log")
  log_success("All good")

  output = capture_console.export_text()
  assert "Captured Log" in output
  assert "All good" in output
  assert "ℹ️" in output


def test_reset_functionality():
  temp = Console()
  set_console(temp)
  assert get_console() is temp

  reset_console()
  current = get_console()
  assert current is not temp
  assert isinstance(current, Console)


def test_logging_wrappers_format(capsys):
  log_info("InfoText")
  log_error("ErrorText")

  captured = capsys.readouterr()
  assert "InfoText" in captured.out
  assert "ErrorText" in captured.out
  assert "❌" in captured.out


def test_proxy_getattr_delegation():
  # 'width' is a property of Rich Console, not defined on _ConsoleProxy
  assert isinstance(console.width, int)
  assert console.width > 0


def test_print_diagnostic_single_line():
  capture = Console(record=True, width=200)
  set_console(capture)

  print_diagnostic("src/Foo.java", Diagnostic(line=4, key="import.ordering", args=("java.util.List",)))

  output = capture.export_text()
  assert "src/Foo.java:4: Wrong order for 'java.util.List' import. [import.ordering]" in output


def test_print_diagnostic_block_is_verbatim():
  """The desired order block keeps its blank lines and is not parsed as markup."""
  capture = Console(record=True, width=200)
  set_console(capture)

  block = "import static a.B.c;\n\nimport [x].Y;\n"
  print_diagnostic("Foo.java", Diagnostic(line=3, key="import.desired.order", args=(block,)))

  lines = capture.export_text().splitlines()
  assert lines[0] == "Foo.java:3: Wrong order for imports. Desired order: [import.desired.order]"
  assert lines[1:] == ["import static a.B.c;", "", "import [x].Y;"]

"""
Central Logging and Console Utilities.

All user-facing output goes through the Python standard `logging` library,
rendered by `rich`.

1.  **Standard Logging Integration**: a `RichHandler` on the root logger and
    helpers (`log_info`, `log_success`, `log_warning`, `log_error`).
2.  **Swappable Console**: the module-level `console` is a proxy whose backend
    can be replaced at runtime via `set_console`, so output can be captured in
    memory (tests, editor integrations) instead of written to stdout.
3.  **Diagnostic Output**: `print_diagnostic` renders one engine diagnostic as
    ``path:line: message``.

Attributes:
    console (_ConsoleProxy): A global, stable reference to the active Rich Console.
"""

import logging
from pathlib import Path
from typing import Any, Union

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.theme import Theme

from import_order.core.records import Diagnostic

# Between INFO and WARNING
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
    "line": "cyan",
    "rule": "dim magenta",
    "code": "bold magenta",
  }
)


class _ConsoleProxy:
  """
  A Proxy wrapper around `rich.console.Console`.

  All printing is forwarded to the current backend. Swapping the backend also
  re-points the logging handler at it.

  Attributes:
      _backend (Console): The active Rich Console instance.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._configure_logging()

  def set_backend(self, new_console: Console) -> None:
    """
    Injects a new Console backend and updates logging handlers.

    Args:
        new_console (Console): The new Rich Console instance to use.
    """
    self._backend = new_console
    self._configure_logging()

  def reset(self) -> None:
    """Resets the proxy to a fresh standard output console."""
    self._backend = Console(theme=_THEME)
    self._configure_logging()

  @property
  def backend(self) -> Console:
    return self._backend

  def _configure_logging(self) -> None:
    # Drop previous RichHandlers so records are not duplicated or sent to a stale console
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
      if isinstance(handler, RichHandler):
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
      console=self._backend,
      show_time=False,
      omit_repeated_times=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )

    root_logger.setLevel(logging.INFO)
    root_logger.addHandler(rich_handler)

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def export_text(self, **kwargs: Any) -> str:
    """
    Forwards `export_text` (useful for output capturing).

    Args:
        **kwargs: Options passed to console.export_text.

    Returns:
        str: The captured text output.
    """
    return self._backend.export_text(**kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


# Modules import this object; its backend changes via `set_console`.
console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Global helper to inject a specific console instance.

  Args:
      new_console (Console): The configured Rich console to use globally.
  """
  console.set_backend(new_console)


def reset_console() -> None:
  """Global helper to reset logging and console to standard output."""
  console.reset()


def get_console() -> Console:
  """
  Retrieves the currently active console backend.

  Returns:
      Console: The active Rich Console.
  """
  return console.backend


def log_info(msg: str) -> None:
  logging.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  logging.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  logging.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  logging.error(f"❌ {msg}", extra={"markup": True})


def print_diagnostic(path: Union[str, Path], diagnostic: Diagnostic) -> None:
  """
  Prints one diagnostic as ``path:line: message [key]``.

  Multi-line messages (the desired order block) are printed verbatim below the
  first line.

  Args:
      path: File the diagnostic belongs to.
      diagnostic: The engine diagnostic.
  """
  head, _, rest = diagnostic.message.partition("\n")
  console.print(
    f"[path]{escape(str(path))}[/path]:[line]{diagnostic.line}[/line]: {escape(head)} [rule]\\[{diagnostic.key}][/rule]",
    highlight=False,
  )
  if rest:
    console.print(escape(rest.rstrip("\n")), highlight=False, markup=False)

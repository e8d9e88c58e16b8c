"""
Check Command Handler.

Implements `import-order check`:
1. Configuration loading (pyproject.toml + CLI overrides).
2. File discovery (a single file or every ``*.java`` below a directory).
3. Running the engine over each file's import section.
4. Reporting diagnostics as text or JSON.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

from pydantic import ValidationError
from rich.table import Table

from import_order.config import ImportOrderConfig
from import_order.core.engine import ImportOrderEngine
from import_order.core.records import Diagnostic
from import_order.core.scanner import check_source
from import_order.utils.console import console, log_error, log_info, log_success, print_diagnostic

EXIT_CLEAN = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def collect_files(path: Path, pattern: str = "*.java") -> List[Path]:
  """
  Resolves the files to check.

  Args:
      path: File or directory.
      pattern: Glob used when `path` is a directory.

  Returns:
      List[Path]: Sorted file list.
  """
  if path.is_file():
    return [path]
  return sorted(p for p in path.rglob(pattern) if p.is_file())


def check_file(path: Path, engine: ImportOrderEngine) -> List[Diagnostic]:
  """
  Reads and checks one file.

  Args:
      path: Java source file.
      engine: Engine to run; its per-file state is reset first.

  Returns:
      List[Diagnostic]: Diagnostics for the file.

  Raises:
      OSError: If the file cannot be read.
  """
  source = path.read_text(encoding="utf-8", errors="replace")
  return check_source(source, engine=engine)


def handle_check(path: Path, overrides: Dict[str, Any], json_mode: bool = False) -> int:
  """
  Checks the import order of a file or directory.

  Args:
      path: Input source file or directory.
      overrides: Configuration values from the command line (None values are ignored).
      json_mode: If True, print a JSON report to stdout instead of console diagnostics.

  Returns:
      int: 0 when clean, 1 when violations were found, 2 on configuration or IO errors.
  """
  if not path.exists():
    log_error(f"Path not found: {path}")
    return EXIT_ERROR

  try:
    config = ImportOrderConfig.load(search_path=path, **overrides)
  except (ValidationError, ValueError) as e:
    log_error(f"Invalid configuration: {e}")
    return EXIT_ERROR

  files = collect_files(path)
  if not json_mode:
    log_info(f"Checking {len(files)} file(s) with groups {config.groups or ['*']}...")

  engine = ImportOrderEngine(config=config)

  results: Dict[Path, List[Diagnostic]] = {}
  had_error = False

  for f in files:
    try:
      results[f] = check_file(f, engine)
    except OSError as e:
      log_error(f"Failed to read {f}: {e}")
      had_error = True

  offending = {f: diags for f, diags in results.items() if diags}

  if json_mode:
    report = [{"file": str(f), **d.to_dict()} for f, diags in offending.items() for d in diags]
    print(json.dumps(report, indent=2))
  else:
    for f, diags in offending.items():
      for d in diags:
        print_diagnostic(f, d)
    _print_summary(len(results), offending)

  if had_error:
    return EXIT_ERROR
  return EXIT_VIOLATIONS if offending else EXIT_CLEAN


def _print_summary(checked: int, offending: Dict[Path, List[Diagnostic]]) -> None:
  if not offending:
    log_success(f"{checked} file(s) checked, import order is clean.")
    return

  table = Table(title="Import Order Summary")
  table.add_column("File", style="cyan")
  table.add_column("Diagnostics", style="red", justify="right")
  for f, diags in offending.items():
    table.add_row(str(f), str(len(diags)))
  console.print(table)
  console.print(f"[bold]{len(offending)}[/bold] of {checked} file(s) have import order problems.")

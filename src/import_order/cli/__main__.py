"""
Main Entry Point for import-order CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `import_order.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from import_order import __version__
from import_order.cli import commands
from import_order.config import parse_cli_key_values
from import_order.enums import StaticImportPolicy
from import_order.utils.console import log_error


def _overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
  """
  Collects configuration overrides given on the command line.

  Flags that were not passed stay None so pyproject.toml values apply.

  Args:
      args: Parsed arguments of the `check` command.

  Returns:
      Dict[str, Any]: Field name -> value.
  """
  overrides = parse_cli_key_values(args.option)
  overrides.update(
    {
      "groups": args.groups,
      "static_import_policy": args.policy,
      "separated": args.separated,
      "ordered": args.ordered,
      "case_sensitive": args.case_sensitive,
      "print_desired_order": args.print_desired_order,
      "blame_individual_imports": args.blame,
    }
  )
  return overrides


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 clean, 1 violations, 2 errors).
  """
  parser = argparse.ArgumentParser(description="import-order: Import ordering checks for Java sources")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: CHECK ---
  cmd_check = subparsers.add_parser("check", help="Check the import order of a file or directory")
  cmd_check.add_argument("path", type=Path, help="Input source file or directory")
  cmd_check.add_argument(
    "--groups",
    default=None,
    help="Comma-separated group specifiers, e.g. 'java,javax,/^org\\./,*' (default: from toml)",
  )
  cmd_check.add_argument(
    "--policy",
    default=None,
    choices=[p.value for p in StaticImportPolicy],
    help="Static import placement policy (default: from toml, else 'under')",
  )
  cmd_check.add_argument(
    "--separated",
    action="store_true",
    default=None,
    help="Require a blank line between groups",
  )
  cmd_check.add_argument(
    "--no-ordered",
    dest="ordered",
    action="store_false",
    default=None,
    help="Do not check lexicographic order within a group",
  )
  cmd_check.add_argument(
    "--case-insensitive",
    dest="case_sensitive",
    action="store_false",
    default=None,
    help="Compare import names ignoring case",
  )
  cmd_check.add_argument(
    "--print-desired-order",
    action="store_true",
    default=None,
    help="Print the full desired import block for files with violations",
  )
  cmd_check.add_argument(
    "--no-blame",
    dest="blame",
    action="store_false",
    default=None,
    help="Do not report individual imports (use with --print-desired-order)",
  )
  cmd_check.add_argument(
    "--option",
    nargs="*",
    help="Extra settings in key=value format (e.g. separated=true static_import_policy=top)",
  )
  cmd_check.add_argument("--json", action="store_true", help="Print a JSON report to stdout")

  args = parser.parse_args(argv)

  if args.command == "check":
    try:
      overrides = _overrides_from_args(args)
    except ValueError as e:
      log_error(str(e))
      return 2
    return commands.handle_check(args.path, overrides, args.json)

  return 0


if __name__ == "__main__":
  sys.exit(main())

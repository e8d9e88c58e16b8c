"""
CLI Command Handlers Facade.

Re-exports handlers from `import_order.cli.handlers` so the dispatcher and
tests have a single module to import or patch.
"""

from import_order.cli.handlers.check import handle_check, check_file, collect_files

__all__ = [
  "check_file",
  "collect_files",
  "handle_check",
]

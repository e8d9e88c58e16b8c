"""
Per-file running state of the ordering validator.
"""

from dataclasses import dataclass
from typing import Union

# Stand-in for "before any import": compares lower than every group index and line.
NEGATIVE_INFINITY = float("-inf")

Number = Union[int, float]


@dataclass
class EngineState:
  """
  Mutable state for one pass over one file.

  A fresh instance is created for every file; instances are never shared
  between files.
  """

  last_group: Number = NEGATIVE_INFINITY
  last_import_line: Number = NEGATIVE_INFINITY
  last_import_name: str = ""
  last_import_was_static: bool = False
  before_first_import: bool = True
  violations_detected: bool = False

  def restart_grouping(self) -> None:
    """Forgets the previous group and name, as if no import had been seen yet."""
    self.last_group = NEGATIVE_INFINITY
    self.last_import_name = ""

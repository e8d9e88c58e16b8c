"""
Desired Import Order Reporter.

Buffers every import of a file and, at end of file, renders the import block
the file *should* contain. The canonical order is computed from the groups
alone; it ignores the validator's line-based heuristics and its TOP/BOTTOM
resets.

Render group per import:

- static under TOP: ``-inf`` (one block before everything),
- static under BOTTOM: ``+inf`` (one block after everything),
- otherwise: the classified group.

Inside the TOP/BOTTOM static block, imports are kept in classified-group order
and separated like regular groups, since the validator checks them that way.

Within one group, imports keep their source order when ordering is disabled;
otherwise statics go first (ABOVE) or last (UNDER) and the rest is sorted by
name.
"""

import functools
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from import_order.core.classifier import GroupClassifier
from import_order.core.comparator import compare
from import_order.core.messages import MSG_DESIRED_ORDER
from import_order.core.records import Diagnostic, ImportRecord
from import_order.enums import StaticImportPolicy

Number = Union[int, float]

FIRST_GROUP = float("-inf")
LAST_GROUP = float("inf")


@dataclass(frozen=True)
class BufferedImport:
  """An import tagged with its classified group and the group it is rendered in."""

  record: ImportRecord
  group: int
  render_group: Number

  @property
  def section(self) -> Tuple[Number, int]:
    """Blank-line delimited section of the rendered block."""
    return self.render_group, self.group


def _sign(a: Number, b: Number) -> int:
  return (a > b) - (a < b)


class DesiredOrderReporter:
  """
  Accumulates the imports of one file and renders the suggested block.

  Attributes:
      entries (List[BufferedImport]): Imports buffered for the current file.
  """

  def __init__(
    self,
    classifier: GroupClassifier,
    policy: StaticImportPolicy = StaticImportPolicy.UNDER,
    ordered: bool = True,
    separated: bool = False,
    case_sensitive: bool = True,
  ):
    self.classifier = classifier
    self.policy = StaticImportPolicy.parse(policy)
    self.ordered = ordered
    self.separated = separated
    self.case_sensitive = case_sensitive
    self.entries: List[BufferedImport] = []

  def render_group_for(self, record: ImportRecord, group: int) -> Number:
    """
    Computes the group an import is rendered in.

    Args:
        record: The import.
        group: Its classified group.

    Returns:
        Number: ``-inf`` / ``+inf`` for statics under TOP / BOTTOM, else `group`.
    """
    if record.is_static:
      if self.policy == StaticImportPolicy.TOP:
        return FIRST_GROUP
      if self.policy == StaticImportPolicy.BOTTOM:
        return LAST_GROUP
    return group

  def add(self, record: ImportRecord) -> None:
    """Buffers one import. Empty names are ignored."""
    if not record.name:
      return
    group = self.classifier.classify(record.name)
    self.entries.append(BufferedImport(record=record, group=group, render_group=self.render_group_for(record, group)))

  def clear(self) -> None:
    self.entries.clear()

  def _compare(self, a: BufferedImport, b: BufferedImport) -> int:
    if a.section != b.section:
      return _sign(a.render_group, b.render_group) or _sign(a.group, b.group)

    if not self.ordered:
      return _sign(a.record.source_index, b.record.source_index)

    if a.record.is_static != b.record.is_static and self.policy in (
      StaticImportPolicy.ABOVE,
      StaticImportPolicy.UNDER,
    ):
      statics_first = self.policy == StaticImportPolicy.ABOVE
      return -1 if a.record.is_static == statics_first else 1

    return compare(a.record.name, b.record.name, self.case_sensitive)

  def sorted_entries(self) -> List[BufferedImport]:
    """Returns the buffered imports in canonical order (stable)."""
    return sorted(self.entries, key=functools.cmp_to_key(self._compare))

  def render(self) -> str:
    """
    Renders the buffered imports as an import block.

    Returns:
        str: One ``import [static ]name;`` line per import, with a blank line
        between sections when separation is enabled. Empty string if nothing
        is buffered.
    """
    ordered = self.sorted_entries()
    if not ordered:
      return ""

    lines: List[str] = []
    last_section = ordered[0].section
    for entry in ordered:
      if entry.section != last_section and self.separated:
        lines.append("\n")
      prefix = "import static " if entry.record.is_static else "import "
      lines.append(f"{prefix}{entry.record.name};\n")
      last_section = entry.section
    return "".join(lines)

  def finish(self, violations_detected: bool) -> Optional[Diagnostic]:
    """
    Produces the end-of-file suggestion and clears the buffer.

    Args:
        violations_detected: Whether the validator flagged anything in this file.

    Returns:
        Optional[Diagnostic]: The ``import.desired.order`` diagnostic at the
        first import's line, or None when there is nothing to suggest.
    """
    if not self.entries or not violations_detected:
      self.clear()
      return None

    first_line = self.entries[0].record.line_number
    text = self.render()
    self.clear()
    return Diagnostic(line=first_line, key=MSG_DESIRED_ORDER, args=(text,))

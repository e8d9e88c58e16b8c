"""
Single-pass Import Ordering Validator.

Consumes the imports of one file in source order and reports:

1.  **Ordering**: an import whose group precedes the group of the previous
    import, or, within one group, an import that sorts before its predecessor.
2.  **Separation**: the first import of a new group placed directly on the
    line after the previous import when blank lines between groups are required.

Static imports are placed according to a `StaticImportPolicy`. Each policy is
described by a `PolicyRule` in `_POLICY_TABLE`: crossing a static/non-static
boundary in one direction may restart grouping from scratch (TOP, BOTTOM),
and crossing it in a given direction may count as a violation when the two
imports share a group (ABOVE, UNDER, and by extension TOP, BOTTOM).
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from import_order.core.classifier import GroupClassifier
from import_order.core.comparator import compare
from import_order.core.records import ImportRecord, Violation
from import_order.core.state import EngineState
from import_order.enums import StaticImportPolicy, ViolationKind

# (previous import was static, current import is static)
Crossing = Tuple[bool, bool]

STATIC_TO_PLAIN: Crossing = (True, False)
PLAIN_TO_STATIC: Crossing = (False, True)


@dataclass(frozen=True)
class PolicyRule:
  """
  Decision row for one static import policy.

  Attributes:
      reset_on: Crossing that restarts grouping before the import is checked.
      boundary_on: Crossing that is an ordering violation inside one group.
  """

  reset_on: Optional[Crossing] = None
  boundary_on: Optional[Crossing] = None


_POLICY_TABLE: Dict[StaticImportPolicy, PolicyRule] = {
  StaticImportPolicy.TOP: PolicyRule(reset_on=STATIC_TO_PLAIN, boundary_on=PLAIN_TO_STATIC),
  StaticImportPolicy.ABOVE: PolicyRule(boundary_on=PLAIN_TO_STATIC),
  StaticImportPolicy.BOTTOM: PolicyRule(reset_on=PLAIN_TO_STATIC, boundary_on=STATIC_TO_PLAIN),
  StaticImportPolicy.UNDER: PolicyRule(boundary_on=STATIC_TO_PLAIN),
  StaticImportPolicy.INFLOW: PolicyRule(),
}


def policy_rule(policy: StaticImportPolicy) -> PolicyRule:
  """Returns the decision row for a policy."""
  return _POLICY_TABLE[policy]


class OrderingValidator:
  """
  Stateless checker applied to an explicit per-file `EngineState`.

  The same validator can serve any number of files, sequentially or in
  parallel, as long as each file gets its own state object.
  """

  def __init__(
    self,
    classifier: GroupClassifier,
    policy: StaticImportPolicy = StaticImportPolicy.UNDER,
    ordered: bool = True,
    separated: bool = False,
    case_sensitive: bool = True,
  ):
    """
    Args:
        classifier: Maps names to group indices.
        policy: Placement policy for static imports.
        ordered: Check lexicographic order within a group.
        separated: Require a blank line between groups.
        case_sensitive: Case sensitivity of the lexicographic check.
    """
    self.classifier = classifier
    self.policy = StaticImportPolicy.parse(policy)
    self.ordered = ordered
    self.separated = separated
    self.case_sensitive = case_sensitive
    self._rule = policy_rule(self.policy)

  def visit(self, state: EngineState, record: ImportRecord) -> List[Violation]:
    """
    Checks one import and advances the state.

    Args:
        state: Running state of the current file. Mutated in place.
        record: The import, delivered in source order.

    Returns:
        List[Violation]: Violations raised by this import (at most one).
    """
    if not record.name:
      return []

    crossing = (state.last_import_was_static, record.is_static)
    if self._rule.reset_on == crossing:
      state.restart_grouping()
    boundary_crossed = self._rule.boundary_on == crossing

    group = self.classifier.classify(record.name)
    violations: List[Violation] = []

    if group > state.last_group:
      if not state.before_first_import and self.separated:
        if record.line_number - state.last_import_line < 2:
          violations.append(Violation(line=record.line_number, kind=ViolationKind.SEPARATION, import_name=record.name))
    elif group == state.last_group:
      if self._out_of_order_in_group(state, record, boundary_crossed):
        violations.append(Violation(line=record.line_number, kind=ViolationKind.ORDERING, import_name=record.name))
    else:
      violations.append(Violation(line=record.line_number, kind=ViolationKind.ORDERING, import_name=record.name))

    if violations:
      state.violations_detected = True

    state.last_group = group
    state.last_import_line = record.end_line
    state.last_import_name = record.name
    state.last_import_was_static = record.is_static
    state.before_first_import = False

    return violations

  def _out_of_order_in_group(self, state: EngineState, record: ImportRecord, boundary_crossed: bool) -> bool:
    if not self.ordered:
      return False

    unsorted = compare(state.last_import_name, record.name, self.case_sensitive) > 0

    if self.policy == StaticImportPolicy.INFLOW:
      return unsorted

    same_kind = state.last_import_was_static == record.is_static
    return (same_kind and unsorted) or boundary_crossed

"""
Tests for the Desired Import Order Reporter.

Verifies that:
1. Statics are placed per policy (block at top/bottom, or inside their group).
2. Names are sorted per case sensitivity, or kept in source order when
   ordering is disabled.
3. Blank lines separate groups only when separation is enabled.
4. Nothing is reported for clean files, and the buffer is always cleared.
"""

from typing import Sequence, Tuple

import pytest

from import_order.core.classifier import GroupClassifier
from import_order.core.messages import MSG_DESIRED_ORDER
from import_order.core.records import ImportRecord
from import_order.core.reporter import FIRST_GROUP, LAST_GROUP, DesiredOrderReporter
from import_order.enums import StaticImportPolicy

Entry = Tuple[str, bool]

MIXED: Sequence[Entry] = [
  ("org.junit.Test", False),
  ("java.util.List", False),
  ("org.junit.Assert.assertEquals", True),
  ("java.io.File", False),
  ("java.lang.Math.max", True),
]


def fill(reporter: DesiredOrderReporter, entries: Sequence[Entry], first_line: int = 3) -> DesiredOrderReporter:
  for index, (name, is_static) in enumerate(entries):
    reporter.add(ImportRecord(name=name, line_number=first_line + index, is_static=is_static, source_index=index))
  return reporter


def make(groups=("java", "org"), **kwargs) -> DesiredOrderReporter:
  return DesiredOrderReporter(GroupClassifier(list(groups)), **kwargs)


def test_render_under_separated():
  reporter = fill(make(policy=StaticImportPolicy.UNDER, separated=True), MIXED)
  assert reporter.render() == (
    "import java.io.File;\n"
    "import java.util.List;\n"
    "import static java.lang.Math.max;\n"
    "\n"
    "import org.junit.Test;\n"
    "import static org.junit.Assert.assertEquals;\n"
  )


def test_render_above_not_separated():
  reporter = fill(make(policy=StaticImportPolicy.ABOVE), MIXED)
  assert reporter.render() == (
    "import static java.lang.Math.max;\n"
    "import java.io.File;\n"
    "import java.util.List;\n"
    "import static org.junit.Assert.assertEquals;\n"
    "import org.junit.Test;\n"
  )


def test_render_top_puts_all_statics_first():
  reporter = fill(make(policy=StaticImportPolicy.TOP, separated=True), MIXED)
  assert reporter.render() == (
    "import static java.lang.Math.max;\n"
    "\n"
    "import static org.junit.Assert.assertEquals;\n"
    "\n"
    "import java.io.File;\n"
    "import java.util.List;\n"
    "\n"
    "import org.junit.Test;\n"
  )


def test_render_bottom_puts_all_statics_last():
  reporter = fill(make(policy=StaticImportPolicy.BOTTOM), MIXED)
  assert reporter.render() == (
    "import java.io.File;\n"
    "import java.util.List;\n"
    "import org.junit.Test;\n"
    "import static java.lang.Math.max;\n"
    "import static org.junit.Assert.assertEquals;\n"
  )


def test_render_inflow_sorts_statics_by_name():
  reporter = fill(make(policy=StaticImportPolicy.INFLOW), MIXED)
  assert reporter.render() == (
    "import java.io.File;\n"
    "import static java.lang.Math.max;\n"
    "import java.util.List;\n"
    "import static org.junit.Assert.assertEquals;\n"
    "import org.junit.Test;\n"
  )


def test_render_unordered_keeps_source_order_within_group():
  reporter = fill(make(policy=StaticImportPolicy.UNDER, ordered=False), MIXED)
  assert reporter.render() == (
    "import java.util.List;\n"
    "import java.io.File;\n"
    "import static java.lang.Math.max;\n"
    "import org.junit.Test;\n"
    "import static org.junit.Assert.assertEquals;\n"
  )


def test_render_case_insensitive():
  reporter = fill(make(groups=(), case_sensitive=False), [("b.Zebra", False), ("b.apple", False)])
  assert reporter.render() == "import b.apple;\nimport b.Zebra;\n"

  sensitive = fill(make(groups=()), [("b.apple", False), ("b.Zebra", False)])
  assert sensitive.render() == "import b.Zebra;\nimport b.apple;\n"


@pytest.mark.parametrize(
  "policy,expected",
  [
    (StaticImportPolicy.TOP, FIRST_GROUP),
    (StaticImportPolicy.BOTTOM, LAST_GROUP),
    (StaticImportPolicy.ABOVE, 1),
    (StaticImportPolicy.UNDER, 1),
    (StaticImportPolicy.INFLOW, 1),
  ],
)
def test_render_group_for_static(policy, expected):
  reporter = make(policy=policy)
  record = ImportRecord("org.junit.Assert.assertEquals", line_number=1, is_static=True)
  assert reporter.render_group_for(record, 1) == expected


def test_render_group_for_plain_is_classified_group():
  reporter = make(policy=StaticImportPolicy.TOP)
  assert reporter.render_group_for(ImportRecord("org.Foo", line_number=1), 1) == 1


def test_finish_without_violations_reports_nothing_and_clears():
  reporter = fill(make(), MIXED)
  assert reporter.finish(violations_detected=False) is None
  assert reporter.entries == []


def test_finish_with_violations_reports_at_first_import_line():
  reporter = fill(make(), MIXED, first_line=7)
  diagnostic = reporter.finish(violations_detected=True)
  assert diagnostic is not None
  assert diagnostic.line == 7
  assert diagnostic.key == MSG_DESIRED_ORDER
  assert diagnostic.args[0].startswith("import java.io.File;\n")
  assert "Desired order:" in diagnostic.message
  assert reporter.entries == []


def test_finish_empty_buffer():
  assert make().finish(violations_detected=True) is None


def test_empty_names_are_not_buffered():
  reporter = make()
  reporter.add(ImportRecord("", line_number=1))
  assert reporter.entries == []
  assert reporter.render() == ""

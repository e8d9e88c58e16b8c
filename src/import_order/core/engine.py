"""
Import Order Engine.

The boundary between a source walker and the checks. For each file the walker
calls :meth:`ImportOrderEngine.begin_file`, then
:meth:`ImportOrderEngine.on_import` once per import in source order, then
:meth:`ImportOrderEngine.end_file`.

Diagnostics are pushed to an optional sink callable ``sink(line, key, args)``
and are also collected in :attr:`ImportOrderEngine.diagnostics` for the
current file.

One engine instance processes one file at a time. Use separate instances to
check files concurrently; they may share a `GroupClassifier`.
"""

import logging
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple, Union

from import_order.config import ImportOrderConfig
from import_order.core.classifier import GroupClassifier
from import_order.core.records import Diagnostic, ImportRecord, Violation
from import_order.core.reporter import DesiredOrderReporter
from import_order.core.state import EngineState
from import_order.core.validator import OrderingValidator

DiagnosticSink = Callable[[int, str, Tuple[Any, ...]], None]

logger = logging.getLogger(__name__)


class ImportOrderEngine:
  """
  Per-file driver combining the validator and the desired-order reporter.

  Attributes:
      config (ImportOrderConfig): Active configuration.
      classifier (GroupClassifier): Compiled groups.
      validator (OrderingValidator): Line-by-line checker.
      reporter (Optional[DesiredOrderReporter]): Present only when
          `print_desired_order` is enabled.
      state (EngineState): Running state of the current file.
      diagnostics (List[Diagnostic]): Everything emitted for the current file.
  """

  def __init__(
    self,
    config: Optional[ImportOrderConfig] = None,
    sink: Optional[DiagnosticSink] = None,
    classifier: Optional[GroupClassifier] = None,
  ):
    """
    Initializes the engine.

    Args:
        config: Settings. Defaults to `ImportOrderConfig()`.
        sink: Receives ``(line, key, args)`` for every emitted diagnostic.
        classifier: Pre-compiled classifier to share between engines. Built
            from `config.groups` if omitted.

    Raises:
        InvalidGroupError: If a group specifier is malformed.
    """
    self.config = config or ImportOrderConfig()
    self.sink = sink
    self.classifier = classifier or GroupClassifier(self.config.groups)

    options = dict(
      policy=self.config.static_import_policy,
      ordered=self.config.ordered,
      separated=self.config.separated,
      case_sensitive=self.config.case_sensitive,
    )
    self.validator = OrderingValidator(self.classifier, **options)
    self.reporter = DesiredOrderReporter(self.classifier, **options) if self.config.print_desired_order else None

    self.state = EngineState()
    self.diagnostics: List[Diagnostic] = []
    self._source_index = 0

  def begin_file(self) -> None:
    """Resets all per-file state."""
    self.state = EngineState()
    self.diagnostics = []
    self._source_index = 0
    if self.reporter:
      self.reporter.clear()

  def on_import(
    self,
    name: Optional[str],
    line: int,
    is_static: bool = False,
    end_line: Optional[int] = None,
  ) -> List[Violation]:
    """
    Processes one import notification.

    Args:
        name: Fully qualified import name. None or empty is ignored.
        line: Line of the imported identifier.
        is_static: True for static imports.
        end_line: Line of the terminating ``;`` (defaults to `line`).

    Returns:
        List[Violation]: Violations raised by this import, whether or not
        they were blamed individually.
    """
    if not name:
      logger.debug("Skipping import without a name at line %s", line)
      return []

    record = ImportRecord(
      name=name,
      line_number=line,
      is_static=is_static,
      source_index=self._source_index,
      end_line=line if end_line is None else end_line,
    )
    self._source_index += 1
    return self.process(record)

  def process(self, record: ImportRecord) -> List[Violation]:
    """
    Processes an already built record.

    Args:
        record: The import.

    Returns:
        List[Violation]: Violations raised by this import.
    """
    if self.reporter:
      self.reporter.add(record)

    violations = self.validator.visit(self.state, record)
    if self.config.blame_individual_imports:
      for violation in violations:
        self._emit(violation.to_diagnostic())
    return violations

  def end_file(self) -> Optional[Diagnostic]:
    """
    Finishes the current file.

    Returns:
        Optional[Diagnostic]: The desired-order suggestion if one was emitted.
    """
    if not self.reporter:
      return None
    suggestion = self.reporter.finish(self.state.violations_detected)
    if suggestion:
      self._emit(suggestion)
    return suggestion

  @property
  def violations_detected(self) -> bool:
    return self.state.violations_detected

  def _emit(self, diagnostic: Diagnostic) -> None:
    self.diagnostics.append(diagnostic)
    if self.sink:
      self.sink(diagnostic.line, diagnostic.key, diagnostic.args)


ImportSpec = Union[Tuple[str, int], Tuple[str, int, bool], Tuple[str, int, bool, int]]


def check_imports(
  imports: Iterable[Union[ImportSpec, ImportRecord]],
  config: Optional[ImportOrderConfig] = None,
  sink: Optional[DiagnosticSink] = None,
) -> List[Diagnostic]:
  """
  Runs one file's worth of imports through a fresh engine.

  Args:
      imports: ``(name, line[, is_static[, end_line]])`` tuples or records, in source order.
      config: Settings.
      sink: Optional diagnostics sink.

  Returns:
      List[Diagnostic]: All diagnostics for the file, suggestion last.
  """
  engine = ImportOrderEngine(config=config, sink=sink)
  engine.begin_file()
  for item in imports:
    if isinstance(item, ImportRecord):
      engine.on_import(item.name, item.line_number, item.is_static, item.end_line)
    else:
      engine.on_import(*_unpack(item))
  engine.end_file()
  return list(engine.diagnostics)


def _unpack(item: Sequence[Any]) -> Tuple[str, int, bool, Optional[int]]:
  name, line = item[0], item[1]
  is_static = bool(item[2]) if len(item) > 2 else False
  end_line = item[3] if len(item) > 3 else None
  return name, line, is_static, end_line

"""
Data structures exchanged between the walker, the engine and diagnostic sinks.

This module defines the immutable `ImportRecord` created for every import
notification, and the `Violation` / `Diagnostic` Pydantic models emitted by
the engine.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from import_order.core.messages import format_message
from import_order.enums import ViolationKind


@dataclass(frozen=True)
class ImportRecord:
  """
  One import declaration, as reported by the walker.

  Attributes:
      name: Fully qualified name (``java.util.List``, ``java.lang.Math.PI``, ``java.io.*``).
      line_number: Line of the imported identifier; violations are reported here.
      is_static: True for ``import static`` declarations.
      source_index: 0-based position of the import within its file.
      end_line: Line of the terminating ``;``. Separation gaps are measured
          from this line. Defaults to `line_number`.
  """

  name: str
  line_number: int
  is_static: bool = False
  source_index: int = 0
  end_line: int = -1

  def __post_init__(self) -> None:
    if self.end_line < self.line_number:
      object.__setattr__(self, "end_line", self.line_number)


class Violation(BaseModel):
  """
  A single ordering or separation problem.
  """

  model_config = ConfigDict(frozen=True)

  line: int = Field(description="Line of the offending import.")
  kind: ViolationKind = Field(description="Ordering or separation.")
  import_name: str = Field(description="Name of the offending import.")

  def to_diagnostic(self) -> "Diagnostic":
    """
    Converts the violation to a sink-ready diagnostic.

    Returns:
        Diagnostic: Message key equal to the violation kind, one argument (the import name).
    """
    return Diagnostic(line=self.line, key=self.kind.value, args=(self.import_name,))


class Diagnostic(BaseModel):
  """
  A message emitted by the engine: ``(line, message-key, arguments)``.
  """

  model_config = ConfigDict(frozen=True)

  line: int
  key: str
  args: Tuple[Any, ...] = Field(default_factory=tuple)

  @property
  def message(self) -> str:
    """Human-readable text for this diagnostic."""
    return format_message(self.key, self.args)

  def to_dict(self) -> Dict[str, Any]:
    """JSON-friendly representation, including the rendered message."""
    return {"line": self.line, "key": self.key, "args": list(self.args), "message": self.message}

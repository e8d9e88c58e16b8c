"""
Java Import Scanner.

A lightweight walker that finds the import declarations of a Java compilation
unit and feeds them to an :class:`~import_order.core.engine.ImportOrderEngine`.

It is not a parser. Comments and string literals are blanked out (newlines are
kept so line numbers stay valid), then ``import`` declarations are matched up
to the first top-level type declaration. Declarations may span several lines;
the reported name has all whitespace removed.
"""

import re
from typing import List, Optional

from import_order.config import ImportOrderConfig
from import_order.core.engine import DiagnosticSink, ImportOrderEngine
from import_order.core.records import Diagnostic, ImportRecord

_IDENT = r"[A-Za-z_$][\w$]*"

_IMPORT_RE = re.compile(
  r"(?<![\w$.])import\s+(?P<static>static\s+)?"
  rf"(?P<name>{_IDENT}(?:\s*\.\s*(?:{_IDENT}|\*))*)\s*;"
)

_TYPE_DECL_RE = re.compile(r"(?<![\w$.])(?:class|interface|enum|record)\s+[A-Za-z_$]|@\s*interface\b")


def strip_comments_and_strings(source: str) -> str:
  """
  Replaces comments and string/char literals with spaces, keeping newlines.

  Args:
      source: Java source text.

  Returns:
      str: Text of the same length with the same line structure.
  """
  out: List[str] = []
  i = 0
  n = len(source)

  def blank(segment: str) -> str:
    return "".join("\n" if ch == "\n" else " " for ch in segment)

  while i < n:
    ch = source[i]
    nxt = source[i + 1] if i + 1 < n else ""

    if ch == "/" and nxt == "/":
      end = source.find("\n", i)
      end = n if end == -1 else end
      out.append(blank(source[i:end]))
      i = end
    elif ch == "/" and nxt == "*":
      end = source.find("*/", i + 2)
      end = n if end == -1 else end + 2
      out.append(blank(source[i:end]))
      i = end
    elif ch in ('"', "'"):
      j = i + 1
      while j < n and source[j] != ch:
        j += 2 if source[j] == "\\" else 1
      end = min(j + 1, n)
      out.append(blank(source[i:end]))
      i = end
    else:
      out.append(ch)
      i += 1

  return "".join(out)


def _line_at(text: str, offset: int) -> int:
  return text.count("\n", 0, offset) + 1


def scan_imports(source: str) -> List[ImportRecord]:
  """
  Extracts the import declarations of a Java file, in source order.

  Args:
      source: Java source text.

  Returns:
      List[ImportRecord]: One record per declaration. `line_number` is the
      line where the imported name starts, `end_line` the line of its ``;``.

  Example:
      >>> [r.name for r in scan_imports("import java.util.List;\\nimport static java.lang.Math.*;")]
      ['java.util.List', 'java.lang.Math.*']
  """
  text = strip_comments_and_strings(source)

  type_decl = _TYPE_DECL_RE.search(text)
  limit = type_decl.start() if type_decl else len(text)

  records: List[ImportRecord] = []
  for match in _IMPORT_RE.finditer(text, 0, limit):
    name = re.sub(r"\s+", "", match.group("name"))
    records.append(
      ImportRecord(
        name=name,
        line_number=_line_at(text, match.start("name")),
        is_static=match.group("static") is not None,
        source_index=len(records),
        end_line=_line_at(text, match.end() - 1),
      )
    )
  return records


def check_source(
  source: str,
  config: Optional[ImportOrderConfig] = None,
  sink: Optional[DiagnosticSink] = None,
  engine: Optional[ImportOrderEngine] = None,
) -> List[Diagnostic]:
  """
  Checks the import section of one Java file.

  Args:
      source: Java source text.
      config: Settings (ignored when `engine` is given).
      sink: Optional diagnostics sink (ignored when `engine` is given).
      engine: Engine to reuse across files.

  Returns:
      List[Diagnostic]: Diagnostics of this file in emission order.
  """
  engine = engine or ImportOrderEngine(config=config, sink=sink)
  engine.begin_file()
  for record in scan_imports(source):
    engine.on_import(record.name, record.line_number, record.is_static, record.end_line)
  engine.end_file()
  return list(engine.diagnostics)

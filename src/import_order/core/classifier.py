"""
Group Classification.

Maps a fully qualified import name to the index of the configured group it
belongs to. Group specifiers come in three forms:

1.  ``*``: the catch-all group, matching every name with a zero-length match.
2.  ``/regex/``: a raw regular expression, searched anywhere in the name.
3.  anything else: a literal package prefix. ``"java"`` is normalized to
    ``"java."`` and anchored at the start, so it matches ``java.util.List``
    but not ``javax.swing.JFrame``.

Every rule can contribute several matches. The best match across all rules is
the longest one; ties go to the earliest start position, then to the first
configured rule.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple, Union

WILDCARD_GROUP_NAME = "*"
PACKAGE_SEPARATOR = "."

logger = logging.getLogger(__name__)


class InvalidGroupError(ValueError):
  """Raised when a group specifier cannot be compiled."""


@dataclass(frozen=True)
class PrefixRule:
  """Literal package prefix, anchored at the start of the name."""

  prefix: str

  def __post_init__(self) -> None:
    object.__setattr__(self, "_regex", re.compile("^" + re.escape(self.prefix)))

  def matches(self, name: str) -> Iterator[Tuple[int, int]]:
    for match in self._regex.finditer(name):
      yield match.start(), match.end()


@dataclass(frozen=True)
class PatternRule:
  """Unanchored regular expression rule (``/regex/`` specifier)."""

  pattern: re.Pattern

  def matches(self, name: str) -> Iterator[Tuple[int, int]]:
    for match in self.pattern.finditer(name):
      yield match.start(), match.end()


@dataclass(frozen=True)
class CatchAll:
  """The ``*`` group. Always matches with length zero at position zero."""

  def matches(self, name: str) -> Iterator[Tuple[int, int]]:
    yield 0, 0


GroupRule = Union[PrefixRule, PatternRule, CatchAll]


def compile_group(spec: str) -> GroupRule:
  """
  Compiles a single group specifier into a rule.

  Args:
      spec: The raw specifier, e.g. ``"java"``, ``"/^com\\.(foo|bar)/"`` or ``"*"``.

  Returns:
      GroupRule: The compiled rule.

  Raises:
      InvalidGroupError: If a ``/regex/`` specifier is not closed or the
          regular expression does not compile.
  """
  pkg = spec.strip()

  if pkg == WILDCARD_GROUP_NAME:
    return CatchAll()

  if pkg.startswith("/"):
    if len(pkg) < 2 or not pkg.endswith("/"):
      raise InvalidGroupError(f"Invalid group '{spec}': regular expression groups must be enclosed in '/'")
    try:
      return PatternRule(re.compile(pkg[1:-1]))
    except re.error as e:
      raise InvalidGroupError(f"Invalid group '{spec}': {e}") from e

  if not pkg:
    raise InvalidGroupError("Invalid group: empty group name")

  if not pkg.endswith(PACKAGE_SEPARATOR):
    pkg = pkg + PACKAGE_SEPARATOR
  return PrefixRule(pkg)


class GroupClassifier:
  """
  Immutable, ordered collection of group rules.

  A classifier holds no per-file state and can be shared by any number of
  engines.

  Attributes:
      specs (Tuple[str, ...]): The specifiers in configuration order.
      rules (Tuple[GroupRule, ...]): The compiled rules, same order.
  """

  def __init__(self, groups: Sequence[str] = ()):
    """
    Compiles all specifiers eagerly.

    Args:
        groups: Group specifiers in configuration order.

    Raises:
        InvalidGroupError: On the first malformed specifier; no partial
            classifier is built.
    """
    self.specs: Tuple[str, ...] = tuple(groups)
    self.rules: Tuple[GroupRule, ...] = tuple(compile_group(g) for g in self.specs)
    logger.debug("Compiled %d import groups: %s", len(self.rules), list(self.specs))

  @property
  def rule_count(self) -> int:
    """Number of configured rules; also the index of the implicit trailing group."""
    return len(self.rules)

  def classify(self, name: str) -> int:
    """
    Returns the group index for an import name.

    Args:
        name: Fully qualified import name (e.g. ``java.util.List``).

    Returns:
        int: Index in ``[0, rule_count]``. ``rule_count`` means no rule matched.
    """
    best_index = self.rule_count
    best_length = -1
    best_pos = 0

    for index, rule in enumerate(self.rules):
      for start, end in rule.matches(name):
        length = end - start
        if length > best_length or (length == best_length and start < best_pos):
          best_index = index
          best_length = length
          best_pos = start

    return best_index

  def __len__(self) -> int:
    return self.rule_count

  def __repr__(self) -> str:
    return f"GroupClassifier({list(self.specs)!r})"


def parse_groups(raw: Optional[Union[str, Sequence[str]]]) -> List[str]:
  """
  Normalizes a group list given either as a list or a comma-separated string.

  Args:
      raw: e.g. ``"java,javax,*"`` or ``["java", "javax", "*"]``.

  Returns:
      List[str]: Stripped, non-empty specifiers.
  """
  if raw is None:
    return []
  items = raw.split(",") if isinstance(raw, str) else list(raw)
  return [item.strip() for item in items if item and item.strip()]

"""
String ordering shared by the validator and the desired-order reporter.
"""

from typing import Callable


def _fold(text: str) -> str:
  # Per-character upper then lower; multi-char uppercase expansions ('ß') are left alone.
  return "".join(ch.upper().lower() if len(ch.upper()) == 1 else ch.lower() for ch in text)


def compare(first: str, second: str, case_sensitive: bool = True) -> int:
  """
  Compares two import names.

  Args:
      first: Left-hand name.
      second: Right-hand name.
      case_sensitive: If True, compare raw code points (uppercase sorts before
          lowercase). If False, compare case-folded names.

  Returns:
      int: -1, 0 or 1 depending on whether `first` sorts before, equal to or
      after `second`.
  """
  if not case_sensitive:
    first, second = _fold(first), _fold(second)
  if first < second:
    return -1
  if first > second:
    return 1
  return 0


def comparison_key(case_sensitive: bool = True) -> Callable[[str], str]:
  """
  Returns a sort key consistent with :func:`compare`.

  Args:
      case_sensitive: Same meaning as in :func:`compare`.

  Returns:
      Callable[[str], str]: Key function for `sorted`.
  """
  if case_sensitive:
    return lambda text: text
  return _fold

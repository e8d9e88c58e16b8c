"""
Enumerations for import-order.

This module defines the closed sets of options used across the codebase:
placement policies for static imports and the kinds of violations the
validator can raise.
"""

from enum import Enum


class StaticImportPolicy(str, Enum):
  """
  Placement policy for static imports relative to the configured groups.

  TOP and BOTTOM gather every static import into a single block at one end of
  the import section. ABOVE and UNDER interleave statics with their natural
  group, before or after the non-static imports of that group. INFLOW treats
  statics exactly like any other import.
  """

  TOP = "top"  # all statics first, one block
  ABOVE = "above"  # statics first within each group
  BOTTOM = "bottom"  # all statics last, one block
  UNDER = "under"  # statics last within each group
  INFLOW = "inflow"  # no distinction

  @classmethod
  def parse(cls, value: "str | StaticImportPolicy") -> "StaticImportPolicy":
    """
    Resolves a policy from its name or value, ignoring case.

    Args:
        value: Either an enum member or a string such as "under" / "UNDER".

    Returns:
        StaticImportPolicy: The matching member.

    Raises:
        ValueError: If the value names no policy.
    """
    if isinstance(value, cls):
      return value
    key = str(value).strip().lower()
    for member in cls:
      if member.value == key:
        return member
    raise ValueError(f"Unknown static import policy: '{value}'. Supported: {[m.value for m in cls]}")


class ViolationKind(str, Enum):
  """
  Category of a reported violation. Values double as diagnostic message keys.
  """

  ORDERING = "import.ordering"
  SEPARATION = "import.separation"

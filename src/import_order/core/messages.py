"""
Message catalogue for diagnostics.

Keys are stable identifiers handed to diagnostic sinks; templates use
positional ``{0}`` placeholders.
"""

from typing import Any, Dict, Sequence

from import_order.enums import ViolationKind

MSG_ORDERING = ViolationKind.ORDERING.value
MSG_SEPARATION = ViolationKind.SEPARATION.value
MSG_DESIRED_ORDER = "import.desired.order"

MESSAGES: Dict[str, str] = {
  MSG_ORDERING: "Wrong order for '{0}' import.",
  MSG_SEPARATION: "'{0}' should be separated from previous imports.",
  MSG_DESIRED_ORDER: "Wrong order for imports. Desired order:\n{0}",
}


def format_message(key: str, args: Sequence[Any]) -> str:
  """
  Renders a message key with its arguments.

  Unknown keys render as the key followed by the arguments so that nothing is lost.
  """
  template = MESSAGES.get(key)
  if template is None:
    return " ".join([key, *map(str, args)])
  return template.format(*args)

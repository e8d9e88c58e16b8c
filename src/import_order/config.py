"""
Runtime Configuration Store.

Settings for the import order checks, loadable from the ``[tool.import_order]``
table of a ``pyproject.toml`` and overridable from the command line.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from import_order.core.classifier import InvalidGroupError, compile_group, parse_groups
from import_order.enums import StaticImportPolicy

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

TOOL_SECTION = "import_order"


class ImportOrderConfig(BaseModel):
  """
  Configuration container for the import order engine.
  """

  groups: List[str] = Field(
    default_factory=list,
    description="Group specifiers in order: package prefixes, '/regex/' patterns, or '*'.",
  )
  ordered: bool = Field(True, description="Check lexicographic order within each group.")
  separated: bool = Field(False, description="Require a blank line between groups.")
  case_sensitive: bool = Field(True, description="Compare names case sensitively.")
  print_desired_order: bool = Field(False, description="Emit the full desired import block on violation.")
  blame_individual_imports: bool = Field(
    True, description="Report each offending import. If False only the desired order is reported."
  )
  static_import_policy: StaticImportPolicy = Field(
    StaticImportPolicy.UNDER, description="Placement of static imports: top, above, bottom, under or inflow."
  )

  @field_validator("groups", mode="before")
  @classmethod
  def split_groups(cls, v: Any) -> List[str]:
    """
    Accepts either a list or a comma-separated string of group specifiers.

    Args:
        v: Raw value.

    Returns:
        List[str]: Normalized specifiers.
    """
    return parse_groups(v)

  @field_validator("groups")
  @classmethod
  def validate_groups(cls, v: List[str]) -> List[str]:
    """
    Compiles every specifier so malformed ones fail before any file is checked.

    Raises:
        ValueError: On the first invalid specifier.
    """
    for spec in v:
      try:
        compile_group(spec)
      except InvalidGroupError as e:
        raise ValueError(str(e)) from e
    return v

  @field_validator("static_import_policy", mode="before")
  @classmethod
  def validate_policy(cls, v: Any) -> StaticImportPolicy:
    return StaticImportPolicy.parse(v)

  @classmethod
  def load(cls, search_path: Optional[Path] = None, **overrides: Any) -> "ImportOrderConfig":
    """
    Loads configuration from pyproject.toml and overrides with explicit values.

    Args:
        search_path (Optional[Path]): Directory to start searching for TOML config.
        **overrides: Field values that win over the TOML settings. None values are ignored.

    Returns:
        ImportOrderConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    merged: Dict[str, Any] = {k: v for k, v in toml_config.items() if k in cls.model_fields}
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return cls(**merged)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.
  """
  current = start_path.resolve()
  if current.is_file():
    current = current.parent

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      with open(toml_path, "rb") as f:
        data = tomllib.load(f)

      tool_section = data.get("tool", {})
      return tool_section.get(TOOL_SECTION, {}), parent

  return {}, None


def parse_cli_key_values(items: Optional[List[str]]) -> Dict[str, Any]:
  """
  Parses a list of 'key=value' strings into a dictionary.

  Booleans and integers are inferred; everything else stays a string.

  Args:
      items (Optional[List[str]]): List of raw CLI strings directly from argparse.

  Returns:
      Dict[str, Any]: Parsed dictionary.

  Raises:
      ValueError: If an item has no '='.
  """
  if not items:
    return {}

  config: Dict[str, Any] = {}
  for item in items:
    if "=" not in item:
      raise ValueError(f"Invalid option format: '{item}'. Expected 'key=value'.")

    key, val_str = item.split("=", 1)
    key = key.strip().replace("-", "_")
    val_str = val_str.strip()

    final_val: Any = val_str
    if val_str.lower() == "true":
      final_val = True
    elif val_str.lower() == "false":
      final_val = False
    else:
      try:
        final_val = int(val_str)
      except ValueError:
        pass

    config[key] = final_val

  return config

"""
Runtime Configuration Store.

`RuntimeConfig` carries every knob the rewrite passes read: parser dialect,
quote style for synthesized code, the null-check helper to remove, and the
framework / aggregator names used by the addons migration. Values come from
``[tool.js_codemods]`` in the nearest ``pyproject.toml`` and can be overridden
programmatically or from the command line.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from js_codemods.enums import Dialect, QuoteStyle

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

TOOL_SECTION = "js_codemods"


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the rewrite engine.
  """

  parser: Dialect = Field(Dialect.TSX, description="Parser dialect (javascript, typescript, tsx).")
  quote: QuoteStyle = Field(QuoteStyle.SINGLE, description="Quote style of string literals the engine writes.")

  helper_name: str = Field("exists", description="Null-check helper removed by 'remove-exists'.")
  helper_path: str = Field("DashboardUI/lib/utils", description="Module the null-check helper is imported from.")

  framework: str = Field("react", description="Main framework module new imports are placed after.")
  aggregator: str = Field("addons", description="Namespace specifier through which addons were reached.")
  pragmas: List[str] = Field(
    default_factory=lambda: ["use es6", "use strict"],
    description="Top-level directive strings that may precede framework imports.",
  )

  @field_validator("parser", mode="before")
  @classmethod
  def normalize_parser(cls, v: Any) -> Any:
    """
    Accepts dialect names case-insensitively.

    Raises:
        ValueError: If the dialect is unknown.
    """
    if isinstance(v, str):
      clean = v.lower().strip()
      known = [d.value for d in Dialect]
      if clean not in known:
        raise ValueError(f"Unknown parser dialect: '{clean}'. Supported dialects: {known}")
      return clean
    return v

  @field_validator("pragmas", mode="before")
  @classmethod
  def listify_pragmas(cls, v: Any) -> Any:
    if isinstance(v, str):
      return [v]
    return v

  @field_validator("helper_name", "framework", "aggregator")
  @classmethod
  def validate_identifier(cls, v: str) -> str:
    if not v.strip():
      raise ValueError("Name must not be empty")
    return v.strip()

  @classmethod
  def load(
    cls,
    parser: Optional[str] = None,
    quote: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides it with explicit values.

    Args:
        parser: Override for the parser dialect.
        quote: Override for the quote style.
        overrides: Any other field overrides (e.g. from ``--set key=value``).
        search_path: Directory to start searching for the TOML file.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    merged: Dict[str, Any] = {**toml_config, **(overrides or {})}
    if parser:
      merged["parser"] = parser
    if quote:
      merged["quote"] = quote

    return cls(**merged)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for a 'pyproject.toml' with a
  ``[tool.js_codemods]`` section.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The section and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      with open(toml_path, "rb") as f:
        data = tomllib.load(f)
      section = data.get("tool", {}).get(TOOL_SECTION)
      if section is not None:
        return dict(section), parent

  return {}, None


def parse_cli_key_values(items: Optional[List[str]]) -> Dict[str, Any]:
  """
  Parses ``key=value`` strings into a dictionary. Comma separated values
  become lists (``pragmas=use strict,use es6``).

  Args:
      items (Optional[List[str]]): Raw CLI strings.

  Returns:
      Dict[str, Any]: Parsed dictionary.

  Raises:
      ValueError: If an item has no ``=``.
  """
  if not items:
    return {}

  config: Dict[str, Any] = {}
  for item in items:
    if "=" not in item:
      raise ValueError(f"Invalid config format: '{item}'. Expected 'key=value'.")

    key, val_str = item.split("=", 1)
    key = key.strip().replace("-", "_")
    val_str = val_str.strip()

    if "," in val_str:
      config[key] = [part.strip() for part in val_str.split(",") if part.strip()]
    else:
      config[key] = val_str

  return config

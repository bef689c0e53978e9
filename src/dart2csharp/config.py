"""
Runtime Configuration Store.

Holds the target-syntax vocabulary used by the rewriter (null literal,
delegate type names, visibility keyword) and the pipeline switches. Values
come from ``[tool.dart2csharp]`` in the nearest ``pyproject.toml`` and can be
overridden from the command line.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  import tomli as tomllib

TOOL_SECTION = "dart2csharp"


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the transpilation engine.
  """

  null_literal: str = Field("null", description="Literal appended as the default of optional parameters.")
  required_placeholder: str = Field(
    "/* TODO: check null */",
    description="Text substituted for a 'required' marker on a parameter.",
  )
  void_type: str = Field("void", description="Return type that maps to the Action delegate.")
  action_type: str = Field("Action", description="Delegate type for callables without a result.")
  function_type: str = Field("Function", description="Delegate type for callables returning a value.")
  public_modifier: str = Field("public", description="Visibility emitted for names not starting with '_'.")
  strip_imports: bool = Field(True, description="Remove directive lines before rewriting headers.")
  directives: List[str] = Field(default_factory=lambda: ["import"], description="Line-leading keywords to strip.")
  extra_keywords: List[str] = Field(default_factory=list, description="Additional names never treated as functions.")
  output_suffix: str = Field(".cs", description="Suffix for generated files.")

  @field_validator("null_literal", "void_type", "action_type", "function_type")
  @classmethod
  def validate_token(cls, v: str) -> str:
    """
    Ensures vocabulary entries are non-empty single tokens.

    Args:
        v (str): The raw value.

    Returns:
        str: The stripped value.

    Raises:
        ValueError: If the value is empty or contains whitespace.
    """
    v_clean = v.strip()
    if not v_clean or any(ch.isspace() for ch in v_clean):
      raise ValueError(f"Expected a single non-empty token, got '{v}'")
    return v_clean

  @field_validator("directives")
  @classmethod
  def validate_directives(cls, v: List[str]) -> List[str]:
    """
    Ensures directive keywords are bare identifiers.

    Args:
        v (List[str]): Directive keywords (e.g. ['import', 'export']).

    Returns:
        List[str]: The validated keywords.

    Raises:
        ValueError: If a keyword is not an identifier.
    """
    for word in v:
      if not word.isidentifier():
        raise ValueError(f"Directive '{word}' is not an identifier")
    return v

  @field_validator("output_suffix")
  @classmethod
  def validate_suffix(cls, v: str) -> str:
    if not v.startswith("."):
      return f".{v}"
    return v

  @classmethod
  def load(
    cls,
    null_literal: Optional[str] = None,
    strip_imports: Optional[bool] = None,
    extra_keywords: Optional[List[str]] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        null_literal (Optional[str]): Override for the default-value literal.
        strip_imports (Optional[bool]): Override for directive stripping.
        extra_keywords (Optional[List[str]]): Keywords appended to the TOML list.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    merged: Dict[str, Any] = dict(toml_config)

    # 1. Scalars: CLI wins
    if null_literal is not None:
      merged["null_literal"] = null_literal
    if strip_imports is not None:
      merged["strip_imports"] = strip_imports

    # 2. Keywords: union, TOML first
    if extra_keywords:
      known = list(merged.get("extra_keywords", []))
      merged["extra_keywords"] = known + [k for k in extra_keywords if k not in known]

    return cls.model_validate(merged)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches the start directory and its parents for 'pyproject.toml'.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get(TOOL_SECTION, {}), parent

  return {}, None

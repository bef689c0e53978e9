"""
Enumerations for dart2csharp.

Standard enumerations used to classify parameter items, parameter-list
sections and rewrite outcomes.
"""

from enum import Enum


class ItemKind(str, Enum):
  """
  Shape of a single parameter item.
  """

  SIMPLE = "simple"  # Type name [= value]
  THIS_INIT = "this_init"  # this.name [= value]
  FUNCTION_TYPED = "function_typed"  # ReturnType name(ArgType arg, ...)
  UNRECOGNIZED = "unrecognized"


class SectionKind(str, Enum):
  """
  The part of a parameter list an item was declared in.
  """

  POSITIONAL = "positional"
  OPTIONAL = "optional"  # [...]
  NAMED = "named"  # {...}

  @property
  def is_defaulted(self) -> bool:
    """True for sections whose items are optional and receive a default."""
    return self is not SectionKind.POSITIONAL


class OutcomeStatus(str, Enum):
  """
  Result tag of a rewrite attempt.
  """

  REWRITTEN = "rewritten"
  UNCHANGED = "unchanged"

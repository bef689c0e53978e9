"""
Header Data Structures.

Transient, purely textual records produced while rewriting function headers.
None of them outlive a single transform call.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from dart2csharp.enums import ItemKind, OutcomeStatus


@dataclass(frozen=True)
class RewriteOutcome:
  """
  Tagged result of a rewrite attempt.

  Attributes:
      text: The text to emit (the original text when unchanged).
      status: Whether a rewrite happened.
      reason: Why the text was left alone (empty when rewritten).
  """

  text: str
  status: OutcomeStatus
  reason: str = ""

  @classmethod
  def rewritten(cls, text: str) -> "RewriteOutcome":
    return cls(text=text, status=OutcomeStatus.REWRITTEN)

  @classmethod
  def unchanged(cls, text: str, reason: str) -> "RewriteOutcome":
    return cls(text=text, status=OutcomeStatus.UNCHANGED, reason=reason)

  @property
  def changed(self) -> bool:
    return self.status is OutcomeStatus.REWRITTEN


@dataclass(frozen=True)
class ParameterItem:
  """
  One comma-separated element of a parameter section.

  Attributes:
      raw_text: Item text as it appeared in the section.
      kind: Recognized shape.
      has_explicit_default: True if the item already assigns a default value.
      has_required_annotation: True if a 'required' marker is present.
  """

  raw_text: str
  kind: ItemKind
  has_explicit_default: bool = False
  has_required_annotation: bool = False


@dataclass
class ParameterSections:
  """
  A parameter list decomposed into its sections, each in source order.
  """

  positional: List[str] = field(default_factory=list)
  optional: List[str] = field(default_factory=list)
  named: List[str] = field(default_factory=list)

  @property
  def is_empty(self) -> bool:
    return not (self.positional or self.optional or self.named)


@dataclass(frozen=True)
class HeaderMatch:
  """
  One recognized function-declaration occurrence.

  Attributes:
      leading_space: Whitespace preceding the header (may span blank lines).
      return_type: Return type token, None for constructors.
      name: Function name.
      raw_params: Untouched text between the outer parentheses.
      trailing: Body-opening marker (':', '=>' or '{') with its leading whitespace.
      source: The matched text, verbatim.
      start: Offset of the match in the scanned text.
      end: Offset just past the trailing marker.
  """

  leading_space: str
  return_type: Optional[str]
  name: str
  raw_params: str
  trailing: str
  source: str
  start: int
  end: int


@dataclass(frozen=True)
class HeaderOutcome:
  """
  A header occurrence paired with the decision taken for it.
  """

  match: HeaderMatch
  outcome: RewriteOutcome
  line: int

  def to_trace(self) -> Dict[str, Any]:
    """
    Serializes the decision as a JSON-safe trace event.

    Returns:
        Dict[str, Any]: Event payload.
    """
    return {
      "type": "header",
      "name": self.match.name,
      "return_type": self.match.return_type,
      "line": self.line,
      "status": self.outcome.status.value,
      "reason": self.outcome.reason,
    }

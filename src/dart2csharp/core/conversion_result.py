"""
Result model returned by `TranspileEngine.run`.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from dart2csharp.enums import OutcomeStatus


class ConversionResult(BaseModel):
  """
  Converted source plus the per-header decisions that produced it.

  `success` only turns False for I/O failures reported by the CLI; the
  rewriting itself accepts every input text.
  """

  code: str = Field(default="", description="Converted C# text.")
  errors: List[str] = Field(default_factory=list, description="I/O or trace problems for this file.")
  success: bool = Field(default=True, description="False if the file could not be read or written.")
  trace_events: List[Dict[str, Any]] = Field(
    default_factory=list,
    description="One event per recognized header (see `HeaderOutcome.to_trace`).",
  )

  @property
  def has_errors(self) -> bool:
    return bool(self.errors)

  def _count(self, status: OutcomeStatus) -> int:
    return sum(1 for e in self.trace_events if e.get("type") == "header" and e.get("status") == status.value)

  @property
  def rewritten_count(self) -> int:
    """Number of headers that were rewritten."""
    return self._count(OutcomeStatus.REWRITTEN)

  @property
  def kept_count(self) -> int:
    """Number of recognized headers emitted unchanged (reserved words)."""
    return self._count(OutcomeStatus.UNCHANGED)

"""
Orchestration Engine for Dart to C# header conversion.

The pipeline is a single pass over the text:

1.  **Directive stripping**: ``import`` groups (and any configured directive
    keywords) are removed.
2.  **Header rewriting**: every recognized function header is rewritten by
    `HeaderTranspiler`; one trace event is recorded per header, whether it was
    rewritten or kept.

The engine never fails for any input string. A `HeaderInvariantError`
(a matcher bug, not an input problem) propagates to the caller.
"""

from typing import Optional

from dart2csharp.config import RuntimeConfig
from dart2csharp.core.cleanup import remove_imports
from dart2csharp.core.conversion_result import ConversionResult
from dart2csharp.core.headers.matcher import HeaderTranspiler


class TranspileEngine:
  """
  Runs the full conversion pipeline on one source text.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None):
    """
    Args:
        config: Runtime settings. Defaults to `RuntimeConfig()`.
    """
    self.config = config or RuntimeConfig()
    self.headers = HeaderTranspiler(self.config)

  def run(self, code: str) -> ConversionResult:
    """
    Converts one Dart source text.

    Args:
        code (str): Dart source.

    Returns:
        ConversionResult: Converted code plus one trace event per header.
    """
    # 1. Directives
    if self.config.strip_imports:
      code = remove_imports(code, self.config.directives)

    # 2. Headers
    outcomes = self.headers.scan(code)
    converted = self.headers.substitute(code, outcomes)

    return ConversionResult(
      code=converted,
      trace_events=[item.to_trace() for item in outcomes],
    )

"""
Error types raised by the transpilation core.

The core is total over input text: unrecognized constructs are passed through,
never reported. The only exception it raises signals that a compiled pattern
and the invariant it is meant to guarantee have drifted apart.
"""


class HeaderInvariantError(RuntimeError):
  """
  Raised when a header pattern matched but a mandatory group is missing.

  Indicates a programming error in the matcher, not a property of the input.
  """

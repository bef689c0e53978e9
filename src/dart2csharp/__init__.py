"""
dart2csharp Package.

A deterministic rewriter that turns Dart function headers into C# method
signatures: named and optional parameters are flattened into defaulted
parameters, inline function-typed parameters become ``Action``/``Function``
delegates, and ``public`` is added to non-private names.

Usage
-----

.. code-block:: python

    import dart2csharp
    code = "int add(int a, {int b}) => a + b;"
    print(dart2csharp.convert(code))
    # public int add(int a,
    # int b = null) => a + b;
"""

from typing import Optional

from dart2csharp.config import RuntimeConfig
from dart2csharp.core.conversion_result import ConversionResult
from dart2csharp.core.engine import TranspileEngine

__version__ = "0.0.1"


def convert(code: str, config: Optional[RuntimeConfig] = None) -> str:
  """
  Converts a string of Dart source code.

  Convenience wrapper around `TranspileEngine` for single strings.

  Args:
      code (str): The Dart source.
      config (Optional[RuntimeConfig]): Settings; defaults are used if omitted.

  Returns:
      str: The converted source code.
  """
  return TranspileEngine(config).run(code).code


__all__ = [
  "ConversionResult",
  "RuntimeConfig",
  "TranspileEngine",
  "convert",
  "__version__",
]

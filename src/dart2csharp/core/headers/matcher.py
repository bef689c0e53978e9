"""
Function Header Matcher & Assembler.

Finds Dart function, method and constructor headers in running text and
rewrites them into C# form::

    NodeMetadata lazySet(          public NodeMetadata lazySet(NodeMetadata meta,
      NodeMetadata meta, {    ->   BuildOp buildOp = null) {
      BuildOp buildOp,
    }) {

A header is recognized at the start of a line as
``[ReturnType] name(params)`` followed by one of the body-opening markers
``:`` (initializer list), ``=>`` (expression body) or ``{`` (block body).
The marker is what tells a declaration apart from a call statement such as
``foo(bar);``, which is never touched.

Headers whose name (or return-type position) holds a reserved word, e.g.
``if (x) {``, are emitted unchanged. All text outside recognized headers is
copied through byte-for-byte.
"""

import logging
import re
from functools import lru_cache
from typing import Iterator, List, Optional

from dart2csharp.config import RuntimeConfig
from dart2csharp.core.errors import HeaderInvariantError
from dart2csharp.core.headers.nodes import HeaderMatch, HeaderOutcome, RewriteOutcome
from dart2csharp.core.headers.params import ParameterListSplitter
from dart2csharp.core.scanning import find_closing
from dart2csharp.utils.keywords import is_keyword

logger = logging.getLogger(__name__)


class HeaderTranspiler:
  """
  Rewrites every recognized function header of a text.

  Holds the compiled patterns and the parameter list splitter; instances are
  immutable after construction and can be shared between threads.
  """

  PREFIX_PATTERN = r"""
    ^(?P<leading_space>\s*)
    (?:
      (?P<rtype>\w+)   # Return type
      [ \t]+
    )?                 # No return type for constructors
    (?P<fname>\w+)     # Function name
    \s*\(              # Start of parameter list
  """
  TRAILING_PATTERN = r"\s*(?::|=>|\{)"

  def __init__(self, config: Optional[RuntimeConfig] = None):
    """
    Args:
        config: Target vocabulary and keyword extensions.
    """
    self.config = config or RuntimeConfig()
    self.prefix_re = re.compile(self.PREFIX_PATTERN, re.MULTILINE | re.VERBOSE)
    self.trailing_re = re.compile(self.TRAILING_PATTERN)
    self.splitter = ParameterListSplitter(self.config)

  def _complete(self, text: str, m: re.Match) -> Optional[HeaderMatch]:
    """
    Extends a prefix match over the parameter list and the trailing marker.

    Args:
        text (str): Scanned text.
        m (re.Match): Match of the header prefix, ending just after '('.

    Returns:
        Optional[HeaderMatch]: The header, or None if the parentheses are
        unbalanced or no body-opening marker follows (a call, not a declaration).

    Raises:
        HeaderInvariantError: If the prefix matched without a name.
    """
    name = m.group("fname")
    if name is None:
      raise HeaderInvariantError(f"Header pattern matched without a function name at offset {m.start()}")

    open_pos = m.end() - 1
    close_pos = find_closing(text, open_pos)
    if close_pos is None:
      return None

    trailing = self.trailing_re.match(text, close_pos + 1)
    if trailing is None:
      return None

    return HeaderMatch(
      leading_space=m.group("leading_space"),
      return_type=m.group("rtype"),
      name=name,
      raw_params=text[open_pos + 1 : close_pos],
      trailing=trailing.group(0),
      source=text[m.start() : trailing.end()],
      start=m.start(),
      end=trailing.end(),
    )

  def find_headers(self, text: str) -> Iterator[HeaderMatch]:
    """
    Scans left to right for non-overlapping header occurrences.

    Args:
        text (str): Source text.

    Yields:
        HeaderMatch: Each header, reserved-word ones included.
    """
    pos = 0
    while True:
      m = self.prefix_re.search(text, pos)
      if m is None:
        return

      header = self._complete(text, m)
      if header is None:
        # '^' only matches at line starts, so this moves to the next line
        pos = m.start() + 1
        continue

      yield header
      pos = header.end

  def rewrite(self, header: HeaderMatch) -> RewriteOutcome:
    """
    Builds the C# form of one header.

    Args:
        header (HeaderMatch): The recognized header.

    Returns:
        RewriteOutcome: The rewritten header, or the verbatim source for
        reserved-word names.
    """
    extra = self.config.extra_keywords
    if is_keyword(header.name, extra):
      return RewriteOutcome.unchanged(header.source, f"reserved keyword '{header.name}'")
    if header.return_type and is_keyword(header.return_type, extra):
      return RewriteOutcome.unchanged(header.source, f"reserved keyword '{header.return_type}'")

    # Leading underscore means library-private in Dart
    visibility = "" if header.name.startswith("_") else f"{self.config.public_modifier} "
    return_type = f"{header.return_type} " if header.return_type else ""
    params = self.splitter.transform(header.raw_params)

    return RewriteOutcome.rewritten(
      f"{header.leading_space}{visibility}{return_type}{header.name}({params}){header.trailing}"
    )

  def scan(self, text: str) -> List[HeaderOutcome]:
    """
    Recognizes and rewrites all headers, keeping each decision.

    Args:
        text (str): Source text.

    Returns:
        List[HeaderOutcome]: One entry per header, in source order.
    """
    outcomes = []
    for header in self.find_headers(text):
      outcome = self.rewrite(header)
      line = text.count("\n", 0, header.start + len(header.leading_space)) + 1
      if outcome.changed:
        logger.debug("Rewrote header '%s' at line %d", header.name, line)
      else:
        logger.debug("Kept header '%s' at line %d: %s", header.name, line, outcome.reason)
      outcomes.append(HeaderOutcome(match=header, outcome=outcome, line=line))
    return outcomes

  def substitute(self, text: str, outcomes: List[HeaderOutcome]) -> str:
    """
    Splices header outcomes back into the text they were scanned from.

    Args:
        text (str): The scanned text.
        outcomes (List[HeaderOutcome]): Result of `scan(text)`.

    Returns:
        str: The text with every header replaced by its outcome.
    """
    parts = []
    last = 0
    for item in outcomes:
      parts.append(text[last : item.match.start])
      parts.append(item.outcome.text)
      last = item.match.end
    parts.append(text[last:])
    return "".join(parts)

  def transform(self, text: str) -> str:
    """
    Rewrites all recognized headers in place.

    Args:
        text (str): Source text.

    Returns:
        str: Text with headers rewritten; everything else unchanged.
    """
    return self.substitute(text, self.scan(text))


@lru_cache(maxsize=None)
def default_transpiler() -> HeaderTranspiler:
  """
  Returns the shared transpiler built from the default configuration.

  Constructed on first use; later calls return the same instance.
  """
  return HeaderTranspiler()


def transform_header_block(text: str, config: Optional[RuntimeConfig] = None) -> str:
  """
  Rewrites every recognized, non-reserved function header of a text.

  Args:
      text (str): Source text.
      config (Optional[RuntimeConfig]): Custom vocabulary. When omitted the
          shared default transpiler is used.

  Returns:
      str: The rewritten text. Total over all strings.
  """
  transpiler = HeaderTranspiler(config) if config is not None else default_transpiler()
  return transpiler.transform(text)

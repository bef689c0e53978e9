"""
Directive Stripping.

Removes Dart ``import`` lines (and optionally other line-leading directives
such as ``export`` or ``part``) before headers are rewritten. Each group of
consecutive directive lines is removed together with the blank lines that
follow it.
"""

import re
from functools import lru_cache
from typing import Iterable, Pattern, Tuple


@lru_cache(maxsize=None)
def _directive_pattern(directives: Tuple[str, ...]) -> Pattern[str]:
  keywords = "|".join(re.escape(d) for d in directives)
  return re.compile(
    rf"""
    ^(?:(?:{keywords})\s+.*\n)*   # Leading lines of the group
    (?:{keywords})\s+.*           # Last line of the group
    (?:\s*\n)*                    # Blank lines that follow
    """,
    re.MULTILINE | re.VERBOSE,
  )


def remove_imports(text: str, directives: Iterable[str] = ("import",)) -> str:
  """
  Strips directive line groups from Dart source.

  Args:
      text (str): Raw source text.
      directives (Iterable[str]): Line-leading keywords to strip.

  Returns:
      str: The text without directive lines.
  """
  keys = tuple(directives)
  if not keys:
    return text
  return _directive_pattern(keys).sub("", text)

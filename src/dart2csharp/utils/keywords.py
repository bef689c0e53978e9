"""
Reserved Word Guard.

Dart constructs such as ``if (x) {`` or ``switch (value) {`` have exactly the
shape of a function header. The header matcher consults this module to leave
them alone.
"""

from typing import FrozenSet, Iterable

RESERVED_KEYWORDS: FrozenSet[str] = frozenset(
  {
    # Conditionals and loops
    "if",
    "while",
    "for",
    "switch",
    "catch",
    # Declarations
    "final",
    "var",
    "const",
    "class",
    # Statements that may precede a parenthesized expression
    "return",
    "case",
    "else",
    "new",
    "await",
    "throw",
  }
)


def is_keyword(word: str, extra: Iterable[str] = ()) -> bool:
  """
  Checks whether an identifier is a reserved word.

  Args:
      word (str): Candidate identifier (exact, case-sensitive).
      extra (Iterable[str]): Additional words configured by the user.

  Returns:
      bool: True if the word must never be treated as a function name.
  """
  return word in RESERVED_KEYWORDS or word in extra

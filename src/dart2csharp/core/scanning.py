"""
Depth-Tracking Scanner.

Small left-to-right scanner used by the header matcher and the parameter list
splitter to locate brackets and separators that sit at nesting depth zero.

Rules:
- ``()``, ``[]`` and ``{}`` always nest.
- ``<`` opens a generic argument list only when it directly follows an
  identifier (``List<int>``, not ``1<<2``) and a matching ``>`` follows with
  nothing but type characters in between. Comparisons and shifts in default
  values (``a<b``, ``1<<2``) are plain characters. ``>`` closes a generic
  only while a ``<`` is the innermost open bracket.
- String literals (single, double, triple quoted) and ``//`` / ``/* */``
  comments are opaque.
"""

from typing import Iterator, List, Optional, Tuple

_OPENERS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_HARD_CLOSERS = ")]}"
# Characters allowed between the brackets of a type argument list
_GENERIC_CHARS = " \t\r\n,?."


def _is_word_char(ch: str) -> bool:
  return ch.isalnum() or ch == "_"


def _opens_generic(text: str, pos: int) -> bool:
  """
  Decides whether the '<' at `pos` starts a type argument list.

  Args:
      text (str): Source text.
      pos (int): Index of '<'.

  Returns:
      bool: True for ``Name<...>`` with a balanced closing '>'.
  """
  start = pos
  while start > 0 and _is_word_char(text[start - 1]):
    start -= 1
  if start == pos or text[start].isdigit():
    return False

  depth = 0
  for i in range(pos, len(text)):
    ch = text[i]
    if ch == "<":
      depth += 1
    elif ch == ">":
      depth -= 1
      if depth == 0:
        return True
    elif not (_is_word_char(ch) or ch in _GENERIC_CHARS):
      return False
  return False


def _skip_opaque(text: str, pos: int) -> int:
  """
  Returns the index just past a string literal or comment starting at `pos`.

  Args:
      text (str): Source text.
      pos (int): Current index.

  Returns:
      int: `pos` itself when nothing opaque starts there.
  """
  ch = text[pos]

  if ch in ("'", '"'):
    quote = text[pos : pos + 3] if text.startswith(ch * 3, pos) else ch
    i = pos + len(quote)
    while i < len(text):
      if text[i] == "\\":
        i += 2
        continue
      if text.startswith(quote, i):
        return i + len(quote)
      i += 1
    return len(text)

  if text.startswith("//", pos):
    end = text.find("\n", pos)
    return len(text) if end == -1 else end

  if text.startswith("/*", pos):
    end = text.find("*/", pos + 2)
    return len(text) if end == -1 else end + 2

  return pos


def walk(text: str, start: int = 0) -> Iterator[Tuple[int, str, int]]:
  """
  Iterates over significant characters with their nesting depth.

  Openers report the depth outside of themselves, closers the depth after
  they close, so a depth of 0 always means "top level".

  Args:
      text (str): Source text.
      start (int): Index to begin scanning at. Nesting is counted from here.

  Yields:
      Tuple[int, str, int]: (index, character, depth).
  """
  stack: List[str] = []
  pos = start
  length = len(text)

  while pos < length:
    skipped = _skip_opaque(text, pos)
    if skipped != pos:
      pos = skipped
      continue

    ch = text[pos]
    if ch in "([{" or (ch == "<" and _opens_generic(text, pos)):
      yield pos, ch, len(stack)
      stack.append(_OPENERS[ch])
    elif ch == ">" and stack and stack[-1] == ">" and text[pos - 1] != "=":
      stack.pop()
      yield pos, ch, len(stack)
    elif ch in _HARD_CLOSERS and ch in stack:
      while stack.pop() != ch:
        pass
      yield pos, ch, len(stack)
    else:
      yield pos, ch, len(stack)

    pos += 1


def find_closing(text: str, open_pos: int) -> Optional[int]:
  """
  Finds the bracket closing the one at `open_pos`.

  Args:
      text (str): Source text.
      open_pos (int): Index of '(', '[', '{' or '<'.

  Returns:
      Optional[int]: Index of the matching closer, or None if unbalanced.
  """
  closer = _OPENERS.get(text[open_pos]) if open_pos < len(text) else None
  if closer is None:
    return None

  for pos, ch, depth in walk(text, open_pos):
    if pos == open_pos:
      continue
    if depth == 0 and ch == closer:
      return pos
  return None


def find_top_level(text: str, chars: str) -> Optional[int]:
  """
  Finds the first occurrence of any of `chars` at depth zero.

  Args:
      text (str): Source text.
      chars (str): Candidate characters.

  Returns:
      Optional[int]: The index, or None.
  """
  for pos, ch, depth in walk(text):
    if depth == 0 and ch in chars:
      return pos
  return None


def split_top_level(text: str, sep: str = ",") -> List[str]:
  """
  Splits text on separators located at depth zero.

  Args:
      text (str): Source text.
      sep (str): Single separator character.

  Returns:
      List[str]: The raw pieces (not stripped). A trailing separator yields an
      empty last piece.
  """
  pieces: List[str] = []
  last = 0
  for pos, ch, depth in walk(text):
    if depth == 0 and ch == sep:
      pieces.append(text[last:pos])
      last = pos + 1
  pieces.append(text[last:])
  return pieces


def extract_comments(text: str) -> Tuple[str, List[str]]:
  """
  Separates ``//`` and ``/* */`` comments from the code around them.

  Comment markers inside string literals are left alone.

  Args:
      text (str): Source text.

  Returns:
      Tuple[str, List[str]]: The text with comments removed, and the comments
      in source order (line comments without their newline).
  """
  code: List[str] = []
  comments: List[str] = []
  pos = 0
  last = 0

  while pos < len(text):
    end = _skip_opaque(text, pos)
    if end == pos:
      pos += 1
      continue
    if text.startswith(("//", "/*"), pos):
      code.append(text[last:pos])
      comments.append(text[pos:end].rstrip())
      last = end
    pos = end

  code.append(text[last:])
  return "".join(code), comments

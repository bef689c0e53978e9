"""
Parameter List Splitter.

Decomposes the raw text between a header's parentheses into sections and
items, then reassembles the rewritten list.

A Dart parameter list has up to two sections::

    Positional, Items, {Named, Items}
    Positional, Items, [Optional, Items]

Items are separated by commas at nesting depth zero; generic arguments
(``Map<String, int>``) and a function-typed parameter's own argument list
(``void f(int a, int b)``) are opaque. The rewritten list joins every item
with ``,\\n``, positional items first.
"""

from typing import List, Optional, Tuple

from dart2csharp.config import RuntimeConfig
from dart2csharp.core.headers.items import ParameterItemTransformer
from dart2csharp.core.headers.nodes import ParameterSections
from dart2csharp.core.scanning import extract_comments, find_closing, find_top_level, split_top_level
from dart2csharp.enums import SectionKind

ITEM_SEPARATOR = ",\n"


def _locate_sections(raw: str) -> Tuple[Optional[str], Optional[str], SectionKind]:
  """
  Splits raw parameter text into positional text and bracketed section text.

  Args:
      raw (str): Text between the outer parentheses.

  Returns:
      Tuple: (positional text, bracketed text, kind of the bracketed section).
      Empty sections are returned as None.
  """
  text = raw.strip()
  section_kind = SectionKind.NAMED
  inner: Optional[str] = None

  open_pos = find_top_level(text, "{[")
  close_pos = find_closing(text, open_pos) if open_pos is not None else None

  if open_pos is not None and close_pos is not None:
    if text[open_pos] == "[":
      section_kind = SectionKind.OPTIONAL
    inner = text[open_pos + 1 : close_pos].strip()
    text = text[:open_pos].strip()

  return (text or None), (inner or None), section_kind


def split_items(section: str) -> List[str]:
  """
  Splits one section into its items, in source order.

  Comments are kept with an item: a comment standing between two commas is
  attached to the item that follows it, or to the last item when nothing
  follows. A section holding nothing but comments has no items.

  Args:
      section (str): Section text, with or without a trailing comma.

  Returns:
      List[str]: Stripped item texts. Empty for an empty section.
  """
  items: List[str] = []
  pending: List[str] = []

  for piece in split_top_level(section):
    piece = piece.strip()
    if not piece:
      continue
    code, _ = extract_comments(piece)
    if not code.strip():
      pending.append(piece)
      continue
    items.append("\n".join(pending + [piece]))
    pending = []

  if pending and items:
    items[-1] = "\n".join([items[-1]] + pending)
  return items


def split_sections(raw: str) -> ParameterSections:
  """
  Splits a parameter list into positional, optional and named items.

  Args:
      raw (str): Text between the outer parentheses.

  Returns:
      ParameterSections: Items of each section in source order.
  """
  positional, inner, kind = _locate_sections(raw)

  sections = ParameterSections(positional=split_items(positional) if positional else [])
  if inner:
    if kind is SectionKind.OPTIONAL:
      sections.optional = split_items(inner)
    else:
      sections.named = split_items(inner)
  return sections


class ParameterListSplitter:
  """
  Splits a parameter list and rewrites each item.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None):
    self.transformer = ParameterItemTransformer(config)

  def transform(self, raw: str) -> str:
    """
    Produces the fully rewritten parameter text.

    Args:
        raw (str): Text between the outer parentheses.

    Returns:
        str: Items joined with ',\\n'; empty string for an empty list.
    """
    sections = split_sections(raw)
    if sections.is_empty:
      return ""

    joined = []
    for kind, items in (
      (SectionKind.POSITIONAL, sections.positional),
      (SectionKind.OPTIONAL, sections.optional),
      (SectionKind.NAMED, sections.named),
    ):
      rendered = [self.transformer.transform(item, kind).text for item in items]
      if rendered:
        joined.append(ITEM_SEPARATOR.join(rendered))

    return ITEM_SEPARATOR.join(joined)


def transform_parameter_list(raw: str, config: Optional[RuntimeConfig] = None) -> str:
  """
  Rewrites one raw parameter list.

  Args:
      raw (str): Text between the outer parentheses of a header.
      config (Optional[RuntimeConfig]): Target vocabulary.

  Returns:
      str: The assembled, defaulted parameter text.
  """
  return ParameterListSplitter(config).transform(raw)

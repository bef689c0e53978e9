"""
Parameter Item Transformer.

Rewrites one parameter item of a Dart parameter list:

1.  **Delegate conversion**: a function-typed parameter, either inline
    (``void f(String key, String value)``) or using the ``Function`` type
    syntax (``int Function(String key)? f``), becomes ``Action<...> f`` or
    ``Function<..., ReturnType> f``. Argument names are dropped.
2.  **Default injection**: items of the named and optional sections without a
    default receive `` = null``.
3.  **Required resolution**: ``@required`` (and the ``required`` modifier) is
    replaced with a placeholder comment asking for a manual null check.

Items matching none of the recognized shapes are returned untouched. Comments
inside an item are moved in front of the rewritten item.
"""

import logging
import re
from typing import List, Optional, Tuple

from dart2csharp.config import RuntimeConfig
from dart2csharp.core.headers.nodes import ParameterItem, RewriteOutcome
from dart2csharp.core.scanning import extract_comments, split_top_level
from dart2csharp.enums import ItemKind, SectionKind

logger = logging.getLogger(__name__)

# Leading modifiers: annotations, 'required', 'covariant', 'final'
_PREFIX = r"(?:(?:@\w+|required|covariant|final)\s+)*"
# TypeName, TypeName<Args>, TypeName?
_TYPE = r"\w+(?:\s*<[\w\s,<>?]*>)?\??"
_DEFAULT = r"(?:\s*=.*)?"

_SIMPLE_RE = re.compile(rf"{_PREFIX}{_TYPE}\s+\w+{_DEFAULT}", re.DOTALL)
_THIS_INIT_RE = re.compile(rf"{_PREFIX}this\.\w+{_DEFAULT}", re.DOTALL)

_INLINE_FUNCTION_RE = re.compile(
  rf"""
  (?P<leading>\s*)
  (?P<prefix>{_PREFIX})
  (?P<rtype>{_TYPE})\s+(?P<fname>\w+)\s*   # Return type and parameter name
  \((?P<args>[^()]*)\)                     # Own argument list, one level only
  (?P<trailing>\s*)
  """,
  re.VERBOSE | re.DOTALL,
)

_TYPED_FUNCTION_RE = re.compile(
  rf"""
  (?P<leading>\s*)
  (?P<prefix>{_PREFIX})
  (?P<rtype>{_TYPE})\s+Function\s*         # void Function
  \((?P<args>[^()]*)\)\??                  # (int a, String)?
  \s+(?P<fname>\w+)
  (?P<trailing>\s*)
  """,
  re.VERBOSE | re.DOTALL,
)

_ARG_RE = re.compile(rf"\s*(?P<type>{_TYPE})(?:\s+(?P<name>\w+))?\s*")

_DEFAULT_ASSIGN_RE = re.compile(r"(?<![=!<>])=(?![=>])")
_REQUIRED_RE = re.compile(r"@required\b|(?<![\w@.])required(?=\s+[\w@])")
_LAST_TOKEN_RE = re.compile(r"(?P<nospace>\S)(?P<trailing>\s*)$")


def _argument_types(args: str, names_required: bool) -> Optional[List[str]]:
  """
  Extracts the argument types of a function-typed parameter.

  Args:
      args (str): Text between the parentheses.
      names_required (bool): True for the inline form, where every argument
          must be a ``Type name`` pair.

  Returns:
      Optional[List[str]]: Types in declared order, or None if any argument is
      not a plain type (with optional name).
  """
  pieces = split_top_level(args)
  if pieces and not pieces[-1].strip():
    pieces.pop()

  types = []
  for piece in pieces:
    m = _ARG_RE.fullmatch(piece)
    if not m or (names_required and not m.group("name")):
      return None
    types.append(m.group("type"))
  return types


class ParameterItemTransformer:
  """
  Classifies and rewrites individual parameter items.
  """

  def __init__(self, config: Optional[RuntimeConfig] = None):
    """
    Args:
        config: Target-syntax vocabulary. Defaults to `RuntimeConfig()`.
    """
    self.config = config or RuntimeConfig()

  def _match_function(self, text: str) -> Optional[Tuple[re.Match, List[str]]]:
    for pattern, names_required in ((_INLINE_FUNCTION_RE, True), (_TYPED_FUNCTION_RE, False)):
      m = pattern.fullmatch(text)
      if not m:
        continue
      types = _argument_types(m.group("args"), names_required)
      if types is not None:
        return m, types
    return None

  def classify(self, text: str) -> ParameterItem:
    """
    Determines the shape of a parameter item.

    Args:
        text (str): Raw item text.

    Returns:
        ParameterItem: The classified item.
    """
    stripped = text.strip()

    if self._match_function(text) is not None:
      kind = ItemKind.FUNCTION_TYPED
    elif _THIS_INIT_RE.fullmatch(stripped):
      kind = ItemKind.THIS_INIT
    elif _SIMPLE_RE.fullmatch(stripped):
      kind = ItemKind.SIMPLE
    else:
      kind = ItemKind.UNRECOGNIZED

    return ParameterItem(
      raw_text=text,
      kind=kind,
      has_explicit_default=bool(_DEFAULT_ASSIGN_RE.search(stripped)),
      has_required_annotation=bool(_REQUIRED_RE.search(stripped)),
    )

  def to_delegate(self, text: str) -> RewriteOutcome:
    """
    Converts a function-typed parameter into a delegate-typed parameter.

    Leading and trailing whitespace of the item is preserved around the
    rewritten ``Type name``.

    Args:
        text (str): Raw item text.

    Returns:
        RewriteOutcome: Rewritten delegate parameter, or unchanged when the
        item is not function-typed.
    """
    found = self._match_function(text)
    if found is None:
      return RewriteOutcome.unchanged(text, "not a function-typed parameter")

    m, arg_types = found
    cfg = self.config
    return_type = m.group("rtype")
    type_args = ", ".join(arg_types)

    if return_type == cfg.void_type:
      delegate = f"{cfg.action_type}<{type_args}>" if arg_types else cfg.action_type
    elif arg_types:
      delegate = f"{cfg.function_type}<{type_args}, {return_type}>"
    else:
      delegate = f"{cfg.function_type}<{return_type}>"

    return RewriteOutcome.rewritten(
      f"{m.group('leading')}{m.group('prefix')}{delegate} {m.group('fname')}{m.group('trailing')}"
    )

  def append_default(self, text: str) -> RewriteOutcome:
    """
    Appends the null default after the last non-whitespace character.

    Args:
        text (str): Item text.

    Returns:
        RewriteOutcome: Defaulted item, or unchanged if a default exists.
    """
    if _DEFAULT_ASSIGN_RE.search(text):
      return RewriteOutcome.unchanged(text, "explicit default present")

    literal = self.config.null_literal
    result, count = _LAST_TOKEN_RE.subn(lambda m: f"{m.group('nospace')} = {literal}{m.group('trailing')}", text, 1)
    if not count:
      return RewriteOutcome.unchanged(text, "empty item")
    return RewriteOutcome.rewritten(result)

  def resolve_required(self, text: str) -> RewriteOutcome:
    """
    Replaces 'required' markers with the null-check placeholder.

    Args:
        text (str): Item text.

    Returns:
        RewriteOutcome: Item with markers replaced, or unchanged if none.
    """
    placeholder = self.config.required_placeholder
    result, count = _REQUIRED_RE.subn(lambda _: placeholder, text)
    if not count:
      return RewriteOutcome.unchanged(text, "no required marker")
    return RewriteOutcome.rewritten(result)

  def transform(self, text: str, section: SectionKind) -> RewriteOutcome:
    """
    Applies all item rewrites appropriate for the item's section.

    Comments in the item are moved in front of it, one per line, so that a
    trailing ``//`` comment cannot swallow the separator or the closing
    parenthesis emitted after the item.

    Args:
        text (str): Raw item text.
        section (SectionKind): Section the item was declared in.

    Returns:
        RewriteOutcome: The final item text.
    """
    code, comments = extract_comments(text)
    if comments:
      inner = self.transform(code.strip(), section)
      moved = "".join(f"{comment}\n" for comment in comments) + inner.text
      if moved == text:
        return RewriteOutcome.unchanged(text, inner.reason)
      return RewriteOutcome.rewritten(moved)

    item = self.classify(text)
    if item.kind is ItemKind.UNRECOGNIZED:
      logger.debug("Parameter left as is (unrecognized shape): %r", text)
      return RewriteOutcome.unchanged(text, "unrecognized parameter shape")

    current = text
    if item.kind is ItemKind.FUNCTION_TYPED:
      current = self.to_delegate(current).text
    if section.is_defaulted:
      current = self.append_default(current).text
    if item.has_required_annotation:
      current = self.resolve_required(current).text

    if current == text:
      return RewriteOutcome.unchanged(text, "already in target form")
    return RewriteOutcome.rewritten(current)

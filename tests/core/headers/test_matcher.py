"""
Tests for the Function Header Matcher.

Covers:
1. Declarations with block, expression and initializer-list bodies.
2. Constructors (no return type) and class-embedded headers.
3. Reserved-word guard and call statements left untouched.
4. Decision records produced by `scan`.
"""

import re

import pytest

from dart2csharp.config import RuntimeConfig
from dart2csharp.core.errors import HeaderInvariantError
from dart2csharp.core.headers.matcher import HeaderTranspiler, default_transpiler, transform_header_block
from dart2csharp.enums import OutcomeStatus
from dart2csharp.utils.keywords import RESERVED_KEYWORDS


def test_block_body_with_named_section():
  src = """NodeMetadata lazySet(
  NodeMetadata meta, {
  BuildOp buildOp,
  Iterable<String> stylesPrepend,
}) {"""
  expected = """public NodeMetadata lazySet(NodeMetadata meta,
BuildOp buildOp = null,
Iterable<String> stylesPrepend = null) {"""
  assert transform_header_block(src) == expected


def test_constructor_with_initializer_list():
  src = """
  final TextBlock block;
  final Iterable<Widget> widgets;

  BuiltPieceSimple({
    this.block,
    this.widgets
  }) : assert((block == null) != (widgets == null));"""
  expected = """
  final TextBlock block;
  final Iterable<Widget> widgets;

  public BuiltPieceSimple(this.block = null,
this.widgets = null) : assert((block == null) != (widgets == null));"""
  assert transform_header_block(src) == expected


def test_expression_body():
  src = """CssMargin copyWith({
    CssLength bottom,
    CssLength left,
    CssLength right,
    CssLength top,
  }) =>
      CssMargin()
        ..bottom = bottom ?? this.bottom
        ..top = top ?? this.top;"""
  expected = """public CssMargin copyWith(CssLength bottom = null,
CssLength left = null,
CssLength right = null,
CssLength top = null) =>
      CssMargin()
        ..bottom = bottom ?? this.bottom
        ..top = top ?? this.top;"""
  assert transform_header_block(src) == expected


def test_initializer_list_on_next_line():
  src = """DataBit(this.block, this.data, this.tsb, {this.onTap})
      : assert(block != null),
        assert(tsb != null);"""
  expected = """public DataBit(this.block,
this.data,
this.tsb,
this.onTap = null)
      : assert(block != null),
        assert(tsb != null);"""
  assert transform_header_block(src) == expected


@pytest.mark.parametrize(
  "rtype, delegate",
  [
    ("void", "Action<String, String> f"),
    ("int", "Function<String, String, int> f"),
  ],
)
def test_function_typed_parameter_and_body_statements(rtype, delegate):
  src = f"""
  void styles({rtype} f(String key, String value)) {{
    _stylesFrozen = true;
    if (_styles == null) return;

    final iterator = _styles.iterator;
    while (iterator.moveNext()) {{
      final key = iterator.current;
      if (!iterator.moveNext()) return;
      f(key, iterator.current);
    }}
  }}"""
  expected = src.replace(f"void styles({rtype} f(String key, String value))", f"public void styles({delegate})")
  assert transform_header_block(src) == expected


def test_expression_body_with_call_in_body():
  src = """
  DataBit rebuild({
    String data,
    VoidCallback onTap,
    TextStyleBuilders tsb,
  }) =>
      DataBit(
        block,
        data ?? this.data,
        onTap: onTap ?? this.onTap,
      );"""
  expected = """
  public DataBit rebuild(String data = null,
VoidCallback onTap = null,
TextStyleBuilders tsb = null) =>
      DataBit(
        block,
        data ?? this.data,
        onTap: onTap ?? this.onTap,
      );"""
  assert transform_header_block(src) == expected


def test_class_embedded_constructor():
  src = """
class BuiltPieceSimple extends BuiltPiece {
  final TextBlock block;
  final Iterable<Widget> widgets;

  BuiltPieceSimple({
    this.block,
    this.widgets,
  }) : assert((block == null) != (widgets == null));

  bool get hasWidgets => widgets != null;
}"""
  expected = """
class BuiltPieceSimple extends BuiltPiece {
  final TextBlock block;
  final Iterable<Widget> widgets;

  public BuiltPieceSimple(this.block = null,
this.widgets = null) : assert((block == null) != (widgets == null));

  bool get hasWidgets => widgets != null;
}"""
  assert transform_header_block(src) == expected


def test_header_without_body_marker_is_left_alone():
  src = """NodeMetadata lazySet(
  NodeMetadata meta, {
  BuildOp buildOp,
})"""
  assert transform_header_block(src) == src


# --- Guards ---


@pytest.mark.parametrize("keyword", sorted(RESERVED_KEYWORDS))
def test_reserved_word_is_never_a_function_name(keyword):
  src = f"  {keyword} (value) {{\n  }}\n"
  assert transform_header_block(src) == src


def test_switch_inside_body_is_kept():
  src = """void apply(CssBorderStyle style) {
  if (style != null) {
    switch (style) {
      case CssBorderStyle.dashed:
        break;
    }
  }
}"""
  expected = src.replace("void apply(CssBorderStyle style)", "public void apply(CssBorderStyle style)")
  assert transform_header_block(src) == expected


def test_reserved_word_in_return_type_position():
  src = "  return compute(a) => a;\n"
  assert transform_header_block(src) == src


def test_configured_extra_keyword():
  config = RuntimeConfig(extra_keywords=["assertThat"])
  src = "assertThat(value) {\n}"
  assert transform_header_block(src, config) == src


def test_call_statements_are_not_headers():
  src = "  f(key, iterator.current);\n  print(build(a));\n"
  assert transform_header_block(src) == src


def test_private_function_has_no_visibility_modifier():
  assert transform_header_block("void _reset(int a) {") == "void _reset(int a) {"


def test_empty_parameter_list():
  assert transform_header_block("void dispose() {\n}") == "public void dispose() {\n}"


def test_nested_parentheses_in_default_value():
  src = "void pad({EdgeInsets insets = const EdgeInsets.all(4)}) {"
  assert transform_header_block(src) == "public void pad(EdgeInsets insets = const EdgeInsets.all(4)) {"


def test_idempotent_on_text_without_headers():
  src = "final x = 1;\n// nothing here\n"
  assert transform_header_block(src) == src


def test_empty_text():
  assert transform_header_block("") == ""


# --- Decisions ---


def test_scan_records_each_decision_with_line_numbers():
  src = """int add(int a, int b) {
  if (a > b) {
    return a;
  }
  return a + b;
}
"""
  outcomes = HeaderTranspiler().scan(src)
  assert [o.match.name for o in outcomes] == ["add", "if"]
  assert [o.line for o in outcomes] == [1, 2]
  assert outcomes[0].outcome.status == OutcomeStatus.REWRITTEN
  assert outcomes[1].outcome.status == OutcomeStatus.UNCHANGED
  assert outcomes[1].outcome.reason == "reserved keyword 'if'"


def test_trace_event_payload():
  outcome = HeaderTranspiler().scan("\n\nWidget build(BuildContext context) {")[0]
  assert outcome.to_trace() == {
    "type": "header",
    "name": "build",
    "return_type": "Widget",
    "line": 3,
    "status": "rewritten",
    "reason": "",
  }


def test_custom_vocabulary():
  config = RuntimeConfig(public_modifier="internal", null_literal="default")
  assert transform_header_block("void f({int a}) {", config) == "internal void f(int a = default) {"


def test_default_transpiler_is_shared():
  assert default_transpiler() is default_transpiler()


def test_match_without_name_is_an_invariant_violation():
  transpiler = HeaderTranspiler()
  transpiler.prefix_re = re.compile(r"^(?P<leading_space>\s*)(?P<rtype>)(?P<fname>\w+)?\(", re.MULTILINE)
  with pytest.raises(HeaderInvariantError):
    transpiler.transform("(a) {")


def test_trailing_comment_does_not_swallow_body_marker():
  src = "void f({\n  int a,\n  int b // last one\n}) {\n  body();\n}"
  assert transform_header_block(src) == "public void f(int a = null,\n// last one\nint b = null) {\n  body();\n}"


def test_doc_comment_on_named_constructor_parameter():
  src = "  Foo({\n    /// The key.\n    Key key,\n    int a,\n  }) {"
  assert transform_header_block(src) == "  public Foo(/// The key.\nKey key = null,\nint a = null) {"

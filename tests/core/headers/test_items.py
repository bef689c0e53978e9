"""
Tests for the Parameter Item Transformer.

Verifies:
1. Function-typed parameters become Action / Function delegates.
2. Null defaults are appended only where no default exists.
3. 'required' markers are replaced by the null-check placeholder.
4. Unrecognized shapes are passed through untouched.
"""

import pytest

from dart2csharp.config import RuntimeConfig
from dart2csharp.core.headers.items import ParameterItemTransformer
from dart2csharp.enums import ItemKind, OutcomeStatus, SectionKind


@pytest.fixture
def transformer():
  return ParameterItemTransformer()


# --- Delegate conversion ---


@pytest.mark.parametrize(
  "item, expected",
  [
    ("void f(int a, float b)", "Action<int, float> f"),
    ("void f(int a)", "Action<int> f"),
    ("void f()", "Action f"),
    ("int f(int a, float b)", "Function<int, float, int> f"),
    ("int f(int a)", "Function<int, int> f"),
    ("int f()", "Function<int> f"),
  ],
)
def test_inline_function_to_delegate(transformer, item, expected):
  outcome = transformer.to_delegate(item)
  assert outcome.status is OutcomeStatus.REWRITTEN
  assert outcome.text == expected


def test_delegate_preserves_surrounding_whitespace(transformer):
  outcome = transformer.to_delegate("\n  void f(int a, float b)\n  ")
  assert outcome.text == "\n  Action<int, float> f\n  "


def test_function_type_syntax_to_delegate(transformer):
  assert transformer.to_delegate("void Function(String key, String value) f").text == "Action<String, String> f"
  assert transformer.to_delegate("bool Function(int)? test").text == "Function<int, bool> test"
  assert transformer.to_delegate("void Function() onTap").text == "Action onTap"


def test_generic_argument_types_are_kept(transformer):
  outcome = transformer.to_delegate("void f(List<int> items, Map<String, int> index)")
  assert outcome.text == "Action<List<int>, Map<String, int>> f"


def test_simple_item_is_not_a_delegate(transformer):
  outcome = transformer.to_delegate("BuildOp buildOp")
  assert outcome.status is OutcomeStatus.UNCHANGED


def test_nested_function_argument_is_not_converted(transformer):
  item = "void f(void g(int x))"
  assert transformer.classify(item).kind is ItemKind.UNRECOGNIZED
  assert transformer.transform(item, SectionKind.POSITIONAL).text == item


def test_custom_delegate_names():
  custom = ParameterItemTransformer(RuntimeConfig(function_type="Func"))
  assert custom.to_delegate("int f(int a)").text == "Func<int, int> f"


# --- Default injection ---


@pytest.mark.parametrize(
  "item, expected",
  [
    ("\n  Iterable stylesPrepend\n  ", "\n  Iterable stylesPrepend = null\n  "),
    ("\n  Iterable<String> stylesPrepend\n  ", "\n  Iterable<String> stylesPrepend = null\n  "),
    ("\n  double stylesPrepend = 0.0\n  ", "\n  double stylesPrepend = 0.0\n  "),
  ],
)
def test_append_default(transformer, item, expected):
  assert transformer.append_default(item).text == expected


def test_explicit_default_is_reported_unchanged(transformer):
  outcome = transformer.append_default("int x = 3")
  assert outcome.status is OutcomeStatus.UNCHANGED
  assert outcome.reason == "explicit default present"


def test_custom_null_literal():
  custom = ParameterItemTransformer(RuntimeConfig(null_literal="default"))
  assert custom.append_default("int x").text == "int x = default"


# --- Required resolution ---


def test_required_annotation_in_named_section(transformer):
  outcome = transformer.transform("\n  @required Iterable<String> stylesPrepend\n  ", SectionKind.NAMED)
  assert outcome.text == "\n  /* TODO: check null */ Iterable<String> stylesPrepend = null\n  "


def test_required_annotation_on_this_init(transformer):
  outcome = transformer.transform("\n  @required this.styles\n  ", SectionKind.NAMED)
  assert outcome.text == "\n  /* TODO: check null */ this.styles = null\n  "


def test_required_modifier_keyword(transformer):
  outcome = transformer.transform("required String name", SectionKind.NAMED)
  assert outcome.text == "/* TODO: check null */ String name = null"


def test_parameter_named_required_is_untouched(transformer):
  item = transformer.classify("bool required")
  assert item.kind is ItemKind.SIMPLE
  assert not item.has_required_annotation


# --- Classification & section behaviour ---


@pytest.mark.parametrize(
  "text, kind",
  [
    ("this.block", ItemKind.THIS_INIT),
    ("this.block = 3", ItemKind.THIS_INIT),
    ("NodeMetadata meta", ItemKind.SIMPLE),
    ("Iterable<String> stylesPrepend", ItemKind.SIMPLE),
    ("Map<String, List<int>> table", ItemKind.SIMPLE),
    ("String? label", ItemKind.SIMPLE),
    ("Key key = const Key('a')", ItemKind.SIMPLE),
    ("void f(int a, float b)", ItemKind.FUNCTION_TYPED),
    ("[int a]", ItemKind.UNRECOGNIZED),
    ("justAName", ItemKind.UNRECOGNIZED),
  ],
)
def test_classify(transformer, text, kind):
  assert transformer.classify(text).kind is kind


def test_classify_flags(transformer):
  item = transformer.classify("@required int x = 1")
  assert item.has_explicit_default
  assert item.has_required_annotation


def test_positional_items_get_no_default(transformer):
  outcome = transformer.transform("NodeMetadata meta", SectionKind.POSITIONAL)
  assert outcome.status is OutcomeStatus.UNCHANGED
  assert outcome.text == "NodeMetadata meta"


def test_named_function_typed_item_gets_default(transformer):
  outcome = transformer.transform("void onTap()", SectionKind.NAMED)
  assert outcome.text == "Action onTap = null"


def test_optional_section_items_get_default(transformer):
  assert transformer.transform("int count", SectionKind.OPTIONAL).text == "int count = null"


def test_named_item_keeps_explicit_default(transformer):
  outcome = transformer.transform("double ratio = 0.5", SectionKind.NAMED)
  assert outcome.status is OutcomeStatus.UNCHANGED
  assert outcome.text == "double ratio = 0.5"


def test_unrecognized_item_passes_through_in_named_section(transformer):
  outcome = transformer.transform("justAName", SectionKind.NAMED)
  assert outcome.status is OutcomeStatus.UNCHANGED
  assert outcome.reason == "unrecognized parameter shape"
  assert outcome.text == "justAName"

"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Console isolation so tests injecting a recording console do not leak.
- Shared Dart source samples.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'dart2csharp' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from dart2csharp.utils.console import reset_console  # noqa: E402

LAZY_SET_DART = """import 'package:flutter/widgets.dart';
import 'package:html/dom.dart' as dom;

NodeMetadata lazySet(
  NodeMetadata meta, {
  BuildOp buildOp,
  Iterable<String> stylesPrepend,
}) {
  meta ??= NodeMetadata();
  if (buildOp != null) {
    meta.buildOp = buildOp;
  }
  return meta;
}
"""

LAZY_SET_CSHARP = """public NodeMetadata lazySet(NodeMetadata meta,
BuildOp buildOp = null,
Iterable<String> stylesPrepend = null) {
  meta ??= NodeMetadata();
  if (buildOp != null) {
    meta.buildOp = buildOp;
  }
  return meta;
}
"""


@pytest.fixture(autouse=True)
def isolate_console():
  """Ensures console and logging point at stdout for every test."""
  reset_console()
  yield
  reset_console()


@pytest.fixture
def lazy_set_source() -> str:
  return LAZY_SET_DART


@pytest.fixture
def lazy_set_expected() -> str:
  return LAZY_SET_CSHARP

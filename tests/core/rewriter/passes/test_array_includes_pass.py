"""
Tests for the indexOf -> includes rewrite.

Verifies:
1. Every accepted comparison, with the call on either side.
2. Comparisons without a canonical form are left alone.
3. Nested occurrences are rewritten across rounds.
4. Wrong arity is fatal for the module.
"""

import pytest

from js_codemods.core.errors import MalformedUsageError
from js_codemods.core.rewriter.passes.array_includes import compared_literal, flip
from js_codemods.core.tree import parse


@pytest.mark.parametrize(
  "source, expected",
  [
    ("if (arr.indexOf(x) === -1) {}", "if (!arr.includes(x)) {}"),
    ("if (arr.indexOf(x) !== -1) {}", "if (arr.includes(x)) {}"),
    ("if (arr.indexOf(x) > -1) {}", "if (arr.includes(x)) {}"),
    ("if (arr.indexOf(x) >= 0) {}", "if (arr.includes(x)) {}"),
    ("if (arr.indexOf(x) < 0) {}", "if (!arr.includes(x)) {}"),
    # Literal on the left: the operator is mirrored first.
    ("if (-1 === arr.indexOf(x)) {}", "if (!arr.includes(x)) {}"),
    ("if (-1 !== arr.indexOf(x)) {}", "if (arr.includes(x)) {}"),
    ("if (-1 < arr.indexOf(x)) {}", "if (arr.includes(x)) {}"),
    ("if (0 <= arr.indexOf(x)) {}", "if (arr.includes(x)) {}"),
    ("if (0 > arr.indexOf(x)) {}", "if (!arr.includes(x)) {}"),
  ],
)
def test_accepted_comparisons(rewrite, source, expected):
  assert rewrite("array-includes", source) == expected


@pytest.mark.parametrize(
  "source",
  [
    "if (arr.indexOf(x) === 0) {}",
    "if (arr.indexOf(x) == -1) {}",
    "if (arr.indexOf(x) <= 0) {}",
    "if (arr.indexOf(x) < 1) {}",
    "if (arr.indexOf(x) >= -1) {}",
    "if (arr.lastIndexOf(x) === -1) {}",
    "if (indexOf(x) === -1) {}",
    "if (arr?.indexOf(x) === -1) {}",
    "const i = arr.indexOf(x);",
  ],
)
def test_other_comparisons_untouched(rewrite, source):
  assert rewrite("array-includes", source) == source


def test_receiver_text_is_preserved(rewrite):
  code = "const ok = this.props.items.indexOf(item.id) !== -1;"
  assert rewrite("array-includes", code) == "const ok = this.props.items.includes(item.id);"


def test_alternative_literal_spellings(rewrite):
  assert rewrite("array-includes", "a.indexOf(b) >= 0.0;") == "a.includes(b);"
  assert rewrite("array-includes", "a.indexOf(b) === -0x1;") == "!a.includes(b);"


def test_nested_occurrences(rewrite):
  code = "if (a.indexOf(b.indexOf(c) === -1) === -1) {}"
  assert rewrite("array-includes", code) == "if (!a.includes(!b.includes(c))) {}"


def test_multiple_occurrences(rewrite):
  code = "const r = a.indexOf(x) >= 0 && b.indexOf(y) === -1;"
  assert rewrite("array-includes", code) == "const r = a.includes(x) && !b.includes(y);"


@pytest.mark.parametrize(
  "source",
  [
    "if (arr.indexOf(x, 1) === -1) {}",
    "if (arr.indexOf() >= 0) {}",
  ],
)
def test_wrong_arity_is_fatal(rewrite, source):
  with pytest.raises(MalformedUsageError) as excinfo:
    rewrite("array-includes", source)

  assert excinfo.value.construct == "indexOf"
  assert "test.js" in str(excinfo.value)


def test_flip_mirrors_relational_operators():
  assert flip("<") == ">"
  assert flip(">=") == "<="
  assert flip("===") == "==="


def test_compared_literal():
  tree = parse("a = [0, -1, 1, -0, 2];")
  values = [compared_literal(node) for node in tree.root.find(kind="array").children() if node.is_named()]
  assert values == [0, -1, None, None, None]


@pytest.mark.parametrize("parser", ["javascript", "typescript", "tsx"])
@pytest.mark.parametrize("source", ["a.indexOf?.(x) === -1;", "a?.indexOf(x) >= 0;"])
def test_optional_calls_untouched_in_every_dialect(rewrite, parser, source):
  assert rewrite("array-includes", source, parser=parser) == source

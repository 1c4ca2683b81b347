"""
Tests for replacement snippet builders.
"""

from js_codemods.core import builders
from js_codemods.core.tree import parse
from js_codemods.enums import NodeKind, QuoteStyle


def _node(code, kind):
  return parse(code).root.find(kind=kind.value)


def test_operand_wraps_looser_expressions():
  assert builders.operand(_node("a || b;", NodeKind.BINARY_EXPRESSION), builders.EQUALITY_PRECEDENCE) == "(a || b)"
  assert builders.operand(_node("a + b;", NodeKind.BINARY_EXPRESSION), builders.EQUALITY_PRECEDENCE) == "a + b"
  assert builders.operand(_node("a = b;", NodeKind.ASSIGNMENT_EXPRESSION), builders.EQUALITY_PRECEDENCE) == "(a = b)"
  assert builders.operand(_node("f(a);", NodeKind.CALL_EXPRESSION), builders.EQUALITY_PRECEDENCE) == "f(a)"


def test_membership_call():
  call = _node("xs.indexOf(y + 1);", NodeKind.CALL_EXPRESSION)
  receiver = call.field("function").field("object")
  argument = call.field("arguments").find(kind="binary_expression")
  assert builders.membership_call(receiver, argument, False) == "xs.includes(y + 1)"
  assert builders.membership_call(receiver, argument, True) == "!xs.includes(y + 1)"


def test_string_literal():
  assert builders.string_literal("a") == "'a'"
  assert builders.string_literal("a", QuoteStyle.DOUBLE) == '"a"'
  assert builders.string_literal("it's") == "'it\\'s'"


def test_default_import():
  assert builders.default_import("Perf", "react-addons-perf") == "import Perf from 'react-addons-perf';"


def test_import_without():
  stmt = _node("import type { b, c as d } from \"m\";", NodeKind.IMPORT_STATEMENT)
  specs = stmt.find_all(kind="import_specifier")
  assert builders.import_without(stmt, [specs[1]]) == "import type { c as d } from 'm';"

  stmt = _node("import * as ns from 'm';", NodeKind.IMPORT_STATEMENT)
  assert builders.import_without(stmt, []) == "import * as ns from 'm';"

  stmt = _node("import { a } from 'm';", NodeKind.IMPORT_STATEMENT)
  assert builders.import_without(stmt, []) is None

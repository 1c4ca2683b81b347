"""
Replacement Builder.

Builds the source text of canonical replacement nodes. Each builder takes the
matched node's parts plus contextual parameters and returns a snippet that
parses as the same syntactic role it replaces. Operands are parenthesized
where JavaScript operator precedence would otherwise regroup them.
"""

from typing import Optional, Sequence

from ast_grep_py import SgNode

from js_codemods.core.classifier import (
  import_clause,
  is_kind,
  kind_of,
  named_children,
  string_value,
)
from js_codemods.enums import NodeKind, QuoteStyle

# Binary operator precedence (higher binds tighter).
BINARY_PRECEDENCE = {
  "??": 1,
  "||": 2,
  "&&": 3,
  "|": 4,
  "^": 5,
  "&": 6,
  "==": 7,
  "!=": 7,
  "===": 7,
  "!==": 7,
  "<": 8,
  ">": 8,
  "<=": 8,
  ">=": 8,
  "instanceof": 8,
  "in": 8,
  "<<": 9,
  ">>": 9,
  ">>>": 9,
  "+": 10,
  "-": 10,
  "*": 11,
  "/": 11,
  "%": 11,
  "**": 12,
}

EQUALITY_PRECEDENCE = BINARY_PRECEDENCE["=="]

# Operands that bind looser than any binary operator.
_LOOSE_KINDS = frozenset(
  {
    NodeKind.ASSIGNMENT_EXPRESSION,
    NodeKind.AUGMENTED_ASSIGNMENT_EXPRESSION,
    NodeKind.TERNARY_EXPRESSION,
    NodeKind.SEQUENCE_EXPRESSION,
    NodeKind.ARROW_FUNCTION,
    NodeKind.YIELD_EXPRESSION,
  }
)

# Parents in which an equality expression must be parenthesized.
_TIGHT_PARENTS = frozenset(
  {
    "unary_expression",
    "member_expression",
    "subscript_expression",
    "call_expression",
    "new_expression",
    "await_expression",
    "update_expression",
  }
)


def binary_operator(node: SgNode) -> Optional[str]:
  op = node.field("operator")
  return op.text() if op is not None else None


def wrap(text: str) -> str:
  return f"({text})"


def operand(node: SgNode, precedence: int) -> str:
  """
  Source of `node` as an operand of a binary operator of `precedence`.

  Args:
      node: Operand expression.
      precedence: Precedence of the enclosing operator.
  """
  kind = kind_of(node)
  if kind in _LOOSE_KINDS:
    return wrap(node.text())
  if kind is NodeKind.BINARY_EXPRESSION:
    inner = BINARY_PRECEDENCE.get(binary_operator(node) or "", 0)
    if inner <= precedence:
      return wrap(node.text())
  return node.text()


def fits_context(text: str, replaced: SgNode, precedence: int) -> str:
  """
  Parenthesizes an expression of `precedence` when the parent of the node it
  replaces binds at least as tightly.
  """
  parent = replaced.parent()
  if parent is None:
    return text
  if parent.kind() in _TIGHT_PARENTS:
    return wrap(text)
  if is_kind(parent, NodeKind.BINARY_EXPRESSION):
    if BINARY_PRECEDENCE.get(binary_operator(parent) or "", 0) >= precedence:
      return wrap(text)
  return text


def identifier(name: str) -> str:
  return name


def membership_call(receiver: SgNode, argument: SgNode, negated: bool) -> str:
  """
  ``receiver.includes(argument)``, prefixed with ``!`` when negated.

  The receiver already stood as the object of a member access, so its text is
  reused verbatim.
  """
  expression = f"{receiver.text()}.includes({argument.text()})"
  return f"!{expression}" if negated else expression


def null_comparison(argument: SgNode, negated: bool, replaced: SgNode) -> str:
  """
  ``argument == null`` (negated) or ``argument != null``.

  Args:
      argument: The helper's single argument.
      negated: True when rewriting ``!helper(x)``.
      replaced: The node being replaced, used to decide outer parentheses.
  """
  operator = "==" if negated else "!="
  text = f"{operand(argument, EQUALITY_PRECEDENCE)} {operator} null"
  return fits_context(text, replaced, EQUALITY_PRECEDENCE)


def string_literal(value: str, quote: QuoteStyle = QuoteStyle.SINGLE) -> str:
  """Quotes `value` with the configured quote character."""
  char = quote.char
  escaped = value.replace(char, f"\\{char}")
  return f"{char}{escaped}{char}"


def _source_literal(source: SgNode, quote: QuoteStyle) -> str:
  value = string_value(source)
  if value is None or "\\" in value or "'" in value or '"' in value:
    return source.text()
  return string_literal(value, quote)


def default_import(name: str, source: str, quote: QuoteStyle = QuoteStyle.SINGLE) -> str:
  """``import Name from 'source';``"""
  return f"import {name} from {string_literal(source, quote)};"


def import_without(
  statement: SgNode,
  keep: Sequence[SgNode],
  quote: QuoteStyle = QuoteStyle.SINGLE,
) -> Optional[str]:
  """
  Rebuilds an import statement keeping only the named specifiers in `keep`.

  Default and namespace bindings are always kept.

  Args:
      statement: The original ``import_statement``.
      keep: The named import specifiers to retain.
      quote: Quote style for the module path.

  Returns:
      Optional[str]: The rebuilt statement, or None when it would import nothing.
  """
  clause = import_clause(statement)
  bindings = []
  if clause is not None:
    for child in named_children(clause):
      if is_kind(child, NodeKind.IDENTIFIER, NodeKind.NAMESPACE_IMPORT):
        bindings.append(child.text())

  if keep:
    bindings.append("{ " + ", ".join(spec.text() for spec in keep) + " }")

  if not bindings:
    return None

  keyword = "import"
  if any(not child.is_named() and child.text() == "type" for child in statement.children()):
    keyword = "import type"

  return f"{keyword} {', '.join(bindings)} from {_source_literal(statement.field('source'), quote)};"

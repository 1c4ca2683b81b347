"""
Node Classifier.

Pure predicates answering "does this node have shape X". None of them mutate
the tree, and all of them can be called any number of times.

Node kinds are looked up through the closed `NodeKind` enum: a tree-sitter
type outside that enum classifies as `None` and never satisfies a predicate.
"""

from typing import Iterable, List, Optional

from ast_grep_py import SgNode

from js_codemods.core.symbols import SymbolTable
from js_codemods.enums import NodeKind

JSX_ELEMENT_KINDS = frozenset(
  {
    NodeKind.JSX_OPENING_ELEMENT,
    NodeKind.JSX_CLOSING_ELEMENT,
    NodeKind.JSX_SELF_CLOSING_ELEMENT,
  }
)

STATEMENT_CONTAINERS = frozenset(
  {
    NodeKind.PROGRAM,
    NodeKind.STATEMENT_BLOCK,
    NodeKind.SWITCH_CASE,
    NodeKind.SWITCH_DEFAULT,
  }
)

IDENTIFIER_KINDS = frozenset(
  {
    NodeKind.IDENTIFIER,
    NodeKind.PROPERTY_IDENTIFIER,
    NodeKind.SHORTHAND_PATTERN,
  }
)


def kind_of(node: Optional[SgNode]) -> Optional[NodeKind]:
  """
  Classifies a node into `NodeKind`.

  Args:
      node: Any ast-grep node (or None).

  Returns:
      Optional[NodeKind]: The kind, or None for kinds the engine does not inspect.
  """
  if node is None:
    return None
  try:
    return NodeKind(node.kind())
  except ValueError:
    return None


def is_kind(node: Optional[SgNode], *kinds: NodeKind) -> bool:
  return kind_of(node) in kinds


def same_node(a: Optional[SgNode], b: Optional[SgNode]) -> bool:
  """True iff `a` and `b` are the same node of the current tree."""
  if a is None or b is None:
    return False
  ra, rb = a.range(), b.range()
  return a.kind() == b.kind() and (ra.start.index, ra.end.index) == (rb.start.index, rb.end.index)


def named_children(node: SgNode) -> List[SgNode]:
  """Named children, comments excluded."""
  return [child for child in node.children() if child.is_named() and not is_kind(child, NodeKind.COMMENT)]


def _has_optional_chain(node: SgNode) -> bool:
  # The javascript grammar wraps `?.` in an optional_chain node; the
  # typescript and tsx grammars leave it as a bare token.
  return any(
    is_kind(child, NodeKind.OPTIONAL_CHAIN) or (not child.is_named() and child.text() == "?.")
    for child in node.children()
  )


# --- Calls ---


def is_call_to(node: SgNode, method: str) -> bool:
  """
  True iff `node` is ``receiver.method(...)``.

  Optional chains (``a?.method(x)``, ``a.method?.(x)``) do not match since
  their short-circuit result cannot be expressed by the canonical forms.

  Args:
      node: Candidate node.
      method: Property name the callee must access.
  """
  if not is_kind(node, NodeKind.CALL_EXPRESSION) or _has_optional_chain(node):
    return False
  callee = node.field("function")
  if not is_kind(callee, NodeKind.MEMBER_EXPRESSION) or _has_optional_chain(callee):
    return False
  prop = callee.field("property")
  return is_kind(prop, NodeKind.PROPERTY_IDENTIFIER) and prop.text() == method


def is_call_to_function(node: SgNode, name: str) -> bool:
  """True iff `node` is a call whose callee is the bare identifier `name`."""
  if not is_kind(node, NodeKind.CALL_EXPRESSION) or _has_optional_chain(node):
    return False
  callee = node.field("function")
  return is_kind(callee, NodeKind.IDENTIFIER) and callee.text() == name


def call_receiver(node: SgNode) -> SgNode:
  """The object a ``receiver.method(...)`` call is made on."""
  return node.field("function").field("object")


def call_arguments(node: SgNode) -> List[SgNode]:
  """Argument expressions of a call, in order."""
  args = node.field("arguments")
  if args is None or not is_kind(args, NodeKind.ARGUMENTS):
    return []
  return named_children(args)


# --- Literals ---


def numeric_value(text: str) -> Optional[float]:
  """
  Evaluates a JavaScript numeric literal.

  Args:
      text: Literal source, e.g. ``0``, ``1.0``, ``0x1``, ``1_000``, ``1e0``.

  Returns:
      Optional[float]: The value, or None for BigInt / unrecognised literals.
  """
  clean = text.replace("_", "")
  if clean.endswith("n"):
    return None
  lowered = clean.lower()
  try:
    if lowered.startswith(("0x", "0o", "0b")):
      return float(int(lowered, 0))
    return float(lowered)
  except ValueError:
    return None


def is_numeric_literal(node: SgNode, value: float) -> bool:
  """
  True iff `node` is the numeric literal `value`.

  Negative values only match a unary minus applied to the literal of the
  absolute value (``-1``).
  """
  if value < 0:
    if not is_kind(node, NodeKind.UNARY_EXPRESSION):
      return False
    operator = node.field("operator")
    if operator is None or operator.text() != "-":
      return False
    return is_numeric_literal(node.field("argument"), -value)

  return is_kind(node, NodeKind.NUMBER) and numeric_value(node.text()) == value


def string_value(node: Optional[SgNode]) -> Optional[str]:
  """Contents of a plain string literal, without its quotes."""
  if not is_kind(node, NodeKind.STRING):
    return None
  return node.text()[1:-1]


# --- Identifiers ---


def is_tracked_identifier(node: SgNode, table: SymbolTable) -> bool:
  """
  True iff `node` is an identifier (any identifier flavour, JSX tag names
  included) naming a tracked symbol.
  """
  return kind_of(node) in IDENTIFIER_KINDS and node.text() in table


def is_member_property(node: SgNode) -> bool:
  """True iff `node` is the property of its parent member expression (``ns.X``)."""
  parent = node.parent()
  if not is_kind(parent, NodeKind.MEMBER_EXPRESSION):
    return False
  prop = parent.field("property")
  return same_node(prop, node)


def is_jsx_element_name(member: SgNode) -> bool:
  """
  True iff a member expression is (part of) a JSX element name, as in
  ``<React.addons.X>`` or ``</addons.X>``.
  """
  current = member
  parent = current.parent()
  while is_kind(parent, NodeKind.MEMBER_EXPRESSION):
    current = parent
    parent = current.parent()
  if kind_of(parent) not in JSX_ELEMENT_KINDS:
    return False
  name = parent.field("name")
  return same_node(name, current)


def declarator_of_pattern(node: SgNode) -> Optional[SgNode]:
  """
  The variable declarator whose binding pattern contains `node`.

  Only object destructuring is traversed; a pattern nested in a default value
  or function parameter does not belong to the declarator.
  """
  current = node
  parent = current.parent()
  while is_kind(parent, NodeKind.OBJECT_PATTERN, NodeKind.PAIR_PATTERN):
    if is_kind(parent, NodeKind.PAIR_PATTERN):
      value = parent.field("value")
      if not same_node(value, current):
        return None
    current = parent
    parent = current.parent()
  if not is_kind(parent, NodeKind.VARIABLE_DECLARATOR):
    return None
  name = parent.field("name")
  if not same_node(name, current):
    return None
  return parent


def namespace_declarator(node: SgNode, table: SymbolTable) -> Optional[SgNode]:
  """
  The variable declarator that binds tracked symbol `node` by reading it off
  a namespace object, if any.

  Matches ``const { X } = ns``, ``const { a: { X } } = ns`` and
  ``const X = ns.X``.
  """
  if not is_tracked_identifier(node, table):
    return None

  if is_kind(node, NodeKind.SHORTHAND_PATTERN):
    return declarator_of_pattern(node)

  if is_kind(node, NodeKind.PROPERTY_IDENTIFIER) and is_member_property(node):
    member = node.parent()
    declarator = member.parent()
    if not is_kind(declarator, NodeKind.VARIABLE_DECLARATOR):
      return None
    value = declarator.field("value")
    name = declarator.field("name")
    if same_node(value, member) and is_kind(name, NodeKind.IDENTIFIER) and name.text() == node.text():
      return declarator

  return None


def contains_call(node: SgNode) -> bool:
  """
  True iff any call expression exists in `node`'s subtree (itself included).
  """
  if is_kind(node, NodeKind.CALL_EXPRESSION):
    return True
  return node.find(kind=NodeKind.CALL_EXPRESSION.value) is not None


def in_statement_list(node: SgNode) -> bool:
  """True iff `node` sits directly in a statement list and can be removed whole."""
  return kind_of(node.parent()) in STATEMENT_CONTAINERS


# --- Modules ---


def import_source(node: SgNode) -> Optional[str]:
  """Module path of an import statement."""
  if not is_kind(node, NodeKind.IMPORT_STATEMENT):
    return None
  return string_value(node.field("source"))


def import_clause(node: SgNode) -> Optional[SgNode]:
  for child in node.children():
    if is_kind(child, NodeKind.IMPORT_CLAUSE):
      return child
  return None


def import_specifiers(node: SgNode) -> List[SgNode]:
  """Named import specifiers (``{a, b as c}``) of an import statement."""
  clause = import_clause(node)
  if clause is None:
    return []
  for child in clause.children():
    if is_kind(child, NodeKind.NAMED_IMPORTS):
      return [spec for spec in child.children() if is_kind(spec, NodeKind.IMPORT_SPECIFIER)]
  return []


def imported_name(specifier: SgNode) -> str:
  """Exported name an import specifier refers to (``a`` in ``{a as b}``)."""
  name = specifier.field("name")
  return name.text() if name is not None else specifier.text()


def is_directive(node: SgNode, values: Iterable[str]) -> bool:
  """
  True iff `node` is an expression statement consisting of a single string
  literal whose contents are one of `values` (``'use strict';``).
  """
  if not is_kind(node, NodeKind.EXPRESSION_STATEMENT):
    return False
  children = named_children(node)
  if len(children) != 1:
    return False
  return string_value(children[0]) in set(values)

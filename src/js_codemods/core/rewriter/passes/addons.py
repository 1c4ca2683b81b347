"""
Addons Namespace Migration.

Collapses every access path through the addons aggregator
(``import {addons}``, ``React.addons.X``, ``const {X} = addons``,
``<React.addons.X>``) into direct references to ``X``, recording each symbol
that remains in use in the ledger for the import fixer.

Passes run in this order:

1.  `AggregatorSpecifierPass` strips ``{ addons }`` specifiers.
2.  `DeclarationPruningPass` prunes destructuring declarations when that is
    side-effect free and records their symbols.
3.  `NestedReferencePass(jsx=False)` flattens member access in expressions.
4.  `NestedReferencePass(jsx=True)` flattens member access in JSX tag names.
"""

import logging
from typing import Iterator, Optional

from ast_grep_py import SgNode

from js_codemods.core.builders import identifier
from js_codemods.core.classifier import (
  contains_call,
  in_statement_list,
  is_jsx_element_name,
  is_kind,
  is_tracked_identifier,
  namespace_declarator,
  same_node,
)
from js_codemods.core.import_fixer.specifiers import strip_specifiers
from js_codemods.core.ledger import UsageLedger
from js_codemods.core.rewriter.context import RewriterContext
from js_codemods.core.rewriter.interface import RewriterPass
from js_codemods.core.tree import DELETE, UNCHANGED, MatchResult, Replace, SourceTree, apply_rule
from js_codemods.enums import NodeKind

logger = logging.getLogger(__name__)

DECLARATION_KINDS = (NodeKind.LEXICAL_DECLARATION, NodeKind.VARIABLE_DECLARATION)


class AggregatorSpecifierPass(RewriterPass):
  """
  Removes the aggregator's named import specifier from every import statement.
  """

  name = "aggregator-specifiers"

  def transform(self, tree: SourceTree, context: RewriterContext, ledger: UsageLedger) -> UsageLedger:
    strip_specifiers(tree, [context.config.aggregator], context.quote)
    return ledger


def _bound_identifiers(declaration: SgNode) -> Iterator[SgNode]:
  for kind in (NodeKind.SHORTHAND_PATTERN, NodeKind.PROPERTY_IDENTIFIER):
    yield from declaration.find_all(kind=kind.value)


def _declared_here(declarator: Optional[SgNode], declaration: SgNode) -> bool:
  return declarator is not None and same_node(declarator.parent(), declaration)


def is_prunable(declaration: SgNode) -> bool:
  """
  Whether a declaration can be removed outright.

  Only statements in a statement list qualify, and only when nothing in them
  is called: a call may have effects beyond the binding.
  """
  return in_statement_list(declaration) and not contains_call(declaration)


class DeclarationPruningPass(RewriterPass):
  """
  Removes declarations that pull tracked symbols out of a namespace, when
  that is safe, and records those symbols as used.

  A declaration that has to stay (it calls something, or sits under an
  export or a for-loop head) keeps its own binding, so its symbols are not
  recorded and no second binding is imported next to it.
  """

  name = "declaration-pruning"

  def transform(self, tree: SourceTree, context: RewriterContext, ledger: UsageLedger) -> UsageLedger:
    used = ledger

    def rule(declaration: SgNode) -> MatchResult:
      nonlocal used
      names = [
        node.text()
        for node in _bound_identifiers(declaration)
        if _declared_here(namespace_declarator(node, context.symbols), declaration)
      ]
      if not names or not is_prunable(declaration):
        return UNCHANGED

      used = used.mark_all(names)
      return DELETE

    pruned = sum(apply_rule(tree, kind, rule) for kind in DECLARATION_KINDS)
    logger.debug("Pruned %d declaration(s)", pruned)
    return used


class NestedReferencePass(RewriterPass):
  """
  Replaces ``namespace.X`` with ``X`` for tracked symbols ``X``.

  Member expressions forming a JSX element name are handled by the JSX
  instance only, everything else by the non-JSX instance.
  """

  def __init__(self, jsx: bool = False) -> None:
    self.jsx = jsx
    self.name = "jsx-references" if jsx else "nested-references"

  def transform(self, tree: SourceTree, context: RewriterContext, ledger: UsageLedger) -> UsageLedger:
    used = ledger

    def rule(member: SgNode) -> MatchResult:
      nonlocal used
      prop = member.field("property")
      if prop is None or not is_kind(prop, NodeKind.PROPERTY_IDENTIFIER):
        return UNCHANGED
      if not is_tracked_identifier(prop, context.symbols):
        return UNCHANGED
      if is_jsx_element_name(member) != self.jsx:
        return UNCHANGED
      if namespace_declarator(prop, context.symbols) is not None:
        # `const X = ns.X` that survived pruning
        return UNCHANGED

      used = used.mark(prop.text())
      return Replace(identifier(prop.text()))

    count = apply_rule(tree, NodeKind.MEMBER_EXPRESSION, rule)
    logger.debug("Flattened %d %s reference(s)", count, "JSX" if self.jsx else "nested")
    return used

"""
Null-check Helper Removal.

Replaces calls to a null-check helper (``exists(x)``) imported from a known
module with plain comparisons against ``null``, and drops the import.
"""

import logging
from typing import Optional

from ast_grep_py import SgNode

from js_codemods.core.builders import null_comparison
from js_codemods.core.classifier import call_arguments, is_call_to_function
from js_codemods.core.errors import MalformedUsageError
from js_codemods.core.import_fixer.specifiers import strip_specifiers
from js_codemods.core.ledger import UsageLedger
from js_codemods.core.rewriter.context import RewriterContext
from js_codemods.core.rewriter.interface import RewriterPass
from js_codemods.core.tree import UNCHANGED, MatchResult, Replace, SourceTree, apply_rule
from js_codemods.enums import NodeKind

logger = logging.getLogger(__name__)


class NullHelperRemovalPass(RewriterPass):
  """
  ``!exists(x)`` -> ``x == null`` and ``exists(x)`` -> ``x != null``.

  Nothing is rewritten unless the module imports the helper by name from the
  configured path.
  """

  name = "remove-exists"

  def __init__(self, helper_name: Optional[str] = None, helper_path: Optional[str] = None) -> None:
    """
    Args:
        helper_name: Helper to remove (defaults to the configured one).
        helper_path: Module the helper comes from (defaults to the configured one).
    """
    self.helper_name = helper_name
    self.helper_path = helper_path

  def transform(self, tree: SourceTree, context: RewriterContext, ledger: UsageLedger) -> UsageLedger:
    helper = self.helper_name or context.config.helper_name
    path = self.helper_path or context.config.helper_path

    if not strip_specifiers(tree, [helper], context.quote, source=path):
      logger.debug("'%s' is not imported from '%s'; skipping", helper, path)
      return ledger

    def single_argument(call: SgNode) -> SgNode:
      args = call_arguments(call)
      if len(args) != 1:
        raise MalformedUsageError(helper, path=context.path)
      return args[0]

    def negated_rule(node: SgNode) -> MatchResult:
      operator = node.field("operator")
      call = node.field("argument")
      if operator is None or operator.text() != "!" or not is_call_to_function(call, helper):
        return UNCHANGED
      return Replace(null_comparison(single_argument(call), True, node))

    def plain_rule(node: SgNode) -> MatchResult:
      if not is_call_to_function(node, helper):
        return UNCHANGED
      return Replace(null_comparison(single_argument(node), False, node))

    # Negated calls first: `!exists(x)` also contains the plain call.
    negated = apply_rule(tree, NodeKind.UNARY_EXPRESSION, negated_rule)
    plain = apply_rule(tree, NodeKind.CALL_EXPRESSION, plain_rule)
    logger.debug("Rewrote %d negated and %d plain '%s' call(s)", negated, plain, helper)
    return ledger

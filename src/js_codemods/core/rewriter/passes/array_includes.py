"""
Index-search to Membership Test.

Rewrites ``receiver.indexOf(x)`` compared against ``0`` or ``-1`` into the
equivalent ``receiver.includes(x)`` call, negated where the comparison tested
for absence.
"""

import logging
from typing import Optional

from ast_grep_py import SgNode

from js_codemods.core.builders import binary_operator, membership_call
from js_codemods.core.classifier import call_arguments, call_receiver, is_call_to, is_numeric_literal
from js_codemods.core.errors import MalformedUsageError
from js_codemods.core.ledger import UsageLedger
from js_codemods.core.rewriter.context import RewriterContext
from js_codemods.core.rewriter.interface import RewriterPass
from js_codemods.core.tree import UNCHANGED, MatchResult, Replace, SourceTree, apply_rule
from js_codemods.enums import NodeKind

logger = logging.getLogger(__name__)

FLIPPED_OPERATORS = {
  "<": ">",
  ">": "<",
  "<=": ">=",
  ">=": "<=",
}

# compared literal -> operator (call on the left) -> negated result
ACCEPTED_COMPARISONS = {
  0: {"<": True, ">=": False},
  -1: {"===": True, "!==": False, ">": False},
}


def flip(operator: str) -> str:
  """Mirrors a relational operator so its operands can be swapped."""
  return FLIPPED_OPERATORS.get(operator, operator)


def compared_literal(node: Optional[SgNode]) -> Optional[int]:
  """Returns 0 or -1 when `node` is that literal, else None."""
  if node is None:
    return None
  for value in ACCEPTED_COMPARISONS:
    if is_numeric_literal(node, value):
      return value
  return None


class IndexOfToIncludesPass(RewriterPass):
  """
  ``arr.indexOf(x) === -1`` -> ``!arr.includes(x)`` and the other
  equivalent comparisons.
  """

  name = "array-includes"
  method = "indexOf"

  def transform(self, tree: SourceTree, context: RewriterContext, ledger: UsageLedger) -> UsageLedger:
    def rule(node: SgNode) -> MatchResult:
      left, right = node.field("left"), node.field("right")
      operator = binary_operator(node) or ""

      if is_call_to(left, self.method) and compared_literal(right) is not None:
        call, literal = left, compared_literal(right)
      elif is_call_to(right, self.method) and compared_literal(left) is not None:
        call, literal, operator = right, compared_literal(left), flip(operator)
      else:
        return UNCHANGED

      negated = ACCEPTED_COMPARISONS[literal].get(operator)
      if negated is None:
        return UNCHANGED

      args = call_arguments(call)
      if len(args) != 1:
        raise MalformedUsageError(self.method, path=context.path)

      return Replace(membership_call(call_receiver(call), args[0], negated))

    count = apply_rule(tree, NodeKind.BINARY_EXPRESSION, rule)
    logger.debug("Rewrote %d %s comparison(s)", count, self.method)
    return ledger

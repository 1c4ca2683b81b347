"""
Orchestration logic for executing sequential rewriter passes.

`RewriterPipeline` runs its passes in order over one tree, handing each pass
the ledger returned by the previous one.
"""

import logging
from typing import List, Optional

from js_codemods.core.ledger import UsageLedger
from js_codemods.core.rewriter.context import RewriterContext
from js_codemods.core.rewriter.interface import RewriterPass
from js_codemods.core.tree import SourceTree

logger = logging.getLogger(__name__)


class RewriterPipeline:
  """
  Manages a sequence of rewriting passes and executes them in order.
  """

  def __init__(self, passes: List[RewriterPass]) -> None:
    """
    Args:
        passes: Sequenced list of passes to execute.
    """
    self.passes = passes

  def run(self, tree: SourceTree, context: RewriterContext, ledger: Optional[UsageLedger] = None) -> UsageLedger:
    """
    Executes all registered passes sequentially on the tree.

    Args:
        tree: The module to transform (mutated in place).
        context: Shared configuration for this module run.
        ledger: Starting ledger; a fresh empty one by default.

    Returns:
        UsageLedger: The ledger returned by the last pass.
    """
    current = ledger if ledger is not None else UsageLedger()
    for pass_instance in self.passes:
      logger.debug("Running %s on %s", pass_instance.name, context.path or "<module>")
      current = pass_instance.transform(tree, context, current)
    return current

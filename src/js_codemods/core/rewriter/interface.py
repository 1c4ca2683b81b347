"""
Interface definition for Rewriter Passes.

A pass rewrites a `SourceTree` in place and threads the `UsageLedger`: it
receives the ledger produced by the previous pass and returns the one the next
pass should see.
"""

from abc import ABC, abstractmethod

from js_codemods.core.ledger import UsageLedger
from js_codemods.core.rewriter.context import RewriterContext
from js_codemods.core.tree import SourceTree


class RewriterPass(ABC):
  """
  Abstract contract for a transformation pass in the rewriting pipeline.
  """

  #: Label used in debug logs.
  name: str = "pass"

  @abstractmethod
  def transform(self, tree: SourceTree, context: RewriterContext, ledger: UsageLedger) -> UsageLedger:
    """
    Executes the transformation on `tree`, mutating it in place.

    Args:
        tree: The module being rewritten.
        context: Shared configuration for this module run.
        ledger: Symbol usage recorded by earlier passes.

    Returns:
        UsageLedger: The ledger for the next pass.

    Raises:
        MalformedUsageError: If a matched call cannot be translated.
    """
    pass

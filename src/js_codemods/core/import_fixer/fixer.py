"""
Import Fixer Pass.

The last pass of the addons migration: consumes the usage ledger, writes the
imports it calls for, and hands back an empty ledger.
"""

from js_codemods.core.import_fixer.injection import synthesize_imports
from js_codemods.core.ledger import UsageLedger
from js_codemods.core.rewriter.context import RewriterContext
from js_codemods.core.rewriter.interface import RewriterPass
from js_codemods.core.tree import SourceTree


class ImportFixer(RewriterPass):
  """
  Emits one top-level default import per tracked symbol still in use.
  """

  name = "import-synthesis"

  def transform(self, tree: SourceTree, context: RewriterContext, ledger: UsageLedger) -> UsageLedger:
    config = context.config
    synthesize_imports(
      tree,
      ledger,
      context.symbols,
      framework=config.framework,
      pragmas=config.pragmas,
      quote=context.quote,
    )
    return UsageLedger()

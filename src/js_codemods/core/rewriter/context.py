"""
Rewriter Context Module.

`RewriterContext` holds the read-only inputs every pass of one module run
shares: the runtime configuration, the tracked symbol table and the module
path used in error messages. Mutable per-module state lives elsewhere: the
tree in `SourceTree`, symbol usage in the `UsageLedger` threaded between
passes.
"""

from typing import Optional

from js_codemods.config import RuntimeConfig
from js_codemods.core.symbols import REACT_ADDONS, SymbolTable
from js_codemods.enums import QuoteStyle


class RewriterContext:
  """
  Shared configuration for the passes of a single module run.
  """

  def __init__(
    self,
    config: Optional[RuntimeConfig] = None,
    symbols: Optional[SymbolTable] = None,
    path: Optional[str] = None,
  ) -> None:
    """
    Args:
        config: Runtime configuration (defaults apply when omitted).
        symbols: Tracked symbol table for the migration passes.
        path: Identifier of the module, reported in fatal errors.
    """
    self.config = config or RuntimeConfig()
    self.symbols = symbols if symbols is not None else REACT_ADDONS
    self.path = path

  @property
  def quote(self) -> QuoteStyle:
    return self.config.quote

"""
Import Insertion Point and Synthesis.

Chooses where new top-level imports go with a single forward scan of the
module body, and emits one default import per tracked symbol still recorded
as used, unless the module already imports that symbol's canonical source.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ast_grep_py import SgNode

from js_codemods.core.builders import default_import
from js_codemods.core.classifier import import_source, is_directive, is_kind
from js_codemods.core.ledger import UsageLedger
from js_codemods.core.symbols import SymbolTable
from js_codemods.core.tree import SourceTree
from js_codemods.enums import NodeKind, QuoteStyle

logger = logging.getLogger(__name__)


@dataclass
class InsertionScan:
  """
  Outcome of the insertion-point scan.

  Attributes:
      done: Index of the first statement that fixes placement (framework
          import or an existing canonical import).
      last_react_like: Index of the last framework-like import or legacy
          pragma seen before placement was fixed.
      pending: Symbols that still need an import, in symbol table order.
  """

  done: Optional[int] = None
  last_react_like: Optional[int] = None
  pending: List[str] = field(default_factory=list)

  @property
  def anchor(self) -> Optional[int]:
    """Statement index new imports go after; None means the top of the module."""
    return self.done if self.done is not None else self.last_react_like


def scan_insertion_point(
  statements: Sequence[SgNode],
  pending: Sequence[str],
  symbols: SymbolTable,
  framework: str,
  pragmas: Sequence[str],
) -> InsertionScan:
  """
  Scans top-level statements once to place new imports and drop satisfied symbols.

  Args:
      statements: Top-level statements in order.
      pending: Used symbols awaiting an import.
      symbols: Tracked symbol table.
      framework: Main framework module name (``react``).
      pragmas: Legacy directive strings treated like framework-like imports.

  Returns:
      InsertionScan: Placement indices and the symbols still pending.
  """
  scan = InsertionScan(pending=list(pending))
  framework_key = framework.lower()

  for idx, stmt in enumerate(statements):
    if is_kind(stmt, NodeKind.IMPORT_STATEMENT):
      source = import_source(stmt) or ""
      satisfied = symbols.symbol_for(source)

      if satisfied is not None:
        if satisfied in scan.pending:
          scan.pending.remove(satisfied)
        if scan.done is None:
          scan.done = idx
        continue

      source_key = source.lower()
      if source_key == framework_key:
        if scan.done is None:
          scan.done = idx
      elif framework_key in source_key and scan.done is None:
        scan.last_react_like = idx

    elif is_directive(stmt, pragmas) and scan.done is None:
      scan.last_react_like = idx

  return scan


def synthesize_imports(
  tree: SourceTree,
  ledger: UsageLedger,
  symbols: SymbolTable,
  framework: str,
  pragmas: Sequence[str],
  quote: QuoteStyle = QuoteStyle.SINGLE,
) -> List[str]:
  """
  Inserts a default import for every used symbol not already imported.

  Args:
      tree: The module being rewritten.
      ledger: Final usage ledger.
      symbols: Tracked symbol table.
      framework: Main framework module name.
      pragmas: Legacy directive strings.
      quote: Quote style for module paths.

  Returns:
      List[str]: Names of the symbols an import was added for.
  """
  used = [name for name in symbols if ledger.is_used(name)]
  if not used:
    return []

  statements = tree.statements()
  scan = scan_insertion_point(statements, used, symbols, framework, pragmas)
  if not scan.pending:
    return []

  block = "\n".join(default_import(name, symbols.source_for(name), quote) for name in scan.pending)
  anchor = scan.anchor

  if anchor is not None:
    target = statements[anchor]
    tree.commit([target.replace(f"{target.text()}\n{block}")])
  elif statements:
    target = statements[0]
    tree.commit([target.replace(f"{block}\n{target.text()}")])
  else:
    tree.replace_code(f"{block}\n{tree.code}")

  logger.debug("Added imports for %s", scan.pending)
  return scan.pending

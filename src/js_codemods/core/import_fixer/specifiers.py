"""
Named Import Specifier Stripping.

Removes named specifiers (``{ addons }``, ``{ exists }``) from import
statements, rebuilding each statement from what remains and deleting a
statement left importing nothing.
"""

import logging
from typing import Iterable, Optional

from ast_grep_py import SgNode

from js_codemods.core.builders import import_without
from js_codemods.core.classifier import import_source, import_specifiers, imported_name
from js_codemods.core.tree import DELETE, UNCHANGED, MatchResult, Replace, SourceTree, apply_rule
from js_codemods.enums import NodeKind, QuoteStyle

logger = logging.getLogger(__name__)


def strip_specifiers(
  tree: SourceTree,
  names: Iterable[str],
  quote: QuoteStyle = QuoteStyle.SINGLE,
  source: Optional[str] = None,
) -> int:
  """
  Strips named import specifiers for `names` from every import statement.

  Args:
      tree: The module being rewritten.
      names: Exported names whose specifiers are removed.
      quote: Quote style for rebuilt module paths.
      source: When given, only statements importing from exactly this path are touched.

  Returns:
      int: Number of import statements that contained one of `names`.
  """
  wanted = frozenset(names)

  def rule(node: SgNode) -> MatchResult:
    if source is not None and import_source(node) != source:
      return UNCHANGED

    specifiers = import_specifiers(node)
    keep = [spec for spec in specifiers if imported_name(spec) not in wanted]
    if len(keep) == len(specifiers):
      return UNCHANGED

    rebuilt = import_without(node, keep, quote)
    if rebuilt is None:
      return DELETE
    return Replace(rebuilt)

  count = apply_rule(tree, NodeKind.IMPORT_STATEMENT, rule)
  if count:
    logger.debug("Stripped %s from %d import statement(s)", sorted(wanted), count)
  return count

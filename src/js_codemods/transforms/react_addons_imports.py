"""
``react-addons-imports``: migrate ``React.addons`` usages to per-addon imports.
"""

from typing import List

from js_codemods.core.import_fixer import ImportFixer
from js_codemods.core.rewriter.context import RewriterContext
from js_codemods.core.rewriter.interface import RewriterPass
from js_codemods.core.rewriter.passes import (
  AggregatorSpecifierPass,
  DeclarationPruningPass,
  NestedReferencePass,
)
from js_codemods.transforms.base import Transform, register_transform


@register_transform("react-addons-imports")
class ReactAddonsImports(Transform):
  description = "Replace React.addons access with direct react-addons-* imports"

  def passes(self, context: RewriterContext) -> List[RewriterPass]:
    return [
      AggregatorSpecifierPass(),
      DeclarationPruningPass(),
      NestedReferencePass(jsx=False),
      NestedReferencePass(jsx=True),
      ImportFixer(),
    ]

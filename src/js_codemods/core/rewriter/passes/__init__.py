"""
Concrete rewriter passes.
"""

from js_codemods.core.rewriter.passes.addons import (
  AggregatorSpecifierPass,
  DeclarationPruningPass,
  NestedReferencePass,
)
from js_codemods.core.rewriter.passes.array_includes import IndexOfToIncludesPass
from js_codemods.core.rewriter.passes.null_check import NullHelperRemovalPass

__all__ = [
  "AggregatorSpecifierPass",
  "DeclarationPruningPass",
  "IndexOfToIncludesPass",
  "NestedReferencePass",
  "NullHelperRemovalPass",
]

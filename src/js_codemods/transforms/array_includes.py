"""
``array-includes``: ``Array#indexOf`` comparisons to ``Array#includes``.
"""

from typing import List

from js_codemods.core.rewriter.context import RewriterContext
from js_codemods.core.rewriter.interface import RewriterPass
from js_codemods.core.rewriter.passes import IndexOfToIncludesPass
from js_codemods.transforms.base import Transform, register_transform


@register_transform("array-includes")
class ArrayIncludes(Transform):
  description = "Rewrite indexOf comparisons against 0 / -1 as includes() calls"

  def passes(self, context: RewriterContext) -> List[RewriterPass]:
    return [IndexOfToIncludesPass()]

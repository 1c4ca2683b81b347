"""
``remove-exists``: replace the ``exists`` helper with ``null`` comparisons.
"""

from typing import List

from js_codemods.core.rewriter.context import RewriterContext
from js_codemods.core.rewriter.interface import RewriterPass
from js_codemods.core.rewriter.passes import NullHelperRemovalPass
from js_codemods.transforms.base import Transform, register_transform


@register_transform("remove-exists")
class RemoveExists(Transform):
  description = "Replace exists(x) helper calls with x != null / x == null"

  def passes(self, context: RewriterContext) -> List[RewriterPass]:
    return [NullHelperRemovalPass()]

"""
Rewriter package: pass interface, shared context and pipeline driver.
"""

from js_codemods.core.rewriter.context import RewriterContext
from js_codemods.core.rewriter.interface import RewriterPass
from js_codemods.core.rewriter.pipeline import RewriterPipeline

__all__ = ["RewriterContext", "RewriterPass", "RewriterPipeline"]

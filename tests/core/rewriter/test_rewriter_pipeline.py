"""
Tests for the Rewriter Pipeline Infrastructure.
"""

import pytest
from unittest.mock import MagicMock

from js_codemods.core.ledger import UsageLedger
from js_codemods.core.rewriter.context import RewriterContext
from js_codemods.core.rewriter.interface import RewriterPass
from js_codemods.core.rewriter.pipeline import RewriterPipeline
from js_codemods.core.tree import parse


class MockPass(RewriterPass):
  """Simple pass that appends a comment and records its label."""

  def __init__(self, label: str) -> None:
    self.label = label
    self.name = f"mock-{label}"

  def transform(self, tree, context, ledger):
    tree.replace_code(f"{tree.code}// Pass: {self.label}\n")
    return ledger.mark(self.label)


def test_pipeline_execution_sequence() -> None:
  """
  Verify that passes are executed in the order provided.
  """
  ctx = MagicMock(spec=RewriterContext)
  ctx.path = "m.js"
  pipeline = RewriterPipeline([MockPass("A"), MockPass("B")])
  tree = parse("x = 1;\n")

  ledger = pipeline.run(tree, ctx)

  assert tree.code == "x = 1;\n// Pass: A\n// Pass: B\n"
  assert list(ledger.used()) == ["A", "B"]


def test_pipeline_threads_initial_ledger() -> None:
  start = UsageLedger().mark("Perf")
  ledger = RewriterPipeline([MockPass("A")]).run(parse("x;"), RewriterContext(), start)
  assert list(ledger.used()) == ["Perf", "A"]


def test_pipeline_empty() -> None:
  """
  Verify pipeline works with no passes (Identity).
  """
  tree = parse("x = 1;")
  ledger = RewriterPipeline([]).run(tree, RewriterContext())
  assert tree.code == "x = 1;"
  assert len(ledger) == 0


def test_interface_enforcement() -> None:
  """
  Verify that RewriterPass cannot be instantiated without transform().
  """

  class BrokenPass(RewriterPass):
    pass

  with pytest.raises(TypeError):
    BrokenPass()


def test_context_defaults() -> None:
  ctx = RewriterContext()
  assert ctx.config.helper_name == "exists"
  assert "Perf" in ctx.symbols
  assert ctx.quote.char == "'"

"""
Orchestration Engine for Codemod Runs.

`CodemodEngine` drives one transform over one module at a time:

1.  **Parse**: module text -> `SourceTree` in the configured dialect.
2.  **Rewrite**: the transform's passes run in order through a
    `RewriterPipeline`, threading a fresh `UsageLedger`.
3.  **Print**: the tree is printed back to text.

A fatal `CodemodError` aborts the module. `rewrite` lets it propagate;
`run` reports it in a failed `ConversionResult` with the input unchanged.
"""

import logging
from typing import Optional, Union

from js_codemods.config import RuntimeConfig
from js_codemods.core.conversion_result import ConversionResult
from js_codemods.core.errors import CodemodError
from js_codemods.core.rewriter.context import RewriterContext
from js_codemods.core.rewriter.pipeline import RewriterPipeline
from js_codemods.core.symbols import SymbolTable
from js_codemods.core.tree import SourceTree, parse, print_tree
from js_codemods.transforms import Transform, available_transforms, get_transform

logger = logging.getLogger(__name__)


class CodemodEngine:
  """
  Applies a single registered transform to module sources.

  The engine holds configuration only; every call builds its own tree and
  ledger, so one engine can serve any number of modules.
  """

  def __init__(
    self,
    transform: Union[str, Transform],
    config: Optional[RuntimeConfig] = None,
    symbols: Optional[SymbolTable] = None,
  ) -> None:
    """
    Args:
        transform: Registered transform name (e.g. 'array-includes') or instance.
        config: Runtime configuration. Defaults are used when omitted.
        symbols: Tracked symbol table override for migration transforms.

    Raises:
        ValueError: If `transform` names no registered transform.
    """
    if isinstance(transform, Transform):
      self.transform = transform
    else:
      resolved = get_transform(transform)
      if resolved is None:
        raise ValueError(f"Unknown transform: '{transform}'. Available transforms: {available_transforms()}")
      self.transform = resolved

    self.config = config or RuntimeConfig()
    self.symbols = symbols

  def parse(self, code: str, path: Optional[str] = None) -> SourceTree:
    """
    Parses module text with the configured dialect.

    Raises:
        ParseError: If the source does not parse cleanly.
    """
    return parse(code, dialect=self.config.parser, path=path)

  def to_source(self, tree: SourceTree) -> str:
    return print_tree(tree)

  def rewrite(self, code: str, path: Optional[str] = None) -> str:
    """
    Runs the transform over one module.

    Args:
        code: Module source text.
        path: Module identifier for error messages.

    Returns:
        str: The rewritten source.

    Raises:
        CodemodError: On unparsable input or malformed usage of a matched call.
    """
    tree = self.parse(code, path)
    context = RewriterContext(config=self.config, symbols=self.symbols, path=path)
    pipeline = RewriterPipeline(self.transform.passes(context))
    pipeline.run(tree, context)
    return self.to_source(tree)

  def run(self, code: str, path: Optional[str] = None) -> ConversionResult:
    """
    Runs the transform, reporting fatal errors instead of raising them.

    Args:
        code: Module source text.
        path: Module identifier for error messages.

    Returns:
        ConversionResult: The rewritten code, or the input with the error on failure.
    """
    try:
      output = self.rewrite(code, path)
    except CodemodError as e:
      logger.debug("%s failed on %s: %s", self.transform.name, path or "<module>", e)
      return ConversionResult(
        code=code,
        errors=[str(e)],
        success=False,
        path=path,
        transform=self.transform.name,
      )

    return ConversionResult(
      code=output,
      path=path,
      transform=self.transform.name,
      changed=output != code,
    )

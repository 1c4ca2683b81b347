"""
Transform Registry.

A transform is a named, ordered list of rewriter passes. Transforms register
themselves with `@register_transform(name)` when their module is imported.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

from js_codemods.core.rewriter.context import RewriterContext
from js_codemods.core.rewriter.interface import RewriterPass

_TRANSFORM_REGISTRY: Dict[str, Type["Transform"]] = {}


class Transform(ABC):
  """
  A codemod: the passes to run over one module, in order.
  """

  name: str = ""
  description: str = ""

  @abstractmethod
  def passes(self, context: RewriterContext) -> List[RewriterPass]:
    """
    Builds the pass sequence for one module run.

    Args:
        context: Shared configuration for the run.

    Returns:
        List[RewriterPass]: Passes in execution order.
    """
    pass


def register_transform(name: str):
  def wrapper(cls):
    cls.name = name
    _TRANSFORM_REGISTRY[name] = cls
    return cls

  return wrapper


def get_transform(name: str) -> Optional[Transform]:
  cls = _TRANSFORM_REGISTRY.get(name)
  if cls:
    return cls()
  return None


def available_transforms() -> List[str]:
  return sorted(_TRANSFORM_REGISTRY)

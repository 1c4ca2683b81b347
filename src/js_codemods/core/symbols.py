"""
Tracked Symbol Table.

A `SymbolTable` maps each tracked symbol name to the single module it should
be imported from, and back. Both directions are plain dict lookups; the
reverse direction is derived by inversion at construction time.
"""

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional


class SymbolTable:
  """
  Immutable bidirectional mapping between symbol names and canonical sources.

  Iteration yields names in the order of the forward mapping, which is also
  the order synthesized imports are emitted in.
  """

  def __init__(self, imports: Mapping[str, str]) -> None:
    """
    Args:
        imports: Forward mapping of symbol name to canonical import path.

    Raises:
        ValueError: If two symbols share a canonical import path.
    """
    forward: Dict[str, str] = dict(imports)
    reverse: Dict[str, str] = {}
    for name, source in forward.items():
      if source in reverse:
        raise ValueError(f"'{name}' and '{reverse[source]}' share the import path '{source}'")
      reverse[source] = name

    self._forward = MappingProxyType(forward)
    self._reverse = MappingProxyType(reverse)

  def __contains__(self, name: object) -> bool:
    return name in self._forward

  def __iter__(self) -> Iterator[str]:
    return iter(self._forward)

  def __len__(self) -> int:
    return len(self._forward)

  def source_for(self, name: str) -> str:
    """Canonical import path of `name` (KeyError if untracked)."""
    return self._forward[name]

  def symbol_for(self, source: str) -> Optional[str]:
    """Tracked symbol imported from `source`, if any."""
    return self._reverse.get(source)

  @property
  def imports(self) -> Mapping[str, str]:
    """Read-only view of the forward mapping."""
    return self._forward


# `update` (react-addons-update) is intentionally not migrated.
REACT_ADDONS = SymbolTable(
  {
    "PureRenderMixin": "react-addons-pure-render-mixin",
    "LinkedStateMixin": "react-addons-linked-state-mixin",
    "CSSTransitionGroup": "react-addons-css-transition-group",
    "shallowCompare": "react-addons-shallow-compare",
    "TransitionGroup": "react-addons-transition-group",
    "createFragment": "react-addons-create-fragment",
    "Perf": "react-addons-perf",
  }
)

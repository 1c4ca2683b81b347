"""
Usage Ledger.

Records which tracked symbols are still genuinely referenced once their
indirect access paths have been removed. Every pass receives the current
ledger and returns an updated one; a ledger is never modified after creation.
"""

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional


class UsageLedger:
  """
  Immutable mapping of tracked symbol name to "seen as used".
  """

  __slots__ = ("_used",)

  def __init__(self, used: Optional[Mapping[str, bool]] = None) -> None:
    self._used = MappingProxyType(dict(used or {}))

  def mark(self, name: str) -> "UsageLedger":
    """
    Returns a ledger that also records `name` as used.

    Args:
        name: Tracked symbol name.

    Returns:
        UsageLedger: `self` when already recorded, else a new ledger.
    """
    if self._used.get(name):
      return self
    return UsageLedger({**self._used, name: True})

  def mark_all(self, names: Iterable[str]) -> "UsageLedger":
    ledger = self
    for name in names:
      ledger = ledger.mark(name)
    return ledger

  def is_used(self, name: str) -> bool:
    return self._used.get(name, False)

  def used(self) -> Iterator[str]:
    """Names recorded as used, in insertion order."""
    return (name for name, flag in self._used.items() if flag)

  def __contains__(self, name: object) -> bool:
    return bool(self._used.get(name))

  def __len__(self) -> int:
    return sum(1 for _ in self.used())

  def __eq__(self, other: object) -> bool:
    if not isinstance(other, UsageLedger):
      return NotImplemented
    return dict(self._used) == dict(other._used)

  def __repr__(self) -> str:
    return f"UsageLedger({sorted(self.used())})"

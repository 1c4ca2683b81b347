"""
Error types raised by the rewrite engine.

Only two things can abort a module's pipeline: source the parser cannot read
cleanly, and a matched call whose argument count has no canonical
replacement. Everything else (for example a declaration that cannot be proven
dead) is a plain negative outcome and never raises.
"""

from typing import Optional


class CodemodError(Exception):
  """
  Base class for fatal, per-module codemod failures.

  Attributes:
      path: Identifier of the offending module (usually its file path).
  """

  def __init__(self, message: str, path: Optional[str] = None) -> None:
    super().__init__(message)
    self.path = path


class MalformedUsageError(CodemodError):
  """
  A call to a convertible method or helper does not carry exactly one argument.

  Attributes:
      construct: The method or helper name that was called incorrectly.
  """

  def __init__(self, construct: str, path: Optional[str] = None) -> None:
    self.construct = construct
    super().__init__(f"incorrect usage of '{construct}' in {path or '<unknown>'}", path=path)


class ParseError(CodemodError):
  """
  The module contains syntax the selected parser dialect cannot read.
  """

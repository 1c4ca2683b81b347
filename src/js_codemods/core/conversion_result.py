"""
Data structures representing the output of the rewrite pipeline.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ConversionResult(BaseModel):
  """
  Container for the result of running one transform over one module.
  """

  code: str = Field(default="", description="The rewritten source (the input, unchanged, on failure).")
  errors: List[str] = Field(default_factory=list, description="Fatal error messages, if any.")
  success: bool = Field(default=True, description="True if every pass completed.")
  path: Optional[str] = Field(default=None, description="Module identifier the run was for.")
  transform: str = Field(default="", description="Name of the transform that was applied.")
  changed: bool = Field(default=False, description="True if the output differs from the input.")

  @property
  def has_errors(self) -> bool:
    return len(self.errors) > 0

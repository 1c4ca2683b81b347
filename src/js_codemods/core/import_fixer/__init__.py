"""
Import Fixer Package.

1.  **Stripping**: removing named specifiers that no longer resolve.
2.  **Placement**: choosing where new top-level imports belong.
3.  **Synthesis**: emitting one default import per tracked symbol still in use.
"""

from js_codemods.core.import_fixer.fixer import ImportFixer
from js_codemods.core.import_fixer.injection import InsertionScan, scan_insertion_point, synthesize_imports
from js_codemods.core.import_fixer.specifiers import strip_specifiers

__all__ = [
  "ImportFixer",
  "InsertionScan",
  "scan_insertion_point",
  "strip_specifiers",
  "synthesize_imports",
]

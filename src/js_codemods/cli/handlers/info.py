"""
List Command Handler.
"""

from rich.console import Console
from rich.table import Table

from js_codemods.transforms import available_transforms, get_transform


def handle_list() -> int:
  """
  Prints the registered transforms and their descriptions to standard output.

  Returns:
      int: Exit code (always 0).
  """
  table = Table(title="Available Transforms")
  table.add_column("Name", style="cyan")
  table.add_column("Description")

  for name in available_transforms():
    table.add_row(name, get_transform(name).description)

  Console().print(table)
  return 0

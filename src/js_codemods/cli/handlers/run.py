"""
Run Command Handler.

Implements ``js-codemods run``: load configuration, apply one transform to
one source file, and write the result to a file or standard output.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from js_codemods.config import RuntimeConfig
from js_codemods.core.engine import CodemodEngine
from js_codemods.utils.console import log_error, log_info, log_success, log_warning

SOURCE_SUFFIXES = (".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx")


def handle_run(
  transform: str,
  input_path: Path,
  output_path: Optional[Path],
  parser: Optional[str],
  settings: Dict[str, Any],
) -> int:
  """
  Handles the 'run' command execution.

  Args:
      transform: Registered transform name.
      input_path: Source file to rewrite.
      output_path: Destination file. Standard output when None.
      parser: Parser dialect override.
      settings: Extra configuration overrides from ``--set``.

  Returns:
      int: Exit code (0 for success, 1 for failure).
  """
  if not input_path.is_file():
    log_error(f"Input not found: [path]{input_path}[/path]")
    return 1

  if input_path.suffix.lower() not in SOURCE_SUFFIXES:
    log_warning(f"[path]{input_path}[/path] does not look like a JavaScript module")

  try:
    config = RuntimeConfig.load(parser=parser, overrides=settings, search_path=input_path.parent)
    engine = CodemodEngine(transform, config=config)
  except ValueError as e:
    log_error(str(e))
    return 1

  with open(input_path, "rt", encoding="utf-8") as f:
    code = f.read()

  result = engine.run(code, path=str(input_path))
  if not result.success:
    for message in result.errors:
      log_error(message)
    return 1

  if output_path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "wt", encoding="utf-8") as f:
      f.write(result.code)
    log_success(f"{transform}: [path]{input_path}[/path] -> [path]{output_path}[/path]")
  else:
    print(result.code, end="")

  if not result.changed:
    log_info(f"No changes for [path]{input_path}[/path]")
  return 0

"""
CLI Command Handlers Facade.

Re-exports the handlers from `js_codemods.cli.handlers`.
"""

from js_codemods.cli.handlers.info import handle_list
from js_codemods.cli.handlers.run import handle_run

__all__ = ["handle_list", "handle_run"]

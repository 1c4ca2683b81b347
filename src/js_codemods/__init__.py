"""
js-codemods Package.

Deterministic source-to-source rewrites for JavaScript, TypeScript and JSX
modules. Each transform finds constructs that have a canonical, preferred
equivalent and replaces them with it:

* ``array-includes``: ``arr.indexOf(x) === -1`` -> ``!arr.includes(x)``
* ``remove-exists``: ``!exists(x)`` -> ``x == null``
* ``react-addons-imports``: ``<React.addons.CSSTransitionGroup>`` ->
  ``<CSSTransitionGroup>`` plus ``import CSSTransitionGroup from
  'react-addons-css-transition-group';``

Usage
-----

.. code-block:: python

    import js_codemods
    js_codemods.transform("if (arr.indexOf(x) >= 0) {}", "array-includes")
    # 'if (arr.includes(x)) {}'

Engine Usage
^^^^^^^^^^^^

.. code-block:: python

    from js_codemods import CodemodEngine, RuntimeConfig

    engine = CodemodEngine("remove-exists", RuntimeConfig(helper_path="app/utils"))
    res = engine.run(source, path="src/widget.js")
    if not res.success:
        print(res.errors)
"""

from typing import Any, Dict, Optional

from js_codemods.config import RuntimeConfig
from js_codemods.core.conversion_result import ConversionResult
from js_codemods.core.engine import CodemodEngine
from js_codemods.core.errors import CodemodError, MalformedUsageError, ParseError

__version__ = "0.0.1"


def transform(
  code: str,
  transform: str,
  path: Optional[str] = None,
  parser: Optional[str] = None,
  settings: Optional[Dict[str, Any]] = None,
) -> str:
  """
  Applies a registered transform to a string of module source.

  Args:
      code (str): The module source.
      transform (str): Transform name (see ``js_codemods.transforms.available_transforms``).
      path (str, optional): Module identifier used in error messages.
      parser (str, optional): Parser dialect ('javascript', 'typescript', 'tsx').
      settings (dict, optional): Extra `RuntimeConfig` fields.

  Returns:
      str: The rewritten source.

  Raises:
      MalformedUsageError: If a matched call has the wrong number of arguments.
      ParseError: If the source cannot be parsed.
      ValueError: If the transform is unknown.
  """
  config_fields = dict(settings or {})
  if parser:
    config_fields["parser"] = parser
  engine = CodemodEngine(transform, config=RuntimeConfig(**config_fields))
  return engine.rewrite(code, path=path)


__all__ = [
  "CodemodEngine",
  "CodemodError",
  "ConversionResult",
  "MalformedUsageError",
  "ParseError",
  "RuntimeConfig",
  "transform",
  "__version__",
]

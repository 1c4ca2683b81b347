"""
Tests for import placement and synthesis.
"""

import pytest

from js_codemods.core.import_fixer.injection import InsertionScan, scan_insertion_point, synthesize_imports
from js_codemods.core.ledger import UsageLedger
from js_codemods.core.symbols import REACT_ADDONS
from js_codemods.core.tree import parse

PRAGMAS = ["use es6", "use strict"]


def _scan(code, pending):
  tree = parse(code)
  return scan_insertion_point(tree.statements(), pending, REACT_ADDONS, "react", PRAGMAS)


@pytest.mark.parametrize(
  "code, anchor",
  [
    ("foo();\n", None),
    ("'use strict';\nfoo();\n", 0),
    ("import a from 'a';\nimport React from 'react';\n", 1),
    ("import React from 'React';\n", 0),
    ("import Dom from 'react-dom';\nfoo();\n", 0),
    ("import React from 'react';\nimport Dom from 'react-dom';\n", 0),
    ("'use es6';\nimport Dom from 'react-dom';\nfoo();\n", 1),
    ("import Perf from 'react-addons-perf';\nimport React from 'react';\n", 0),
  ],
)
def test_anchor(code, anchor):
  assert _scan(code, ["Perf"]).anchor == anchor


def test_existing_imports_satisfy_pending_after_done():
  scan = _scan(
    "import React from 'react';\nimport Perf from 'react-addons-perf';\n",
    ["Perf", "TransitionGroup"],
  )
  assert scan.done == 0
  assert scan.pending == ["TransitionGroup"]


def test_anchor_prefers_done():
  assert InsertionScan(done=3, last_react_like=1).anchor == 3
  assert InsertionScan(last_react_like=1).anchor == 1
  assert InsertionScan().anchor is None


def test_synthesis_in_symbol_table_order():
  tree = parse("import React from 'react';\nx();\n")
  ledger = UsageLedger().mark("Perf").mark("PureRenderMixin")
  added = synthesize_imports(tree, ledger, REACT_ADDONS, "react", PRAGMAS)

  assert added == ["PureRenderMixin", "Perf"]
  assert tree.code == (
    "import React from 'react';\n"
    "import PureRenderMixin from 'react-addons-pure-render-mixin';\n"
    "import Perf from 'react-addons-perf';\n"
    "x();\n"
  )


def test_synthesis_empty_ledger():
  tree = parse("x();\n")
  assert synthesize_imports(tree, UsageLedger(), REACT_ADDONS, "react", PRAGMAS) == []
  assert tree.code == "x();\n"


def test_synthesis_empty_module():
  tree = parse("")
  synthesize_imports(tree, UsageLedger().mark("Perf"), REACT_ADDONS, "react", PRAGMAS)
  assert tree.code == "import Perf from 'react-addons-perf';\n"


def test_synthesis_after_leading_comment():
  tree = parse("// header\nx();\n")
  synthesize_imports(tree, UsageLedger().mark("Perf"), REACT_ADDONS, "react", PRAGMAS)
  assert tree.code == "// header\nimport Perf from 'react-addons-perf';\nx();\n"

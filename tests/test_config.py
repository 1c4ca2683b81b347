"""
Tests for RuntimeConfig loading and validation.
"""

import pytest
from pydantic import ValidationError

from js_codemods.config import RuntimeConfig, parse_cli_key_values
from js_codemods.enums import Dialect, QuoteStyle


def test_defaults():
  cfg = RuntimeConfig()
  assert cfg.parser is Dialect.TSX
  assert cfg.quote is QuoteStyle.SINGLE
  assert cfg.helper_name == "exists"
  assert cfg.helper_path == "DashboardUI/lib/utils"
  assert cfg.framework == "react"
  assert cfg.aggregator == "addons"
  assert cfg.pragmas == ["use es6", "use strict"]


def test_parser_is_case_insensitive():
  assert RuntimeConfig(parser=" TypeScript ").parser is Dialect.TYPESCRIPT
  with pytest.raises(ValidationError, match="Unknown parser dialect"):
    RuntimeConfig(parser="flow")


def test_empty_names_rejected():
  with pytest.raises(ValidationError):
    RuntimeConfig(helper_name="  ")


def test_single_pragma_becomes_list():
  assert RuntimeConfig(pragmas="use client").pragmas == ["use client"]


def test_load_from_pyproject(tmp_path):
  (tmp_path / "pyproject.toml").write_text(
    '[tool.js_codemods]\nquote = "double"\nhelper_path = "app/utils"\n', encoding="utf-8"
  )
  nested = tmp_path / "src" / "components"
  nested.mkdir(parents=True)

  cfg = RuntimeConfig.load(search_path=nested)
  assert cfg.quote is QuoteStyle.DOUBLE
  assert cfg.helper_path == "app/utils"


def test_explicit_values_override_toml(tmp_path):
  (tmp_path / "pyproject.toml").write_text('[tool.js_codemods]\nparser = "javascript"\nframework = "preact"\n')

  cfg = RuntimeConfig.load(parser="typescript", overrides={"framework": "react"}, search_path=tmp_path)
  assert cfg.parser is Dialect.TYPESCRIPT
  assert cfg.framework == "react"


def test_pyproject_without_section_is_skipped(tmp_path):
  (tmp_path / "pyproject.toml").write_text('[tool.other]\nx = 1\n')
  cfg = RuntimeConfig.load(search_path=tmp_path)
  assert cfg.helper_name == "exists"


def test_parse_cli_key_values():
  parsed = parse_cli_key_values(["helper-name=has", "pragmas=use strict, use client", "quote=double"])
  assert parsed == {"helper_name": "has", "pragmas": ["use strict", "use client"], "quote": "double"}
  assert parse_cli_key_values(None) == {}

  with pytest.raises(ValueError, match="key=value"):
    parse_cli_key_values(["oops"])

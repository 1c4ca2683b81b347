"""
Tests for the CLI entry point and command handlers.
"""

from unittest.mock import patch

import pytest

from js_codemods.cli.__main__ import main


def test_run_dispatch():
  with patch("js_codemods.cli.commands.handle_run", return_value=0) as mock_run:
    assert main(["run", "array-includes", "a.js", "--parser", "javascript", "--set", "quote=double"]) == 0

  args = mock_run.call_args[0]
  assert args[0] == "array-includes"
  assert str(args[1]) == "a.js"
  assert args[2] is None
  assert args[3] == "javascript"
  assert args[4] == {"quote": "double"}


def test_bad_setting_exits_with_usage_code():
  with patch("js_codemods.cli.commands.handle_run") as mock_run:
    assert main(["run", "array-includes", "a.js", "--set", "oops"]) == 2
  mock_run.assert_not_called()


def test_unknown_transform_rejected():
  with pytest.raises(SystemExit):
    main(["run", "nope", "a.js"])


def test_list_prints_to_stdout(capsys, captured_console):
  assert main(["list"]) == 0
  text = capsys.readouterr().out
  assert "array-includes" in text
  assert "react-addons-imports" in text
  assert "remove-exists" in text
  assert "array-includes" not in captured_console.export_text()


def test_run_writes_output(tmp_path, captured_console):
  src = tmp_path / "a.js"
  src.write_text("if (arr.indexOf(x) === -1) {}\n", encoding="utf-8")
  out = tmp_path / "build" / "a.js"

  assert main(["run", "array-includes", str(src), "--out", str(out)]) == 0
  assert out.read_text(encoding="utf-8") == "if (!arr.includes(x)) {}\n"
  assert "array-includes" in captured_console.export_text()


def test_run_prints_to_stdout(tmp_path, capsys, captured_console):
  src = tmp_path / "a.js"
  src.write_text("a.indexOf(b) >= 0;\n", encoding="utf-8")

  assert main(["run", "array-includes", str(src)]) == 0
  assert capsys.readouterr().out == "a.includes(b);\n"


def test_run_reports_failures(tmp_path, captured_console):
  src = tmp_path / "a.js"
  src.write_text("a.indexOf(b, 1) >= 0;\n", encoding="utf-8")
  out = tmp_path / "out.js"

  assert main(["run", "array-includes", str(src), "--out", str(out)]) == 1
  assert not out.exists()
  assert "incorrect usage of 'indexOf'" in captured_console.export_text()


def test_run_missing_file(tmp_path, captured_console):
  assert main(["run", "array-includes", str(tmp_path / "missing.js")]) == 1
  assert "Input not found" in captured_console.export_text()


def test_run_warns_on_unexpected_suffix(tmp_path, captured_console):
  src = tmp_path / "notes.txt"
  src.write_text("a.indexOf(b) >= 0;\n", encoding="utf-8")

  assert main(["run", "array-includes", str(src), "--out", str(tmp_path / "out.js")]) == 0
  assert "does not look like a JavaScript module" in captured_console.export_text()

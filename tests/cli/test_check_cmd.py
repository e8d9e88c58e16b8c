"""
Tests for the CLI 'check' Command.

Verifies that:
1. Argument parsing maps flags to configuration overrides.
2. Exit codes distinguish clean files, violations and errors.
3. JSON mode prints a machine-readable report.
4. Directories are scanned recursively for Java files.
"""

import json
from unittest.mock import patch

import pytest
from rich.console import Console

from import_order.cli.__main__ import main
from import_order.cli.handlers.check import collect_files, handle_check
from import_order.utils.console import set_console

GOOD = """package demo;

import java.util.List;

import org.junit.Test;

class Good {}
"""

BAD = """package demo;

import org.junit.Test;
import java.util.List;

class Bad {}
"""


@pytest.fixture
def project(tmp_path):
  """A tiny source tree with one clean and one offending file."""
  src = tmp_path / "src" / "demo"
  src.mkdir(parents=True)
  (src / "Good.java").write_text(GOOD, encoding="utf-8")
  (src / "Bad.java").write_text(BAD, encoding="utf-8")
  (src / "notes.txt").write_text("import not.Java;", encoding="utf-8")
  return tmp_path


@pytest.fixture
def recorded():
  """Captures console output without line wrapping."""
  capture = Console(record=True, width=500, force_terminal=False)
  set_console(capture)
  return capture


@patch("import_order.cli.commands.handle_check")
def test_flags_become_overrides(mock_handle):
  mock_handle.return_value = 0
  main(["check", "src/", "--groups", "java,org", "--policy", "top", "--separated", "--case-insensitive"])

  mock_handle.assert_called_once()
  path, overrides, json_mode = mock_handle.call_args[0]
  assert str(path) == "src"
  assert overrides["groups"] == "java,org"
  assert overrides["static_import_policy"] == "top"
  assert overrides["separated"] is True
  assert overrides["case_sensitive"] is False
  assert overrides["ordered"] is None  # not given -> config file decides
  assert json_mode is False


@patch("import_order.cli.commands.handle_check")
def test_option_key_values_are_merged(mock_handle):
  mock_handle.return_value = 0
  main(["check", "src/", "--option", "blame_individual_imports=false"])
  overrides = mock_handle.call_args[0][1]
  assert overrides["blame_individual_imports"] is False


def test_bad_option_format_is_an_error():
  assert main(["check", "src/", "--option", "separated"]) == 2


def test_collect_files(project):
  files = collect_files(project)
  assert [f.name for f in files] == ["Bad.java", "Good.java"]
  single = project / "src" / "demo" / "Good.java"
  assert collect_files(single) == [single]


def test_clean_file_exits_zero(project, recorded):
  code = main(["check", str(project / "src" / "demo" / "Good.java"), "--groups", "java,org", "--separated"])
  assert code == 0
  assert "clean" in recorded.export_text()


def test_violations_exit_one_and_are_printed(project, recorded):
  code = main(["check", str(project), "--groups", "java,org"])
  out = recorded.export_text()
  assert code == 1
  assert "Bad.java" in out
  assert "Bad.java:4: Wrong order for 'java.util.List' import." in out
  assert "Good.java" not in out.split("Import Order Summary")[0]


def test_json_report(project, capsys):
  code = handle_check(project, {"groups": "java,org", "print_desired_order": True}, json_mode=True)
  report = json.loads(capsys.readouterr().out)

  assert code == 1
  assert [entry["key"] for entry in report] == ["import.ordering", "import.desired.order"]
  assert report[0]["file"].endswith("Bad.java")
  assert report[0]["line"] == 4
  assert report[1]["line"] == 3
  assert report[1]["args"] == ["import java.util.List;\nimport org.junit.Test;\n"]


def test_missing_path_exits_two(tmp_path):
  assert handle_check(tmp_path / "nope", {}) == 2


def test_invalid_group_exits_two(project, recorded):
  assert main(["check", str(project), "--groups", "java,/unclosed"]) == 2
  assert "Invalid configuration" in recorded.export_text()


def test_pyproject_settings_apply(project, capsys):
  (project / "pyproject.toml").write_text(
    '[tool.import_order]\ngroups = ["java", "org"]\nseparated = true\n', encoding="utf-8"
  )
  code = handle_check(project / "src", {}, json_mode=True)
  report = json.loads(capsys.readouterr().out)
  assert code == 1
  assert {entry["key"] for entry in report} == {"import.ordering"}

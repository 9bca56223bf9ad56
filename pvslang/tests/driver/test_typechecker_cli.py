# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import json
from pathlib import Path

import pytest

from pvslang.typechecker import typechecker as typechecker_module
from pvslang.typechecker.config import RunConfig
from pvslang.typechecker.index import MalformedDeclarationError
from pvslang.typechecker.parser import SyntaxNode
from pvslang.typechecker.typechecker import main as typecheck_main
from pvslang.typechecker.typechecker import run_typechecker, typecheck_source

_CLEAN = """\
sets: THEORY
BEGIN
  a, b, c: TYPE = nat
  color: TYPE = {red, green, blue}
  x: VAR nat
  zero_ax: AXIOM FORALL (n: nat): n >= 0
  add_comm: LEMMA
    FORALL (m, n: nat):
      m + n = n + m
END sets
"""

_BROKEN = """\
sets: THEORY
BEGIN
  a: TYPE = $
  b: TYPE
END sets
"""


def _write_file(path: Path, text: str) -> Path:
	path.parent.mkdir(parents=True, exist_ok=True)
	path.write_text(text, encoding="utf-8")
	return path


def _run_json(argv: list[str], capsys: pytest.CaptureFixture[str]) -> tuple[int, object]:
	rc = typecheck_main(argv)
	out = capsys.readouterr().out
	payload = json.loads(out) if out.strip() else None
	return rc, payload


def test_clean_file_reports_index(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	src = _write_file(tmp_path / "sets.pvs", _CLEAN)
	rc, payload = _run_json([str(src)], capsys)
	assert rc == 0
	assert set(payload) == {"typeDeclarations", "formulaDeclarations"}
	assert list(payload["typeDeclarations"]) == ["a", "b", "c", "color"]
	assert payload["typeDeclarations"]["b"] == {
		"line": 3,
		"character": 5,
		"identifier": "b",
		"declaration": "a, b, c: TYPE = nat",
	}
	assert list(payload["formulaDeclarations"]) == ["zero_ax", "add_comm"]
	assert payload["formulaDeclarations"]["add_comm"]["declaration"] == (
		"add_comm: LEMMA\n    FORALL (m, n: nat):\n      m + n = n + m"
	)


def test_syntax_errors_suppress_indexing(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	src = _write_file(tmp_path / "broken.pvs", _BROKEN)
	rc, payload = _run_json(["--json", str(src)], capsys)
	assert rc == 1
	assert isinstance(payload, list)
	assert len(payload) >= 2
	assert payload[0] == {
		"range": {"start": {"line": 3, "character": 12}, "end": {"line": 3, "character": 14}},
		"message": "token recognition error at: '$'",
		"severity": 1,
	}
	assert all(d["severity"] == 1 for d in payload)


def test_report_carries_no_index_on_errors() -> None:
	report = typecheck_source(_BROKEN)
	assert not report.ok
	assert report.index is None
	assert report.to_json() == [d.to_json() for d in report.diagnostics]


def test_missing_input_is_fatal(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	rc = typecheck_main([str(tmp_path / "nope.pvs")])
	captured = capsys.readouterr()
	assert rc == 2
	assert captured.out == ""
	assert "cannot read input" in captured.err
	with pytest.raises(FileNotFoundError):
		run_typechecker(RunConfig(source=tmp_path / "nope.pvs"))


def test_reports_are_identical_across_runs(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	src = _write_file(tmp_path / "sets.pvs", _CLEAN)
	assert typecheck_main([str(src)]) == 0
	first = capsys.readouterr().out
	assert typecheck_main([str(src)]) == 0
	second = capsys.readouterr().out
	assert first == second


def test_test_mode_prints_summary(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	src = _write_file(tmp_path / "sets.pvs", _CLEAN)
	rc = typecheck_main(["-test", str(src)])
	out = capsys.readouterr().out
	assert rc == 0
	lines = out.splitlines()
	assert lines[0] == f"Parsing file {src}"
	assert lines[1] == f"{src} parsed successfully!"
	assert lines[2] == "-" * 30
	assert lines[3] == "4 type declarations"
	assert "2 formula declarations" in lines
	assert any(line.startswith("zero_ax {") for line in lines)
	# Human mode only: no JSON report on stdout.
	assert not any(line.startswith("{\"typeDeclarations\"") for line in lines)


def test_test_mode_lists_syntax_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	src = _write_file(tmp_path / "broken.pvs", _BROKEN)
	rc = typecheck_main(["--test", str(src)])
	captured = capsys.readouterr()
	assert rc == 1
	assert captured.out.splitlines() == [f"Parsing file {src}"]
	assert f"{src}:3:12: error: token recognition error at: '$'" in captured.err


def test_duplicate_report_is_opt_in(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	src = _write_file(
		tmp_path / "dup.pvs",
		"dup: THEORY\nBEGIN\n  t: TYPE\n  t: TYPE+\n  ax: AXIOM TRUE\nEND dup\n",
	)
	rc, payload = _run_json([str(src)], capsys)
	assert rc == 0
	assert "duplicates" not in payload
	assert payload["typeDeclarations"]["t"]["declaration"] == "t: TYPE+"

	rc, payload = _run_json(["--report-duplicates", str(src)], capsys)
	assert rc == 0
	assert payload["typeDeclarations"]["t"]["declaration"] == "t: TYPE+"
	assert payload["duplicates"] == [
		{
			"range": {"start": {"line": 3, "character": 2}, "end": {"line": 3, "character": 3}},
			"message": "duplicate type declaration 't'",
			"severity": 2,
		}
	]


def test_crlf_source_keeps_exact_declaration_text(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	src = tmp_path / "crlf.pvs"
	src.write_bytes(b"crlf: THEORY\r\nBEGIN\r\n  t: TYPE\r\n  ax: LEMMA\r\n    TRUE\r\nEND crlf\r\n")
	rc, payload = _run_json([str(src)], capsys)
	assert rc == 0
	assert payload["formulaDeclarations"]["ax"] == {
		"line": 4,
		"character": 2,
		"identifier": "ax",
		"declaration": "ax: LEMMA\r\n    TRUE",
	}
	assert payload["typeDeclarations"]["t"]["line"] == 3


def test_undecodable_input_is_fatal(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
	src = tmp_path / "latin1.pvs"
	src.write_bytes(b"caf\xe9: THEORY\nBEGIN\nEND caf\xe9\n")
	rc = typecheck_main([str(src)])
	captured = capsys.readouterr()
	assert rc == 2
	assert captured.out == ""
	assert captured.err.startswith(f"{src}:?:?: error: cannot read input:")


def test_malformed_tree_is_fatal(
	tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
	def _malformed(root, tokens, index=None):
		raise MalformedDeclarationError(SyntaxNode(kind="formula_declaration"), "expected exactly one name, found 0")

	monkeypatch.setattr(typechecker_module, "index_declarations", _malformed)
	src = _write_file(tmp_path / "sets.pvs", _CLEAN)
	rc = typecheck_main([str(src)])
	captured = capsys.readouterr()
	assert rc == 2
	assert captured.out == ""
	assert f"{src}:?:?: error: internal: malformed 'formula_declaration' node" in captured.err

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-13
"""
PVS typechecker front end (declaration indexing only).

One run handles one source file:

source -> parse (syntax errors collected, never raised)
   -> errors?  report every diagnostic; the index is not built
   -> clean?   walk the tree once and report the declaration index

There is no partial indexing: a single syntax error anywhere in the file
suppresses the walk for that run. With --test, progress and a summary of the
index are printed for humans; otherwise the report is printed as JSON.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from pvslang.typechecker.config import RunConfig
from pvslang.typechecker.core.diagnostics import Diagnostic, DiagnosticSeverity, Position, Range
from pvslang.typechecker.core.span import EmptySpanError
from pvslang.typechecker.index.declarations import DeclarationIndex, DeclDescriptor
from pvslang.typechecker.index.walker import MalformedDeclarationError, index_declarations
from pvslang.typechecker.parser import parse_source

_RULE = "-" * 30


@dataclass
class TypecheckReport:
	"""
	Result of one run: either syntax diagnostics or a declaration index.

	`index` is None whenever `diagnostics` is non-empty. `duplicates` holds the
	optional duplicate-declaration warnings of a clean run.
	"""

	diagnostics: List[Diagnostic] = field(default_factory=list)
	index: Optional[DeclarationIndex] = None
	duplicates: List[Diagnostic] = field(default_factory=list)

	@property
	def ok(self) -> bool:
		return not self.diagnostics

	def to_json(self) -> object:
		if self.index is None:
			return [d.to_json() for d in self.diagnostics]
		payload = self.index.to_json()
		if self.duplicates:
			payload["duplicates"] = [d.to_json() for d in self.duplicates]
		return payload


def typecheck_source(source: str, config: Optional[RunConfig] = None) -> TypecheckReport:
	"""Run the parse/index policy on an in-memory PVS source string."""
	config = config or RunConfig()
	parsed = parse_source(source)
	if parsed.tree is None or parsed.tokens is None:
		return TypecheckReport(diagnostics=parsed.diagnostics)
	index = index_declarations(parsed.tree, parsed.tokens)
	duplicates = _duplicate_warnings(index) if config.report_duplicates else []
	return TypecheckReport(index=index, duplicates=duplicates)


def run_typechecker(config: RunConfig) -> TypecheckReport:
	"""
	Read `config.source` and typecheck it.

	The file is decoded as UTF-8 without newline translation, so declaration
	texts are exact slices of the file (CRLF line ends included). Raises
	OSError (e.g. FileNotFoundError) or UnicodeDecodeError before any parsing
	when the file cannot be read, and EmptySpanError or
	MalformedDeclarationError if the parse tree is malformed.
	"""
	if config.source is None:
		raise FileNotFoundError("no input file")
	source = Path(config.source).read_bytes().decode("utf-8")
	return typecheck_source(source, config)


def _duplicate_warnings(index: DeclarationIndex) -> List[Diagnostic]:
	warnings: List[Diagnostic] = []
	for kind, desc in index.shadowed:
		warnings.append(
			Diagnostic(
				range=Range(
					start=Position(line=desc.line, character=desc.character),
					end=Position(line=desc.line, character=desc.character + len(desc.identifier)),
				),
				message=f"duplicate {kind} declaration '{desc.identifier}'",
				severity=DiagnosticSeverity.Warning,
			)
		)
	return warnings


def _print_summary(index: DeclarationIndex) -> None:
	for label, table in (
		("type declarations", index.type_declarations),
		("formula declarations", index.formula_declarations),
	):
		print(_RULE)
		print(f"{len(table)} {label}")
		print(_RULE)
		for ident, desc in table.items():
			print(f"{ident} {_descriptor_json(desc)}")


def _descriptor_json(desc: DeclDescriptor) -> str:
	return json.dumps(desc.to_json())


def _print_diagnostics(source: Path, diagnostics: List[Diagnostic]) -> None:
	for d in diagnostics:
		start = d.range.start
		print(f"{source}:{start.line}:{start.character}: {d.severity.name.lower()}: {d.message}", file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="pvs-typecheck", description="Index the type and formula declarations of a PVS file")
	p.add_argument("source", type=Path, help="Path to the PVS source file")
	p.add_argument(
		"--test",
		"-test",
		dest="test",
		action="store_true",
		help="Print progress and a human-readable summary of the declaration index",
	)
	p.add_argument(
		"--json",
		action="store_true",
		help="Print the JSON report (default unless --test is given)",
	)
	p.add_argument(
		"--report-duplicates",
		action="store_true",
		help="Add warnings for declarations that are overwritten by a later one with the same name",
	)
	return p


def main(argv: list[str] | None = None) -> int:
	"""
	CLI entry point.

	Exit codes: 0 clean, 1 syntax errors, 2 fatal (unreadable input or a
	malformed parse tree).
	"""
	args = _build_parser().parse_args(argv)
	config = RunConfig.from_args(args)
	source_name = config.source

	if config.test_mode:
		print(f"Parsing file {source_name}")
	try:
		report = run_typechecker(config)
	except (OSError, UnicodeDecodeError) as err:
		print(f"{source_name}:?:?: error: cannot read input: {err}", file=sys.stderr)
		return 2
	except (EmptySpanError, MalformedDeclarationError) as err:
		print(f"{source_name}:?:?: error: internal: {err}", file=sys.stderr)
		return 2

	if report.index is None:
		if config.json:
			print(json.dumps(report.to_json()))
		if config.test_mode:
			_print_diagnostics(source_name, report.diagnostics)
		return 1

	if config.test_mode:
		print(f"{source_name} parsed successfully!")
		_print_summary(report.index)
		if report.duplicates:
			_print_diagnostics(source_name, report.duplicates)
	if config.json:
		print(json.dumps(report.to_json()))
	return 0


__all__ = ["TypecheckReport", "typecheck_source", "run_typechecker", "main"]

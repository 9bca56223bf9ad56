# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-12
"""
Diagnostics reported by the PVS front end.

The shape mirrors what language-server clients expect: a range made of two
positions (one-based line, zero-based character), a message and an integer
severity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List


class DiagnosticSeverity(IntEnum):
	Error = 1
	Warning = 2
	Information = 3
	Hint = 4


@dataclass(frozen=True)
class Position:
	line: int
	character: int

	def to_json(self) -> dict:
		return {"line": self.line, "character": self.character}


@dataclass(frozen=True)
class Range:
	start: Position
	end: Position

	def to_json(self) -> dict:
		return {"start": self.start.to_json(), "end": self.end.to_json()}


@dataclass(frozen=True)
class Diagnostic:
	"""Represents one front-end diagnostic (syntax error, duplicate warning, ...)."""

	range: Range
	message: str
	severity: DiagnosticSeverity = DiagnosticSeverity.Error

	def to_json(self) -> dict:
		return {
			"range": self.range.to_json(),
			"message": self.message,
			"severity": int(self.severity),
		}


@dataclass
class SyntaxErrorCollector:
	"""
	Accumulates syntax errors for a single parse attempt.

	Every reported error is kept, in the order the parser reports it; nothing is
	deduplicated and collection never stops early, so one pass shows all the
	syntax errors in a file.
	"""

	diagnostics: List[Diagnostic] = field(default_factory=list)

	def record_syntax_error(self, line: int, column: int, offending_token: str, message: str) -> Diagnostic:
		"""
		Record a syntax error at `line` (one-based) and `column` (zero-based).

		The end character is `column + 1 + len(offending_token)`. This is a
		fixed-width approximation rather than the real end of the token; clients
		already rely on it, so keep it.
		"""
		end = column + 1 + len(offending_token)
		diag = Diagnostic(
			range=Range(
				start=Position(line=line, character=column),
				end=Position(line=line, character=end),
			),
			message=message,
			severity=DiagnosticSeverity.Error,
		)
		self.diagnostics.append(diag)
		return diag

	def __len__(self) -> int:
		return len(self.diagnostics)

	def __bool__(self) -> bool:
		return bool(self.diagnostics)


__all__ = ["DiagnosticSeverity", "Position", "Range", "Diagnostic", "SyntaxErrorCollector"]

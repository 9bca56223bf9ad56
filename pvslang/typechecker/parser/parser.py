# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-12
"""
Lark front end for PVS theories.

`parse_source` lexes and parses a source string and returns the syntax tree,
its token stream and every syntax error found. The parser recovers after each
error (dropping the offending token or character) so a single pass reports
all of them; a tree is only built when no error was reported.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from lark import Lark, Token
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken
from lark.lexer import PatternStr

from pvslang.typechecker.core.diagnostics import Diagnostic, SyntaxErrorCollector
from pvslang.typechecker.parser.syntax import SyntaxNode, TokenStream, build_syntax_tree

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start="start",
	propagate_positions=True,
	maybe_placeholders=False,
	keep_all_tokens=True,
)

_EOF = "<EOF>"


@dataclass
class ParseResult:
	"""Outcome of one parse attempt; `tree`/`tokens` are None when `diagnostics` is non-empty."""

	tree: Optional[SyntaxNode] = None
	tokens: Optional[TokenStream] = None
	diagnostics: List[Diagnostic] = field(default_factory=list)

	@property
	def ok(self) -> bool:
		return not self.diagnostics


class _RecoveringErrorHandler:
	"""
	`on_error` hook for the LALR parser.

	Each error is forwarded to the collector; returning True lets lark drop the
	offending token (or character) and resume. At end of input there is
	nothing left to drop, so recovery stops there.
	"""

	def __init__(self, collector: SyntaxErrorCollector) -> None:
		self.collector = collector
		self.last_error: UnexpectedInput | None = None

	def __call__(self, err: UnexpectedInput) -> bool:
		self.record(err)
		if isinstance(err, UnexpectedToken):
			return err.token.type != "$END"
		return isinstance(err, UnexpectedCharacters)

	def record(self, err: UnexpectedInput) -> None:
		self.last_error = err
		if isinstance(err, UnexpectedToken):
			tok = err.token
			if tok.type == "$END":
				# $END borrows the position of the last real token; report the
				# error just past it, where the input actually ran out.
				line = tok.end_line if tok.end_line is not None else _int_or(err.line, 1)
				column = tok.end_column if tok.end_column is not None else _int_or(err.column, 1)
				self.collector.record_syntax_error(line, column - 1, "", _mismatched(f"'{_EOF}'", err.expected))
				return
			self.collector.record_syntax_error(
				_int_or(err.line, 1),
				_int_or(err.column, 1) - 1,
				str(tok),
				_mismatched(f"'{tok}'", err.expected),
			)
			return
		if isinstance(err, UnexpectedCharacters):
			self.collector.record_syntax_error(
				_int_or(err.line, 1),
				_int_or(err.column, 1) - 1,
				err.char,
				f"token recognition error at: '{err.char}'",
			)
			return
		self.collector.record_syntax_error(
			_int_or(getattr(err, "line", None), 1),
			_int_or(getattr(err, "column", None), 1) - 1,
			"",
			str(err),
		)


def _int_or(value: object, default: int) -> int:
	# lark uses '?' for positions it does not know.
	return value if isinstance(value, int) else default


def _mismatched(shown: str, expected: object) -> str:
	names = sorted(_describe_terminal(name) for name in (expected or ()))
	if not names:
		return f"mismatched input {shown}"
	return f"mismatched input {shown} expecting {{{', '.join(names)}}}"


def _describe_terminal(name: str) -> str:
	"""Render a terminal name the way users wrote it (`':'`, `'THEORY'`), or its name for patterns."""
	if name == "$END":
		return _EOF
	try:
		term = _PARSER.get_terminal(name)
	except KeyError:
		return name
	if isinstance(term.pattern, PatternStr):
		return f"'{term.pattern.value}'"
	return name


def parse_source(source: str) -> ParseResult:
	"""Parse PVS `source`, collecting syntax errors instead of raising them."""
	collector = SyntaxErrorCollector()
	handler = _RecoveringErrorHandler(collector)
	try:
		tree = _PARSER.parse(source, on_error=handler)
	except UnexpectedInput as err:
		# Recovery gave up. Lark re-raises the error the hook declined, which is
		# already recorded; anything else is new.
		if err is not handler.last_error:
			handler.record(err)
		return ParseResult(diagnostics=list(collector.diagnostics))
	if collector:
		return ParseResult(diagnostics=list(collector.diagnostics))
	root, tokens = build_syntax_tree(tree, source)
	return ParseResult(tree=root, tokens=tokens)


def tokenize(source: str) -> List[Token]:
	"""Lex `source` without parsing (whitespace and comments dropped)."""
	return list(_PARSER.lex(source))


__all__ = ["ParseResult", "parse_source", "tokenize"]

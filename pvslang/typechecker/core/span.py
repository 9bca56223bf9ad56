# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-12
"""
Source spans of syntax nodes.

A node's span runs from the first character of its first token through the
last character of its last token. Lines are one-based and characters
zero-based, matching the diagnostics module.
"""

from __future__ import annotations

from dataclasses import dataclass

from pvslang.typechecker.parser.syntax import SyntaxNode, TokenStream


class EmptySpanError(ValueError):
	"""
	A syntax node covers no tokens, so it has no source position or text.

	Raised instead of returning an empty string: a well-formed tree never
	contains such a node, so this points at a bug upstream of the caller.
	"""

	def __init__(self, node: SyntaxNode) -> None:
		super().__init__(f"syntax node '{node.kind}' covers no tokens")
		self.node = node


@dataclass(frozen=True)
class Span:
	"""Line/character range of a node plus its source offsets (end exclusive)."""

	line: int
	character: int
	end_line: int
	end_character: int
	start_offset: int
	end_offset: int


def node_span(node: SyntaxNode, tokens: TokenStream) -> Span:
	if node.start is None or node.stop is None:
		raise EmptySpanError(node)
	first = tokens[node.start]
	last = tokens[node.stop]
	# lark columns are one-based; end_column points one past the last character.
	return Span(
		line=first.line,
		character=first.column - 1,
		end_line=last.end_line,
		end_character=last.end_column - 1,
		start_offset=first.start_pos,
		end_offset=last.end_pos,
	)


def node_source(node: SyntaxNode, tokens: TokenStream) -> str:
	"""Exact source text of `node`, untrimmed, including inner whitespace and comments."""
	if node.start is None or node.stop is None:
		raise EmptySpanError(node)
	return tokens.text(node.start, node.stop)


__all__ = ["EmptySpanError", "Span", "node_span", "node_source"]

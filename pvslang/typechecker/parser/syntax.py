# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-12
"""
Parser-independent syntax tree consumed by the PVS checker passes.

The lark parse tree is converted once into `SyntaxNode`s: every node exposes
its kind (the grammar rule or terminal name), its children and the indices of
its first and last token in the `TokenStream`. Passes never look at lark
classes directly, which keeps them independent of the parser generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from lark import Token, Tree


class NodeKind(str, Enum):
	START = "start"
	THEORY = "theory"
	TYPE_DECLARATION = "type_declaration"
	FORMULA_DECLARATION = "formula_declaration"
	IDENTIFIER = "identifier"


@dataclass(frozen=True)
class SyntaxNode:
	"""
	One node of the syntax tree.

	`start`/`stop` are inclusive token indices into the owning `TokenStream`;
	both are None for a node that covers no tokens. Leaves carry the lexer
	token in `token` and have no children.
	"""

	kind: str
	children: Tuple["SyntaxNode", ...] = ()
	start: Optional[int] = None
	stop: Optional[int] = None
	token: Optional[Token] = None

	def text(self) -> str:
		"""Concatenated token values (no whitespace), mostly useful for identifiers."""
		if self.token is not None:
			return str(self.token)
		return "".join(c.text() for c in self.children)


class TokenStream:
	"""Ordered lexer tokens of one source text."""

	def __init__(self, source: str, tokens: List[Token]) -> None:
		self.source = source
		self._tokens = tokens

	def __len__(self) -> int:
		return len(self._tokens)

	def __getitem__(self, index: int) -> Token:
		return self._tokens[index]

	def __iter__(self) -> Iterator[Token]:
		return iter(self._tokens)

	def text(self, start: int, stop: int) -> str:
		"""
		Source text from the first character of token `start` through the last
		character of token `stop` (both inclusive). Whitespace and comments
		between the tokens are preserved verbatim.
		"""
		first = self._tokens[start]
		last = self._tokens[stop]
		return self.source[first.start_pos:last.end_pos]


def build_syntax_tree(tree: Tree, source: str) -> Tuple[SyntaxNode, TokenStream]:
	"""
	Convert a lark parse tree into a `SyntaxNode` tree plus its token stream.

	The tree must have been produced with `keep_all_tokens=True`, otherwise
	keyword and punctuation tokens are missing and node spans come out short.
	Tokens are numbered in document order while the tree is converted.
	"""
	tokens = _tokens_in_order(tree)
	index_of = {id(tok): idx for idx, tok in enumerate(tokens)}
	return _convert(tree, index_of), TokenStream(source, tokens)


def _tokens_in_order(tree: Tree) -> List[Token]:
	tokens: List[Token] = []
	stack: list[Tree | Token] = [tree]
	while stack:
		node = stack.pop()
		if isinstance(node, Token):
			tokens.append(node)
		elif isinstance(node, Tree):
			stack.extend(reversed(node.children))
	return tokens


def _convert(tree: Tree, index_of: dict[int, int]) -> SyntaxNode:
	# Iterative post-order conversion; deeply nested expressions would
	# otherwise hit the recursion limit.
	results: dict[int, SyntaxNode] = {}
	stack: list[tuple[Tree, bool]] = [(tree, False)]
	while stack:
		current, expanded = stack.pop()
		if not expanded:
			stack.append((current, True))
			for child in current.children:
				if isinstance(child, Tree):
					stack.append((child, False))
			continue
		children: list[SyntaxNode] = []
		for child in current.children:
			if isinstance(child, Tree):
				children.append(results.pop(id(child)))
			elif isinstance(child, Token):
				children.append(_leaf(child, index_of[id(child)]))
		results[id(current)] = _interior(current, children)
	return results[id(tree)]


def _leaf(token: Token, idx: int) -> SyntaxNode:
	return SyntaxNode(kind=token.type, start=idx, stop=idx, token=token)


def _interior(tree: Tree, children: list[SyntaxNode]) -> SyntaxNode:
	start = next((c.start for c in children if c.start is not None), None)
	stop = next((c.stop for c in reversed(children) if c.stop is not None), None)
	return SyntaxNode(kind=_name(tree), children=tuple(children), start=start, stop=stop)


def _name(tree: Tree) -> str:
	data = tree.data
	if isinstance(data, Token):
		return data.value
	return data


__all__ = ["NodeKind", "SyntaxNode", "TokenStream", "build_syntax_tree"]

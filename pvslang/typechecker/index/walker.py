# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-12
"""
Declaration indexer.

Walks a well-formed PVS syntax tree once, depth first and in document order,
and records every type and formula declaration in a `DeclarationIndex`.
Only those two node kinds produce entries; everything else is walked through.

Because the walk follows document order, "last declaration wins" for a
repeated identifier means the one that appears last in the file.
"""

from __future__ import annotations

from typing import Iterator, Optional

from pvslang.typechecker.core.span import node_source, node_span
from pvslang.typechecker.index.declarations import DeclarationIndex, DeclDescriptor
from pvslang.typechecker.parser.syntax import NodeKind, SyntaxNode, TokenStream


class MalformedDeclarationError(ValueError):
	"""A declaration node whose shape the grammar cannot produce."""

	def __init__(self, node: SyntaxNode, detail: str) -> None:
		super().__init__(f"malformed '{node.kind}' node: {detail}")
		self.node = node


def index_declarations(
	root: SyntaxNode,
	tokens: TokenStream,
	index: Optional[DeclarationIndex] = None,
) -> DeclarationIndex:
	"""
	Populate `index` (a fresh one when omitted) from the tree rooted at `root`.

	`EmptySpanError` and `MalformedDeclarationError` are not caught: a
	declaration that cannot be located or named means the index would be
	silently incomplete.
	"""
	if index is None:
		index = DeclarationIndex()
	for node in _preorder(root):
		kind = node.kind
		if kind == NodeKind.TYPE_DECLARATION:
			_index_type_declaration(node, tokens, index)
		elif kind == NodeKind.FORMULA_DECLARATION:
			_index_formula_declaration(node, tokens, index)
	return index


def _preorder(root: SyntaxNode) -> Iterator[SyntaxNode]:
	stack = [root]
	while stack:
		node = stack.pop()
		yield node
		stack.extend(reversed(node.children))


def _declared_names(node: SyntaxNode) -> list[SyntaxNode]:
	"""Identifier children ahead of the ':' that separates names from the body."""
	names: list[SyntaxNode] = []
	for child in node.children:
		if child.kind == "COLON":
			break
		if child.kind == NodeKind.IDENTIFIER:
			names.append(child)
	return names


def _index_type_declaration(node: SyntaxNode, tokens: TokenStream, index: DeclarationIndex) -> None:
	# `a, b, c: TYPE = nat` declares three types sharing one definition.
	declaration = node_source(node, tokens)
	for ident in _declared_names(node):
		index.add_type(_descriptor(ident, tokens, declaration))


def _index_formula_declaration(node: SyntaxNode, tokens: TokenStream, index: DeclarationIndex) -> None:
	names = _declared_names(node)
	if len(names) != 1:
		raise MalformedDeclarationError(node, f"expected exactly one name, found {len(names)}")
	index.add_formula(_descriptor(names[0], tokens, node_source(node, tokens)))


def _descriptor(ident: SyntaxNode, tokens: TokenStream, declaration: str) -> DeclDescriptor:
	span = node_span(ident, tokens)
	return DeclDescriptor(
		identifier=ident.text(),
		line=span.line,
		character=span.character,
		declaration=declaration,
	)


__all__ = ["MalformedDeclarationError", "index_declarations"]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
PVS parser: lark grammar, error recovery and the parser-independent syntax tree.
"""

from .parser import ParseResult, parse_source, tokenize
from .syntax import NodeKind, SyntaxNode, TokenStream, build_syntax_tree

__all__ = ["ParseResult", "parse_source", "tokenize", "NodeKind", "SyntaxNode", "TokenStream", "build_syntax_tree"]

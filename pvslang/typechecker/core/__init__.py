"""
pvslang.typechecker.core: data shared by the front-end passes.

Modules:
  - diagnostics: Diagnostic/Range/Position and the syntax error collector
  - span: source spans of syntax nodes (EmptySpanError on token-less nodes)
"""

__all__ = [
	"diagnostics",
	"span",
]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-12
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class DeclDescriptor:
	"""
	One named declaration found in a theory.

	`line`/`character` locate the identifier token (one-based line, zero-based
	character); `declaration` is the source text of the whole construct.
	"""

	identifier: str
	line: int
	character: int
	declaration: str

	def to_json(self) -> dict:
		return {
			"line": self.line,
			"character": self.character,
			"identifier": self.identifier,
			"declaration": self.declaration,
		}


@dataclass
class DeclarationIndex:
	"""
	Type and formula declarations of one source file, keyed by identifier.

	A later declaration of the same identifier (same kind) replaces the earlier
	one. Replaced descriptors are kept in `shadowed`, in replacement order, for
	callers that want to report duplicates.
	"""

	type_declarations: Dict[str, DeclDescriptor] = field(default_factory=dict)
	formula_declarations: Dict[str, DeclDescriptor] = field(default_factory=dict)
	shadowed: List[tuple[str, DeclDescriptor]] = field(default_factory=list)

	def add_type(self, desc: DeclDescriptor) -> None:
		self._put("type", self.type_declarations, desc)

	def add_formula(self, desc: DeclDescriptor) -> None:
		self._put("formula", self.formula_declarations, desc)

	def _put(self, kind: str, table: Dict[str, DeclDescriptor], desc: DeclDescriptor) -> None:
		prev = table.get(desc.identifier)
		if prev is not None:
			self.shadowed.append((kind, prev))
		table[desc.identifier] = desc

	def to_json(self) -> dict:
		return {
			"typeDeclarations": {k: v.to_json() for k, v in self.type_declarations.items()},
			"formulaDeclarations": {k: v.to_json() for k, v in self.formula_declarations.items()},
		}


__all__ = ["DeclDescriptor", "DeclarationIndex"]

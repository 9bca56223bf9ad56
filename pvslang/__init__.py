# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-12
"""
pvslang: front-end tooling for the PVS specification language.

Packages:
  typechecker: parser, syntax tree and the declaration indexer
"""

__all__ = ["typechecker"]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-12
"""
PVS typechecker package.

The CLI entrypoint is `pvslang.typechecker.typechecker:main`
(`python -m pvslang.typechecker FILE`).
"""

__all__ = []

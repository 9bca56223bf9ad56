# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-13
"""
CLI entrypoint for `python -m pvslang.typechecker`.
"""

from .typechecker import main

if __name__ == "__main__":
	import sys
	sys.exit(main())

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-13
from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class RunConfig:
	"""
	Settings for one typechecker run.

	Passed explicitly to the driver; nothing here is process-wide, so several
	runs in one process cannot see each other's flags.
	"""

	source: Optional[Path] = None
	test_mode: bool = False
	report_duplicates: bool = False
	json: bool = True

	@classmethod
	def from_args(cls, args: argparse.Namespace) -> "RunConfig":
		return cls(
			source=args.source,
			test_mode=bool(args.test),
			report_duplicates=bool(args.report_duplicates),
			json=not bool(args.test) or bool(args.json),
		)


__all__ = ["RunConfig"]

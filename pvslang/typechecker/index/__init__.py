# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Declaration index built from a well-formed PVS syntax tree.
"""

from .declarations import DeclarationIndex, DeclDescriptor
from .walker import MalformedDeclarationError, index_declarations

__all__ = ["DeclarationIndex", "DeclDescriptor", "MalformedDeclarationError", "index_declarations"]

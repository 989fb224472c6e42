from __future__ import annotations

from typing import List

from .blocks import extract_block
from .model import ClassInfo, FunctionInfo, Relationship


def inheritance_edges(classes: List[ClassInfo]) -> List[Relationship]:
	"""One ``inherits`` edge per class that names a parent."""
	return [
		Relationship(from_name=cls.name, to_name=cls.parent, kind="inherits")
		for cls in classes
		if cls.parent
	]


def call_edges(functions: List[FunctionInfo], text: str) -> List[Relationship]:
	"""Edges for every caller whose block contains ``callee(``."""
	edges: List[Relationship] = []
	for caller in functions:
		block = extract_block(text, caller.offset)
		for callee in functions:
			if caller.name != callee.name and f"{callee.name}(" in block:
				edges.append(Relationship(from_name=caller.name, to_name=callee.name, kind="calls"))
	return edges


def analyze_relationships(classes: List[ClassInfo], functions: List[FunctionInfo], text: str) -> List[Relationship]:
	return inheritance_edges(classes) + call_edges(functions, text)

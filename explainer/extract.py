from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from .blocks import extract_block
from .model import ClassInfo, ExtractedComponents, FunctionInfo
from .patterns import PatternSet

logger = logging.getLogger(__name__)


EXTERNAL_DEPENDENCY = "external dependency"

# Words the brace-signature patterns pick up from control-flow statements
CONTROL_KEYWORDS = frozenset(
	{
		"if",
		"else",
		"for",
		"foreach",
		"while",
		"do",
		"switch",
		"catch",
		"try",
		"finally",
		"with",
		"return",
		"new",
		"typeof",
		"using",
		"lock",
		"synchronized",
		"function",
	}
)

BOUND_FUNCTION_PATTERN = re.compile(
	r"(?:const|let|var)\s+(\w+)\s*=\s*(?:async\s+)?"
	r"(?:function\b|(?:\([^)]*\)(?:\s*:\s*[^=;{]+?)?|[\w$]+)\s*=>)"
)


def _first_group(match: re.Match[str]) -> Optional[str]:
	for group in match.groups():
		if group:
			return group
	return None


def _find_methods(block: str, patterns: PatternSet, class_name: str) -> List[str]:
	methods: List[str] = []
	for match in patterns.method_pattern.finditer(block):
		name = _first_group(match)
		if not name or name in CONTROL_KEYWORDS or name == class_name:
			continue
		methods.append(name)
	return methods


def extract_classes(text: str, patterns: PatternSet) -> List[ClassInfo]:
	classes: List[ClassInfo] = []
	for match in patterns.class_pattern.finditer(text):
		parent = match.group(2) if patterns.class_pattern.groups >= 2 else None
		name = match.group(1)
		block = extract_block(text, match.start())
		classes.append(
			ClassInfo(
				name=name,
				parent=parent.strip() if parent else None,
				offset=match.start(),
				methods=_find_methods(block, patterns, name),
			)
		)
	return classes


def extract_functions(text: str, patterns: PatternSet, classes: List[ClassInfo]) -> List[FunctionInfo]:
	"""Collect top-level functions, skipping matches inside a class block."""
	spans: List[Tuple[int, int]] = [
		(cls.offset, cls.offset + len(extract_block(text, cls.offset))) for cls in classes
	]
	functions: List[FunctionInfo] = []
	for match in patterns.function_pattern.finditer(text):
		offset = match.start()
		if any(start <= offset < end for start, end in spans):
			continue
		name = _first_group(match)
		if not name or name in CONTROL_KEYWORDS:
			continue
		functions.append(FunctionInfo(name=name, offset=offset))
	return functions


def extract_imports(text: str, patterns: PatternSet) -> List[str]:
	return [_first_group(match) or EXTERNAL_DEPENDENCY for match in patterns.import_pattern.finditer(text)]


def extract_components(text: str, patterns: PatternSet) -> ExtractedComponents:
	classes = extract_classes(text, patterns)
	functions = extract_functions(text, patterns, classes)
	imports = extract_imports(text, patterns)
	logger.debug(
		"Extracted %d classes, %d functions, %d imports",
		len(classes),
		len(functions),
		len(imports),
	)
	return ExtractedComponents(classes=classes, functions=functions, imports=imports)


def find_bound_functions(text: str) -> List[FunctionInfo]:
	"""Functions assigned to variables, e.g. ``const f = (a) => a``."""
	return [
		FunctionInfo(name=match.group(1), offset=match.start())
		for match in BOUND_FUNCTION_PATTERN.finditer(text)
	]

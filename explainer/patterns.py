from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict

logger = logging.getLogger(__name__)


class Language(str, Enum):
	JAVASCRIPT = "javascript"
	PYTHON = "python"
	JAVA = "java"
	CSHARP = "csharp"
	GENERIC = "generic"


LABEL_LANGUAGE: Dict[str, Language] = {
	"javascript": Language.JAVASCRIPT,
	"typescript": Language.JAVASCRIPT,
	"js": Language.JAVASCRIPT,
	"ts": Language.JAVASCRIPT,
	"python": Language.PYTHON,
	"java": Language.JAVA,
	"c#": Language.CSHARP,
	"csharp": Language.CSHARP,
}


EXTENSION_LANGUAGE: Dict[str, str] = {
	".py": "python",
	".ts": "typescript",
	".tsx": "typescript",
	".js": "javascript",
	".jsx": "javascript",
	".mjs": "javascript",
	".java": "java",
	".cs": "csharp",
	".go": "go",
	".rs": "rust",
	".c": "c",
	".cpp": "cpp",
}


@dataclass(frozen=True)
class PatternSet:
	"""Lexical matchers used to locate declarations for one language."""

	language: Language
	class_pattern: re.Pattern[str]
	function_pattern: re.Pattern[str]
	method_pattern: re.Pattern[str]
	import_pattern: re.Pattern[str]


_JAVA_LIKE_SIGNATURE = r"(?:public|private|protected|static)?\s+\w+\s+(\w+)\s*\([^)]*\)\s*{"

PATTERN_SETS: Dict[Language, PatternSet] = {
	Language.JAVASCRIPT: PatternSet(
		language=Language.JAVASCRIPT,
		class_pattern=re.compile(r"class\s+(\w+)(?:\s+extends\s+(\w+))?"),
		function_pattern=re.compile(r"function\s+(\w+)"),
		method_pattern=re.compile(r"(\w+)\s*\([^)]*\)\s*{"),
		import_pattern=re.compile(r"import\s+(?:{[^}]*}|[^{;]*)(?:\s+from)?\s+['\"]([^'\"]+)['\"]"),
	),
	Language.PYTHON: PatternSet(
		language=Language.PYTHON,
		class_pattern=re.compile(r"class\s+(\w+)(?:\(([^)]+)\))?:"),
		function_pattern=re.compile(r"def\s+(\w+)"),
		method_pattern=re.compile(r"def\s+(\w+)\s*\(self,?[^)]*\):"),
		import_pattern=re.compile(r"(?:from\s+(\w+(?:\.\w+)*)\s+import|import\s+(\w+(?:\.\w+)*))"),
	),
	Language.JAVA: PatternSet(
		language=Language.JAVA,
		class_pattern=re.compile(r"class\s+(\w+)(?:\s+extends\s+(\w+))?(?:\s+implements\s+([^{]+))?"),
		function_pattern=re.compile(_JAVA_LIKE_SIGNATURE),
		method_pattern=re.compile(_JAVA_LIKE_SIGNATURE),
		import_pattern=re.compile(r"import\s+([^;]+);"),
	),
	Language.CSHARP: PatternSet(
		language=Language.CSHARP,
		class_pattern=re.compile(r"class\s+(\w+)(?:\s+extends\s+(\w+))?(?:\s+implements\s+([^{]+))?"),
		function_pattern=re.compile(_JAVA_LIKE_SIGNATURE),
		method_pattern=re.compile(_JAVA_LIKE_SIGNATURE),
		import_pattern=re.compile(r"import\s+([^;]+);"),
	),
	Language.GENERIC: PatternSet(
		language=Language.GENERIC,
		class_pattern=re.compile(r"class\s+(\w+)"),
		function_pattern=re.compile(r"function\s+(\w+)|def\s+(\w+)|(\w+)\s*\([^)]*\)\s*{"),
		method_pattern=re.compile(r"(\w+)\s*\([^)]*\)\s*{|def\s+(\w+)"),
		import_pattern=re.compile(r"import|require|include|using"),
	),
}


def resolve_language(label: str) -> Language:
	return LABEL_LANGUAGE.get((label or "").strip().lower(), Language.GENERIC)


def select_patterns(label: str) -> PatternSet:
	"""Return the pattern set for a language label, falling back to generic rules."""
	language = resolve_language(label)
	logger.debug("Selected %s patterns for label %r", language.value, label)
	return PATTERN_SETS[language]


def detect_language(filename: str) -> str:
	_, ext = os.path.splitext(filename)
	return EXTENSION_LANGUAGE.get(ext.lower(), "unknown")

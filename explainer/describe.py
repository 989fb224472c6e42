"""Per-component descriptions.

A component is described by its attached documentation when it has any
(doc-string, ``/** */`` block, or a run of line comments). Otherwise its own
text is scored against ``DESCRIPTION_CATEGORIES`` and a templated sentence is
built from the winning category.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence, Tuple

from .blocks import extract_block
from .extract import find_bound_functions
from .model import ComponentDescription, ExtractedComponents, FunctionInfo
from .patterns import Language, resolve_language
from .purpose import rank_categories, score_categories

logger = logging.getLogger(__name__)


DESCRIPTION_CATEGORIES: List[Tuple[str, List[str]]] = [
	("ui", [r"render", r"component", r"view", r"display", r"dom", r"element", r"ui"]),
	("data", [r"data", r"state", r"store", r"model", r"entity", r"repository"]),
	("network", [r"fetch", r"http", r"request", r"api", r"url", r"endpoint"]),
	("utility", [r"util", r"helper", r"format", r"convert", r"transform"]),
	("event", [r"event", r"listener", r"handler", r"callback", r"click", r"change"]),
	("auth", [r"auth", r"login", r"permission", r"role", r"access", r"token"]),
	("file", [r"file", r"read", r"write", r"save", r"load", r"path"]),
	("math", [r"calc", r"compute", r"sum", r"average", r"math", r"formula"]),
]

DOCSTRING_PATTERN = re.compile(r"(\"\"\"|''')(.*?)\1", re.DOTALL)
DOC_BLOCK_PATTERN = re.compile(r"/\*\*(.*?)\*/", re.DOTALL)
LINE_COMMENT_PATTERN = re.compile(r"^(?://+|#(?=\s|$))\s*(.*)$")
DOC_TAG_PATTERN = re.compile(r"(?:^|\s)@\w+.*$")

CLASS_TEMPLATES = {
	"ui": "A UI component that handles rendering and user interaction",
	"data": "Manages data and state for the application",
	"network": "Provides services or API interactions",
	"auth": "Handles authentication and authorization",
	"file": "Manages file operations and storage",
}


def _collapse(text: str) -> str:
	return re.sub(r"\s+", " ", text).strip()


def clean_doc_block(body: str) -> str:
	"""Strip leading asterisks, drop everything from the first ``@tag`` on, collapse whitespace."""
	kept: List[str] = []
	for line in body.splitlines():
		line = line.strip().lstrip("*").strip()
		tag = DOC_TAG_PATTERN.search(line)
		if tag:
			kept.append(line[: tag.start()])
			break
		kept.append(line)
	return _collapse(" ".join(kept))


def _line_comment_run(text: str) -> str:
	parts: List[str] = []
	in_run = False
	for line in text.splitlines():
		stripped = line.strip()
		match = LINE_COMMENT_PATTERN.match(stripped)
		if match:
			in_run = True
			if match.group(1).strip():
				parts.append(match.group(1).strip())
		elif in_run and not stripped:
			continue
		else:
			in_run = False
			if parts:
				break
	return " ".join(parts)


def find_doc_comment(text: str) -> Optional[str]:
	if '"""' in text or "'''" in text:
		match = DOCSTRING_PATTERN.search(text)
		if match and _collapse(match.group(2)):
			return _collapse(match.group(2))
	if "/**" in text:
		match = DOC_BLOCK_PATTERN.search(text)
		if match:
			comment = clean_doc_block(match.group(1))
			if comment:
				return comment
	comment = _line_comment_run(text)
	return comment or None


def attached_comment(text: str, offset: int) -> str:
	"""Comment lines sitting directly above the declaration at ``offset``."""
	before = text[:offset]
	line_start = before.rfind("\n") + 1
	# export / public static / async on the declaration's own line
	before = before[:line_start] + re.sub(r"[\w@ \t]*$", "", before[line_start:])

	lines = before.rstrip().split("\n")
	while lines and lines[-1].strip().startswith("@"):
		lines.pop()
	before = "\n".join(lines).rstrip()

	if before.endswith("*/"):
		return before[before.rfind("/*"):]

	run: List[str] = []
	for line in reversed(lines):
		if not LINE_COMMENT_PATTERN.match(line.strip()):
			break
		run.insert(0, line.strip())
	return "\n".join(run)


def humanize_name(name: str) -> str:
	words = re.sub(r"([A-Z])", r" \1", name).replace("_", " ")
	words = _collapse(words)
	return words[:1].upper() + words[1:]


def _guess_name(text: str, kind: str) -> str:
	if kind == "class":
		match = re.search(r"class\s+(\w+)", text)
		return match.group(1) if match else ""
	match = re.search(r"function\s+(\w+)|def\s+(\w+)", text)
	if not match:
		return ""
	return match.group(1) or match.group(2)


def _class_sentence(text: str, category: Optional[str]) -> str:
	if category in CLASS_TEMPLATES:
		return CLASS_TEMPLATES[category]
	if "extends" in text or "implements" in text:
		return "A base class that defines core functionality"
	return "Encapsulates related functionality and data"


def _function_sentence(text: str, category: Optional[str]) -> str:
	params = re.search(r"\(([^)]*)\)", text)
	has_parameters = bool(params and params.group(1).strip())
	has_return = re.search(r"\breturn\b", text) is not None

	if category == "ui":
		verb = "Generates" if has_return else "Renders"
		return f"{verb} UI elements" + (" based on input parameters" if has_parameters else "")
	if category == "data":
		verb = "Processes and transforms" if has_return else "Manages"
		return f"{verb} data" + (" from input parameters" if has_parameters else "")
	if category == "network":
		return "Handles network communication" + (" with specified endpoints" if has_parameters else "")
	if category == "utility":
		action = "processes input and returns a result" if has_return else "performs operations"
		return f"Utility function that {action}"
	if category == "event":
		return "Event handler that responds to user interactions"
	if category == "auth":
		return "Manages authentication or authorization processes"
	if category == "file":
		return "Handles file system operations"
	if category == "math":
		return "Performs mathematical calculations" + (" on input values" if has_parameters else "")

	if has_return and has_parameters:
		return "Processes input parameters and returns a result"
	if has_return:
		return "Computes and returns a value"
	if has_parameters:
		return "Performs operations based on input parameters"
	return "Performs a specific operation or task"


def describe_component(text: str, kind: str, name: str = "") -> str:
	"""Describe a class or function from its source text.

	Documentation found in ``text`` wins; otherwise the text is classified
	and a sentence is built for ``kind``. The result is never empty.
	"""
	doc = find_doc_comment(text)
	if doc:
		return doc

	ranked = rank_categories(score_categories(text, DESCRIPTION_CATEGORIES))
	category = ranked[0] if ranked else None
	human = humanize_name(name or _guess_name(text, kind))
	prefix = f"{human} - " if human else ""

	if kind == "class":
		return prefix + _class_sentence(text, category)
	return prefix + _function_sentence(text, category)


def component_source(code: str, offset: int, boundaries: Sequence[int], indented: bool = False) -> str:
	"""Leading comment plus block for the declaration at ``offset``.

	Without a brace block the text runs to the next declaration instead. For
	indentation-delimited code the block never runs past the next declaration.
	"""
	end = min((b for b in boundaries if b > offset), default=len(code))
	body = extract_block(code, offset)
	if not body:
		body = code[offset:end]
	elif indented:
		body = body[: end - offset]
	leading = attached_comment(code, offset)
	return f"{leading}\n{body}" if leading else body


def describe_components(
	code: str, components: ExtractedComponents, language: str = ""
) -> Tuple[List[ComponentDescription], List[ComponentDescription]]:
	functions: List[FunctionInfo] = list(components.functions) + find_bound_functions(code)
	boundaries = sorted({cls.offset for cls in components.classes} | {fn.offset for fn in functions})
	indented = resolve_language(language) is Language.PYTHON

	def source(offset: int) -> str:
		return component_source(code, offset, boundaries, indented)

	classes = [
		ComponentDescription(
			name=cls.name,
			kind="class",
			text=describe_component(source(cls.offset), "class", cls.name),
		)
		for cls in components.classes
	]
	described = [
		ComponentDescription(
			name=fn.name,
			kind="function",
			text=describe_component(source(fn.offset), "function", fn.name),
		)
		for fn in functions
	]
	logger.debug("Described %d classes and %d functions", len(classes), len(described))
	return classes, described

from __future__ import annotations

import logging
from typing import List

from .describe import describe_components
from .diagram import render_diagram
from .extract import extract_components
from .model import ComponentDescription, Explanation
from .patterns import select_patterns
from .purpose import classify_purpose
from .relations import analyze_relationships

logger = logging.getLogger(__name__)


CLOSING_QUESTION = (
	"Would you like me to explain all the functions and classes in detail? "
	"Or are you more interested in a specific part?"
)


def build_explanation(code: str, language: str) -> Explanation:
	code = code or ""
	language = language or ""
	components = extract_components(code, select_patterns(language))
	relationships = analyze_relationships(components.classes, components.functions, code)
	classes, functions = describe_components(code, components, language)
	return Explanation(
		language=language,
		diagram=render_diagram(components.classes, components.functions, components.imports, relationships),
		functionality=classify_purpose(code, language),
		classes=classes,
		functions=functions,
		relationships=relationships,
		imports=components.imports,
	)


def _bullets(descriptions: List[ComponentDescription]) -> str:
	return "\n".join(f"- {d.name}: {d.text}" for d in descriptions)


def format_report(explanation: Explanation) -> str:
	parts: List[str] = []
	parts.append(f"# Code Analysis for {explanation.language} Code")
	parts.append("")
	parts.append("## Architecture Diagram")
	parts.append("```")
	parts.append(explanation.diagram.rstrip("\n"))
	parts.append("```")
	parts.append("")
	parts.append("## Core Functionality")
	parts.append(explanation.functionality)
	parts.append("")
	parts.append("## Main Classes:")
	parts.append(_bullets(explanation.classes))
	parts.append("")
	parts.append("## Main Functions:")
	parts.append(_bullets(explanation.functions))
	parts.append("")
	parts.append(CLOSING_QUESTION)
	return "\n".join(parts) + "\n"


def explain(code: str, language: str) -> str:
	"""Render the full Markdown report for a snippet."""
	explanation = build_explanation(code, language)
	logger.debug(
		"Explained %d chars of %r: %d classes, %d functions",
		len(code or ""),
		language,
		len(explanation.classes),
		len(explanation.functions),
	)
	return format_report(explanation)

"""Heuristic code explainer: structure, purpose and component descriptions for snippets.

Modules:
- patterns.py: Language labels and the lexical patterns used per language.
- blocks.py: Brace-delimited block isolation by depth counting.
- extract.py: Class, function and import extraction with offsets.
- relations.py: Inheritance and call relationships between components.
- diagram.py: ASCII architecture diagram rendering.
- purpose.py: Keyword-category scoring and the functionality summary.
- describe.py: Doc-comment recovery and heuristic component descriptions.
- report.py: The ``explain`` entry point and report formatting.
- model.py: Data structures shared by the modules above.
- config.py: Service settings.
"""

from .report import build_explanation, explain

__all__ = [
	"explain",
	"build_explanation",
	"patterns",
	"blocks",
	"extract",
	"relations",
	"diagram",
	"purpose",
	"describe",
	"report",
	"model",
	"config",
]

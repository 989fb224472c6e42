from __future__ import annotations


def extract_block(text: str, start: int) -> str:
	"""Return text from ``start`` through the brace block that follows it.

	The first ``{`` at or after ``start`` opens the block and nesting depth is
	counted until it closes. An unterminated block runs to end of input. When
	no ``{`` follows ``start`` the result is empty.
	"""
	start = min(max(start, 0), len(text))
	opening = text.find("{", start)
	if opening == -1:
		return ""

	depth = 1
	cursor = opening + 1
	while depth > 0 and cursor < len(text):
		char = text[cursor]
		if char == "{":
			depth += 1
		elif char == "}":
			depth -= 1
		cursor += 1
	return text[start:cursor]

from __future__ import annotations

from typing import List, Set

from .model import ClassInfo, FunctionInfo, Relationship


MAX_DEPENDENCIES = 3
BOX_BORDER = "+------------------+"
CHILD_INDENT = " " * 17


def _box(name: str, indent: str = "    ") -> List[str]:
	return [
		f"{indent}{BOX_BORDER}",
		f"{indent}|  {name.ljust(14)}  |",
		f"{indent}{BOX_BORDER}",
	]


def _header() -> List[str]:
	return [
		"+----------------------+",
		"|    Code Structure    |",
		"+----------------------+",
	]


def _dependencies(imports: List[str]) -> List[str]:
	if not imports:
		return []
	lines = ["", "    Dependencies:"]
	for name in imports[:MAX_DEPENDENCIES]:
		lines.append(f"    [{name}]")
	if len(imports) > MAX_DEPENDENCIES:
		lines.append("    [...more dependencies...]")
	lines.extend(["", "        |", "        v"])
	return lines


def _class_box(cls: ClassInfo, indent: str = "    ") -> List[str]:
	lines = _box(cls.name, indent)
	if cls.methods:
		lines.append(f"{indent}  methods: {', '.join(cls.methods)}")
	return lines


def _classes(classes: List[ClassInfo]) -> List[str]:
	if not classes:
		return []
	lines = ["", "    Classes:"]
	names = {cls.name for cls in classes}
	parent_names = {cls.parent for cls in classes if cls.parent}

	for cls in classes:
		if cls.name not in parent_names:
			continue
		lines.extend(_class_box(cls))
		# Parent declared outside the snippet
		if cls.parent and cls.parent not in names:
			lines.append(f"      (extends {cls.parent})")
		children = [c for c in classes if c.parent == cls.name]
		for i, child in enumerate(children):
			connector = "`" if i == len(children) - 1 else "|"
			lines.append(f"    {connector}--extends--+")
			lines.extend(_class_box(child, CHILD_INDENT))
		lines.append("")

	for cls in classes:
		if not cls.parent and cls.name not in parent_names:
			lines.extend(_class_box(cls))

	for cls in classes:
		if cls.parent and cls.parent not in names and cls.name not in parent_names:
			lines.extend(_class_box(cls))
			lines.append(f"      (extends {cls.parent})")
	return lines


def _functions(functions: List[FunctionInfo], relationships: List[Relationship]) -> List[str]:
	if not functions:
		return []
	lines = ["", "    Functions:"]
	processed: Set[str] = set()
	for rel in relationships:
		if rel.kind != "calls" or rel.from_name in processed:
			continue
		lines.append(f"    [{rel.from_name}] --calls--> [{rel.to_name}]")
		processed.add(rel.from_name)
		processed.add(rel.to_name)
	for func in functions:
		if func.name not in processed:
			lines.append(f"    [{func.name}]")
			processed.add(func.name)
	return lines


def render_diagram(
	classes: List[ClassInfo],
	functions: List[FunctionInfo],
	imports: List[str],
	relationships: List[Relationship],
) -> str:
	lines = _header()
	lines.extend(_dependencies(imports))
	lines.extend(_classes(classes))
	lines.extend(_functions(functions, relationships))
	if not classes and not functions:
		lines.append("")
		lines.extend(_box("Implementation"))
	return "\n".join(lines) + "\n"

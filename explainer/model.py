from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict


class Frozen(BaseModel):
	model_config = ConfigDict(frozen=True)


class ClassInfo(Frozen):
	name: str
	parent: Optional[str] = None
	# Position of the declaration match in the analyzed text
	offset: int
	methods: List[str] = []


class FunctionInfo(Frozen):
	name: str
	offset: int


class Relationship(Frozen):
	from_name: str
	to_name: str
	kind: Literal["inherits", "calls"]


class ExtractedComponents(Frozen):
	classes: List[ClassInfo] = []
	functions: List[FunctionInfo] = []
	imports: List[str] = []


class ComponentDescription(Frozen):
	name: str
	kind: Literal["class", "function"]
	text: str


class Explanation(Frozen):
	language: str
	diagram: str
	functionality: str
	classes: List[ComponentDescription] = []
	functions: List[ComponentDescription] = []
	relationships: List[Relationship] = []
	imports: List[str] = []

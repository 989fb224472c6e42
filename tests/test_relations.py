from explainer.extract import extract_components
from explainer.patterns import select_patterns
from explainer.relations import analyze_relationships


def _relationships(code, language="javascript"):
	facts = extract_components(code, select_patterns(language))
	return analyze_relationships(facts.classes, facts.functions, code)


def test_single_inheritance_edge():
	edges = _relationships("class Base {}\nclass Child extends Base {}")
	assert [(e.from_name, e.to_name, e.kind) for e in edges] == [("Child", "Base", "inherits")]


def test_call_edge():
	edges = _relationships("function a(){ b(); } function b(){}")
	assert [(e.from_name, e.to_name, e.kind) for e in edges] == [("a", "b", "calls")]


def test_recursion_is_not_an_edge():
	edges = _relationships("function fact(n){ return n * fact(n - 1); }")
	assert edges == []


def test_unterminated_caller_block():
	code = "function a() { b();\nfunction b() {"
	edges = _relationships(code)
	assert [(e.from_name, e.to_name) for e in edges] == [("a", "b")]


def test_caller_without_block():
	edges = _relationships("def a():\n    b()\n\ndef b():\n    pass\n", "python")
	assert edges == []

from textwrap import dedent

from explainer.extract import EXTERNAL_DEPENDENCY, extract_components, find_bound_functions
from explainer.patterns import select_patterns


def test_javascript_components():
	code = dedent(
		"""
		import React from 'react';
		import { get } from "./http";

		class Base {}
		class Child extends Base {}

		function a() { b(); }
		function b() {}
		"""
	)
	facts = extract_components(code, select_patterns("javascript"))
	assert [(c.name, c.parent) for c in facts.classes] == [("Base", None), ("Child", "Base")]
	assert [f.name for f in facts.functions] == ["a", "b"]
	assert facts.imports == ["react", "./http"]
	assert facts.functions[0].offset == code.index("function a")


def test_functions_inside_class_block_are_dropped():
	code = "class A {\n  run() { function inner() {} }\n}\nfunction outer() {}"
	facts = extract_components(code, select_patterns("js"))
	assert [f.name for f in facts.functions] == ["outer"]


def test_class_methods_skip_control_flow():
	code = "class Counter {\n  increment() {\n    if (x) { y(); }\n  }\n}"
	facts = extract_components(code, select_patterns("ts"))
	assert facts.classes[0].methods == ["increment"]


def test_python_components():
	code = dedent(
		"""
		import os
		from typing import List

		class A(Base):
			def m(self, x):
				return x

		def f(a, b=2):
			return a + b
		"""
	)
	facts = extract_components(code, select_patterns("python"))
	assert facts.imports == ["os", "typing"]
	assert [(c.name, c.parent) for c in facts.classes] == [("A", "Base")]
	# Brace-less class bodies cannot hide their methods
	assert [f.name for f in facts.functions] == ["m", "f"]


def test_java_components():
	code = dedent(
		"""
		import java.util.List;

		public class Shape {
			public double area() { return 0; }
		}

		public class Circle extends Shape {
		}
		"""
	)
	facts = extract_components(code, select_patterns("java"))
	assert facts.imports == ["java.util.List"]
	assert [(c.name, c.parent) for c in facts.classes] == [("Shape", None), ("Circle", "Shape")]
	assert facts.classes[0].methods == ["area"]
	assert facts.functions == []


def test_generic_fallback():
	code = "using System;\nint main() { return helper(1); }\nint helper(int x) { if (x) { return x; } }"
	facts = extract_components(code, select_patterns("unknown-lang"))
	assert facts.imports == [EXTERNAL_DEPENDENCY]
	assert [f.name for f in facts.functions] == ["main", "helper"]


def test_duplicate_class_names_are_kept():
	code = "class A {}\nclass A {}"
	facts = extract_components(code, select_patterns("js"))
	assert [c.name for c in facts.classes] == ["A", "A"]


def test_bound_functions():
	code = "const double = (x) => x * 2;\nlet load = async function () {};\nconst total = 3;"
	assert [f.name for f in find_bound_functions(code)] == ["double", "load"]


def test_garbage_input():
	facts = extract_components("\x00\xff{{{ )(", select_patterns("python"))
	assert facts.classes == [] and facts.functions == [] and facts.imports == []

from textwrap import dedent

import pytest

from explainer import build_explanation, explain
from explainer.purpose import GENERIC_SUMMARY

HEADERS = ["Architecture Diagram", "Core Functionality", "Main Classes:", "Main Functions:"]


@pytest.mark.parametrize(
	"code,language",
	[
		("", "python"),
		("", ""),
		("\x00\xff{{{ }}}}", "brainfuck"),
		("function a() {", "javascript"),
		("class A extends", "ts"),
		("public class X { void f() { } }", "C#"),
	],
)
def test_always_produces_report(code, language):
	report = explain(code, language)
	assert report
	for header in HEADERS:
		assert header in report
	assert report == explain(code, language)


def test_empty_python_input():
	explanation = build_explanation("", "python")
	assert "|  Implementation  |" in explanation.diagram
	assert explanation.functionality == GENERIC_SUMMARY
	assert explanation.classes == []
	assert explanation.functions == []

	report = explain("", "python")
	assert "## Main Classes:\n\n\n## Main Functions:\n\n\n" in report
	assert not any(line.startswith("- ") for line in report.splitlines())


def test_full_report():
	code = dedent(
		"""
		import axios from 'axios';

		/** Base view for widgets */
		class Widget {}
		class Button extends Widget {}

		function load(url) { return fetch(url); }
		function init() { load('/api'); }
		"""
	)
	report = explain(code, "JavaScript")
	assert report.startswith("# Code Analysis for JavaScript Code\n")
	assert "    [axios]" in report
	assert "`--extends--+" in report
	assert "[init] --calls--> [load]" in report
	assert "- Widget: Base view for widgets" in report
	assert "- Button: Button - " in report
	assert "- load: Load - Handles network communication with specified endpoints" in report
	assert "This code appears to handle network communication" in report
	assert report.rstrip().endswith("Or are you more interested in a specific part?")


def test_relationships_exposed():
	explanation = build_explanation("function a(){ b(); } function b(){}", "js")
	assert [(r.from_name, r.to_name, r.kind) for r in explanation.relationships] == [("a", "b", "calls")]
	assert explanation.model_dump()["relationships"][0]["kind"] == "calls"

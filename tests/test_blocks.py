from explainer.blocks import extract_block


def test_extracts_nested_block():
	code = "function a() { if (x) { y(); } } function b() {}"
	assert extract_block(code, 0) == "function a() { if (x) { y(); } }"


def test_starts_at_offset():
	code = "class A {} class B { m() {} }"
	start = code.index("class B")
	assert extract_block(code, start) == "class B { m() {} }"


def test_no_opening_brace_is_empty():
	assert extract_block("def f(): pass", 0) == ""
	assert extract_block("", 0) == ""


def test_unterminated_block_runs_to_end():
	code = "function a() { b(); if (c) {"
	assert extract_block(code, 0) == code


def test_out_of_range_offsets():
	assert extract_block("x {a}", 100) == ""
	assert extract_block("x {a}", -5) == "x {a}"

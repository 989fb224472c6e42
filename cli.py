from __future__ import annotations

import argparse
import json
import logging
import sys

import uvicorn

from explainer.config import get_settings
from explainer.patterns import detect_language
from explainer.report import build_explanation, format_report


def _read_source(path: str) -> str:
	if path == "-":
		return sys.stdin.read()
	with open(path, "r", encoding="utf-8", errors="replace") as fh:
		return fh.read()


def cmd_explain(args: argparse.Namespace) -> None:
	code = _read_source(args.path)
	language = args.language or detect_language(args.path)
	explanation = build_explanation(code, language)
	if args.json:
		print(json.dumps(explanation.model_dump(), indent=2))
	else:
		print(format_report(explanation))


def cmd_serve(args: argparse.Namespace) -> None:
	settings = get_settings()
	uvicorn.run(
		"api:app",
		host=args.host or settings.host,
		port=args.port or settings.port,
		reload=args.reload,
	)


def main() -> None:
	parser = argparse.ArgumentParser(prog="code-explainer")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pe = sub.add_parser("explain", help="Explain a source file and print the report")
	pe.add_argument("path", help="Path to a source file, or - for stdin")
	pe.add_argument("-l", "--language", help="Language label (default: guessed from extension)")
	pe.add_argument("--json", action="store_true", help="Print the structured explanation as JSON")
	pe.set_defaults(func=cmd_explain)

	ps = sub.add_parser("serve", help="Run the explainer HTTP service")
	ps.add_argument("--host", default=None)
	ps.add_argument("--port", type=int, default=None)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)

	args = parser.parse_args()
	logging.basicConfig(level=get_settings().log_level.upper())
	args.func(args)


if __name__ == "__main__":
	main()

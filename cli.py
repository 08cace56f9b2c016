from __future__ import annotations

import argparse
import json
import logging
import sys

import uvicorn

from analyzer.config import SettingsError, load_settings
from analyzer.source import SourceError, read_text_source
from analyzer.stats import analyze
from analyzer.summarize import summarize


def _read_input(args: argparse.Namespace) -> str:
	text = read_text_source(args.path)
	if not text.strip():
		raise SourceError("No content to analyze")
	return text


def cmd_analyze(args: argparse.Namespace) -> None:
	settings = load_settings(args.config)
	text = _read_input(args)
	out = {"analysis": analyze(text, settings).model_dump()}
	if args.summary:
		out["summary"] = summarize(text, settings)
	print(json.dumps(out, indent=2))


def cmd_summarize(args: argparse.Namespace) -> None:
	settings = load_settings(args.config)
	print(summarize(_read_input(args), settings))


def cmd_serve(args: argparse.Namespace) -> None:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="textanalyzer")
	parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Print text statistics as JSON")
	pa.add_argument("path", nargs="?", default="-", help="Path to a .txt file, or - for stdin")
	pa.add_argument("--summary", action="store_true", help="Include the extractive summary")
	pa.add_argument("--config", default=None, help="JSON settings file")
	pa.set_defaults(func=cmd_analyze)

	ps = sub.add_parser("summarize", help="Print an extractive summary")
	ps.add_argument("path", nargs="?", default="-", help="Path to a .txt file, or - for stdin")
	ps.add_argument("--config", default=None, help="JSON settings file")
	ps.set_defaults(func=cmd_summarize)

	pv = sub.add_parser("serve", help="Run FastAPI server")
	pv.add_argument("--host", default="127.0.0.1")
	pv.add_argument("--port", type=int, default=8000)
	pv.add_argument("--reload", action="store_true")
	pv.set_defaults(func=cmd_serve)

	return parser


def main(argv=None) -> int:
	args = build_parser().parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.INFO,
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
	try:
		args.func(args)
	except SettingsError as e:
		print(f"error: {e}", file=sys.stderr)
		return 2
	except SourceError as e:
		print(f"error: {e}", file=sys.stderr)
		return 1
	return 0


if __name__ == "__main__":
	sys.exit(main())

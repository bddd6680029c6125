from __future__ import annotations
import argparse, json, sys

from . import config as CFG
from .engine import Engine, configure_logging
from .loader import load_config

HEADER = "The Concordance Computed is:"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Word concordance: count and sentence indices per word")
    p.add_argument("input", nargs="?", default=None, help="Text file to read ('-' or omitted for stdin)")
    p.add_argument("--demo", action="store_true", help="Use the built-in demo text instead of input")
    p.add_argument("--output", "-o", default=None, help="Write the report to this file instead of stdout")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--separator", default=CFG.FIELD_SEPARATOR, help="Between word and {count:indices}")
    p.add_argument("--config", default=None, help="JSON file with tokenizer options")
    p.add_argument("--header", action="store_true", help="Print a header line before the report")
    p.add_argument("--verbose", action="store_true")
    return p


def run(args: argparse.Namespace) -> int:
    config = load_config(args.config) if args.config else None
    eng = Engine(config)

    if args.demo:
        index = eng.build(CFG.DEMO_TEXT)
    else:
        index = eng.build_from_path(args.input)

    if args.json:
        report = json.dumps([r.to_dict() for r in index.rows()], ensure_ascii=False, indent=2)
    else:
        report = index.to_text(args.separator)
        if args.header:
            report = f"{HEADER}\n\n{report}"

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            if report:
                f.write(report + "\n")
    elif report:
        print(report)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        return run(args)
    except Exception as exc:  # surfaced to the user
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

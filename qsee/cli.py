"""Command-line interface for qsee.

    qsee summary h2.inp
    qsee get h2.inp scf.maxiter --type int
    qsee keys h2.inp SCF
    qsee serve --input h2.inp
"""

import argparse
import json
import logging
import sys

from .config import configure_logging, settings
from .engine.core import Input, InputError
from .models import DataType, InputFileSummary
from .services import summarize_input

logger = logging.getLogger(__name__)


def _load(path: str) -> Input:
    return Input.from_file(path, settings.case_sensitive_keys_list)


def format_summary(summary: InputFileSummary) -> str:
    """Plain-text rendering of a summary, grouped by section."""
    out: list[str] = []
    if summary.title:
        out.append(summary.title)
    out.append(f"File:         {summary.filename}")
    if summary.atoms:
        out.append(f"Formula:      {summary.formula} ({len(summary.atoms)} atoms)")
    out.append(f"Charge:       {summary.charge}")
    out.append(f"Multiplicity: {summary.multiplicity}")

    section = None
    for param in summary.parameters:
        if param.section != section:
            section = param.section
            out.append(f"\n[{section}]")
        value = param.value.replace("\n", " | ")
        out.append(f"  {param.key} = {value}")
    return "\n".join(out)


def cmd_summary(args: argparse.Namespace) -> int:
    summary = summarize_input(_load(args.file))
    if args.json:
        print(summary.model_dump_json(indent=2))
    else:
        print(format_summary(summary))
    return 0


def cmd_get(args: argparse.Namespace) -> int:
    inp = _load(args.file)
    key = args.key.strip().upper()
    value = inp.get_data(key, args.type)
    if args.json:
        print(json.dumps({"key": key, "type": args.type, "value": value}))
    else:
        print(value)
    return 0


def cmd_keys(args: argparse.Namespace) -> int:
    inp = _load(args.file)
    if args.section:
        section = args.section.strip().upper()
        if not inp.contains_section(section):
            print(f"Section {section} not found", file=sys.stderr)
            return 1
        names = inp.get_data_in_section(section)
    else:
        names = list(inp.entries)
    print("\n".join(names))
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from .server import create_app

    app = create_app(input_file=args.input)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="qsee", description="Parse and query ChronusQ input files")
    ap.add_argument("--log-level", default=settings.log_level, help="logging level (default: %(default)s)")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_sum = sub.add_parser("summary", help="Title, molecule and parameters of an input file")
    ap_sum.add_argument("file")
    ap_sum.add_argument("--json", action="store_true", help="print the summary as JSON")
    ap_sum.set_defaults(func=cmd_summary)

    ap_get = sub.add_parser("get", help="Print one value, optionally converted")
    ap_get.add_argument("file")
    ap_get.add_argument("key", help="dotted key, e.g. MOLECULE.CHARGE")
    ap_get.add_argument("--type", choices=[t.value for t in DataType], default=DataType.STRING.value)
    ap_get.add_argument("--json", action="store_true")
    ap_get.set_defaults(func=cmd_get)

    ap_keys = sub.add_parser("keys", help="List all keys, or the children of a section")
    ap_keys.add_argument("file")
    ap_keys.add_argument("section", nargs="?")
    ap_keys.set_defaults(func=cmd_keys)

    ap_srv = sub.add_parser("serve", help="Serve read-only queries over HTTP")
    ap_srv.add_argument("--input", default=settings.input_file, help="input file to serve")
    ap_srv.add_argument("--host", default=settings.host)
    ap_srv.add_argument("--port", type=int, default=settings.port)
    ap_srv.set_defaults(func=cmd_serve)

    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    try:
        return args.func(args)
    except InputError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())

import argparse
import json
import logging
import sys
from pathlib import Path

from .context import Context
from .enum_writer import EnumWriter
from .names import ClassName
from .sinks import StreamSink, StringSink
from .specs import EnumSpec, build_enum

logger = logging.getLogger(__name__)


def _load_enum(path: str) -> EnumWriter:
    if path == "-":
        data: EnumSpec = json.load(sys.stdin)
    else:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    return build_enum(data)


def cmd_render(args: argparse.Namespace) -> None:
    writer = _load_enum(args.spec)
    package = args.package if args.package is not None else writer.name.package_name
    context = Context.top_level(
        package_name=package,
        imports=[ClassName.best_guess(i) for i in args.imports],
        indent=" " * args.indent,
    )
    if args.out:
        # Render fully before touching the output file.
        buffer = StringSink()
        writer.write(buffer, context)
        Path(args.out).write_text(buffer.getvalue(), encoding="utf-8")
        logger.info("Wrote %s", args.out)
    else:
        writer.write(StreamSink(sys.stdout), context)


def cmd_refs(args: argparse.Namespace) -> None:
    writer = _load_enum(args.spec)
    for name in sorted(c.canonical_name for c in writer.referenced_classes()):
        print(name)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser("javawriter")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(required=True)

    s = sub.add_parser("render", help="Render a JSON enum description as Java source")
    s.add_argument("spec", help="Path to the JSON description, or '-' for stdin")
    s.add_argument("--package", help="Package the source lives in (default: the enum's package)")
    s.add_argument("--import", dest="imports", action="append", default=[],
                   help="Fully qualified class already imported (repeatable)")
    s.add_argument("--indent", type=int, default=2, help="Spaces per indentation level")
    s.add_argument("-o", "--out", help="Write to this file instead of stdout")
    s.set_defaults(func=cmd_render)

    s = sub.add_parser("refs", help="List classes referenced by a JSON enum description")
    s.add_argument("spec", help="Path to the JSON description, or '-' for stdin")
    s.set_defaults(func=cmd_refs)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        args.func(args)
    except (ValueError, TypeError, RuntimeError, OSError) as e:
        # json.JSONDecodeError is a ValueError.
        print(f"javawriter: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

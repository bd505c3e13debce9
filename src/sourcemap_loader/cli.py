from __future__ import annotations

"""Command-line interface for sourcemap-loader.

Reads a generated file, follows its `sourceMappingURL` directive and writes
the file without the directive plus a sourcemap with absolute source paths
and embedded source contents.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import LoaderOptions
from .context import BuildContext
from .loader import transform_sync


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        description="Resolve the sourcemap referenced by a generated file and embed its sources",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    sourcemap-loader dist/app.js -o out/app.js      # Writes out/app.js + out/app.js.map
    sourcemap-loader dist/app.js -n                 # Dry run - list resolved sources
    sourcemap-loader dist/app.js --keep-relative-sources --map-output app.map
        """,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    parser.add_argument("input", help="Generated file containing a sourceMappingURL directive")
    parser.add_argument("-o", "--output", dest="output", help="Where to write the file without its directive")
    parser.add_argument("--map-output", dest="map_output", help="Where to write the sourcemap (default: OUTPUT.map)")
    parser.add_argument(
        "--keep-relative-sources",
        action="store_true",
        help="Keep 'sources' as written in the map instead of absolute paths",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="List dependencies and debug output")
    parser.add_argument("-n", "--dry-run", action="store_true", help="List sources without writing anything")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    input_path = Path(args.input)
    if not input_path.is_file():
        print(f"Error: {input_path} not found", file=sys.stderr)
        return 1

    context = BuildContext(
        context=str(input_path.resolve().parent),
        options=LoaderOptions(keep_relative_sources=args.keep_relative_sources),
    )
    result = transform_sync(input_path.read_bytes(), None, context)
    code = result.code if isinstance(result.code, str) else result.code.decode("utf-8", errors="replace")

    if args.dry_run:
        if result.map is None:
            print(f"No sourcemap resolved for {input_path}")
            return 0
        print(f"Would embed {len(result.map['sources'])} sources:")
        for source, content in zip(result.map["sources"], result.map["sourcesContent"]):
            marker = "" if content is not None else " [missing]"
            print(f"  {source}{marker}")
        return 0

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(code, encoding="utf-8")
    else:
        sys.stdout.write(code)

    map_output = args.map_output or (f"{args.output}.map" if args.output else None)
    if result.map is not None and map_output:
        map_path = Path(map_output)
        map_path.parent.mkdir(parents=True, exist_ok=True)
        map_path.write_text(json.dumps(result.map, indent=2), encoding="utf-8")
        print(f"Wrote sourcemap with {len(result.map['sources'])} sources to {map_path}", file=sys.stderr)

    if args.verbose:
        for dependency in context.dependencies:
            print(f"  depends on {dependency}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

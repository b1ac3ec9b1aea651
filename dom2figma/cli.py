"""
Command line entry point.

    dom2figma https://example.com --selector ".hero" -o hero.figma.json
    dom2figma page.html --snapshot page.snapshot.json
    dom2figma --from-snapshot page.snapshot.json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .capture import DEFAULT_SELECTOR, DEFAULT_WAIT_MS, capture_snapshot_sync, parse_viewport
from .converter import generate_figma_json
from .errors import Dom2FigmaError
from .snapshot import load_snapshot, write_snapshot


def status(message: str) -> None:
    print(message, file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert a rendered element into design tool node JSON")
    parser.add_argument("target", nargs="?", help="Page URL or local HTML file")
    parser.add_argument("--selector", "-s", default=DEFAULT_SELECTOR, help="CSS selector of the element to convert")
    parser.add_argument("--output", "-o", help="Write the JSON here instead of stdout")
    parser.add_argument("--viewport", help="Viewport size, e.g. 1440x900")
    parser.add_argument(
        "--wait-ms",
        type=int,
        default=DEFAULT_WAIT_MS,
        help="Extra settle time after the page loads, in milliseconds",
    )
    parser.add_argument("--snapshot", help="Also save the captured element snapshot to this file")
    parser.add_argument(
        "--from-snapshot",
        help="Convert a previously saved snapshot instead of opening a browser",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def run(args: argparse.Namespace) -> int:
    if args.from_snapshot:
        status(f"📂 Loading snapshot {args.from_snapshot}")
        snapshot = load_snapshot(Path(args.from_snapshot))
    else:
        status(f"🌐 Capturing {args.selector!r} from {args.target}")
        snapshot = capture_snapshot_sync(
            args.target,
            selector=args.selector,
            viewport=parse_viewport(args.viewport),
            wait_ms=args.wait_ms,
        )
        if args.snapshot:
            write_snapshot(Path(args.snapshot), snapshot)
            status(f"Snapshot: {args.snapshot}")

    document = generate_figma_json(snapshot)

    if args.output:
        Path(args.output).write_text(document + "\n", encoding="utf-8")
        status(f"✅ Design JSON written to {args.output}")
    else:
        sys.stdout.write(document + "\n")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.target and not args.from_snapshot:
        parser.error("a target URL/file or --from-snapshot is required")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    try:
        return run(args)
    except Dom2FigmaError as exc:
        status(f"❌ {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

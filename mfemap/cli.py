from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from mfemap.config.loader import ConfigLoader
from mfemap.core.exceptions import MfeMapError
from mfemap.pipeline import Pipeline

log = logging.getLogger("mfemap")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mfemap",
        description="Detect micro-frontends on a page and map their interactive elements.",
    )
    parser.add_argument("--config", help="Path to a JSON config file")
    parser.add_argument("--output-dir", help="Directory for JSON artifacts")
    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG or INFO")
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Capture a URL, then detect MFEs and map interactions")
    analyze.add_argument("url", help="URL to analyze")
    analyze.add_argument("--browser", choices=["chrome", "firefox"])
    analyze.add_argument("--headed", action="store_true", help="Show the browser window")

    detect = subparsers.add_parser("detect", help="Detect MFEs from a saved page snapshot")
    detect.add_argument("--snapshot", help="Path to page-snapshot.json")

    map_parser = subparsers.add_parser("map", help="Map interactive elements from saved artifacts")
    map_parser.add_argument("--snapshot", help="Path to page-snapshot.json")
    map_parser.add_argument("--analysis", help="Path to mfe-analysis.json")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    overrides = {
        "output_dir": args.output_dir,
        "log_level": args.log_level,
        "browser": getattr(args, "browser", None),
        "headless": False if getattr(args, "headed", False) else None,
    }
    try:
        config = ConfigLoader.load(args.config, **overrides)
    except (OSError, ValueError, ValidationError) as exc:
        logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
        log.error("Invalid configuration: %s", exc)
        return 2

    logging.basicConfig(level=config.log_level, format="[%(levelname)s] %(message)s")
    pipeline = Pipeline(config)
    try:
        if args.command == "analyze":
            pipeline.analyze(args.url)
        elif args.command == "detect":
            pipeline.analyze_mfe(args.snapshot)
        else:
            pipeline.analyze_interactions(args.snapshot, args.analysis)
    except (MfeMapError, OSError) as exc:
        log.error("%s failed: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""chat_stats_summary.py

Summarize one or more Telegram chat export HTML files.

Accepts export files and/or export directories (every ``messages*.html``
page inside is used, in page order), prints a summary report and writes
JSON/CSV analytics files for chat_stats_viz.py.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from analytics import (
    aggregate_metrics,
    find_export_files,
    load_export,
    print_summary_report,
    save_analytics_files,
)

logger = logging.getLogger(__name__)


def collect_paths(inputs: list[str]) -> list[Path]:
    """Expand directories into their export pages, keeping argument order."""
    paths: list[Path] = []
    for item in inputs:
        path = Path(item)
        if path.is_dir():
            found = find_export_files(path)
            if not found:
                logger.warning("No export pages found in %s", path)
            paths.extend(found)
        else:
            paths.append(path)
    return paths


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for summarizing chat exports."""
    parser = argparse.ArgumentParser(description='Summarize Telegram chat export HTML files')
    parser.add_argument('inputs', nargs='*', default=['.'],
                        help='Export HTML files or export directories (default: current directory)')
    parser.add_argument('--output-dir', '-o', default='chat_analytics',
                        help='Directory for JSON/CSV output (default: chat_analytics)')
    parser.add_argument('--workers', '-w', type=int, default=1,
                        help='Threads used to analyze documents in parallel')
    parser.add_argument('--no-save', dest='save', action='store_false',
                        help='Only print the report, do not write files')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    paths = collect_paths(args.inputs)
    contents = []
    for path in paths:
        try:
            contents.append(load_export(path))
        except OSError as e:
            print(f"Error: could not read {path}: {e}", file=sys.stderr)

    if not contents:
        print("Error: no readable export files given.", file=sys.stderr)
        sys.exit(1)

    metrics = aggregate_metrics(contents, max_workers=args.workers)

    output_dir = None
    if args.save:
        save_analytics_files(metrics, args.output_dir)
        output_dir = args.output_dir

    print_summary_report(metrics, output_dir=output_dir)

    if output_dir:
        print("\nRun 'python chat_stats_viz.py' to create visualizations.")


if __name__ == '__main__':
    main()

#!/usr/bin/env python3
"""Access Stats - Entry point"""

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from access_stats import (
    VERSION, MAX_LINE_LENGTH, LineTooLongError, StatisticsAccumulator,
    read_lines, print_report,
)

console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def prompt_paths():
    """Ask for log file paths until the user types 'exit'."""
    while True:
        try:
            value = console.input("\nLog file path (or 'exit' to quit): ").strip()
        except EOFError:
            return
        if value.lower() == 'exit':
            return
        if not value:
            console.print("[red]Error:[/] path cannot be empty")
            continue
        path = Path(value)
        if not path.exists():
            console.print("[red]Error:[/] file does not exist")
            continue
        if not path.is_file():
            console.print("[red]Error:[/] path is a directory, not a file")
            continue
        yield value


def main():
    parser = argparse.ArgumentParser(
        description="Access Stats - Web server access log statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument("logfiles", nargs="*",
                        help="Log files to analyze (prompts interactively if omitted)")
    parser.add_argument("-o", "--output", help="Output file (JSON)")
    parser.add_argument("-j", "--json", action="store_true", help="JSON output only")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    parser.add_argument("--max-line-length", type=int, default=MAX_LINE_LENGTH,
                        help=f"Reject files with longer lines (default {MAX_LINE_LENGTH})")
    parser.add_argument("--version", action="version", version=f"AccessStats v{VERSION}")

    args = parser.parse_args()
    setup_logging(args.verbose)

    accumulator = StatisticsAccumulator(console=None if args.json else console)
    reports = []
    processed = 0

    paths = args.logfiles if args.logfiles else prompt_paths()
    try:
        for filepath in paths:
            processed += 1
            if not args.json:
                console.print(f"\nFile #{processed}: [cyan]{filepath}[/]")
            try:
                lines = read_lines(filepath, max_length=args.max_line_length)
                report = accumulator.analyze_file(Path(filepath).name, lines)
            except (LineTooLongError, OSError) as e:
                err_console.print(f"[red]Error:[/] {e}")
                continue
            finally:
                accumulator.reset()

            reports.append(report)
            if not args.json:
                print_report(report, console)
    finally:
        if not args.json:
            console.print(f"\nDone. Files processed: {processed}")

    payload = [report.to_dict() for report in reports]
    if args.json:
        print(json.dumps(payload, indent=2))

    if args.output:
        with open(args.output, 'w') as f:
            json.dump(payload, f, indent=2)
        if not args.json:
            console.print(f"\n[green]Report saved to:[/] {args.output}")

    if args.logfiles and not reports:
        sys.exit(1)


if __name__ == "__main__":
    main()

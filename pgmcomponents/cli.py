"""Command-line entry point for extracting components from a PGM image."""

from __future__ import annotations

import sys
from collections import deque

from .processor import PGMFormatError, PGMImageProcessor

USAGE = "Usage: pgmcomponents [options] <inputPGMfile>"


def main(argv: list[str] | None = None) -> int:
    """Run the extractor; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print(USAGE, file=sys.stderr)
        return 1

    input_file = ""
    min_valid_size = 1
    min_size_filter = -1
    max_size_filter = -1
    threshold = 128
    print_data = False
    output_file = "output.pgm"

    args = deque(argv)
    try:
        while args:
            arg = args.popleft()
            if arg == "-m" and args:
                min_valid_size = int(args.popleft())
            elif arg == "-f" and len(args) >= 2:
                min_size_filter = int(args.popleft())
                max_size_filter = int(args.popleft())
            elif arg == "-t" and args:
                threshold = int(args.popleft())
            elif arg == "-p":
                print_data = True
            elif arg == "-w" and args:
                output_file = args.popleft()
            elif not arg.startswith("-"):
                input_file = arg
            else:
                print(f"Unknown option: {arg}", file=sys.stderr)
                return 1
    except ValueError as exc:
        print(f"Invalid number: {exc}", file=sys.stderr)
        return 1

    if not input_file:
        print("No input file provided.", file=sys.stderr)
        return 1

    try:
        processor = PGMImageProcessor.from_file(input_file)
    except OSError as exc:
        print(f"Failed to open file for read: {input_file} ({exc})", file=sys.stderr)
        return 1
    except PGMFormatError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    count = processor.extract_components(threshold, min_valid_size)
    print(f"Extracted {count} components.")

    if min_size_filter != -1 and max_size_filter != -1:
        remaining = processor.filter_components_by_size(min_size_filter, max_size_filter)
        print(f"Filtered components. Remaining: {remaining}")

    if print_data:
        for comp in processor.components:
            processor.print_component_data(comp)
        print(f"\nComponent Count: {processor.component_count}")
        print(f"Largest Component Size: {processor.largest_size}")
        print(f"Smallest Component Size: {processor.smallest_size}")

    try:
        processor.write_components(output_file)
    except OSError:
        print(f"Failed to write to {output_file}", file=sys.stderr)
    else:
        print(f"\nComponents written to {output_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
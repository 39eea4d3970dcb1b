import argparse
import sys

from typing import List, Optional
from coder import FileAccessError, HuffmanCoder
from frequency import FrequencyCounter
from huffman import EmptyInputError

USAGE = "huffcodes <input-filename> <code-filename>"


class _Parser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message):
        """Print usage and exit with status 1.

        :param message: Error reported by argparse.
        :type message: str
        :raises SystemExit: Always, with code 1.
        """
        self.print_usage(sys.stdout)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _positive_int(value: str) -> int:
    """Parse a strictly positive integer option value.

    :param value: Raw option text.
    :type value: str
    :returns: Parsed integer.
    :rtype: int
    :raises argparse.ArgumentTypeError: If ``value`` is not an integer >= 1.
    """
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1: {number}")
    return number


def get_parser():
    """Create and configure the CLI argument parser.

    :returns: Configured argument parser.
    :rtype: argparse.ArgumentParser
    """
    parser = _Parser(
        prog="huffcodes",
        usage=USAGE,
        description="Build a Huffman code table for a text file",
    )
    parser.add_argument("input", help="Text file to read symbol frequencies from")
    parser.add_argument("output", help="File to write the symbol/code table to")
    parser.add_argument(
        "-p",
        "--parallel",
        action="store_true",
        help="Count symbol frequencies on several threads",
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=_positive_int,
        default=FrequencyCounter.DEFAULT_WORKERS,
        help="Number of counting threads with --parallel "
             f"(default: {FrequencyCounter.DEFAULT_WORKERS})",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Do not print the tree diagram",
    )
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return its exit status.

    :param argv: Arguments without the program name; ``sys.argv[1:]`` if ``None``.
    :type argv: Optional[List[str]]
    :returns: ``0`` on success, ``1`` on any failure.
    :rtype: int
    :raises SystemExit: With code ``1`` on malformed arguments.
    """
    args = get_parser().parse_args(argv)

    if args.input == args.output:
        print("Input and output file cannot be the same")
        return 1

    try:
        coder = HuffmanCoder.from_file(
            args.input, parallel=args.parallel, workers=args.workers
        )
        coder.save(args.output)
    except FileAccessError as e:
        print(f"[!] {e}")
        return 1
    except EmptyInputError as e:
        print(f"[!] {e}: {args.input}")
        return 1

    if not args.quiet:
        print(coder)
    return 0


def main():
    """Entry point for the CLI tool.

    :returns: None
    :rtype: None
    """
    sys.exit(run())


if __name__ == "__main__":
    main()

"""Command line entry point: print the operations that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Optional

from .algorithm import SMALL_INPUT_LIMIT, sort_operations
from .validation import InputError, is_sorted, parse_arguments

ABORT_STATUS = 255


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print one operation per line that sorts the integer arguments.

    Invalid arguments print "Error" on standard error. The status is 0 after
    sorting more than five numbers and ABORT_STATUS in every other case:
    invalid input, fewer than two numbers, input already sorted, and five
    numbers or fewer.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return ABORT_STATUS
    if len(values) < 2 or is_sorted(values):
        return ABORT_STATUS
    operations = sort_operations(values)
    sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return ABORT_STATUS if len(values) <= SMALL_INPUT_LIMIT else 0


if __name__ == "__main__":
    sys.exit(main())
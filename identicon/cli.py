"""Command line entry point."""

import argparse
import logging
import sys
from typing import List, Optional

from identicon.pipeline import generate

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace with:
        - inputs: Strings to generate identicons for
    """
    parser = argparse.ArgumentParser(
        prog="identicon",
        description="Generate identicons into img/<input>.png",
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        metavar="TEXT",
        help="String to derive an identicon from",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    status = 0
    for text in args.inputs:
        try:
            path = generate(text)
        except OSError as e:
            logger.error("Could not write identicon for %r: %s", text, e)
            status = 1
            continue
        print(path)
    return status


if __name__ == "__main__":
    sys.exit(main())

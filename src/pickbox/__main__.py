"""Entry point for the pickbox CLI."""

import sys

from pickbox.cli import build_parser, run


def main():
    args = build_parser().parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()

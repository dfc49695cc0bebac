"""Command line entry point running the simulation in the terminal."""

import argparse
import random
import sys

from agentsim.server import Server
from agentsim.world import MapIndexError

_WIDTH = 23

DEFAULT_MAP = tuple(
    row.ljust(_WIDTH, "0")
    for row in (
        "000OO",
        "000OO",
        "000OOO",
        "0000OO",
        "0000OOOO",
        "000000OO",
        "00000OOOOOOA",
        "00000OO00OO",
        "00000OO00OOO",
        "00000OO000OO",
        "00000OOOO0OO",
        "00000000O0OOO",
    )
)


def _read_map(path):
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\r\n") for line in handle if line.strip()]


def _parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="agentsim", description="Watch agents wander, eat, breed and die."
    )
    parser.add_argument("--map", help="file with one map row per line (default: built-in map)")
    parser.add_argument("--seed", type=int, help="seed for the random number generator")
    parser.add_argument(
        "--delay", type=float, default=0.1, help="seconds to wait between ticks (default: 0.1)"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Run the simulation until every agent has died."""
    args = _parse_args(argv)
    try:
        rows = DEFAULT_MAP if args.map is None else _read_map(args.map)
        server = Server(rows, random.Random(args.seed))
        server.play(delay=args.delay)
    except (IndexError, MapIndexError, ValueError, OSError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Maze solver demonstrating grids and frontier searches.

Reads an ASCII maze (``#`` walls, ``S`` start, ``E`` exit), prints one shortest path
and how many tied shortest paths exist:

    python examples/maze/run.py
    python examples/maze/run.py --maze path/to/maze.txt --diagonals

Set ``FRONTIER_TRACE_SEARCH=1`` to print the search waves as they are explored.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List

from frontier import Config, UnreachableError, char_grid, grid_successors, shortest_paths
from frontier.grid import snapshot_grid
from frontier.logging_utils import log_error, log_info, log_success

DEFAULT_MAZE = Path(__file__).parent / "maze.txt"


def load_rows(path: Path) -> List[str]:
    return [line.rstrip("\n") for line in path.read_text().splitlines() if line.strip()]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Maze solver")
    parser.add_argument("--maze", type=Path, default=DEFAULT_MAZE, help="ASCII maze file")
    parser.add_argument("--diagonals", action="store_true", help="Allow diagonal moves")
    parser.add_argument(
        "--snapshot",
        type=Path,
        default=None,
        help="Write the parsed maze grid as JSON to this file",
    )
    return parser.parse_args()


def main(args: argparse.Namespace) -> int:
    Config.validate()
    log_info(Config.display().replace("\n", " |"))

    grid = char_grid(load_rows(args.maze))
    starts = grid.find("S")
    exits = grid.find("E")
    if len(starts) != 1 or len(exits) != 1:
        log_error("Maze needs exactly one 'S' and one 'E'")
        return 1
    start, goal = starts[0], exits[0]
    log_info(f"Loaded {args.maze.name}: {grid.window} with {len(grid)} stored cells")

    if args.snapshot is not None:
        args.snapshot.write_text(snapshot_grid(grid).model_dump_json(indent=2))
        log_info(f"Snapshot written to {args.snapshot}")

    successors = grid_successors(grid, lambda cell: cell != "#", diagonals=args.diagonals)
    try:
        paths = shortest_paths(start, goal, successors)
    except UnreachableError as exc:
        log_error(str(exc))
        return 1

    best = paths[0]
    log_success(f"Shortest path takes {len(best) - 1} steps ({len(paths)} tied)")
    special = {coord: "*" for coord in best[1:-1]}
    for row in grid.to_rows(special=special):
        print(row)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(parse_args()))

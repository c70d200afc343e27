# solver_impl.py
import heapq
import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from config import DEFAULT_GOAL, MAX_EXPANDED
from puzzle import (
    Direction,
    Grid,
    PuzzleError,
    manhattan_distance,
    neighbors,
    to_grid,
)

logger = logging.getLogger(__name__)


class Unreachable(PuzzleError):
    """Frontier ran dry before the goal was found (start and goal differ in parity)."""


class SearchLimitExceeded(Unreachable):
    """More nodes were expanded than the configured limit allows."""


class InvariantViolation(PuzzleError, RuntimeError):
    """Visited set is inconsistent with the predecessor links; a solver bug."""


@dataclass(frozen=True)
class SearchNode:
    grid: Grid
    g: int
    h: int
    direction: Optional[Direction] = None
    parent: Optional[Grid] = None

    @property
    def f(self) -> int:
        return self.g + self.h


@dataclass(frozen=True)
class Step:
    direction: Optional[Direction]
    grid: Grid


@dataclass
class SolveResult:
    steps: List[Step]
    expanded: int = 0
    generated: int = 0
    elapsed: float = 0.0

    @property
    def moves(self) -> List[Direction]:
        return [s.direction for s in self.steps if s.direction is not None]

    @property
    def cost(self) -> int:
        return len(self.steps) - 1

    @property
    def grids(self) -> List[Grid]:
        return [s.grid for s in self.steps]


@dataclass
class _Frontier:
    """Open set: best node per grid, plus a heap ordered by (f, h, insertion)."""
    nodes: Dict[Grid, SearchNode] = field(default_factory=dict)
    heap: List[Tuple[int, int, int, SearchNode]] = field(default_factory=list)
    counter: int = 0

    def __len__(self) -> int:
        return len(self.nodes)

    def push(self, node: SearchNode) -> bool:
        """Insert node unless an equal-or-cheaper one is already queued."""
        old = self.nodes.get(node.grid)
        if old is not None and old.f <= node.f:
            return False
        self.nodes[node.grid] = node
        heapq.heappush(self.heap, (node.f, node.h, self.counter, node))
        self.counter += 1
        return True

    def pop(self) -> SearchNode:
        while self.heap:
            _, _, _, node = heapq.heappop(self.heap)
            # replaced entries stay in the heap until they surface here
            if self.nodes.get(node.grid) is node:
                del self.nodes[node.grid]
                return node
        raise IndexError("pop from empty frontier")


def expand(node: SearchNode, goal: Grid) -> Iterator[SearchNode]:
    """Children of node, one per legal blank move."""
    for direction, grid in neighbors(node.grid):
        yield SearchNode(
            grid=grid,
            g=node.g + 1,
            h=manhattan_distance(grid, goal),
            direction=direction,
            parent=node.grid,
        )


def reconstruct_path(visited: Dict[Grid, SearchNode], goal: Grid) -> List[Step]:
    """Follow parent links from goal back to the start node."""
    try:
        node = visited[goal]
    except KeyError:
        raise InvariantViolation(f"goal {goal} was never expanded") from None

    path = [Step(node.direction, node.grid)]
    while node.direction is not None:
        try:
            node = visited[node.parent]
        except KeyError:
            raise InvariantViolation(
                f"predecessor {node.parent} of {node.grid} missing from visited set"
            ) from None
        path.append(Step(node.direction, node.grid))
        if len(path) > len(visited):
            raise InvariantViolation("predecessor links form a cycle")
    path.reverse()
    return path


def solve(start: Sequence, goal: Sequence = DEFAULT_GOAL,
          max_expanded: int = MAX_EXPANDED) -> SolveResult:
    """A* over blank moves with the Manhattan-distance heuristic.

    Raises InvalidConfiguration for malformed boards, Unreachable when the
    goal is not reachable from start, SearchLimitExceeded when more than
    max_expanded nodes would be expanded.
    """
    start = to_grid(start)
    goal = to_grid(goal)
    t0 = time.perf_counter()
    logger.debug("A* search %s -> %s (limit %d)", start, goal, max_expanded)

    frontier = _Frontier()
    frontier.push(SearchNode(start, g=0, h=manhattan_distance(start, goal)))
    visited: Dict[Grid, SearchNode] = {}
    generated = 1

    while frontier:
        current = frontier.pop()
        visited[current.grid] = current

        if current.grid == goal:
            steps = reconstruct_path(visited, goal)
            elapsed = time.perf_counter() - t0
            logger.info("Solved in %d moves: expanded=%d generated=%d time=%.3fs",
                        len(steps) - 1, len(visited), generated, elapsed)
            return SolveResult(steps, expanded=len(visited),
                               generated=generated, elapsed=elapsed)

        if len(visited) > max_expanded:
            logger.warning("Search stopped after expanding %d nodes", len(visited))
            raise SearchLimitExceeded(
                f"gave up after expanding {len(visited)} nodes (limit {max_expanded})"
            )

        for child in expand(current, goal):
            if child.grid in visited:
                continue
            if frontier.push(child):
                generated += 1

    logger.warning("Frontier exhausted after expanding %d nodes", len(visited))
    raise Unreachable(f"goal {goal} is not reachable from {start}")


def solve_puzzle(start: Sequence, goal: Sequence = DEFAULT_GOAL) -> List[Grid]:
    """Solve the puzzle using A* with Manhattan distance; grids only.

    Public helper for callers that do not need move labels or statistics.
    """
    return solve(start, goal).grids

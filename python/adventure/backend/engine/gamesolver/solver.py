"""Sliding puzzle solvability check and optimal solver."""

from __future__ import annotations

import heapq
import itertools
import logging

from adventure.backend.models.board import Board, Direction

logger = logging.getLogger(__name__)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def inversions(cells: list[int]) -> int:
        """Count pairs ``i < j`` with ``cells[i] > cells[j]``, ignoring 0."""
        flat = [v for v in cells if v != 0]
        count = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    count += 1
        return count

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal layout.

        Only odd widths are supported: there the blank's row does not matter
        and an even inversion count is both necessary and sufficient.
        """
        if board.size % 2 == 0:
            raise ValueError(
                f"Inversion parity rule only holds for odd widths, got {board.size}."
            )
        return Solver.inversions(board.cells) % 2 == 0

    @staticmethod
    def solve(board: Board) -> list[Direction]:
        """Return a shortest move list that solves *board*, or ``[]``."""
        if board.is_solved():
            return []
        if not Solver.is_solvable(board):
            return []

        n = board.size
        goal = tuple(range(n * n))
        start = tuple(board.cells)
        # Moving the gap by this delta means the tile slides the named way.
        dmap = {n: Direction.UP, -n: Direction.DOWN, 1: Direction.LEFT, -1: Direction.RIGHT}
        adj = [tuple(board.neighbors(i)) for i in range(n * n)]

        # dist[v][idx]: Manhattan distance of tile v at idx from its goal
        dist = [
            [abs(i // n - v // n) + abs(i % n - v % n) for i in range(n * n)]
            for v in range(n * n)
        ]
        h0 = sum(dist[v][i] for i, v in enumerate(start) if v)

        tie = itertools.count()
        frontier: list[tuple[int, int, int, int, tuple[int, ...], int]] = [
            (h0, next(tie), 0, h0, start, start.index(0))
        ]
        parent: dict[tuple[int, ...], tuple[tuple[int, ...], Direction] | None] = {
            start: None
        }
        best_g = {start: 0}

        while frontier:
            _, _, g, hv, state, blank = heapq.heappop(frontier)
            if state == goal:
                break
            if g > best_g[state]:
                continue
            for nb in adj[blank]:
                tile = state[nb]
                cells = list(state)
                cells[blank], cells[nb] = tile, 0
                nxt = tuple(cells)
                ng = g + 1
                if ng < best_g.get(nxt, ng + 1):
                    best_g[nxt] = ng
                    parent[nxt] = (state, dmap[nb - blank])
                    nh = hv - dist[tile][nb] + dist[tile][blank]
                    heapq.heappush(frontier, (ng + nh, next(tie), ng, nh, nxt, nb))
        else:
            return []

        moves: list[Direction] = []
        step = parent[goal]
        while step is not None:
            prev, direction = step
            moves.append(direction)
            step = parent[prev]
        moves.reverse()
        logger.debug("Solved board %s in %d moves", board.cells, len(moves))
        return moves

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None
        moves = Solver.solve(board)
        return moves[0] if moves else None

"""Backtracking searches: Hamiltonian cycles, N queens and maze paths."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def hamiltonian_cycles(
    adjacency: Sequence[Sequence[int]], start: int = 0
) -> Iterator[list[int]]:
    """Yield every Hamiltonian cycle through start as a list of vertex indices.

    Each cycle begins and ends with start; neighbours are tried in index order.
    """
    count = len(adjacency)
    if any(len(row) != count for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < count:
        raise ValueError(f"start vertex {start} is out of range")

    path = [start]
    visited = {start}

    def extend(vertex: int) -> Iterator[list[int]]:
        if len(path) == count:
            if adjacency[vertex][start]:
                yield path + [start]
            return
        for neighbour, linked in enumerate(adjacency[vertex]):
            if linked and neighbour not in visited:
                visited.add(neighbour)
                path.append(neighbour)
                yield from extend(neighbour)
                path.pop()
                visited.discard(neighbour)

    yield from extend(start)


def n_queens(size: int) -> list[list[int]] | None:
    """Place size queens on a size x size board, filling column by column.

    Returns the first placement found as rows of 0/1, or None when none exists.
    """
    if size < 0:
        raise ValueError(f"board size must be non-negative, got {size}")
    rows_used: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()
    placement: list[int] = []

    def place(col: int) -> bool:
        if col >= size:
            return True
        for row in range(size):
            if row in rows_used or row - col in diagonals or row + col in anti_diagonals:
                continue
            rows_used.add(row)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            placement.append(row)
            if place(col + 1):
                return True
            placement.pop()
            rows_used.discard(row)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)
        return False

    if not place(0):
        return None
    board = [[0] * size for _ in range(size)]
    for col, row in enumerate(placement):
        board[row][col] = 1
    return board


def maze_paths(maze: Sequence[str]) -> Iterator[list[list[int]]]:
    """Yield every path from the top-left to the bottom-right cell of maze.

    The rat moves only right or down and cannot enter cells marked 'X'; the
    exit cell itself is not checked for a wall. Each path is a grid of 0/1
    marking the cells it visits; paths going right first are yielded first.
    """
    rows = len(maze)
    if rows == 0 or len(maze[0]) == 0:
        raise ValueError("maze must have at least one cell")
    cols = len(maze[0])
    if any(len(row) != cols for row in maze):
        raise ValueError("maze rows must all have the same length")

    exit_cell = (rows - 1, cols - 1)
    solution = [[0] * cols for _ in range(rows)]

    def walk(i: int, j: int) -> Iterator[list[list[int]]]:
        if (i, j) == exit_cell:
            solution[i][j] = 1
            yield [row[:] for row in solution]
            return
        if i >= rows or j >= cols or maze[i][j] == "X":
            return
        solution[i][j] = 1
        yield from walk(i, j + 1)
        yield from walk(i + 1, j)
        solution[i][j] = 0

    yield from walk(0, 0)
"""Algorithms over two-dimensional grids and intervals."""

from __future__ import annotations

from typing import Iterable, Sequence


def rotate_image(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    if any(len(row) != len(matrix) for row in matrix):
        raise ValueError("matrix must be square")
    transposed = [list(column) for column in zip(*matrix)]
    for row, column in zip(matrix, transposed):
        row[:] = column[::-1]


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """The matrix's values read clockwise from the top-left corner inwards."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    out: list[int] = []
    while top <= bottom and left <= right:
        out.extend(matrix[top][left : right + 1])
        top += 1
        out.extend(matrix[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            out.extend(matrix[bottom][j] for j in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            out.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return out


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching closed intervals, sorted by start."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero every row and column that holds a zero, in place."""
    rows = {i for i, row in enumerate(matrix) if 0 in row}
    cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in rows:
            row[:] = [0] * len(row)
        else:
            for j in cols:
                row[j] = 0


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle under a histogram of ``heights``."""
    bars = [*heights, 0]
    stack: list[int] = []
    best = 0
    for index, height in enumerate(bars):
        while stack and bars[stack[-1]] >= height:
            top = bars[stack.pop()]
            left = stack[-1] if stack else -1
            best = max(best, top * (index - left - 1))
        stack.append(index)
    return best


def maximal_rectangle(matrix: Sequence[Sequence[str]]) -> int:
    """Area of the largest rectangle of non-'0' cells in a grid of characters."""
    if not matrix:
        return 0
    heights = [0] * len(matrix[0])
    best = 0
    for row in matrix:
        heights = [0 if cell == "0" else h + 1 for cell, h in zip(row, heights)]
        best = max(best, largest_rectangle_area(heights))
    return best
"""Compressed sparse column matrices."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

_EMPTY_CELL = "__.___"


@dataclass(eq=False)
class CSCMatrix:
    """A ``dim_x`` by ``dim_y`` sparse matrix in compressed column storage."""

    dim_x: int
    dim_y: int
    row_index: np.ndarray
    col_index: np.ndarray
    data: np.ndarray

    def __post_init__(self) -> None:
        if self.dim_x <= 0 or self.dim_y <= 0:
            raise ValueError("matrix dimensions must be positive")
        self.row_index = np.array(self.row_index, dtype=np.int64).reshape(-1)
        self.col_index = np.array(self.col_index, dtype=np.int64).reshape(-1)
        self.data = np.array(self.data, dtype=np.float64).reshape(-1)

        if self.row_index.size != self.data.size:
            raise ValueError("row_index and data must have the same length")
        if self.col_index.size != self.dim_y + 1:
            raise ValueError("col_index must hold dim_y + 1 offsets")
        if self.col_index[0] != 0:
            raise ValueError("col_index must start at zero")
        if np.any(np.diff(self.col_index) < 0):
            raise ValueError("col_index must be non-decreasing")
        if self.col_index[-1] != self.data.size:
            raise ValueError("last column offset must equal the number of stored values")
        if np.any(self.row_index < 0) or np.any(self.row_index >= self.dim_x):
            raise ValueError("row index out of range")

    @property
    def size(self) -> int:
        return self.dim_x * self.dim_y

    def nnz(self) -> int:
        """Return the number of stored entries."""
        return int(self.col_index[-1])

    def _stored_cells(self) -> list[list[float | None]]:
        cells: list[list[float | None]] = [[None] * self.dim_y for _ in range(self.dim_x)]
        for j in range(self.dim_y):
            start, end = self.col_index[j], self.col_index[j + 1]
            for row, value in zip(
                self.row_index[start:end].tolist(), self.data[start:end].tolist()
            ):
                cells[row][j] = value
        return cells

    def format(self) -> str:
        """Render the matrix densely, showing absent entries as placeholders."""
        return "".join(
            "".join(
                (_EMPTY_CELL if value is None else f"{value:<2.3f}") + " "
                for value in row
            )
            + "\n"
            for row in self._stored_cells()
        )

    def __str__(self) -> str:
        return self.format()
"""Compressed sparse row matrices."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

_EMPTY_CELL = "__.___"


@dataclass(eq=False)
class CSRMatrix:
    """A ``dim_x`` by ``dim_y`` sparse matrix in compressed row storage."""

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

        if self.col_index.size != self.data.size:
            raise ValueError("col_index and data must have the same length")
        if self.row_index.size != self.dim_x + 1:
            raise ValueError("row_index must hold dim_x + 1 offsets")
        if self.row_index[0] != 0:
            raise ValueError("row_index must start at zero")
        if np.any(np.diff(self.row_index) < 0):
            raise ValueError("row_index must be non-decreasing")
        if self.row_index[-1] != self.data.size:
            raise ValueError("last row offset must equal the number of stored values")
        if np.any(self.col_index < 0) or np.any(self.col_index >= self.dim_y):
            raise ValueError("column index out of range")

    @property
    def size(self) -> int:
        return self.dim_x * self.dim_y

    def nnz(self) -> int:
        """Return the number of stored entries."""
        return int(self.row_index[-1])

    def row(self, i: int) -> tuple[np.ndarray, np.ndarray]:
        """Return the column indices and values stored in row ``i``."""
        if not 0 <= i < self.dim_x:
            raise IndexError(f"row {i} out of range for {self.dim_x} rows")
        start, end = self.row_index[i], self.row_index[i + 1]
        return self.col_index[start:end], self.data[start:end]

    def format(self) -> str:
        """Render the matrix densely, showing absent entries as placeholders."""
        lines = []
        for i in range(self.dim_x):
            cols, values = self.row(i)
            pending = iter(zip(cols.tolist(), values.tolist()))
            current = next(pending, None)
            cells = []
            for j in range(self.dim_y):
                if current is not None and current[0] == j:
                    cells.append(f"{current[1]:<2.3f} ")
                    current = next(pending, None)
                else:
                    cells.append(_EMPTY_CELL + " ")
            lines.append("".join(cells) + "\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.format()
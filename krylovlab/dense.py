"""Dense row-major matrices."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

_EMPTY_CELL = "__.___"


def _format_cell(value: float) -> str:
    return _EMPTY_CELL if value == 0 else f"{value:<2.3f}"


@dataclass(eq=False)
class DenseMatrix:
    """A dense ``dim_x`` by ``dim_y`` matrix of floats."""

    data: np.ndarray

    def __post_init__(self) -> None:
        array = np.array(self.data, dtype=np.float64)
        if array.ndim != 2 or 0 in array.shape:
            raise ValueError("a matrix needs two non-empty dimensions")
        self.data = array

    @property
    def dim_x(self) -> int:
        return self.data.shape[0]

    @property
    def dim_y(self) -> int:
        return self.data.shape[1]

    @property
    def size(self) -> int:
        return self.dim_x * self.dim_y

    @classmethod
    def filled(cls, dim_x: int, dim_y: int, value: float = 0.0) -> DenseMatrix:
        """Build a ``dim_x`` by ``dim_y`` matrix with every entry set to ``value``."""
        if dim_x <= 0 or dim_y <= 0:
            raise ValueError("matrix dimensions must be positive")
        return cls(np.full((dim_x, dim_y), value, dtype=np.float64))

    def fill(self, value: float) -> None:
        self.data.fill(value)

    def format(self) -> str:
        """Render the matrix row by row, showing zeros as placeholders."""
        return "".join(
            "".join(_format_cell(value) + " " for value in row) + "\n"
            for row in self.data
        )

    def __str__(self) -> str:
        return self.format()
"""Reading coordinate Matrix Market files into CSR matrices."""

from __future__ import annotations

import os
from typing import Iterable

import numpy as np

from krylovlab.csr import CSRMatrix


def _meaningful(lines: Iterable[str]):
    for line in lines:
        stripped = line.strip()
        if stripped and not stripped.startswith("%"):
            yield stripped


def _parse_header(line: str) -> tuple[int, int, int]:
    fields = line.split()
    if len(fields) < 3:
        raise ValueError(f"malformed size line: {line!r}")
    try:
        rows, cols, nnz = (int(field) for field in fields[:3])
    except ValueError as exc:
        raise ValueError(f"malformed size line: {line!r}") from exc
    if rows <= 0 or cols <= 0 or nnz < 0:
        raise ValueError(f"invalid sizes in line: {line!r}")
    return rows, cols, nnz


def _parse_entry(line: str, rows: int, cols: int) -> tuple[int, int, float]:
    fields = line.split()
    if len(fields) < 3:
        raise ValueError(f"malformed entry line: {line!r}")
    try:
        row, col, value = int(fields[0]) - 1, int(fields[1]) - 1, float(fields[2])
    except ValueError as exc:
        raise ValueError(f"malformed entry line: {line!r}") from exc
    if not (0 <= row < rows and 0 <= col < cols):
        raise ValueError(f"entry out of range: {line!r}")
    return row, col, value


def parse_matrix_market_csr(lines: Iterable[str]) -> CSRMatrix:
    """Build a CSR matrix from the lines of a coordinate Matrix Market document."""
    content = _meaningful(lines)
    header = next(content, None)
    if header is None:
        raise ValueError("missing size line")
    rows, cols, nnz = _parse_header(header)

    entries = [_parse_entry(line, rows, cols) for line in content]
    if len(entries) != nnz:
        raise ValueError(f"expected {nnz} entries, found {len(entries)}")
    entries.sort(key=lambda entry: entry[0])

    row_ids = np.array([row for row, _, _ in entries], dtype=np.int64)
    counts = np.bincount(row_ids, minlength=rows)
    row_index = np.concatenate(([0], np.cumsum(counts)))
    return CSRMatrix(
        rows,
        cols,
        row_index,
        [col for _, col, _ in entries],
        [value for _, _, value in entries],
    )


def load_matrix_market_csr(path: str | os.PathLike[str]) -> CSRMatrix:
    """Read a coordinate Matrix Market file into a CSR matrix."""
    with open(path, encoding="utf-8") as handle:
        return parse_matrix_market_csr(handle)
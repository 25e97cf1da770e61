"""
Line-data I/O utilities for the analyzer.

This module provides:
    • parse_line_sets(text)
    • load_line_sets(path)

Handles all filesystem interaction in a consistent, testable way.

File format: whitespace-separated real numbers, read in groups of 12
(a1 b1 c1 a2 b2 c2 a3 b3 c3 a4 b4 c4), one group per line set.
"""

from typing import List

import numpy as np

from config import LINES_PER_SET, COEFFICIENTS_PER_LINE
from models.errors import InvalidLineError, LineDataError
from models.line import Line


NUMBERS_PER_SET = LINES_PER_SET * COEFFICIENTS_PER_LINE


# -------------------------------------------------------------------------
#  PARSING
# -------------------------------------------------------------------------

def parse_line_sets(text: str) -> List[List[Line]]:
    """
    Turns the raw text of a data source into groups of 4 Line objects.

    Raises:
        LineDataError: non-numeric token, incomplete trailing group,
                       or a line with a = b = 0
    """
    tokens = text.split()
    try:
        values = np.array(tokens, dtype=float)
    except ValueError as exc:
        raise LineDataError(f"Non-numeric value in line data: {exc}") from exc

    if values.size % NUMBERS_PER_SET != 0:
        complete = values.size // NUMBERS_PER_SET
        raise LineDataError(
            f"Insufficient data for set {complete + 1}: "
            f"expected {NUMBERS_PER_SET} numbers, "
            f"got {values.size - complete * NUMBERS_PER_SET}"
        )

    coefficients = values.reshape(-1, LINES_PER_SET, COEFFICIENTS_PER_LINE)

    line_sets = []
    for set_idx, rows in enumerate(coefficients, start=1):
        lines = []
        for line_idx, (a, b, c) in enumerate(rows, start=1):
            try:
                lines.append(Line(float(a), float(b), float(c)))
            except InvalidLineError as exc:
                raise LineDataError(f"Set {set_idx}, line {line_idx}: {exc}") from exc
        line_sets.append(lines)

    return line_sets


# -------------------------------------------------------------------------
#  FILE LOADING
# -------------------------------------------------------------------------

def load_line_sets(path: str) -> List[List[Line]]:
    """
    Loads every line set stored in the file at 'path'.

    Example:
        line_sets = load_line_sets('linesData.txt')
    """
    try:
        with open(path, "r", encoding="utf-8") as fh:
            text = fh.read()
    except OSError as exc:
        raise LineDataError(f"Error opening file {path}: {exc.strerror}") from exc

    return parse_line_sets(text)


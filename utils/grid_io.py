import numpy as np

from models.sudoku_solver import GRID_SIZE, BOX_SIZE, EMPTY

DIGIT_CHARS = "0123456789"
BLANK_CHARS = {".", "_"}

SAMPLE_PUZZLE = [
    [0, 2, 0, 6, 0, 8, 0, 0, 0],
    [5, 8, 0, 0, 0, 9, 7, 0, 0],
    [0, 0, 0, 0, 4, 0, 0, 0, 0],
    [3, 7, 0, 0, 0, 0, 5, 0, 0],
    [6, 0, 0, 0, 0, 0, 0, 0, 4],
    [0, 0, 8, 0, 0, 0, 0, 1, 3],
    [0, 0, 0, 0, 2, 0, 0, 0, 0],
    [0, 0, 9, 8, 0, 0, 0, 3, 6],
    [0, 0, 0, 3, 0, 6, 0, 9, 0],
]


def to_grid(data):
    """Validate 9x9 cell data and return it as a fresh list of lists of ints"""
    array = np.asarray(data)

    if array.shape != (GRID_SIZE, GRID_SIZE):
        raise ValueError(f"Grid must be {GRID_SIZE}x{GRID_SIZE}, got shape {array.shape}")

    if array.dtype == np.bool_ or not np.issubdtype(array.dtype, np.number):
        raise ValueError("Grid must contain numbers only")

    if np.iscomplexobj(array) or np.any(array != np.round(array)):
        raise ValueError("Grid values must be whole numbers")

    if np.any((array < 0) | (array > 9)):
        raise ValueError("Grid values must be between 0 and 9")

    return array.astype(int).tolist()


def parse_puzzle(text):
    """Convert puzzle text into a grid.

    Digits are cell values and '.' or '_' mark blanks. Anything else
    (whitespace, box separators) is skipped.
    """
    digits = []
    for ch in text:
        if ch in DIGIT_CHARS:
            digits.append(int(ch))
        elif ch in BLANK_CHARS:
            digits.append(EMPTY)

    cell_count = GRID_SIZE * GRID_SIZE
    if len(digits) != cell_count:
        raise ValueError(f"Sudoku puzzle must yield {cell_count} cells, got {len(digits)}")

    return [digits[i:i + GRID_SIZE] for i in range(0, cell_count, GRID_SIZE)]


def load_puzzle(path):
    with open(path, encoding="utf-8") as f:
        return parse_puzzle(f.read())


def format_grid(grid):
    """Render grid as text with box separators, blanks shown as '.'"""
    separator = "+".join(["-" * (BOX_SIZE * 2)] + ["-" * (BOX_SIZE * 2 + 1)] * (BOX_SIZE - 1))
    lines = []
    for i, row in enumerate(grid):
        if i % BOX_SIZE == 0 and i != 0:
            lines.append(separator)

        row_str = ""
        for j, cell in enumerate(row):
            if j % BOX_SIZE == 0 and j != 0:
                row_str += "| "
            row_str += str(cell if cell != EMPTY else '.') + " "

        lines.append(row_str.rstrip())
    return "\n".join(lines)


def format_plain(grid):
    """Render grid as space separated rows"""
    return "\n".join(" ".join(str(cell) for cell in row) for row in grid)


def parse_correction(text):
    """Parse a 'row,col,digit' correction entry"""
    parts = text.split(',')
    if len(parts) != 3:
        raise ValueError("Invalid format. Use: row,col,digit")

    try:
        row, col, digit = (int(part) for part in parts)
    except ValueError:
        raise ValueError("Invalid input. Use numbers only in format: row,col,digit") from None

    if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE and 0 <= digit <= 9):
        raise ValueError("Invalid values. Use row,col,digit with values 0-8 for row/col and 0-9 for digit")

    return row, col, digit

GRID_SIZE = 9
BOX_SIZE = 3
EMPTY = 0


def row_has_value(grid, value, row):
    """Check if value is already in the given row"""
    for j in range(GRID_SIZE):
        if grid[row][j] == value:
            return True
    return False


def column_has_value(grid, value, col):
    """Check if value is already in the given column"""
    for i in range(GRID_SIZE):
        if grid[i][col] == value:
            return True
    return False


def box_has_value(grid, value, row, col):
    """Check if value is already in the 3x3 box containing (row, col)"""
    start_row = row - row % BOX_SIZE
    start_col = col - col % BOX_SIZE

    for i in range(start_row, start_row + BOX_SIZE):
        for j in range(start_col, start_col + BOX_SIZE):
            if grid[i][j] == value:
                return True
    return False


def is_valid_placement(grid, value, row, col):
    """Check if placing value at (row, col) is valid.

    The cell itself is scanned too, so it must be empty when this is called.
    """
    return (not row_has_value(grid, value, row)
            and not column_has_value(grid, value, col)
            and not box_has_value(grid, value, row, col))


def find_empty_cell(grid):
    """Return (row, col) of the first empty cell in row-major order, or None"""
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            if grid[i][j] == EMPTY:
                return i, j
    return None


def count_empty_cells(grid):
    return sum(1 for row in grid for cell in row if cell == EMPTY)


def solve(grid):
    """Solve Sudoku in place using backtracking.

    Returns True with every empty cell filled, or False with the grid left
    exactly as it was passed in. Givens that already clash fail straight
    away. Cells are filled in row-major order trying 1-9 in ascending order,
    so the first solution found is always the same.
    """
    if not is_valid_sudoku(grid):
        return False
    return _solve_helper(grid)


def _solve_helper(grid):
    """Recursive helper for solving"""
    cell = find_empty_cell(grid)
    if cell is None:
        return True

    row, col = cell
    for value in range(1, GRID_SIZE + 1):
        if is_valid_placement(grid, value, row, col):
            grid[row][col] = value

            if _solve_helper(grid):
                return True

            grid[row][col] = EMPTY  # Backtrack

    return False


def is_valid_sudoku(grid):
    """Check that the given values have no duplicates in any row, column or box"""
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            if grid[i][j] != EMPTY:
                value = grid[i][j]
                grid[i][j] = EMPTY  # Temporarily remove

                valid = is_valid_placement(grid, value, i, j)
                grid[i][j] = value  # Restore

                if not valid:
                    return False
    return True


def is_solved(grid):
    """Check that the grid is completely and legally filled"""
    return find_empty_cell(grid) is None and is_valid_sudoku(grid)

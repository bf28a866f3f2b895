import sys

from models.sudoku_solver import solve, is_valid_sudoku, count_empty_cells
from utils.grid_io import (
    SAMPLE_PUZZLE, load_puzzle, to_grid, format_grid, format_plain, parse_correction
)

USAGE = "Usage: python main.py [PUZZLE_FILE] [--no-edit] [--plain]"


class SudokuApp:
    def __init__(self, input_func=input, allow_corrections=True, plain_output=False):
        self.input_func = input_func
        self.allow_corrections = allow_corrections
        self.plain_output = plain_output
        self.current_grid = None
        self.solution_grid = None

    def run(self, puzzle_path=None):
        """Load a puzzle, solve it and return a process exit code"""
        try:
            if puzzle_path is None:
                print("No puzzle file given, using the sample puzzle.")
                grid = to_grid(SAMPLE_PUZZLE)
            else:
                print(f"Loading puzzle from {puzzle_path}...")
                grid = load_puzzle(puzzle_path)
        except (OSError, ValueError) as e:
            print(f"Error: Could not load puzzle: {e}")
            return 2

        solution = self.process_grid(grid)
        return 0 if solution is not None else 1

    def process_grid(self, grid):
        """Correct, solve and report a puzzle grid"""
        self.print_grid(grid, "Puzzle:")

        if self.allow_corrections:
            self.collect_corrections(grid)

        print(f"Solving Sudoku with {count_empty_cells(grid)} empty cells...")
        solution = [row[:] for row in grid]

        if solve(solution):
            print("Sudoku solved!")
            self.print_grid(solution, "Solution:")

            self.current_grid = grid
            self.solution_grid = solution
            return solution

        print("No solution exists.")
        if not is_valid_sudoku(grid):
            print("The puzzle contains invalid numbers (duplicates in row/column/box).")
        else:
            print("The given numbers cannot be completed to a full grid.")

        self.current_grid = grid
        self.solution_grid = None
        return None

    def collect_corrections(self, grid):
        """Let the user fix cells before solving"""
        print("\nIf any digits are wrong, you can correct them.")
        print("Enter corrections in format: row,col,digit (e.g., 0,1,5)")
        print("Press Enter to skip corrections")

        while True:
            try:
                correction = self.input_func("Enter correction (or press Enter to continue): ").strip()
            except EOFError:
                break
            if not correction:
                break

            try:
                row, col, digit = parse_correction(correction)
            except ValueError as e:
                print(e)
                continue

            grid[row][col] = digit
            print(f"Corrected cell [{row},{col}] to {digit}")
            self.print_grid(grid, "Corrected Grid:")

    def print_grid(self, grid, title="Grid:"):
        """Print grid to console"""
        print(f"\n{title}")
        if self.plain_output:
            print(format_plain(grid))
        else:
            print(format_grid(grid))


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    flags = {"--no-edit", "--plain"}
    options = [arg for arg in args if arg in flags]
    args = [arg for arg in args if arg not in flags]

    if len(args) > 1 or any(arg.startswith("-") for arg in args):
        print(USAGE)
        return 2

    app = SudokuApp(allow_corrections="--no-edit" not in options,
                    plain_output="--plain" in options)
    return app.run(args[0] if args else None)


if __name__ == "__main__":
    sys.exit(main())

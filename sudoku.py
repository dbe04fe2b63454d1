import logging
import random
from collections import namedtuple

logger = logging.getLogger(__name__)

GRID_SIZE = 9
BOX_SIZE = 3

# Inclusive ranges of cells to clear, out of 81.
DIFFICULTY_HOLES = {
    'beginner': (30, 34),
    'easy': (40, 44),
    'medium': (48, 52),
    'hard': (53, 56),
    'expert': (57, 59),
}
DEFAULT_HOLES = 48

PuzzleResult = namedtuple('PuzzleResult', ['puzzle', 'solution'])


def empty_grid():
    return [[0 for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)]


def copy_grid(board):
    return [row[:] for row in board]


def is_placement_legal(board, row, col, num):
    # Check row and column
    for i in range(GRID_SIZE):
        if board[row][i] == num or board[i][col] == num:
            return False

    # Check box
    box_row = row - row % BOX_SIZE
    box_col = col - col % BOX_SIZE
    for i in range(box_row, box_row + BOX_SIZE):
        for j in range(box_col, box_col + BOX_SIZE):
            if board[i][j] == num:
                return False
    return True


def find_empty(board):
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            if board[i][j] == 0:
                return (i, j)  # row, col
    return None


def solve(board):
    """Fill every empty cell of ``board`` in place by backtracking.

    Candidates are tried in ascending order, so the result only varies with
    the cells that were already filled in.
    """
    find = find_empty(board)
    if not find:
        return True
    row, col = find

    for num in range(1, GRID_SIZE + 1):
        if is_placement_legal(board, row, col, num):
            board[row][col] = num

            if solve(board):
                return True

            board[row][col] = 0  # backtrack
    return False


def holes_for(level, rng):
    bounds = DIFFICULTY_HOLES.get(level)
    if bounds is None:
        return DEFAULT_HOLES
    return rng.randint(*bounds)


class SudokuGenerator:
    def __init__(self, level='medium', rng=None):
        self.level = level
        self.rng = rng or random.Random()
        self.board = empty_grid()
        self.solution = empty_grid()
        self._generate_solution()

    def _generate_solution(self):
        self.fill_diagonal(self.board)
        solve(self.board)
        self.solution = copy_grid(self.board)  # Store the solved board

    def fill_diagonal(self, board):
        for start in range(0, GRID_SIZE, BOX_SIZE):
            self.fill_box(board, start, start)

    def fill_box(self, board, row, col):
        # Diagonal boxes share no row or column, so only the box itself can conflict.
        for i in range(row, row + BOX_SIZE):
            for j in range(col, col + BOX_SIZE):
                num = self.rng.randint(1, GRID_SIZE)
                while not is_placement_legal(board, i, j, num):
                    num = self.rng.randint(1, GRID_SIZE)
                board[i][j] = num

    def get_puzzle(self):
        puzzle = copy_grid(self.solution)
        squares_to_remove = holes_for(self.level, self.rng)
        logger.debug("Carving %d holes for level %r", squares_to_remove, self.level)

        while squares_to_remove > 0:
            r = self.rng.randrange(GRID_SIZE)
            c = self.rng.randrange(GRID_SIZE)
            if puzzle[r][c] != 0:
                puzzle[r][c] = 0
                squares_to_remove -= 1

        return puzzle

    def get_solution(self):
        return copy_grid(self.solution)


def generate(difficulty, rng=None):
    generator = SudokuGenerator(level=difficulty, rng=rng)
    return PuzzleResult(generator.get_puzzle(), generator.get_solution())

"""
Sudoku Board Codec

Boards are 81 bytes, one cell per byte, read left to right, top to bottom.
A cell holds 0 (blank) or a digit 1-9.

The compact form packs each row of nine base-10 digits into one big-endian
u32, giving 36 bytes. Running the cipher over the compact form instead of
the full board cuts the encrypted payload by more than half.

To keep the mapping between compact and full boards 1-to-1 (bijective),
decompress_board() rejects any row value above 999_999_999. Otherwise the
same board would have several valid encodings.
"""

import struct
from typing import List

from .errors import DecompressionMalleable, InvalidMask

BOARD_SIZE = 81
COMPACT_BOARD_SIZE = 36

MAX_ROW_VALUE = 999_999_999

_ROW = struct.Struct('>I')


def _check_board(board: bytes, name: str = 'board') -> bytes:
    board = bytes(board)
    if len(board) != BOARD_SIZE:
        raise ValueError(f"{name} must be {BOARD_SIZE} bytes, got {len(board)}")
    return board


def compress_board(board: bytes) -> bytes:
    """
    Compress an 81-byte board into 9 big-endian u32 rows (36 bytes).

    Each row's digits are read as a base-10 number.
    """
    board = _check_board(board)
    compact = bytearray()
    for row in range(9):
        value = 0
        for cell in board[row * 9:(row + 1) * 9]:
            value = value * 10 + cell
        compact += _ROW.pack(value)
    return bytes(compact)


def decompress_board(compact: bytes) -> bytes:
    """
    Expand a 36-byte compact board back to one cell per byte.

    Raises:
        DecompressionMalleable: If any row encodes a value above 999_999_999
    """
    compact = bytes(compact)
    if len(compact) != COMPACT_BOARD_SIZE:
        raise ValueError(f"compact board must be {COMPACT_BOARD_SIZE} bytes, got {len(compact)}")

    board = bytearray(BOARD_SIZE)
    for row in range(9):
        (value,) = _ROW.unpack_from(compact, row * 4)

        # Malleable row representations are not allowed
        if value > MAX_ROW_VALUE:
            raise DecompressionMalleable()

        for column in reversed(range(9)):
            board[row * 9 + column] = value % 10
            value //= 10
    return bytes(board)


def mask_sudoku_solution(solution: bytes, mask: bytes) -> bytes:
    """
    Turn a solution into a puzzle by blanking the cells the mask zeroes.

    - mask[i] == 0: puzzle[i] = 0
    - mask[i] == 1: puzzle[i] = solution[i]

    Raises:
        InvalidMask: If the mask holds any byte other than 0 or 1
    """
    solution = _check_board(solution, 'solution')
    mask = _check_board(mask, 'mask')

    puzzle = bytearray(solution)
    for i, bit in enumerate(mask):
        if bit == 0:
            puzzle[i] = 0
        elif bit != 1:
            raise InvalidMask(f"invalid mask byte {bit} at cell {i}")
    return bytes(puzzle)


def _is_digit_set(cells: List[int]) -> bool:
    seen = [False] * 9
    for digit in cells:
        if not 1 <= digit <= 9:
            return False
        if seen[digit - 1]:
            return False
        seen[digit - 1] = True
    return True


def is_valid_sudoku_solution(board: bytes) -> bool:
    """
    Test a board against the rules of sudoku.

    Every row, every column and every 3x3 subgrid must contain each of the
    digits 1-9 exactly once.
    """
    board = _check_board(board)

    for row in range(9):
        if not _is_digit_set([board[row * 9 + column] for column in range(9)]):
            return False

    for column in range(9):
        if not _is_digit_set([board[row * 9 + column] for row in range(9)]):
            return False

    for grid in range(9):
        grid_row_start = grid // 3 * 3
        grid_col_start = grid % 3 * 3
        cells = [
            board[(grid_row_start + i // 3) * 9 + grid_col_start + i % 3]
            for i in range(9)
        ]
        if not _is_digit_set(cells):
            return False

    return True


def solves_sudoku_puzzle(solution: bytes, puzzle: bytes) -> bool:
    """True iff puzzle[i] == 0 or solution[i] == puzzle[i] for every cell."""
    solution = _check_board(solution, 'solution')
    puzzle = _check_board(puzzle, 'puzzle')
    return all(p == 0 or s == p for s, p in zip(solution, puzzle))

"""The board and mask every example proves against."""

SOLUTION = bytes([
    6, 1, 4, 3, 8, 9, 2, 5, 7,
    5, 8, 3, 6, 7, 2, 4, 1, 9,
    9, 7, 2, 5, 4, 1, 8, 6, 3,
    1, 3, 9, 8, 5, 4, 6, 7, 2,
    2, 5, 8, 1, 6, 7, 9, 3, 4,
    7, 4, 6, 2, 9, 3, 5, 8, 1,
    8, 2, 7, 9, 1, 5, 3, 4, 6,
    4, 9, 5, 7, 3, 6, 1, 2, 8,
    3, 6, 1, 4, 2, 8, 7, 9, 5,
])

MASK = bytes([
    1, 1, 1, 1, 1, 1, 1, 1, 0,
    1, 0, 0, 1, 0, 0, 1, 0, 0,
    0, 0, 0, 1, 0, 0, 0, 1, 1,
    1, 1, 0, 1, 0, 0, 1, 1, 0,
    1, 0, 1, 1, 1, 0, 1, 0, 1,
    0, 1, 0, 1, 0, 1, 1, 0, 1,
    0, 1, 0, 1, 0, 0, 1, 0, 0,
    1, 0, 1, 1, 0, 1, 1, 0, 0,
    1, 1, 0, 1, 1, 0, 1, 0, 1,
])


def format_board(board: bytes) -> str:
    rows = []
    for r in range(9):
        row = board[r * 9:(r + 1) * 9]
        rows.append(' '.join(str(d) if d else '.' for d in row))
    return '\n'.join(rows)

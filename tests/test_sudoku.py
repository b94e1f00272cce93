"""
Tests for the Sudoku Board Codec

- Compact encoding (9 big-endian u32 rows)
- Malleability rejection
- Masking solutions into puzzles
- Solution and puzzle checks
"""

import struct

import pytest

from zkcp.errors import DecompressionMalleable, InvalidMask
from zkcp.sudoku import (
    compress_board,
    decompress_board,
    mask_sudoku_solution,
    is_valid_sudoku_solution,
    solves_sudoku_puzzle,
)

from conftest import SOLUTION, MASK, PUZZLE


def _with_cell(board: bytes, index: int, value: int) -> bytes:
    cells = bytearray(board)
    cells[index] = value
    return bytes(cells)


class TestCompactBoard:
    """Tests for compress_board / decompress_board."""

    def test_row_values(self):
        """Each row becomes its digits read as a base-10 number."""
        compact = compress_board(SOLUTION)
        assert len(compact) == 36
        rows = list(struct.unpack('>9I', compact))
        assert rows == [
            614_389_257,
            583_672_419,
            972_541_863,
            139_854_672,
            258_167_934,
            746_293_581,
            827_915_346,
            495_736_128,
            361_428_795,
        ]

    def test_roundtrip(self):
        """Decompressing a compressed board gives the board back."""
        assert decompress_board(compress_board(SOLUTION)) == SOLUTION

    def test_roundtrip_puzzle_with_blanks(self):
        """Blank cells (leading zeros included) survive the round trip."""
        assert decompress_board(compress_board(PUZZLE)) == PUZZLE

    def test_rejects_all_ff(self):
        """0xFFFFFFFF rows are non-canonical."""
        with pytest.raises(DecompressionMalleable):
            decompress_board(b'\xff' * 36)

    def test_boundary_row_values(self):
        """999_999_999 decodes; 1_000_000_000 does not."""
        ok = struct.pack('>I', 999_999_999) * 9
        assert decompress_board(ok) == bytes([9] * 81)

        bad = struct.pack('>I', 1_000_000_000) + struct.pack('>I', 0) * 8
        with pytest.raises(DecompressionMalleable):
            decompress_board(bad)

    def test_malleable_is_value_error(self):
        """Callers catching ValueError also catch malleable encodings."""
        with pytest.raises(ValueError):
            decompress_board(b'\xff' * 36)

    def test_wrong_lengths(self):
        with pytest.raises(ValueError):
            compress_board(bytes(80))
        with pytest.raises(ValueError):
            decompress_board(bytes(35))


class TestMask:
    """Tests for mask_sudoku_solution."""

    def test_example_mask(self):
        assert mask_sudoku_solution(SOLUTION, MASK) == PUZZLE

    def test_first_row_and_column(self):
        """Zeroing the first row and first column."""
        mask = bytearray([1] * 81)
        for i in range(9):
            mask[i] = 0
            mask[i * 9] = 0
        puzzle = mask_sudoku_solution(SOLUTION, bytes(mask))

        assert puzzle[:9] == bytes(9)
        assert all(puzzle[i * 9] == 0 for i in range(9))
        assert puzzle[10:18] == SOLUTION[10:18]

    def test_all_ones_is_identity(self):
        assert mask_sudoku_solution(SOLUTION, bytes([1] * 81)) == SOLUTION

    def test_rejects_non_binary_mask(self):
        """A mask byte of 2 is a contract violation."""
        with pytest.raises(InvalidMask):
            mask_sudoku_solution(SOLUTION, _with_cell(MASK, 40, 2))


class TestSolutionValidity:
    """Tests for is_valid_sudoku_solution."""

    def test_valid(self):
        assert is_valid_sudoku_solution(SOLUTION)

    def test_blank_cell_rejected(self):
        assert not is_valid_sudoku_solution(_with_cell(SOLUTION, 0, 0))

    def test_duplicate_in_row_rejected(self):
        assert not is_valid_sudoku_solution(_with_cell(SOLUTION, 2, 6))

    def test_out_of_range_digit_rejected(self):
        assert not is_valid_sudoku_solution(_with_cell(SOLUTION, 0, 10))

    def test_row_permutations_only_rejected(self):
        """Every row 1..9 in order: rows pass, columns fail."""
        assert not is_valid_sudoku_solution(bytes(list(range(1, 10)) * 9))

    def test_latin_square_without_subgrids_rejected(self):
        """A cyclic Latin square passes rows and columns but not subgrids."""
        board = bytes((r + c) % 9 + 1 for r in range(9) for c in range(9))
        assert not is_valid_sudoku_solution(board)

    def test_swapping_rows_across_bands_rejected(self):
        """Rows 0 and 3 swapped keeps rows and columns, breaks subgrids."""
        rows = [SOLUTION[i * 9:(i + 1) * 9] for i in range(9)]
        rows[0], rows[3] = rows[3], rows[0]
        assert not is_valid_sudoku_solution(b''.join(rows))


class TestSolvesPuzzle:
    """Tests for solves_sudoku_puzzle."""

    def test_solution_solves_its_puzzle(self):
        assert solves_sudoku_puzzle(SOLUTION, PUZZLE)

    def test_blank_puzzle_accepts_anything(self):
        assert solves_sudoku_puzzle(SOLUTION, bytes(81))

    def test_conflicting_clue(self):
        assert not solves_sudoku_puzzle(SOLUTION, _with_cell(PUZZLE, 0, 7))

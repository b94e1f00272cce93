"""
Contingent Sudoku Encryption

Host-side helpers shared by the sudoku proofs: building the auxiliary
input, and reversing the attested encryption once the secret is known.

Appendix layout (after the proof's fixed journal prefix):
    chacha_nonce (12) ‖ puzzle (81) ‖ encrypted compact solution (36)
"""

from typing import Tuple

from .. import sudoku
from ..cipher import chacha20_apply
from ..errors import InputLengthMismatch, InvalidSolutionOrWrongPuzzle
from ..program import Program
from ..tags import DerivationTag
from ..transcript import HashTranscript

CHACHA_NONCE_SIZE = 12
SECRET_SIZE = 32
APPENDIX_SIZE = CHACHA_NONCE_SIZE + sudoku.BOARD_SIZE + sudoku.COMPACT_BOARD_SIZE


def derive_chacha_nonce(program: Program, secret: bytes, solution: bytes, puzzle_mask: bytes) -> bytes:
    """
    H(program_id ‖ secret ‖ solution ‖ mask ‖ "chacha_nonce")[:12]

    Deterministic, but unpredictable without the secret.
    """
    digest = (
        HashTranscript('chacha_nonce')
        .append('program_id', program.program_id, 32)
        .append('secret', secret, SECRET_SIZE)
        .append('solution', solution, sudoku.BOARD_SIZE)
        .append('puzzle_mask', puzzle_mask, sudoku.BOARD_SIZE)
        .append_tag(DerivationTag.CHACHA_NONCE)
        .digest()
    )
    return digest[:CHACHA_NONCE_SIZE]


def build_aux_input(program: Program, secret: bytes, solution: bytes, puzzle_mask: bytes) -> bytes:
    """
    chacha_nonce (12) ‖ puzzle_mask (81) ‖ solution (81)

    Raises:
        InputLengthMismatch: If secret, solution or puzzle_mask has the wrong length
    """
    secret = bytes(secret)
    solution = bytes(solution)
    puzzle_mask = bytes(puzzle_mask)
    for label, value, size in (
        ('secret', secret, SECRET_SIZE),
        ('solution', solution, sudoku.BOARD_SIZE),
        ('puzzle_mask', puzzle_mask, sudoku.BOARD_SIZE),
    ):
        if len(value) != size:
            raise InputLengthMismatch(f"expected {label} of len {size}; got {len(value)}")
    chacha_nonce = derive_chacha_nonce(program, secret, solution, puzzle_mask)
    return chacha_nonce + puzzle_mask + solution


def split_appendix(appendix: bytes) -> Tuple[bytes, bytes, bytes]:
    """(chacha_nonce, puzzle, encrypted_solution)"""
    chacha_nonce = appendix[:CHACHA_NONCE_SIZE]
    puzzle = appendix[CHACHA_NONCE_SIZE:CHACHA_NONCE_SIZE + sudoku.BOARD_SIZE]
    encrypted = appendix[CHACHA_NONCE_SIZE + sudoku.BOARD_SIZE:APPENDIX_SIZE]
    return chacha_nonce, puzzle, encrypted


def decrypt_solution(secret: bytes, appendix: bytes) -> bytes:
    """
    Decrypt and check the committed solution. The caller has already
    checked secret against the proof's outer relation.

    Raises:
        DecompressionMalleable: If the plaintext is not a canonical compact board
        InvalidSolutionOrWrongPuzzle: If the solution is invalid or for another puzzle
    """
    chacha_nonce, puzzle, encrypted = split_appendix(appendix)
    compact_solution = chacha20_apply(secret, chacha_nonce, encrypted)
    solution = sudoku.decompress_board(compact_solution)

    if not sudoku.is_valid_sudoku_solution(solution):
        raise InvalidSolutionOrWrongPuzzle(
            "decrypted solution is not valid. This should never happen; "
            "did you forget to verify the proof?"
        )
    if not sudoku.solves_sudoku_puzzle(solution, puzzle):
        raise InvalidSolutionOrWrongPuzzle(
            "decrypted solution is for the wrong puzzle. This should never happen; "
            "did you forget to verify the proof?"
        )
    return solution

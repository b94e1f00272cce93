"""
zkcp: Zero-Knowledge Contingent Payments

Prove that a secret (a secp256k1 discrete log or a SHA-256 preimage) also
certifies a second statement without revealing it: that it made a
Schnorr signature, or that it decrypts a valid sudoku solution.

Usage:
    from zkcp import LocalOracle, Sha256SudokuProof

    oracle = LocalOracle()
    proof = Sha256SudokuProof.new(preimage, solution, mask, oracle)
    proof.verify(oracle)
    puzzle = proof.puzzle()

    # later, once the preimage is revealed
    solution = proof.decrypt_solution(preimage)
"""

# Errors
from .errors import (
    ZkcpError,
    InputLengthMismatch,
    JournalLengthMismatch,
    DegenerateNonce,
    ProofInvalid,
    ChallengeMismatch,
    SignatureInvalid,
    AttestationInvalid,
    DecompressionMalleable,
    InvalidMask,
    SecretMismatch,
    InvalidSolutionOrWrongPuzzle,
    GuestAbort,
    OracleError,
    MalformedProof,
)

# Board codec
from .sudoku import (
    compress_board,
    decompress_board,
    mask_sudoku_solution,
    is_valid_sudoku_solution,
    solves_sudoku_puzzle,
)

# Programs and oracle
from .program import Program, ProgramDescriptor
from .oracle import Attestation, Oracle, LocalOracle
from .config import Settings, load_settings, configure_logging

# Proofs
from .proofs import (
    Secp256k1DlogProof,
    Sha256Proof,
    Secp256k1DlogSha256Proof,
    Secp256k1DlogSudokuProof,
    Sha256SudokuProof,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Errors
    "ZkcpError",
    "InputLengthMismatch",
    "JournalLengthMismatch",
    "DegenerateNonce",
    "ProofInvalid",
    "ChallengeMismatch",
    "SignatureInvalid",
    "AttestationInvalid",
    "DecompressionMalleable",
    "InvalidMask",
    "SecretMismatch",
    "InvalidSolutionOrWrongPuzzle",
    "GuestAbort",
    "OracleError",
    "MalformedProof",
    # Board codec
    "compress_board",
    "decompress_board",
    "mask_sudoku_solution",
    "is_valid_sudoku_solution",
    "solves_sudoku_puzzle",
    # Programs and oracle
    "Program",
    "ProgramDescriptor",
    "Attestation",
    "Oracle",
    "LocalOracle",
    "Settings",
    "load_settings",
    "configure_logging",
    # Proofs
    "Secp256k1DlogProof",
    "Sha256Proof",
    "Secp256k1DlogSha256Proof",
    "Secp256k1DlogSudokuProof",
    "Sha256SudokuProof",
]

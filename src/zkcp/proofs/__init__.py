"""
Proofs

Two generic engines, one per outer relation, and the application proofs
built on them:

- Secp256k1DlogProof: knowledge of a secp256k1 discrete log
  - Secp256k1DlogSha256Proof: ...which is also a SHA-256 preimage
  - Secp256k1DlogSudokuProof: ...which also decrypts a sudoku solution
- Sha256Proof: knowledge of a SHA-256 preimage
  - Sha256SudokuProof: ...which also decrypts a sudoku solution
"""

from .dlog_secp256k1_generic import (
    Secp256k1DlogProof,
    compute_challenge,
    derive_secret_nonce,
)
from .sha256_generic import Sha256Proof
from .contingent import derive_chacha_nonce
from .dlog_secp256k1_sha256 import Secp256k1DlogSha256Proof
from .dlog_secp256k1_sudoku import Secp256k1DlogSudokuProof
from .sha256_sudoku import Sha256SudokuProof

__all__ = [
    # Engines
    'Secp256k1DlogProof',
    'Sha256Proof',
    'compute_challenge',
    'derive_secret_nonce',
    'derive_chacha_nonce',

    # Applications
    'Secp256k1DlogSha256Proof',
    'Secp256k1DlogSudokuProof',
    'Sha256SudokuProof',
]

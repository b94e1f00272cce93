#!/usr/bin/env python3
"""
Prove that the discrete log of a secp256k1 public key decrypts a valid
solution to a published sudoku puzzle, then decrypt it.

Usage:
    python examples/dlog_secp256k1_sudoku.py
"""

import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))
sys.path.insert(0, str(Path(__file__).parent))

from zkcp import LocalOracle, Secp256k1DlogSudokuProof, Settings, configure_logging
from zkcp.secp256k1 import reduce_scalar, scalar_to_bytes

from boards import SOLUTION, MASK, format_board


def main():
    settings = Settings.from_env()
    configure_logging(settings)
    oracle = LocalOracle.from_settings(settings)

    secret_key = scalar_to_bytes(reduce_scalar(bytes([3] * 32)))

    print("proving execution...")
    start = time.perf_counter()
    proof = Secp256k1DlogSudokuProof.new(secret_key, SOLUTION, MASK, oracle)
    print(f"proof generated in {time.perf_counter() - start:.2f} seconds")

    print("journal output:")
    print(f"  challenge:          {proof.challenge():064x}")
    print(f"  signature:          {proof.signature():064x}")
    print(f"  encrypted solution: {proof.encrypted_solution().hex()}")

    print("verifying dlog-secp256k1-sudoku proof...")
    proof.verify(oracle)
    print("ok!")

    print(f"proof is valid; discrete log of {proof.public_key.hex()}")
    print("...is also the decryption key to a solution for the sudoku puzzle:")
    print(format_board(proof.puzzle()))
    print(f"proof is {len(proof.to_bytes())} bytes long")

    solution = proof.decrypt_solution(secret_key)
    print("decrypted solution:")
    print(format_board(solution))


if __name__ == '__main__':
    main()
